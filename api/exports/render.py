"""Turn an RFP's response or budget into export bytes."""
from dataclasses import dataclass

from app.common.files import compute_checksum
from budget.exporters import to_csv, to_docx, to_html_document
from budget.store import load_ledger
from responses.models import ProposalResponse

from .errors import InvalidExportFormatError
from .models import BUDGET_FORMATS, RESPONSE_FORMATS
from .utils import render_docx_from_markdown, render_pdf_from_text, response_to_markdown

FORMATS_BY_KIND = {'response': RESPONSE_FORMATS, 'budget': BUDGET_FORMATS}


@dataclass(frozen=True)
class Rendered:
    data: bytes
    checksum: str
    extension: str


def check_format(kind: str, fmt: str) -> None:
    if fmt not in FORMATS_BY_KIND.get(kind, ()):
        raise InvalidExportFormatError(kind=kind, format=fmt)


def _response_sections(rfp) -> list:
    response = ProposalResponse.objects.filter(rfp=rfp).first()
    if response is None:
        return []
    return list(response.sections.order_by('order_index', 'id'))


def render_response(rfp, fmt: str) -> Rendered:
    md = response_to_markdown(rfp.title, _response_sections(rfp))
    if fmt == 'md':
        data = md.encode('utf-8')
        return Rendered(data, compute_checksum(data).hex, 'md')
    if fmt == 'pdf':
        data, checksum = render_pdf_from_text(md, title=rfp.title or 'RFP Response')
        return Rendered(data, checksum, 'pdf')
    data, checksum = render_docx_from_markdown(md, title=rfp.title or 'RFP Response')
    return Rendered(data, checksum, 'docx')


def render_budget(rfp, fmt: str) -> Rendered:
    table = load_ledger(rfp.pk).export_tabular()
    title = f"Budget - {rfp.title}" if rfp.title else 'Budget'
    if fmt == 'csv':
        # BOM so Excel opens the file as UTF-8.
        data = to_csv(table).encode('utf-8-sig')
        return Rendered(data, compute_checksum(data).hex, 'csv')
    if fmt == 'doc':
        data = to_html_document(table, title).encode('utf-8')
        return Rendered(data, compute_checksum(data).hex, 'doc')
    data, checksum = to_docx(table, title)
    return Rendered(data, checksum, 'docx')


def render(rfp, kind: str, fmt: str) -> Rendered:
    check_format(kind, fmt)
    if kind == 'budget':
        return render_budget(rfp, fmt)
    return render_response(rfp, fmt)
