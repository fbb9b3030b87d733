"""Deterministic document renderers shared by response and budget exports.

Every renderer returns ``(bytes, sha256_hex)``. Timestamps and document ids
are pinned so exporting the same content twice yields the same checksum.
"""
from __future__ import annotations

from datetime import datetime, timezone
from io import BytesIO
import html
import re
import zipfile

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from app.common.files import compute_checksum

EXPORT_AUTHOR = "RFP Response Desk"
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_PDF_EPOCH = b"D:19700101000000Z"


def _escape_text(s: str) -> str:
    return html.escape(s, quote=False)


def response_to_markdown(title: str, sections) -> str:
    """Render an RFP response as markdown.

    ``sections`` is an ordered iterable of objects or dicts with ``title`` and
    ``content``. Text is HTML-escaped so pasted markup stays inert downstream.
    """
    lines = [f"# {_escape_text(title or 'Response')}"]
    for section in sections:
        if isinstance(section, dict):
            s_title, content = section.get('title'), section.get('content')
        else:
            s_title, content = getattr(section, 'title', ''), getattr(section, 'content', '')
        lines.append("")
        lines.append(f"## {_escape_text(s_title or 'Untitled section')}")
        lines.append(_escape_text(str(content or '')))
    return "\n".join(lines)


def _normalize_pdf_for_checksum(data: bytes) -> bytes:
    data = re.sub(rb"/ID\s*\[\s*<[^>]*>\s*<[^>]*>\s*\]", b"/ID [<000000><000000>]", data)
    data = re.sub(rb"startxref\s*\d+", b"startxref 0", data)
    data = re.sub(rb"/CreationDate\s*\(D:[^\)]+\)", b"/CreationDate (" + _PDF_EPOCH + b")", data)
    data = re.sub(rb"/ModDate\s*\(D:[^\)]+\)", b"/ModDate (" + _PDF_EPOCH + b")", data)
    return data


def render_pdf_from_text(text: str, title: str = "RFP Response") -> tuple[bytes, str]:
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=LETTER, invariant=1)
    c.setTitle(title)
    c.setAuthor(EXPORT_AUTHOR)
    c.setCreator(EXPORT_AUTHOR)
    _, height = LETTER
    y = height - 72
    for line in text.splitlines():
        if y < 72:
            c.showPage()
            y = height - 72
        c.drawString(72, y, line[:1000])
        y -= 14
    c.showPage()
    c.save()
    data = buffer.getvalue()
    # invariant=1 pins the dates in the file; only the checksum input is normalized.
    return data, compute_checksum(_normalize_pdf_for_checksum(data)).hex


def normalize_docx_zip(data: bytes) -> bytes:
    """Rewrite a .docx archive with sorted entries and fixed timestamps."""
    out = BytesIO()
    with zipfile.ZipFile(BytesIO(data), 'r') as zin, zipfile.ZipFile(out, 'w', compression=zipfile.ZIP_DEFLATED) as zout:
        for name in sorted(zin.namelist()):
            zi = zipfile.ZipInfo(filename=name, date_time=(1980, 1, 1, 0, 0, 0))
            zi.compress_type = zipfile.ZIP_DEFLATED
            zi.external_attr = 0o600 << 16
            zout.writestr(zi, zin.read(name))
    return out.getvalue()


def new_document(title: str):
    doc = Document()
    doc.styles['Normal'].font.size = Pt(11)
    core = doc.core_properties
    core.title = title
    core.author = EXPORT_AUTHOR
    core.created = EPOCH
    core.modified = EPOCH
    core.last_printed = EPOCH
    return doc


def finalize_docx(doc) -> tuple[bytes, str]:
    bio = BytesIO()
    doc.save(bio)
    data = normalize_docx_zip(bio.getvalue())
    return data, compute_checksum(data).hex


def render_docx_from_markdown(md: str, title: str = "RFP Response") -> tuple[bytes, str]:
    """Light markdown to DOCX: ``#``/``##`` headings, paragraphs, blank lines."""
    doc = new_document(title)
    for raw in md.splitlines():
        line = raw.rstrip()
        if not line:
            doc.add_paragraph("")
        elif line.startswith('# '):
            doc.add_heading(line[2:].strip(), level=1).alignment = WD_ALIGN_PARAGRAPH.LEFT
        elif line.startswith('## '):
            doc.add_heading(line[3:].strip(), level=2).alignment = WD_ALIGN_PARAGRAPH.LEFT
        else:
            doc.add_paragraph(line)
    return finalize_docx(doc)
