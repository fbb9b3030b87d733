"""Render a ledger ``TableExport`` to CSV, Word HTML and DOCX.

Body rows carry hours in the year columns; the trailing TOTAL row carries
money. Rate and total columns are always money.
"""
from __future__ import annotations

import csv
import html
import io
from decimal import ROUND_HALF_UP, Decimal

from exports.utils import finalize_docx, new_document

from .ledger import TableExport

CENTS = Decimal('0.01')
_FORMULA_PREFIXES = ('=', '+', '-', '@')


def format_money(value: Decimal) -> str:
    return f"${value.quantize(CENTS, rounding=ROUND_HALF_UP):,.2f}"


def format_hours(value: Decimal) -> str:
    text = format(value.quantize(CENTS, rounding=ROUND_HALF_UP), 'f')
    return text.rstrip('0').rstrip('.') if '.' in text else text


def _text(value) -> str:
    return '' if value is None else str(value)


def display_rows(table: TableExport) -> list[list[str]]:
    """Header, body and total rows as display strings."""
    out = [list(table.header)]
    for row in table.rows:
        name, title, rate, *hours, total = row
        out.append([_text(name), _text(title), format_money(rate)] + [format_hours(h) for h in hours] + [format_money(total)])
    label, b1, b2, *year_totals, grand = table.total_row
    out.append([label, b1, b2] + [format_money(v) for v in year_totals] + [format_money(grand)])
    return out


def _csv_cell(value: str) -> str:
    # Spreadsheet formula injection guard for free-text cells.
    if value.startswith(_FORMULA_PREFIXES) and not value.lstrip('-').replace('.', '', 1).isdigit():
        return "'" + value
    return value


def to_csv(table: TableExport) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf)
    for row in display_rows(table):
        writer.writerow([_csv_cell(c) for c in row])
    return buf.getvalue()


def to_html_document(table: TableExport, title: str = 'Budget') -> str:
    """Word-compatible HTML (saved as ``.doc``)."""
    rows = display_rows(table)
    head = ''.join(f'<th>{html.escape(c)}</th>' for c in rows[0])
    body = ''.join(
        '<tr>' + ''.join(f'<td>{html.escape(c)}</td>' for c in r) + '</tr>' for r in rows[1:-1]
    )
    total = '<tr style="font-weight:bold">' + ''.join(f'<td>{html.escape(c)}</td>' for c in rows[-1]) + '</tr>'
    safe_title = html.escape(title)
    return (
        "<html xmlns:o='urn:schemas-microsoft-com:office:office' "
        "xmlns:w='urn:schemas-microsoft-com:office:word' "
        "xmlns='http://www.w3.org/TR/REC-html40'>"
        f"<head><meta charset='utf-8'><title>{safe_title}</title></head><body>"
        f"<h1>{safe_title}</h1>"
        "<table border='1' style='border-collapse:collapse'>"
        f"<thead><tr>{head}</tr></thead><tbody>{body}{total}</tbody></table>"
        "</body></html>"
    )


def to_docx(table: TableExport, title: str = 'Budget') -> tuple[bytes, str]:
    rows = display_rows(table)
    doc = new_document(title)
    doc.add_heading(title, level=1)
    grid = doc.add_table(rows=len(rows), cols=len(rows[0]))
    grid.style = 'Table Grid'
    for r_idx, row in enumerate(rows):
        bold = r_idx in (0, len(rows) - 1)
        for c_idx, value in enumerate(row):
            cell = grid.cell(r_idx, c_idx)
            cell.text = value
            if bold:
                for run in cell.paragraphs[0].runs:
                    run.bold = True
    return finalize_docx(doc)
