from django.test import SimpleTestCase

from app.common.files import compute_checksum
from exports.utils import (
    _normalize_pdf_for_checksum,
    render_docx_from_markdown,
    render_pdf_from_text,
    response_to_markdown,
)

SECTIONS = [
    {"title": "Executive Summary", "content": "Hello world"},
    {"title": "Technical Approach", "content": "Do X\nThen Y"},
]


class ExportDeterminismTests(SimpleTestCase):
    def test_markdown_checksum_stable(self):
        md1 = response_to_markdown("Deterministic", SECTIONS)
        md2 = response_to_markdown("Deterministic", SECTIONS)
        self.assertEqual(md1, md2)
        self.assertEqual(compute_checksum(md1).hex, compute_checksum(md2).hex)

    def test_pdf_deterministic(self):
        md = response_to_markdown("Deterministic", SECTIONS)
        _, c1 = render_pdf_from_text(md)
        _, c2 = render_pdf_from_text(md)
        self.assertEqual(c1, c2)

    def test_docx_deterministic(self):
        md = response_to_markdown("Deterministic", SECTIONS)
        docx1, c1 = render_docx_from_markdown(md)
        docx2, c2 = render_docx_from_markdown(md)
        self.assertEqual(c1, c2)
        self.assertEqual(docx1, docx2)

    def test_pdf_metadata(self):
        pdf, checksum = render_pdf_from_text("Body", title="Deterministic")
        self.assertTrue(pdf.startswith(b'%PDF'))
        normalized = _normalize_pdf_for_checksum(pdf)
        self.assertIn(b'RFP Response Desk', normalized)
        self.assertIn(b'/CreationDate (D:19700101000000Z)', normalized)
        self.assertIn(b'/ModDate (D:19700101000000Z)', normalized)
        self.assertEqual(len(checksum), 64)
