from types import SimpleNamespace

from django.test import SimpleTestCase

from exports.utils import render_docx_from_markdown, render_pdf_from_text, response_to_markdown


class ExportEscapeTests(SimpleTestCase):
    def test_markdown_escapes_html(self):
        md = response_to_markdown(
            "<b>Title</b>", [{"title": "Intro", "content": "Hello <script>alert(1)</script>"}]
        )
        self.assertIn("&lt;b&gt;Title&lt;/b&gt;", md)
        self.assertIn("&lt;script&gt;alert(1)&lt;/script&gt;", md)

    def test_markdown_accepts_objects_and_blank_titles(self):
        md = response_to_markdown("", [SimpleNamespace(title="", content=None)])
        self.assertEqual(md, "# Response\n\n## Untitled section\n")

    def test_renderers_accept_text(self):
        pdf, sum1 = render_pdf_from_text("Hello\nWorld")
        self.assertIsInstance(pdf, bytes)
        self.assertEqual(len(sum1), 64)
        docx, sum2 = render_docx_from_markdown("# T\n\nBody")
        self.assertIsInstance(docx, bytes)
        self.assertEqual(len(sum2), 64)
