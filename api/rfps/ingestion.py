"""Text extraction for uploaded solicitation documents.

Uploads are read in memory and never written to disk; only the extracted
text is kept on the RFP.
"""
import io
import logging
import re
import zipfile

from django.conf import settings

from app.common.files import file_extension

from .errors import EmptyExtractionError, FileTooLargeError, UnsupportedFileError

logger = logging.getLogger(__name__)

_SIGNATURES = {
    'pdf': b'%PDF',
    'docx': b'PK\x03\x04',
}


def _has_signature(head: bytes, ext: str) -> bool:
    sig = _SIGNATURES.get(ext)
    return head.startswith(sig) if sig else True


def _extract_pdf(data: bytes) -> str:
    from pdfminer.high_level import extract_text
    from pdfminer.pdfparser import PDFSyntaxError

    try:
        txt = extract_text(io.BytesIO(data)) or ''
    except PDFSyntaxError:
        logger.warning("pdf extraction failed: malformed document")
        return ''
    # Collapse runs of spaces but keep paragraph breaks for highlighting.
    txt = re.sub(r'[ \t\f\v]+', ' ', txt)
    return re.sub(r'\n{3,}', '\n\n', txt).strip()


def _extract_docx(data: bytes) -> str:
    from docx import Document
    from docx.opc.exceptions import PackageNotFoundError

    try:
        doc = Document(io.BytesIO(data))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError):
        logger.warning("docx extraction failed: not a Word document")
        return ''
    return '\n'.join(p.text.strip() for p in doc.paragraphs if (p.text or '').strip())


def _extract_txt(data: bytes) -> str:
    return data.decode('utf-8', errors='ignore').replace('\r\n', '\n').strip()


_EXTRACTORS = {
    'pdf': _extract_pdf,
    'docx': _extract_docx,
    'txt': _extract_txt,
}


def extract_document_text(name: str, data: bytes) -> str:
    """Return plain text for an uploaded document or raise a domain error."""
    ext = file_extension(name)
    allowed = set(getattr(settings, 'ALLOWED_UPLOAD_EXTENSIONS', _EXTRACTORS.keys()))
    if ext not in _EXTRACTORS or ext not in allowed:
        raise UnsupportedFileError(name=name)
    if len(data) > settings.FILE_UPLOAD_MAX_BYTES:
        raise FileTooLargeError(size=len(data))
    if not _has_signature(data[:16], ext):
        raise UnsupportedFileError(name=name)
    text = _EXTRACTORS[ext](data)
    if not text:
        raise EmptyExtractionError(name=name)
    limit = settings.TEXT_EXTRACTION_MAX_CHARS
    if len(text) > limit:
        logger.info("extracted text truncated from %d to %d chars", len(text), limit)
        text = text[:limit]
    return text
