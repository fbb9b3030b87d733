"""File helpers shared by exports and document ingestion.

Kept free of Django settings so they can be imported from Celery tasks
without side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
import os
import re
import unicodedata
from typing import BinaryIO

_CHUNK_SIZE = 1024 * 1024  # 1MB
_SAFE_FILENAME_RE = re.compile(r'[^A-Za-z0-9._-]+')


@dataclass(slots=True)
class Checksum:
    algo: str
    hex: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.hex


def compute_checksum(data: bytes | bytearray | memoryview | str | BinaryIO) -> Checksum:
    """Return the SHA-256 checksum of bytes, text or an open binary file."""
    sha = hashlib.sha256()
    if isinstance(data, str):
        sha.update(data.encode('utf-8'))
    elif isinstance(data, (bytes, bytearray, memoryview)):
        sha.update(bytes(data))
    elif hasattr(data, 'read'):
        while True:
            chunk = data.read(_CHUNK_SIZE)
            if not chunk:
                break
            sha.update(chunk)
    else:
        raise TypeError('Unsupported data type for checksum')
    return Checksum(algo='sha256', hex=sha.hexdigest())


def safe_filename(name: str, max_length: int = 100) -> str:
    """Return a sanitized filename base while preserving the extension."""
    name = os.path.basename(name.strip().replace('\x00', '')) or 'file'
    base, ext = os.path.splitext(name)
    if len(ext) > 16:
        base, ext = name, ''
    norm = unicodedata.normalize('NFKD', base)
    norm = ''.join(ch for ch in norm if not unicodedata.combining(ch))
    norm = _SAFE_FILENAME_RE.sub('-', norm)
    norm = re.sub(r'-+', '-', norm).strip('.-') or 'file'
    norm = norm[: max(1, max_length - len(ext))]
    return f'{norm}{ext.lower()}' if ext else norm


def file_extension(name: str) -> str:
    return os.path.splitext(name or '')[1].lower().lstrip('.')
