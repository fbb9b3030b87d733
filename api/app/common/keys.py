"""User-facing copy for the API, loaded from ``locales/en.yml``.

Messages are grouped per domain app under ``errors.<app>.<name>`` (budget,
sections, rfps, reviews, exports, ai, auth) and looked up by their dotted
key through ``t(key, **kwargs)``. Every ``DomainError`` subclass names one of
these keys; ``missing_keys`` reports the ones the catalogue lacks.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Iterable

import yaml

LOCALE_FILE = Path(__file__).resolve().parents[3] / 'locales' / 'en.yml'
ERRORS_PREFIX = 'errors'
GENERIC_ERROR_KEY = 'errors.generic'


class Catalogue:
    """Flat ``dotted.key -> message`` map, reloaded when the file changes."""

    def __init__(self, path: Path):
        self.path = path
        self._lock = threading.RLock()
        self._messages: dict[str, str] = {}
        self._mtime: float | None = None

    def __contains__(self, key: str) -> bool:
        return key in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def get(self, key: str) -> str | None:
        return self._messages.get(key)

    def load(self, force: bool = False) -> None:
        if not self.path.exists():
            return
        mtime = self.path.stat().st_mtime
        if not force and mtime == self._mtime:
            return
        with self._lock:
            with self.path.open('r', encoding='utf-8') as f:
                raw = yaml.safe_load(f) or {}
            self._messages = dict(_walk('', raw)) if isinstance(raw, dict) else {}
            self._mtime = mtime


def _walk(prefix: str, data: dict[str, Any]):
    for name, value in data.items():
        key = f'{prefix}.{name}' if prefix else str(name)
        if isinstance(value, dict):
            yield from _walk(key, value)
        else:
            yield key, value if isinstance(value, str) else str(value)


_catalogue = Catalogue(LOCALE_FILE)


def t(key: str, **kwargs: Any) -> str:
    """Message for ``key`` formatted with ``kwargs``.

    An unknown error key falls back to the generic error message so raw keys
    never reach API clients; any other unknown key is returned as is. A
    placeholder the kwargs do not fill leaves the message unformatted.
    """
    from django.conf import settings

    if getattr(settings, 'DEBUG', False) or not len(_catalogue):
        try:
            _catalogue.load()
        except (OSError, yaml.YAMLError):  # pragma: no cover
            pass
    msg = _catalogue.get(key)
    if msg is None:
        if not key.startswith(ERRORS_PREFIX + '.'):
            return key
        msg = _catalogue.get(GENERIC_ERROR_KEY) or key
    if not kwargs:
        return msg
    try:
        return msg.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return msg


def missing_keys(keys: Iterable[str]) -> list[str]:
    _catalogue.load()
    return sorted({k for k in keys if k not in _catalogue})


def ready() -> None:
    """Load the catalogue at startup (``AppUtilitiesConfig.ready``)."""
    try:
        _catalogue.load(force=True)
    except (OSError, yaml.YAMLError):  # pragma: no cover
        pass


__all__ = ['t', 'missing_keys', 'ready', 'Catalogue', 'LOCALE_FILE']
