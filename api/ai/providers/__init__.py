"""AI provider package with factory selection."""

from django.conf import settings

from .base import AIResult, BaseProvider  # noqa: F401
from .stub import LocalStubProvider  # noqa: F401


def get_provider(name: str | None = None) -> BaseProvider:
    key = (name or getattr(settings, 'AI_PROVIDER', 'stub') or 'stub').lower()
    if key == 'openai':
        from .openai_chat import OpenAIProvider

        return OpenAIProvider()
    return LocalStubProvider()


__all__ = [
    'AIResult',
    'BaseProvider',
    'LocalStubProvider',
    'get_provider',
]
