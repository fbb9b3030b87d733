"""OpenAI chat-completions provider.

Works against any OpenAI-compatible endpoint via ``AI_OPENAI_BASE_URL``.
Structured calls request ``response_format={"type": "json_object"}``; the
returned text is still validated by ``ai.validators`` before use.
"""
import logging

from django.conf import settings
from openai import OpenAI, OpenAIError

from ai import prompts
from ai.errors import ProviderError

from .base import AIResult, BaseProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(BaseProvider):
    name = 'openai'

    def __init__(self, client=None, model: str | None = None):
        self.model = model or settings.AI_MODEL
        self._client = client or OpenAI(
            api_key=settings.AI_OPENAI_API_KEY or None,
            base_url=settings.AI_OPENAI_BASE_URL,
        )

    def _complete(self, messages, *, max_tokens: int, json_mode: bool = False, temperature=None) -> AIResult:
        kwargs = {
            'model': self.model,
            'messages': messages,
            'max_completion_tokens': max_tokens,
        }
        if json_mode:
            kwargs['response_format'] = {'type': 'json_object'}
        if temperature is not None:
            kwargs['temperature'] = temperature
        try:
            resp = self._client.chat.completions.create(**kwargs)
        except OpenAIError as exc:
            logger.warning("openai call failed model=%s: %s", self.model, exc)
            raise ProviderError(provider=self.name) from exc
        choice = resp.choices[0] if resp.choices else None
        content = (choice.message.content if choice else None) or ''
        usage = getattr(resp, 'usage', None)
        return AIResult(
            text=content,
            usage_tokens=int(getattr(usage, 'total_tokens', 0) or 0),
            model_id=getattr(resp, 'model', None) or self.model,
        )

    def extract_requirements(self, *, document_text: str) -> AIResult:
        return self._complete(
            prompts.requirements_messages(document_text),
            max_tokens=settings.AI_ANALYZE_MAX_TOKENS,
            json_mode=True,
        )

    def generate_insights(self, *, response_text: str) -> AIResult:
        return self._complete(
            prompts.insights_messages(response_text),
            max_tokens=settings.AI_INSIGHTS_MAX_TOKENS,
            json_mode=True,
        )

    def chat(self, *, message: str, history: list[dict[str, str]]) -> AIResult:
        return self._complete(
            prompts.chat_messages(message, history),
            max_tokens=settings.AI_CHAT_MAX_TOKENS,
            temperature=settings.AI_CHAT_TEMPERATURE,
        )
