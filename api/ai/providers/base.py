from dataclasses import dataclass


@dataclass
class AIResult:
    """Raw provider output. ``text`` is untrusted until validated."""

    text: str
    usage_tokens: int = 0
    model_id: str = 'local.stub'


class BaseProvider:
    name = 'base'

    def extract_requirements(self, *, document_text: str) -> AIResult:  # pragma: no cover - interface
        """Return a JSON object ``{"requirements": [...]}`` as text."""
        raise NotImplementedError

    def generate_insights(self, *, response_text: str) -> AIResult:  # pragma: no cover - interface
        """Return a JSON object ``{"insights": [...]}`` as text."""
        raise NotImplementedError

    def chat(self, *, message: str, history: list[dict[str, str]]) -> AIResult:  # pragma: no cover - interface
        raise NotImplementedError
