import json
import re

from .base import AIResult, BaseProvider

_OBLIGATION_RE = re.compile(r'\b(must|shall|required|will provide)\b', re.IGNORECASE)
_SENTENCE_RE = re.compile(r'[^.!?\n]+[.!?]?')


class LocalStubProvider(BaseProvider):
    """Offline provider with deterministic output, used in tests and without an API key."""

    name = 'stub'

    def extract_requirements(self, *, document_text: str) -> AIResult:
        requirements = []
        for match in _SENTENCE_RE.finditer(document_text or ''):
            sentence = match.group(0)
            if not _OBLIGATION_RE.search(sentence):
                continue
            lead = len(sentence) - len(sentence.lstrip())
            text = sentence.strip()
            lowered = text.lower()
            requirements.append(
                {
                    'text': text,
                    'section': 'Budget' if ('budget' in lowered or 'cost' in lowered) else 'General Requirements',
                    'priority': 'high' if ('must' in lowered or 'shall' in lowered) else 'medium',
                    'highlightStart': match.start() + lead,
                    'highlightEnd': match.start() + lead + len(text),
                }
            )
        return AIResult(text=json.dumps({'requirements': requirements}))

    def generate_insights(self, *, response_text: str) -> AIResult:
        insights = []
        if re.search(r'\b(\w+) \1\b', response_text or '', re.IGNORECASE):
            insights.append(
                {
                    'type': 'writing_improvement',
                    'text': 'Repeated word detected.',
                    'suggestion': 'Remove the duplicated word.',
                }
            )
        if len((response_text or '').split()) < 50:
            insights.append(
                {
                    'type': 'language_match',
                    'text': 'The response is brief for a government proposal.',
                    'suggestion': 'Expand each section with specifics on approach, staffing and schedule.',
                }
            )
        insights.append(
            {
                'type': 'inconsistency',
                'text': 'Check that terminology is used consistently across sections.',
                'suggestion': 'Pick one name for each deliverable and use it throughout.',
            }
        )
        return AIResult(text=json.dumps({'insights': insights}))

    def chat(self, *, message: str, history: list[dict[str, str]]) -> AIResult:
        return AIResult(text=f"[stub] ({len(history)} prior messages) You asked: {message}")
