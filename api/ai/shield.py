"""Prompt-injection screening for text forwarded to a model.

High-risk text is rejected with ``PromptRejectedError``; medium-risk text is
forwarded with the suspicious fragments neutralized.
"""
import logging
import re
from typing import Any

from django.conf import settings

from .errors import PromptRejectedError

logger = logging.getLogger(__name__)

HIGH_RISK_PATTERNS = [
    r'\b(ignore|disregard|forget)\s+(all|any|previous|above|earlier|everything)',
    r'\bsystem\s*(prompt|message|role)',
    r'\bdeveloper\s*(instructions?|commands?|mode)',
    r'\b(you\s+are\s+now|act\s+as)\s+(chatgpt|gpt|an?\s+ai|assistant|helpful)',
    r'\bjailbreak\b',
    r'\bdan\s+mode\b',
    r'\bdo\s+anything\s+now\b',
    r'```\s*(system|user|assistant)',
    r'\[INST\]|\[\/INST\]',
    r'<\|.*\|>',
]

MEDIUM_RISK_PATTERNS = [
    r'\bprompt\s+injection\b',
    r'\btool\s+(call|usage|invocation)',
    r'\bfunction\s+call',
]

_HIGH_RISK_RE = re.compile('|'.join(HIGH_RISK_PATTERNS), re.IGNORECASE)
_MEDIUM_RISK_RE = re.compile('|'.join(MEDIUM_RISK_PATTERNS), re.IGNORECASE)
_OVERRIDE_WORDS = ('ignore', 'forget', 'disregard', 'override', 'bypass')


def analyze_risk(text: str) -> tuple[str, dict[str, Any]]:
    """Return ``('high' | 'medium' | 'low', details)``."""
    if not isinstance(text, str) or not text.strip():
        return 'low', {}
    found = [m.group(0) for m in _HIGH_RISK_RE.finditer(text)]
    if found:
        return 'high', {'patterns': found[:3]}
    found = [m.group(0) for m in _MEDIUM_RISK_RE.finditer(text)]
    if found:
        return 'medium', {'patterns': found[:3]}
    lowered = text.lower()
    indicators = {}
    if lowered.count('you are') > 2:
        indicators['role_changes'] = lowered.count('you are')
    override_count = sum(1 for w in _OVERRIDE_WORDS if w in lowered)
    if override_count >= 3:
        indicators['override_words'] = override_count
    if text.count('```') > 2 or text.count('<|') > 1:
        indicators['formatting'] = True
    if len(indicators) >= 2:
        return 'medium', indicators
    return 'low', indicators


def neutralize(text: str) -> str:
    text = _MEDIUM_RISK_RE.sub('[content-filtered]', text)
    text = re.sub(r'```\s*(system|user|assistant)', '[code-block]', text, flags=re.IGNORECASE)
    return re.sub(r'<\|[^|]*\|>', '[token]', text)


def screen(text: str, *, source: str = 'input') -> str:
    """Reject or neutralize ``text``; returns what may be sent to the model."""
    if not getattr(settings, 'AI_PROMPT_SHIELD_ENABLED', True):
        return text
    level, details = analyze_risk(text)
    if level == 'high':
        logger.warning("prompt shield rejected %s: %s", source, details)
        raise PromptRejectedError(source=source)
    if level == 'medium':
        logger.info("prompt shield neutralized %s: %s", source, details)
        return neutralize(text)
    return text
