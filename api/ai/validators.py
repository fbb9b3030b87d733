"""Schema checks for model output before it reaches the database.

LLM responses are untrusted input. A response that is not a JSON object
raises ``SchemaError``; inside a well-formed response, individual entries
that fail validation are quarantined (returned in ``rejected`` with a
reason) and never persisted.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

PRIORITIES = ('high', 'medium', 'low')
INSIGHT_TYPES = ('writing_improvement', 'inconsistency', 'language_match')
CHAT_ROLES = ('user', 'assistant')

MAX_SECTION_LEN = 200


class SchemaError(ValueError):
    pass


@dataclass
class Validated:
    accepted: list[dict[str, Any]] = field(default_factory=list)
    rejected: list[dict[str, Any]] = field(default_factory=list)

    def reject(self, index: int, entry: Any, reason: str) -> None:
        self.rejected.append({'index': index, 'reason': reason, 'entry': entry})


def parse_json_object(text: str) -> Any:
    try:
        data = json.loads(text or '')
    except (TypeError, ValueError) as exc:
        raise SchemaError(f'response is not valid JSON: {exc}') from None
    if not isinstance(data, (dict, list)):
        raise SchemaError('response must be a JSON object')
    return data


def _entries(data: Any, key: str) -> list:
    if isinstance(data, list):
        return data
    entries = data.get(key, []) if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise SchemaError(f'{key} must be a list')
    return entries


def _offset(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def _offsets(entry: dict, document_length: int | None) -> tuple[int | None, int | None]:
    start = _offset(entry.get('highlightStart', entry.get('highlight_start')))
    end = _offset(entry.get('highlightEnd', entry.get('highlight_end')))
    if start is None or end is None or start > end:
        return None, None
    if document_length is not None and end > document_length:
        return None, None
    return start, end


def validate_requirements(data: Any, *, document_length: int | None = None) -> Validated:
    out = Validated()
    for idx, entry in enumerate(_entries(data, 'requirements')):
        if not isinstance(entry, dict):
            out.reject(idx, entry, 'not_object')
            continue
        text = entry.get('text')
        if not isinstance(text, str) or not text.strip():
            out.reject(idx, entry, 'missing_text')
            continue
        section = entry.get('section')
        section = section.strip()[:MAX_SECTION_LEN] if isinstance(section, str) else ''
        priority = entry.get('priority')
        priority = priority.strip().lower() if isinstance(priority, str) else ''
        start, end = _offsets(entry, document_length)
        out.accepted.append(
            {
                'text': text.strip(),
                'section': section,
                'priority': priority if priority in PRIORITIES else 'medium',
                'highlight_start': start,
                'highlight_end': end,
            }
        )
    return out


def validate_insights(data: Any, *, section_ids: set[int] | None = None) -> Validated:
    out = Validated()
    for idx, entry in enumerate(_entries(data, 'insights')):
        if not isinstance(entry, dict):
            out.reject(idx, entry, 'not_object')
            continue
        if entry.get('type') not in INSIGHT_TYPES:
            out.reject(idx, entry, 'unknown_type')
            continue
        text = entry.get('text')
        if not isinstance(text, str) or not text.strip():
            out.reject(idx, entry, 'missing_text')
            continue
        suggestion = entry.get('suggestion')
        section_id = entry.get('sectionId', entry.get('section_id'))
        if section_ids is None or section_id not in section_ids:
            section_id = None
        out.accepted.append(
            {
                'type': entry['type'],
                'text': text.strip(),
                'suggestion': suggestion.strip() if isinstance(suggestion, str) else '',
                'section_id': section_id,
            }
        )
    return out


def validate_chat_history(history: Any, *, limit: int) -> list[dict[str, str]]:
    """Keep well-formed ``{role, content}`` turns, most recent ``limit``."""
    if history in (None, ''):
        return []
    if not isinstance(history, list):
        raise SchemaError('history must be a list')
    turns = [
        {'role': h['role'], 'content': h['content']}
        for h in history
        if isinstance(h, dict) and h.get('role') in CHAT_ROLES and isinstance(h.get('content'), str)
    ]
    return turns[-limit:] if limit > 0 else []
