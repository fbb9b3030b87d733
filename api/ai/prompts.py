"""Prompt text for the three AI calls."""
from django.conf import settings

REQUIREMENTS_SYSTEM = """You are an expert RFP analyst. Extract key requirements from the given RFP document.
For each requirement:
- Provide the exact text of the requirement
- Categorize it into a section (e.g., "Technical Requirements", "Qualifications", "Budget", "Timeline", "Deliverables")
- Assign a priority: high, medium, or low
- Provide the approximate character position in the original text (start and end)

Return a JSON object with a "requirements" array of objects with these fields:
{"requirements": [{"text": "...", "section": "...", "priority": "high|medium|low", "highlightStart": number, "highlightEnd": number}]}

Only return valid JSON."""

INSIGHTS_SYSTEM = """You are a proposal writing expert. Analyze the proposal response and provide actionable insights to improve it.
Focus on:
1. Writing improvements: grammar, clarity, conciseness
2. Inconsistencies: conflicting information, mismatched terminology
3. Language matching: alignment with professional proposal standards and company tone

Return a JSON object with an "insights" array. Each insight has:
{"type": "writing_improvement" | "inconsistency" | "language_match", "text": string, "suggestion": string}

Provide 3-6 high-value insights. Only return valid JSON."""

CHAT_SYSTEM = """You are an AI assistant for an RFP response desk, a proposal management platform. You help proposal managers and consultants with:
- Understanding RFP requirements
- Drafting proposal response sections
- Budget calculations and estimates
- Best practices for government proposals
- Template suggestions and writing tips
- Review processes and compliance

Be helpful, professional, and concise. Provide actionable advice specific to proposal management."""


def requirements_messages(document_text: str) -> list[dict[str, str]]:
    text = document_text[: settings.AI_DOCUMENT_MAX_CHARS]
    return [
        {'role': 'system', 'content': REQUIREMENTS_SYSTEM},
        {'role': 'user', 'content': f"Analyze this RFP document and extract all key requirements:\n\n{text}"},
    ]


def insights_messages(response_text: str) -> list[dict[str, str]]:
    return [
        {'role': 'system', 'content': INSIGHTS_SYSTEM},
        {'role': 'user', 'content': f"Analyze this proposal response and provide improvement insights:\n\n{response_text}"},
    ]


def chat_messages(message: str, history: list[dict[str, str]]) -> list[dict[str, str]]:
    return [{'role': 'system', 'content': CHAT_SYSTEM}, *history, {'role': 'user', 'content': message}]
