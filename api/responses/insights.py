import logging

from ai.errors import ProviderError
from ai.metrics import track
from ai.providers import BaseProvider, get_provider
from ai.shield import screen
from ai.validators import SchemaError, parse_json_object, validate_insights

from .errors import NoResponseContentError
from .models import Insight
from .store import load_sections, response_for_rfp

logger = logging.getLogger(__name__)


def response_text(sections) -> str:
    return "\n\n".join(f"## {s.title}\n{s.content}" for s in sections)


def generate_insights(rfp, *, user=None, provider: BaseProvider | None = None) -> list[Insight]:
    """Ask the model for review notes on the whole response and store the valid ones."""
    response = response_for_rfp(rfp)
    sections = load_sections(response.pk)
    if not sections:
        raise NoResponseContentError(rfp_id=rfp.pk)
    text = screen(response_text(sections), source='response')
    provider = provider or get_provider()
    with track('insights', user=user, rfp_id=rfp.pk) as call:
        result = provider.generate_insights(response_text=text)
        try:
            validated = validate_insights(parse_json_object(result.text), section_ids={s.pk for s in sections})
        except SchemaError as exc:
            raise ProviderError(str(exc), provider=provider.name) from exc
        call.record(result, rejected=len(validated.rejected))
    created = Insight.objects.bulk_create(
        [
            Insight(
                response=response,
                section_id=entry['section_id'],
                type=entry['type'],
                text=entry['text'],
                suggestion=entry['suggestion'],
            )
            for entry in validated.accepted
        ]
    )
    logger.info("insights generated rfp=%s created=%d", rfp.pk, len(created))
    return created
