"""Requirement extraction: RFP text -> model -> validated Requirement rows."""
import logging

from django.db import transaction

from ai.errors import ProviderError
from ai.metrics import track
from ai.providers import BaseProvider, get_provider
from ai.shield import screen
from ai.validators import SchemaError, parse_json_object, validate_requirements
from app.errors import DomainError

from .errors import NoDocumentContentError
from .models import Requirement, Rfp

logger = logging.getLogger(__name__)


def analyze_rfp(rfp_id: int, *, user=None, provider: BaseProvider | None = None) -> list[Requirement]:
    """Replace the RFP's requirements with freshly extracted ones.

    Status moves draft -> analyzing -> in_progress; any failure puts it back
    to draft and re-raises. Malformed model entries are dropped, not stored.
    """
    rfp = Rfp.objects.get(pk=rfp_id)
    rfp.set_status('analyzing')
    content = rfp.document_content or ''
    try:
        if not content.strip():
            raise NoDocumentContentError(rfp_id=rfp.pk)
        text = screen(content, source='rfp_document')
        provider = provider or get_provider()
        with track('analyze', user=user, rfp_id=rfp.pk) as call:
            result = provider.extract_requirements(document_text=text)
            try:
                validated = validate_requirements(parse_json_object(result.text), document_length=len(content))
            except SchemaError as exc:
                raise ProviderError(str(exc), provider=provider.name) from exc
            call.record(result, rejected=len(validated.rejected))
        with transaction.atomic():
            rfp.requirements.all().delete()
            Requirement.objects.bulk_create(
                [Requirement(rfp=rfp, status='pending', **entry) for entry in validated.accepted]
            )
    except DomainError as exc:
        rfp.set_status('draft')
        logger.warning("analysis rejected rfp=%s code=%s", rfp.pk, exc.code)
        raise
    except Exception:
        rfp.set_status('draft')
        logger.exception("analysis failed rfp=%s", rfp.pk)
        raise
    rfp.set_status('in_progress')
    logger.info(
        "analysis done rfp=%s accepted=%d rejected=%d", rfp.pk, len(validated.accepted), len(validated.rejected)
    )
    return list(rfp.requirements.all())
