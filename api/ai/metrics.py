import logging
import time
from contextlib import contextmanager

from .models import AIMetric

logger = logging.getLogger(__name__)


class _Call:
    def __init__(self):
        self.model_id = ''
        self.tokens = 0
        self.rejected = 0

    def record(self, result, rejected: int = 0) -> None:
        self.model_id = result.model_id
        self.tokens = result.usage_tokens
        self.rejected = rejected


@contextmanager
def track(call_type: str, *, user=None, rfp_id=None):
    """Record an ``AIMetric`` row around a provider call, on success or failure."""
    call = _Call()
    t0 = time.monotonic()
    created_by = user if getattr(user, 'is_authenticated', False) else None
    try:
        yield call
    except Exception as exc:
        AIMetric.objects.create(
            type=call_type,
            model_id=call.model_id,
            rfp_id=rfp_id,
            duration_ms=int((time.monotonic() - t0) * 1000),
            success=False,
            error_text=f"{type(exc).__name__}: {exc}"[:2000],
            created_by=created_by,
        )
        raise
    AIMetric.objects.create(
        type=call_type,
        model_id=call.model_id,
        rfp_id=rfp_id,
        duration_ms=int((time.monotonic() - t0) * 1000),
        tokens_used=call.tokens,
        rejected_count=call.rejected,
        success=True,
        created_by=created_by,
    )
    if call.rejected:
        logger.warning("%s call quarantined %d malformed entries rfp=%s", call_type, call.rejected, rfp_id)
