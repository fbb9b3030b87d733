import time
from typing import Optional

from django.conf import settings
from django.core.cache import cache
from rest_framework.response import Response

from app.common.keys import t
from app.errors import error_response

RETRY_AFTER = 30


def rate_limit_check(request, endpoint_type: str) -> Optional[Response]:
    """Per-user, per-minute cap on AI calls (``AI_RATE_PER_MIN``).

    Skipped in DEBUG unless ``AI_ENFORCE_RATE_LIMIT_DEBUG``. Returns a 429
    response when the bucket is full, else ``None`` and counts the call.
    """
    if settings.DEBUG and not getattr(settings, 'AI_ENFORCE_RATE_LIMIT_DEBUG', False):
        return None
    limit = int(getattr(settings, 'AI_RATE_PER_MIN', 0) or 0)
    user = getattr(request, 'user', None)
    uid = getattr(user, 'id', None) if getattr(user, 'is_authenticated', False) else None
    if limit <= 0 or uid is None:
        return None
    bucket_key = f"ai_rl:{endpoint_type}:{uid}:{int(time.time() // 60)}"
    cache.add(bucket_key, 0, 65)
    current = cache.get(bucket_key) or 0
    if current >= limit:
        resp = error_response(
            'rate_limited',
            t('errors.ai.rate_limited'),
            status=429,
            meta={'retry_after': RETRY_AFTER},
        )
        resp['Retry-After'] = str(RETRY_AFTER)
        resp['X-Rate-Limit-Limit'] = str(limit)
        resp['X-Rate-Limit-Remaining'] = '0'
        return resp
    try:
        cache.incr(bucket_key)
    except ValueError:
        # Key expired between get and incr.
        cache.set(bucket_key, 1, 65)
    return None
