"""Review lifecycle: pending -> approved | rejected, decided once."""
import logging

from django.db import transaction
from django.utils import timezone

from .errors import InvalidReviewStatusError, ReviewAlreadyDecidedError
from .models import Review

logger = logging.getLogger(__name__)

DECISIONS = ('approved', 'rejected')
# Opening one of these puts the RFP into the review stage.
STAGE_CHANGING_TYPES = ('copy_editing', 'budget')


def open_review(rfp, review_type: str) -> Review:
    with transaction.atomic():
        review = Review.objects.create(rfp=rfp, type=review_type, status='pending')
        if review_type in STAGE_CHANGING_TYPES and rfp.status != 'review':
            rfp.set_status('review')
    logger.info("review opened id=%s rfp=%s type=%s", review.pk, rfp.pk, review_type)
    return review


def decide(review: Review, status: str, *, reviewer=None, comments: str | None = None) -> Review:
    if status not in DECISIONS:
        raise InvalidReviewStatusError(status=status)
    updated = Review.objects.filter(pk=review.pk, status='pending').update(
        status=status,
        reviewer=reviewer,
        comments=comments if comments is not None else review.comments,
        reviewed_at=timezone.now(),
    )
    if not updated:
        review.refresh_from_db()
        raise ReviewAlreadyDecidedError(status=review.status)
    review.refresh_from_db()
    logger.info("review decided id=%s status=%s", review.pk, status)
    return review
