from celery import shared_task
from django.contrib.auth import get_user_model

from .analysis import analyze_rfp


@shared_task
def analyze_rfp_task(rfp_id: int, user_id: int | None = None) -> int:
    user = get_user_model().objects.filter(pk=user_id).first() if user_id else None
    return len(analyze_rfp(rfp_id, user=user))
