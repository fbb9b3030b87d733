from django.conf import settings
from django.db import models


class AIMetric(models.Model):
    """One model call: what it was for, how long it took, whether it succeeded."""

    TYPE_CHOICES = [
        ('analyze', 'analyze'),
        ('insights', 'insights'),
        ('chat', 'chat'),
    ]

    type = models.CharField(max_length=16, choices=TYPE_CHOICES)
    model_id = models.CharField(max_length=64, blank=True, default='')
    rfp_id = models.IntegerField(null=True, blank=True)
    duration_ms = models.IntegerField(default=0)
    tokens_used = models.IntegerField(default=0)
    success = models.BooleanField(default=True)
    # Quarantined entries from structured output (rejected by validation).
    rejected_count = models.IntegerField(default=0)
    error_text = models.TextField(blank=True, default='')
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [models.Index(fields=['created_by', 'type', 'created_at'], name='aimetric_user_type_idx')]

    def __str__(self) -> str:  # pragma: no cover
        return f"AIMetric({self.type},{self.model_id},{self.duration_ms}ms)"
