from django.contrib import admin

from .models import AIMetric


@admin.register(AIMetric)
class AIMetricAdmin(admin.ModelAdmin):
    list_display = ("type", "model_id", "rfp_id", "duration_ms", "tokens_used", "success", "rejected_count", "created_at")
    list_filter = ("type", "success")
    readonly_fields = ("created_at",)
