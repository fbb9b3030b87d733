from django.contrib import admin

from .models import Insight, ProposalResponse, ResponseSection


class ResponseSectionInline(admin.TabularInline):
    model = ResponseSection
    extra = 0
    fields = ("title", "order_index", "assigned_to", "is_locked", "locked_by", "version")
    readonly_fields = ("version",)


@admin.register(ProposalResponse)
class ProposalResponseAdmin(admin.ModelAdmin):
    list_display = ("rfp", "last_saved_at", "created_at")
    inlines = [ResponseSectionInline]


@admin.register(Insight)
class InsightAdmin(admin.ModelAdmin):
    list_display = ("type", "response", "section", "is_resolved", "created_at")
    list_filter = ("type", "is_resolved")
