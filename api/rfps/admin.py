from django.contrib import admin

from .models import Requirement, Rfp


class RequirementInline(admin.TabularInline):
    model = Requirement
    extra = 0
    fields = ("text", "section", "priority", "status")


@admin.register(Rfp)
class RfpAdmin(admin.ModelAdmin):
    list_display = ("title", "source", "agency", "status", "due_date", "assigned_pm")
    list_filter = ("source", "status")
    search_fields = ("title", "agency", "state")
    inlines = [RequirementInline]
