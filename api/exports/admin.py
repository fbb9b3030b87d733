from django.contrib import admin

from .models import ExportJob


@admin.register(ExportJob)
class ExportJobAdmin(admin.ModelAdmin):
    list_display = ("id", "rfp", "kind", "format", "status", "created_at")
    list_filter = ("kind", "format", "status")
    readonly_fields = ("url", "checksum", "error", "created_at", "updated_at")
