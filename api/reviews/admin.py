from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("rfp", "type", "status", "reviewer", "submitted_at", "reviewed_at")
    list_filter = ("type", "status")
