from django.contrib import admin

from .models import BudgetItem


@admin.register(BudgetItem)
class BudgetItemAdmin(admin.ModelAdmin):
    list_display = ("rfp", "member", "year", "hours", "title", "rate_override")
    list_filter = ("year",)
    search_fields = ("member__full_name", "rfp__title", "title")
