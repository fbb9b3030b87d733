from django.contrib import admin

from .models import TeamMember


@admin.register(TeamMember)
class TeamMemberAdmin(admin.ModelAdmin):
    list_display = ("full_name", "username", "role", "title", "hourly_rate")
    list_filter = ("role",)
    search_fields = ("full_name", "username", "email", "title")
