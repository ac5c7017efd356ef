"""
Django admin for the audit trail; read-only by construction.
"""

from django.contrib import admin

from .models import ActivityLog


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    """Admin configuration for the ActivityLog model."""

    list_display = (
        "id",
        "timestamp",
        "actor_name",
        "action",
        "target",
        "project_id",
    )
    list_filter = ("action", "timestamp")
    search_fields = ("actor_name", "target", "details")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
