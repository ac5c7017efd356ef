"""
Django admin for the projects app.
Projects are view-only here: they change only through the workflow
service and the SLA monitor, both of which leave an audit trail.
"""

from django.contrib import admin

from .models import Project, SlaConfig


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    """Admin configuration for the Project model."""

    list_display = (
        "id",
        "project_name",
        "client_name",
        "status",
        "timer_status",
        "target_deadline",
        "assigned_to",
    )
    list_filter = ("status", "timer_status", "service_type")
    search_fields = ("project_name", "client_name")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(SlaConfig)
class SlaConfigAdmin(admin.ModelAdmin):
    """Admin configuration for the SlaConfig model."""

    list_display = ("key", "value_int", "updated_at")
