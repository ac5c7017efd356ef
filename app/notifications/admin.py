"""
Django admin and customizations for models of notifications app.
"""

from django.contrib import admin
from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    """Admin configuration for the Notification model."""

    list_display = (
        "id",
        "title",
        "severity",
        "category",
        "project_id",
        "is_read",
        "created_at",
    )
    list_filter = ("is_read", "severity", "category", "created_at")
    search_fields = ("title", "message", "project_id")
    readonly_fields = ("created_at", "read_at")
