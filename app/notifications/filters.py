"""
Filters for the notifications API.
"""

from django_filters import rest_framework as filters

from .models import Notification


class NotificationFilter(filters.FilterSet):
    """FilterSet for the Notification model."""

    project = filters.NumberFilter(field_name="project_id")

    class Meta:
        model = Notification
        fields = ["is_read", "severity", "category"]
