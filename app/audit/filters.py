"""
Filters for the audit trail API.
"""

from django_filters import rest_framework as filters

from .models import ActivityLog


class ActivityLogFilter(filters.FilterSet):
    """FilterSet for the ActivityLog model."""

    project = filters.NumberFilter(field_name="project_id")
    actor = filters.NumberFilter(field_name="actor_id")
    since = filters.IsoDateTimeFilter(
        field_name="timestamp", lookup_expr="gte"
    )

    class Meta:
        model = ActivityLog
        fields = ["action"]
