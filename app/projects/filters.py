"""
Filters for projects API.
"""

from django.db.models import Q
from django_filters import rest_framework as filters

from .models import Project


class ProjectFilter(filters.FilterSet):
    """FilterSet for the Project model."""

    search = filters.CharFilter(
        method="filter_search",
        help_text="Case-insensitive match on project or client name.",
    )
    deadline_before = filters.IsoDateTimeFilter(
        field_name="target_deadline", lookup_expr="lte"
    )

    class Meta:
        model = Project
        fields = ["status", "timer_status", "service_type", "assigned_to"]

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(project_name__icontains=value) | Q(client_name__icontains=value)
        )
