"""
Views for the audit trail API (read-only).
"""

from rest_framework import viewsets
from rest_framework.authentication import TokenAuthentication
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated

from users.permissions import IsSupervisorRole
from .models import ActivityLog
from .serializers import ActivityLogSerializer
from .filters import ActivityLogFilter


class ActivityLogPagination(PageNumberPagination):
    """Provides pagination for output."""

    page_size = 50
    page_size_query_param = "page_size"
    max_page_size = 500


class ActivityLogViewSet(viewsets.ReadOnlyModelViewSet):
    """Browse the audit trail, newest first."""

    serializer_class = ActivityLogSerializer
    queryset = ActivityLog.objects.all()
    authentication_classes = [TokenAuthentication]
    permission_classes = [IsAuthenticated, IsSupervisorRole]
    pagination_class = ActivityLogPagination
    filterset_class = ActivityLogFilter
