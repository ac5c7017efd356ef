"""
Views for the notifications API.
"""

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.authentication import TokenAuthentication
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated

from .models import Notification
from . import serializers, services
from .filters import NotificationFilter


class NotificationPagination(PageNumberPagination):
    """Provides pagination for output."""

    page_size = 25
    page_size_query_param = "page_size"
    max_page_size = 200


class NotificationViewSet(viewsets.ReadOnlyModelViewSet):
    """List alerts and acknowledge them."""

    serializer_class = serializers.NotificationSerializer
    queryset = Notification.objects.all()
    authentication_classes = [TokenAuthentication]
    permission_classes = [IsAuthenticated]
    pagination_class = NotificationPagination
    filterset_class = NotificationFilter

    @action(detail=True, methods=["post"])
    def read(self, request, pk=None):
        """Mark a single notification as read."""
        notification = services.mark_read(notification=self.get_object())
        serializer = self.get_serializer(notification)
        return Response(serializer.data, status=status.HTTP_200_OK)

    @action(detail=False, methods=["post"], url_path="read-all")
    def read_all(self, request):
        """Mark every unread notification as read."""
        updated = services.mark_all_read()
        return Response({"updated": updated}, status=status.HTTP_200_OK)
