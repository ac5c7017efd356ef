"""
Serializers for the notifications API.
"""

from rest_framework import serializers

from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    """Serializer for Notification objects."""

    class Meta:
        model = Notification
        fields = [
            "id",
            "severity",
            "category",
            "title",
            "message",
            "project_id",
            "action_ref",
            "created_at",
            "is_read",
            "read_at",
        ]
        read_only_fields = fields
