"""
Serializers for the audit trail API.
"""

from rest_framework import serializers

from .models import ActivityLog


class ActivityLogSerializer(serializers.ModelSerializer):
    """Read-only representation of an audit record."""

    actor_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = ActivityLog
        fields = [
            "id",
            "actor_id",
            "actor_name",
            "action",
            "target",
            "details",
            "project_id",
            "from_status",
            "to_status",
            "timestamp",
        ]
        read_only_fields = fields
