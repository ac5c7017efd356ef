"""
Serializers for projects API.
"""

from rest_framework import serializers

from projects.models import Project
from users.serializers import TeamMemberNestedSerializer


class ProjectListSerializer(serializers.ModelSerializer):
    """Serializer for the project LIST view (lightweight)."""

    class Meta:
        model = Project
        fields = [
            "id",
            "project_name",
            "client_name",
            "service_type",
            "status",
            "timer_status",
            "target_deadline",
            "assigned_to",
        ]
        read_only_fields = fields


class ProjectDetailSerializer(ProjectListSerializer):
    """Serializer for the project DETAIL view (comprehensive)."""

    created_by = TeamMemberNestedSerializer(read_only=True)

    class Meta(ProjectListSerializer.Meta):
        fields = ProjectListSerializer.Meta.fields + [
            "contact_person",
            "email",
            "phone",
            "amount",
            "start_date",
            "remarks",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProjectCreateSerializer(serializers.ModelSerializer):
    """Serializer for the intake (CREATE) action; status is always LEAD."""

    class Meta:
        model = Project
        fields = [
            "project_name",
            "client_name",
            "service_type",
            "contact_person",
            "email",
            "phone",
            "amount",
            "start_date",
            "target_deadline",
            "remarks",
            "assigned_to",
        ]


class ProjectUpdateSerializer(serializers.ModelSerializer):
    """
    Serializer for UPDATE action (writable fields plus status).
    'justification' is not a model field: it is handed to the workflow and
    becomes the project's remarks when present.
    """

    justification = serializers.CharField(
        required=False,
        allow_blank=True,
        write_only=True,
        max_length=2000,
    )

    class Meta:
        model = Project
        fields = ProjectCreateSerializer.Meta.fields + [
            "status",
            "justification",
        ]


class ProjectTransitionsSerializer(serializers.Serializer):
    """Statuses the requesting member may move a project to."""

    status = serializers.CharField()
    can_edit = serializers.BooleanField()
    available_transitions = serializers.ListField(
        child=serializers.CharField()
    )


class MonitorPassSerializer(serializers.Serializer):
    """Counts reported by one SLA monitor pass."""

    projects_updated = serializers.IntegerField()
    notifications_raised = serializers.IntegerField()
