"""
Views for the projects APIs.
"""

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.authentication import TokenAuthentication
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from projects.models import Project
from projects import serializers, services
from users.permissions import IsAdminRole
from .workflows import (
    ProjectNotFoundError,
    ProjectPermissionError,
    ProjectValidationError,
    ProjectWorkflowError,
    can_edit,
    get_available_transitions,
)
from .filters import ProjectFilter


# Each workflow failure keeps its own status code
WORKFLOW_ERROR_STATUS = {
    ProjectNotFoundError: status.HTTP_404_NOT_FOUND,
    ProjectPermissionError: status.HTTP_403_FORBIDDEN,
    ProjectValidationError: status.HTTP_400_BAD_REQUEST,
}


def workflow_error_response(error: ProjectWorkflowError) -> Response:
    """Translates a Domain error into an API response."""
    code = WORKFLOW_ERROR_STATUS.get(
        type(error), status.HTTP_400_BAD_REQUEST
    )
    return Response({"error": str(error)}, status=code)


class ProjectPagination(PageNumberPagination):
    """Provides pagination for output."""

    page_size = 50
    page_size_query_param = "page_size"


class ProjectViewSet(viewsets.ModelViewSet):
    """View for managing projects APIs. Projects are never deleted here."""

    serializer_class = serializers.ProjectDetailSerializer
    queryset = Project.objects.all()
    authentication_classes = [TokenAuthentication]
    permission_classes = [IsAuthenticated]
    pagination_class = ProjectPagination
    filterset_class = ProjectFilter
    http_method_names = ["get", "post", "put", "patch", "head", "options"]
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        """Role-based data segregation: Auditors see assigned projects."""
        queryset = (
            super()
            .get_queryset()
            .select_related("assigned_to", "created_by")
        )
        return services.get_visible_projects(self.request.user, queryset)

    def get_serializer_class(self):
        """Return the serializer class for request based on action."""
        if self.action == "list":
            return serializers.ProjectListSerializer
        if self.action == "create":
            return serializers.ProjectCreateSerializer
        if self.action in ["update", "partial_update"]:
            return serializers.ProjectUpdateSerializer
        if self.action == "transitions":
            return serializers.ProjectTransitionsSerializer
        if self.action == "sla_monitor":
            return serializers.MonitorPassSerializer

        return self.serializer_class

    @extend_schema(responses=serializers.ProjectDetailSerializer)
    def create(self, request, *args, **kwargs):
        """Create a new project (intake) by calling the service layer."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = services.create_project(
            user=request.user, **serializer.validated_data
        )

        response_serializer = serializers.ProjectDetailSerializer(project)
        return Response(
            response_serializer.data, status=status.HTTP_201_CREATED
        )

    @extend_schema(responses=serializers.ProjectDetailSerializer)
    def update(self, request, *args, **kwargs):
        """
        Edit a project through the workflow.
        The project is resolved by the service, not get_object(), so that
        ownership failures surface as 403 rather than 404.
        """
        partial = kwargs.pop("partial", False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        changes = dict(serializer.validated_data)
        justification = changes.pop("justification", None)
        try:
            project = services.apply_edit(
                project_id=kwargs["pk"],
                user=request.user,
                changes=changes,
                justification=justification,
            )
        except ProjectWorkflowError as e:
            return workflow_error_response(e)

        response_serializer = serializers.ProjectDetailSerializer(project)
        return Response(response_serializer.data)

    @action(detail=True, methods=["get"])
    def transitions(self, request, pk=None):
        """Statuses the requesting member may move this project to."""
        project = self.get_object()
        user = request.user
        is_owner = project.assigned_to_id == user.id
        editable = can_edit(user.role, is_owner)
        data = {
            "status": project.status,
            "can_edit": editable,
            "available_transitions": (
                get_available_transitions(project.status, user.role)
                if editable
                else []
            ),
        }
        return Response(self.get_serializer(data).data)

    @extend_schema(request=None)
    @action(
        detail=False,
        methods=["post"],
        url_path="sla-monitor",
        permission_classes=[IsAuthenticated, IsAdminRole],
    )
    def sla_monitor(self, request):
        """Run one SLA monitor pass now."""
        result = services.run_sla_monitor_pass()
        if result.skipped:
            return Response(
                {"error": "An SLA monitor pass is already running."},
                status=status.HTTP_409_CONFLICT,
            )
        serializer = self.get_serializer(
            {
                "projects_updated": result.projects_updated,
                "notifications_raised": result.notifications_raised,
            }
        )
        return Response(serializer.data, status=status.HTTP_200_OK)
