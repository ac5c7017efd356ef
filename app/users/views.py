"""
Views for the team member APIs.
"""

from django.contrib.auth import get_user_model
from rest_framework import generics, status, viewsets
from rest_framework import serializers as drf_serializers
from rest_framework.authentication import TokenAuthentication
from rest_framework.authtoken.models import Token
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, inline_serializer

from users import serializers, services
from .permissions import IsAdminRole


class LoginView(APIView):
    """Exchange credentials for an API token."""

    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        request=serializers.LoginSerializer,
        responses=inline_serializer(
            name="LoginResponse",
            fields={
                "token": drf_serializers.CharField(),
                "member": serializers.TeamMemberNestedSerializer(),
            },
        ),
    )
    def post(self, request):
        serializer = serializers.LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            member = services.login(
                request=request, **serializer.validated_data
            )
        except services.LoginFailedError as e:
            return Response(
                {"error": str(e)}, status=status.HTTP_401_UNAUTHORIZED
            )

        token, _ = Token.objects.get_or_create(user=member)
        return Response(
            {
                "token": token.key,
                "member": serializers.TeamMemberNestedSerializer(
                    member
                ).data,
            },
            status=status.HTTP_200_OK,
        )


class MeView(generics.RetrieveAPIView):
    """Profile of the authenticated member."""

    serializer_class = serializers.TeamMemberSerializer
    authentication_classes = [TokenAuthentication]
    permission_classes = [IsAuthenticated]

    def get_object(self):
        return self.request.user


class TeamMemberViewSet(viewsets.ModelViewSet):
    """
    Member directory. Anyone signed in can read it; only admins can add
    or change members. Members are deactivated, never deleted.
    """

    serializer_class = serializers.TeamMemberSerializer
    queryset = get_user_model().objects.all().order_by("id")
    authentication_classes = [TokenAuthentication]
    http_method_names = ["get", "post", "put", "patch", "head", "options"]
    filterset_fields = ["role", "is_active"]

    def get_permissions(self):
        if self.action in ["list", "retrieve"]:
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsAdminRole()]

    def perform_create(self, serializer):
        serializer.instance = services.create_member(
            **serializer.validated_data
        )

    def perform_update(self, serializer):
        serializer.instance = services.update_member(
            member=serializer.instance, **serializer.validated_data
        )
