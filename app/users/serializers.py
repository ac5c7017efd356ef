"""
Serializers for the team member API.
"""

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers


class TeamMemberNestedSerializer(serializers.ModelSerializer):
    """Compact member representation embedded in other payloads."""

    class Meta:
        model = get_user_model()
        fields = ["id", "username", "name", "role"]
        read_only_fields = fields


class TeamMemberSerializer(serializers.ModelSerializer):
    """Serializer for the member management endpoints."""

    password = serializers.CharField(
        write_only=True,
        required=False,
        style={"input_type": "password"},
    )

    class Meta:
        model = get_user_model()
        fields = [
            "id",
            "username",
            "name",
            "email",
            "role",
            "is_active",
            "password",
            "date_joined",
            "last_login",
        ]
        read_only_fields = ["id", "date_joined", "last_login"]

    def validate_password(self, value):
        validate_password(value)
        return value

    def validate(self, attrs):
        if self.instance is None and not attrs.get("password"):
            raise serializers.ValidationError(
                {"password": "A password is required for new members."}
            )
        return attrs


class LoginSerializer(serializers.Serializer):
    """Credentials for the login endpoint."""

    username = serializers.CharField()
    password = serializers.CharField(
        trim_whitespace=False,
        style={"input_type": "password"},
    )
