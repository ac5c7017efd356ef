"""
View-level permissions keyed on the member's role.
"""

from rest_framework import permissions

from .models import TeamMember


class IsUserInRole(permissions.BasePermission):
    """
    Allows access only to members whose role is in role_names.
    Subclass and set role_names to use it in permission_classes.
    """

    message = "User does not have required role to get an access."
    role_names = frozenset()

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return user.role in self.role_names


class IsAdminRole(IsUserInRole):
    """Super Admin and Admin only."""

    role_names = frozenset(
        {TeamMember.Role.SUPER_ADMIN, TeamMember.Role.ADMIN}
    )


class IsSupervisorRole(IsUserInRole):
    """Super Admin, Admin and Manager."""

    role_names = frozenset(
        {
            TeamMember.Role.SUPER_ADMIN,
            TeamMember.Role.ADMIN,
            TeamMember.Role.MANAGER,
        }
    )
