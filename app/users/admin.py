"""
Django admin customization for the team member model.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _

from users.models import TeamMember


class TeamMemberAdmin(BaseUserAdmin):
    """Define the admin pages for team members."""

    ordering = ["id"]
    list_display = ["username", "name", "role", "is_active", "last_login"]
    list_filter = ["role", "is_active", "is_staff"]
    search_fields = ["username", "name", "email"]
    filter_horizontal = ["groups", "user_permissions"]
    actions = ["deactivate_members"]
    fieldsets = (
        (None, {"fields": ("username", "password")}),
        (_("Profile"), {"fields": ("name", "email", "role")}),
        (
            _("Permissions"),
            {
                "fields": (
                    "is_active",
                    "is_staff",
                    "is_superuser",
                )
            },
        ),
        (
            _("Important dates"),
            {
                "fields": (
                    "last_login",
                    "date_joined",
                )
            },
        ),
    )
    readonly_fields = [
        "last_login",
        "date_joined",
    ]
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": (
                    "username",
                    "password1",
                    "password2",
                    "name",
                    "email",
                    "role",
                    "is_active",
                    "is_staff",
                    "is_superuser",
                ),
            },
        ),
    )

    @admin.action(description="Deactivate selected members")
    def deactivate_members(self, request, queryset):
        updated = queryset.filter(is_active=True).update(is_active=False)
        self.message_user(request, f"{updated} member(s) deactivated.")

    # Members are referenced by projects and the audit trail
    def has_delete_permission(self, request, obj=None):
        return False


admin.site.register(TeamMember, TeamMemberAdmin)
