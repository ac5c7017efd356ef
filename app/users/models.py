"""
Database models for the team member (custom user) model.
"""

from django.db import models

from django.contrib.auth.models import (
    AbstractBaseUser,
    BaseUserManager,
    PermissionsMixin,
)


class TeamMemberManager(BaseUserManager):
    """Manager for team members."""

    def create_user(self, username, password=None, **extra_fields):
        if not username:
            raise ValueError("The Username field must be set")
        username = self.model.normalize_username(username)
        email = extra_fields.pop("email", None)
        if email:
            extra_fields["email"] = self.normalize_email(email)
        member = self.model(username=username, **extra_fields)
        member.set_password(password)
        member.save(using=self._db)
        return member

    def create_superuser(self, username, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", TeamMember.Role.SUPER_ADMIN)
        return self.create_user(username, password, **extra_fields)


class TeamMember(AbstractBaseUser, PermissionsMixin):
    """A member of the firm; the role drives every workflow decision."""

    class Role(models.TextChoices):
        SUPER_ADMIN = "SUPER_ADMIN", "Super Admin"
        ADMIN = "ADMIN", "Admin"
        MANAGER = "MANAGER", "Manager"
        AUDITOR = "AUDITOR", "Auditor"
        VIEWER = "VIEWER", "Viewer"
        SALES = "SALES", "Sales"

    username = models.CharField(max_length=150, unique=True)
    name = models.CharField(max_length=255, blank=True)
    email = models.EmailField(blank=True, null=True)
    role = models.CharField(
        max_length=20, choices=Role.choices, default=Role.VIEWER
    )
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    date_joined = models.DateTimeField(auto_now_add=True)

    objects = TeamMemberManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = "Team Member"
        verbose_name_plural = "Team Members"

    @property
    def display_name(self):
        return self.name or self.username

    def __str__(self):
        return self.username
