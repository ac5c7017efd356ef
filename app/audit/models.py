"""
Data models for the audit trail.
Append-only: rows can be created, never updated or deleted.
"""

from django.db import models
from django.conf import settings
from django.utils import timezone


class ImmutableRecordError(Exception):
    """Raised on any attempt to change or remove an audit record."""

    pass


class ActivityLogQuerySet(models.QuerySet):
    """Blocks the bulk mutation paths of the ORM."""

    def update(self, **kwargs):
        raise ImmutableRecordError("Activity log records cannot be updated.")

    def delete(self):
        raise ImmutableRecordError("Activity log records cannot be deleted.")


class ActivityLog(models.Model):
    """One record per accepted mutation or login."""

    class Action(models.TextChoices):
        LOGIN = "LOGIN", "Login"
        CREATE = "CREATE", "Create"
        EDIT = "EDIT", "Edit"
        STATUS_CHANGE = "STATUS_CHANGE", "Status Change"
        REJECTION = "REJECTION", "Rejection"

    # No DB constraint: a record outlives the member who produced it
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name="+",
    )
    actor_name = models.CharField(max_length=255)
    action = models.CharField(max_length=30, choices=Action.choices)
    target = models.CharField(max_length=255)
    details = models.TextField(blank=True, null=True)
    # Weak reference, kept after the project is gone
    project_id = models.BigIntegerField(blank=True, null=True, db_index=True)
    from_status = models.CharField(max_length=30, blank=True)
    to_status = models.CharField(max_length=30, blank=True)
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    objects = ActivityLogQuerySet.as_manager()

    class Meta:
        ordering = ["-timestamp", "-id"]
        verbose_name = "Activity Log"
        verbose_name_plural = "Activity Logs"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ImmutableRecordError(
                "Activity log records cannot be updated."
            )
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ImmutableRecordError("Activity log records cannot be deleted.")

    def __str__(self):
        return f"{self.action} by {self.actor_name} on {self.target}"
