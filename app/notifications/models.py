"""
Data models for the notifications app.
In-app alerts raised by the SLA monitor; bounded by a retention policy
(see notifications.services.prune_notifications).
"""

from django.db import models
from django.utils import timezone


# To prevent circular dependencies - No direct import of other apps' models


class Notification(models.Model):
    """An in-app alert, e.g. an SLA breach on a project."""

    class Severity(models.TextChoices):
        HIGH = "HIGH", "High"
        BANNER = "BANNER", "Banner"

    class Category(models.TextChoices):
        RISK = "RISK", "Risk"
        PAYMENT = "PAYMENT", "Payment"
        SYSTEM = "SYSTEM", "System"
        TASK = "TASK", "Task"
        ESCALATION = "ESCALATION", "Escalation"

    severity = models.CharField(
        max_length=20, choices=Severity.choices, default=Severity.BANNER
    )
    category = models.CharField(
        max_length=20, choices=Category.choices, default=Category.SYSTEM
    )
    title = models.CharField(max_length=255)
    message = models.TextField()

    # Weak link to the source project, if any
    project_id = models.BigIntegerField(blank=True, null=True, db_index=True)
    action_ref = models.CharField(max_length=500, blank=True, null=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.category} {self.severity}: {self.title}"
