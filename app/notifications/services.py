"""
Application layer for notifications: raising, acknowledging and
retention of in-app alerts.
"""

import logging
from datetime import timedelta

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from .models import Notification

logger = logging.getLogger(__name__)


def raise_sla_breach(*, project, now=None) -> Notification:
    """Creates the HIGH/RISK alert for a project that just became late."""
    notification = Notification.objects.create(
        severity=Notification.Severity.HIGH,
        category=Notification.Category.RISK,
        title="SLA Breach Detected",
        message=(
            f"Project {project.project_name} is now OVERDUE. "
            "Immediate action required."
        ),
        project_id=project.id,
        action_ref=f"/projects/{project.id}/",
        created_at=now or timezone.now(),
    )
    logger.info(
        "SLA breach notification %s raised for project %s",
        notification.id,
        project.id,
    )
    return notification


def mark_read(*, notification: Notification, now=None) -> Notification:
    """Marks one notification as read; a no-op if it already is."""
    if notification.is_read:
        return notification
    notification.is_read = True
    notification.read_at = now or timezone.now()
    notification.save(update_fields=["is_read", "read_at"])
    return notification


def mark_all_read(*, now=None) -> int:
    """Marks every unread notification as read, returns how many."""
    return Notification.objects.filter(is_read=False).update(
        is_read=True, read_at=now or timezone.now()
    )


@transaction.atomic
def prune_notifications(
    *, now=None, retention_days=None, max_rows=None
) -> int:
    """
    Applies the retention policy and returns the number of rows deleted:
    1. read notifications older than retention_days are dropped;
    2. the store is capped at max_rows, oldest first (read or not).
    """
    now = now or timezone.now()
    if retention_days is None:
        retention_days = settings.NOTIFICATION_RETENTION_DAYS
    if max_rows is None:
        max_rows = settings.NOTIFICATION_MAX_ROWS

    cutoff = now - timedelta(days=retention_days)
    deleted, _ = Notification.objects.filter(
        is_read=True, created_at__lt=cutoff
    ).delete()

    # Ordering is newest first, so everything past max_rows is overflow
    overflow_ids = list(
        Notification.objects.values_list("id", flat=True)[max_rows:]
    )
    if overflow_ids:
        overflow_deleted, _ = Notification.objects.filter(
            id__in=overflow_ids
        ).delete()
        deleted += overflow_deleted

    if deleted:
        logger.info("Pruned %s notifications", deleted)
    return deleted
