"""
Tests for the notifications services: raising, acknowledging, retention.
"""

from datetime import datetime, timedelta, timezone as dt_timezone
from types import SimpleNamespace

from django.test import TestCase, override_settings

from notifications import services
from notifications.models import Notification

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=dt_timezone.utc)


def create_notification(age_days=0, is_read=False, **params):
    """Create and return a notification created age_days before NOW."""
    defaults = {"title": "Reminder", "message": "Something happened."}
    defaults.update(params)
    return Notification.objects.create(
        created_at=NOW - timedelta(days=age_days),
        is_read=is_read,
        **defaults,
    )


class RaiseSlaBreachTests(TestCase):
    """Tests for services.raise_sla_breach."""

    def test_breach_notification_content(self):
        project = SimpleNamespace(id=12, project_name="VAT filing")

        notification = services.raise_sla_breach(project=project, now=NOW)

        self.assertEqual(notification.severity, Notification.Severity.HIGH)
        self.assertEqual(notification.category, Notification.Category.RISK)
        self.assertEqual(notification.title, "SLA Breach Detected")
        self.assertEqual(
            notification.message,
            "Project VAT filing is now OVERDUE. Immediate action required.",
        )
        self.assertEqual(notification.project_id, 12)
        self.assertEqual(notification.action_ref, "/projects/12/")
        self.assertEqual(notification.created_at, NOW)
        self.assertFalse(notification.is_read)


class MarkReadTests(TestCase):
    """Tests for services.mark_read and services.mark_all_read."""

    def test_mark_read_sets_timestamp(self):
        notification = create_notification()

        services.mark_read(notification=notification, now=NOW)

        notification.refresh_from_db()
        self.assertTrue(notification.is_read)
        self.assertEqual(notification.read_at, NOW)

    def test_mark_read_keeps_first_read_time(self):
        notification = create_notification()
        services.mark_read(notification=notification, now=NOW)

        services.mark_read(
            notification=notification, now=NOW + timedelta(hours=1)
        )

        notification.refresh_from_db()
        self.assertEqual(notification.read_at, NOW)

    def test_mark_all_read_counts_unread_only(self):
        create_notification()
        create_notification()
        create_notification(is_read=True)

        updated = services.mark_all_read(now=NOW)

        self.assertEqual(updated, 2)
        self.assertFalse(Notification.objects.filter(is_read=False).exists())


class PruneNotificationsTests(TestCase):
    """Tests for the retention policy."""

    def test_old_read_notifications_are_dropped(self):
        old_read = create_notification(age_days=91, is_read=True)
        old_unread = create_notification(age_days=91)
        recent_read = create_notification(age_days=10, is_read=True)

        deleted = services.prune_notifications(
            now=NOW, retention_days=90, max_rows=100
        )

        self.assertEqual(deleted, 1)
        remaining = set(Notification.objects.values_list("id", flat=True))
        self.assertEqual(remaining, {old_unread.id, recent_read.id})
        self.assertNotIn(old_read.id, remaining)

    def test_store_is_capped_oldest_first(self):
        notifications = [
            create_notification(age_days=age) for age in (5, 4, 3, 2, 1)
        ]

        deleted = services.prune_notifications(
            now=NOW, retention_days=90, max_rows=3
        )

        self.assertEqual(deleted, 2)
        kept = list(Notification.objects.values_list("id", flat=True))
        self.assertEqual(kept, [n.id for n in reversed(notifications[2:])])

    def test_nothing_to_prune(self):
        create_notification()

        self.assertEqual(services.prune_notifications(now=NOW), 0)

    @override_settings(
        NOTIFICATION_RETENTION_DAYS=1, NOTIFICATION_MAX_ROWS=1
    )
    def test_limits_default_to_settings(self):
        create_notification(age_days=2, is_read=True)
        create_notification(age_days=3)
        create_notification()

        deleted = services.prune_notifications(now=NOW)

        self.assertEqual(deleted, 2)
        self.assertEqual(Notification.objects.count(), 1)
