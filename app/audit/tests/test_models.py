"""
Tests for the append-only audit trail.
"""

from django.contrib.auth import get_user_model
from django.test import TestCase

from audit.models import ActivityLog, ImmutableRecordError
from audit.services import record_activity


class ActivityLogTests(TestCase):
    """Records can be appended, never changed or removed."""

    def setUp(self):
        self.member = get_user_model().objects.create_user(
            username="mona", password="testpass123", name="Mona Lisa"
        )
        self.entry = record_activity(
            actor=self.member,
            action=ActivityLog.Action.EDIT,
            target="Project Annual audit",
            details="Updated project details.",
        )

    def test_record_activity_snapshots_actor_name(self):
        self.assertEqual(self.entry.actor_name, "Mona Lisa")
        self.assertEqual(self.entry.actor_id, self.member.id)
        self.assertIsNotNone(self.entry.timestamp)
        self.assertIsNone(self.entry.project_id)

    def test_system_record_without_actor(self):
        entry = record_activity(
            actor=None, action=ActivityLog.Action.EDIT, target="System"
        )

        self.assertEqual(entry.actor_name, "System")

    def test_str(self):
        self.assertEqual(
            str(self.entry), "EDIT by Mona Lisa on Project Annual audit"
        )

    def test_save_existing_record_is_blocked(self):
        self.entry.details = "tampered"

        with self.assertRaises(ImmutableRecordError):
            self.entry.save()

        self.entry.refresh_from_db()
        self.assertEqual(self.entry.details, "Updated project details.")

    def test_delete_record_is_blocked(self):
        with self.assertRaises(ImmutableRecordError):
            self.entry.delete()

        self.assertTrue(ActivityLog.objects.filter(id=self.entry.id).exists())

    def test_bulk_update_is_blocked(self):
        with self.assertRaises(ImmutableRecordError):
            ActivityLog.objects.filter(id=self.entry.id).update(
                details="tampered"
            )

    def test_bulk_delete_is_blocked(self):
        with self.assertRaises(ImmutableRecordError):
            ActivityLog.objects.all().delete()

        self.assertEqual(ActivityLog.objects.count(), 1)

    def test_record_survives_member_deletion(self):
        """The actor name stays readable after the member is gone."""
        member_id = self.member.id
        self.member.delete()

        entry = ActivityLog.objects.get(id=self.entry.id)
        self.assertEqual(entry.actor_id, member_id)
        self.assertEqual(entry.actor_name, "Mona Lisa")

    def test_newest_first_ordering(self):
        newer = record_activity(
            actor=self.member,
            action=ActivityLog.Action.LOGIN,
            target="System",
        )

        self.assertEqual(ActivityLog.objects.first(), newer)
