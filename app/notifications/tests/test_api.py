"""
Tests for the notifications API.
"""

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from rest_framework import status
from rest_framework.test import APIClient

from notifications.models import Notification


NOTIFICATIONS_URL = reverse("notifications:notification-list")
READ_ALL_URL = reverse("notifications:notification-read-all")


def read_url(notification_id):
    """Create and return the mark-as-read URL of a notification."""
    return reverse("notifications:notification-read", args=[notification_id])


class PublicNotificationApiTests(TestCase):
    """Test unauthenticated API requests."""

    def test_auth_required(self):
        res = APIClient().get(NOTIFICATIONS_URL)

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)


class PrivateNotificationApiTests(TestCase):
    """Test authenticated API requests."""

    def setUp(self):
        self.client = APIClient()
        self.user = get_user_model().objects.create_user(
            username="victor", password="testpass123"
        )
        self.client.force_authenticate(user=self.user)
        self.breach = Notification.objects.create(
            severity=Notification.Severity.HIGH,
            category=Notification.Category.RISK,
            title="SLA Breach Detected",
            message="Project X is now OVERDUE.",
            project_id=3,
        )
        self.banner = Notification.objects.create(
            title="Maintenance tonight", message="Back at 2am."
        )

    def test_list_notifications(self):
        res = self.client.get(NOTIFICATIONS_URL)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["count"], 2)
        self.assertEqual(res.data["results"][0]["id"], self.banner.id)

    def test_filter_by_severity_and_project(self):
        by_severity = self.client.get(NOTIFICATIONS_URL, {"severity": "HIGH"})
        by_project = self.client.get(NOTIFICATIONS_URL, {"project": 3})

        self.assertEqual(by_severity.data["count"], 1)
        self.assertEqual(by_project.data["count"], 1)
        self.assertEqual(
            by_project.data["results"][0]["id"], self.breach.id
        )

    def test_mark_one_read(self):
        res = self.client.post(read_url(self.breach.id))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertTrue(res.data["is_read"])
        self.assertIsNotNone(res.data["read_at"])
        self.banner.refresh_from_db()
        self.assertFalse(self.banner.is_read)

    def test_mark_all_read(self):
        res = self.client.post(READ_ALL_URL)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, {"updated": 2})
        unread = self.client.get(NOTIFICATIONS_URL, {"is_read": "false"})
        self.assertEqual(unread.data["count"], 0)

    def test_notifications_cannot_be_created_via_api(self):
        res = self.client.post(
            NOTIFICATIONS_URL, {"title": "x", "message": "y"}
        )

        self.assertEqual(res.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
