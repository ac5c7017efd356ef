"""
Tests for the Django admin interface of the notifications app.
"""

from django.test import TestCase, Client
from django.contrib.auth import get_user_model
from django.urls import reverse

from notifications.models import Notification

User = get_user_model()


class NotificationAdminTests(TestCase):

    def setUp(self):
        self.client = Client()
        self.admin_user = User.objects.create_superuser(
            username="root",
            password="adminpw123",
        )
        self.client.force_login(self.admin_user)
        self.notification = Notification.objects.create(
            title="SLA Breach Detected", message="Project X is now OVERDUE."
        )

    def test_notification_changelist_loads(self):
        """Test the changelist page for Notification model loads."""
        url = reverse("admin:notifications_notification_changelist")
        response = self.client.get(url)

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "SLA Breach Detected")

    def test_notification_change_page_loads(self):
        """Test the change page for Notification model loads."""
        url = reverse(
            "admin:notifications_notification_change",
            args=[self.notification.id],
        )
        response = self.client.get(url)

        self.assertEqual(response.status_code, 200)
