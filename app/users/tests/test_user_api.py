"""
Tests for the team member API.
"""

from django.test import TestCase
from django.contrib.auth import get_user_model
from django.urls import reverse

from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient
from rest_framework import status

from audit.models import ActivityLog

LOGIN_URL = reverse("users:login")
ME_URL = reverse("users:me")
MEMBERS_URL = reverse("users:teammember-list")


def member_url(member_id):
    """Create and return a member detail URL."""
    return reverse("users:teammember-detail", args=[member_id])


def create_user(**params):
    """Create and return a new member (helper function)."""
    return get_user_model().objects.create_user(**params)


class LoginApiTests(TestCase):
    """Test the login endpoint."""

    def setUp(self):
        self.client = APIClient()
        self.user = create_user(
            username="mona",
            password="testpass123",
            name="Mona Lisa",
            role="MANAGER",
        )

    def test_login_returns_token_and_member(self):
        res = self.client.post(
            LOGIN_URL, {"username": "mona", "password": "testpass123"}
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        token = Token.objects.get(user=self.user)
        self.assertEqual(res.data["token"], token.key)
        self.assertEqual(res.data["member"]["role"], "MANAGER")
        self.assertNotIn("password", res.data["member"])

    def test_login_is_recorded(self):
        self.client.post(
            LOGIN_URL, {"username": "mona", "password": "testpass123"}
        )

        log = ActivityLog.objects.get()
        self.assertEqual(log.action, ActivityLog.Action.LOGIN)
        self.assertEqual(log.actor_id, self.user.id)
        self.assertEqual(log.actor_name, "Mona Lisa")
        self.assertEqual(log.target, "System")
        self.user.refresh_from_db()
        self.assertIsNotNone(self.user.last_login)

    def test_token_works_for_later_requests(self):
        res = self.client.post(
            LOGIN_URL, {"username": "mona", "password": "testpass123"}
        )

        token = res.data["token"]
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {token}")
        me = self.client.get(ME_URL)
        self.assertEqual(me.status_code, status.HTTP_200_OK)
        self.assertEqual(me.data["username"], "mona")

    def test_failure_does_not_reveal_which_credential_was_wrong(self):
        wrong_password = self.client.post(
            LOGIN_URL, {"username": "mona", "password": "nope-nope"}
        )
        unknown_user = self.client.post(
            LOGIN_URL, {"username": "nobody", "password": "testpass123"}
        )

        for res in (wrong_password, unknown_user):
            self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
            self.assertEqual(
                res.data, {"error": "Invalid username or password."}
            )
        self.assertFalse(ActivityLog.objects.exists())
        self.assertFalse(Token.objects.exists())

    def test_inactive_member_cannot_login(self):
        self.user.is_active = False
        self.user.save()

        res = self.client.post(
            LOGIN_URL, {"username": "mona", "password": "testpass123"}
        )

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_blank_credentials_are_rejected(self):
        res = self.client.post(LOGIN_URL, {"username": "", "password": ""})

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)


class PublicMemberApiTests(TestCase):
    """Test unauthenticated requests to member endpoints."""

    def setUp(self):
        self.client = APIClient()

    def test_retrieve_me_unauthorized(self):
        res = self.client.get(ME_URL)

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_members_unauthorized(self):
        res = self.client.get(MEMBERS_URL)

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)


class PrivateMemberApiTests(TestCase):
    """Test API requests that require authentication."""

    def setUp(self):
        self.client = APIClient()
        self.admin = create_user(
            username="alice", password="testpass123", role="ADMIN"
        )
        self.viewer = create_user(
            username="victor", password="testpass123", role="VIEWER"
        )

    def test_retrieve_profile_success(self):
        self.client.force_authenticate(user=self.viewer)

        res = self.client.get(ME_URL)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["username"], "victor")
        self.assertEqual(res.data["role"], "VIEWER")
        self.assertNotIn("password", res.data)

    def test_any_member_can_list_members(self):
        self.client.force_authenticate(user=self.viewer)

        res = self.client.get(MEMBERS_URL, {"role": "ADMIN"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data), 1)
        self.assertEqual(res.data[0]["username"], "alice")

    def test_admin_creates_member_with_hashed_password(self):
        self.client.force_authenticate(user=self.admin)
        payload = {
            "username": "aaron",
            "password": "testpass123",
            "name": "Aaron",
            "role": "AUDITOR",
        }

        res = self.client.post(MEMBERS_URL, payload)

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertNotIn("password", res.data)
        member = get_user_model().objects.get(username="aaron")
        self.assertTrue(member.check_password("testpass123"))
        self.assertEqual(member.role, "AUDITOR")

    def test_password_too_short(self):
        self.client.force_authenticate(user=self.admin)
        payload = {"username": "aaron", "password": "psw", "role": "AUDITOR"}

        res = self.client.post(MEMBERS_URL, payload)

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(
            get_user_model().objects.filter(username="aaron").exists()
        )

    def test_password_required_for_new_member(self):
        self.client.force_authenticate(user=self.admin)

        res = self.client.post(MEMBERS_URL, {"username": "aaron"})

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password", res.data)

    def test_duplicate_username_rejected(self):
        self.client.force_authenticate(user=self.admin)
        payload = {"username": "victor", "password": "testpass123"}

        res = self.client.post(MEMBERS_URL, payload)

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_non_admin_cannot_create_member(self):
        self.client.force_authenticate(user=self.viewer)
        payload = {"username": "aaron", "password": "testpass123"}

        res = self.client.post(MEMBERS_URL, payload)

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_updates_role_and_password(self):
        self.client.force_authenticate(user=self.admin)
        payload = {"role": "MANAGER", "password": "newpass123"}

        res = self.client.patch(member_url(self.viewer.id), payload)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.viewer.refresh_from_db()
        self.assertEqual(self.viewer.role, "MANAGER")
        self.assertTrue(self.viewer.check_password("newpass123"))

    def test_members_cannot_be_deleted(self):
        self.client.force_authenticate(user=self.admin)

        res = self.client.delete(member_url(self.viewer.id))

        self.assertEqual(res.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertTrue(
            get_user_model().objects.filter(id=self.viewer.id).exists()
        )
