"""
Application layer for team members: login and account management.
"""

import logging

from django.contrib.auth import authenticate, get_user_model
from django.contrib.auth.models import update_last_login
from django.db import transaction

from audit.models import ActivityLog
from audit.services import record_activity

User = get_user_model()

logger = logging.getLogger(__name__)


class LoginFailedError(Exception):
    """Credential mismatch; never says which credential was wrong."""

    pass


@transaction.atomic
def login(*, username: str, password: str, request=None) -> User:
    """
    Verifies credentials against the salted password hash and records
    the login in the audit trail.
    """
    member = authenticate(request, username=username, password=password)
    if member is None:
        logger.warning("Failed login attempt for username %r", username)
        raise LoginFailedError("Invalid username or password.")

    update_last_login(None, member)
    record_activity(
        actor=member,
        action=ActivityLog.Action.LOGIN,
        target="System",
    )
    logger.info("Member %s logged in", member.username)
    return member


def create_member(*, password: str, **fields) -> User:
    """Creates a member with a hashed password."""
    username = fields.pop("username")
    return User.objects.create_user(username, password, **fields)


def update_member(*, member: User, password: str | None = None, **fields):
    """Updates profile fields; a non-empty password is re-hashed."""
    for field_name, value in fields.items():
        setattr(member, field_name, value)
    if password:
        member.set_password(password)
    member.save()
    return member
