"""
Application layer - Django-aware orchestrator service for project objects.
Locks the project row, calls the Domain layer for validation, persists
the change and appends the audit record inside one transaction.
Runs the SLA monitor pass and raises breach notifications.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from audit.models import ActivityLog
from audit.services import record_activity
from notifications.services import raise_sla_breach
from .models import MonitorLease, Project, SlaConfig
from .workflows import (
    DEFAULT_AT_RISK_DAYS,
    LATE,
    TERMINAL_STATUSES,
    ProjectNotFoundError,
    ProjectPermissionError,
    ProjectValidationError,
    can_edit,
    compute_timer_status,
    is_rejection,
    requires_justification,
    validate_transition,
)

User = get_user_model()

logger = logging.getLogger(__name__)

# Never taken from an edit payload
NON_EDITABLE_FIELDS = frozenset(
    {"id", "timer_status", "created_by", "created_at", "updated_at"}
)


# --- SLA helper ---
def _get_sla_days(key: str, default: int) -> int:
    """Fetches an SLA configuration value from the DB, with a fallback."""
    try:
        return SlaConfig.objects.get(key=key).value_int
    except SlaConfig.DoesNotExist:
        return default


def _project_label(project: Project) -> str:
    return f"Project {project.project_name}"


# --- Service Functions ---


@transaction.atomic
def create_project(*, user, **kwargs) -> Project:
    """
    Intake: creates a project in LEAD, open to any member, with its timer
    computed from the deadline.
    """
    # Status and timer are owned by the workflow, not the caller
    kwargs.pop("status", None)
    kwargs.pop("timer_status", None)

    project = Project.objects.create(
        created_by=user,
        status=Project.Status.LEAD,
        **kwargs,
    )
    record_activity(
        actor=user,
        action=ActivityLog.Action.CREATE,
        target=_project_label(project),
        details="Created new project",
        project=project,
        to_status=project.status,
    )
    # Timer is set at intake; a past deadline raises its breach here
    _refresh_timer(
        project.id,
        timezone.now(),
        _get_sla_days("at_risk_days", DEFAULT_AT_RISK_DAYS),
    )
    project.refresh_from_db()
    logger.info("Project %s created by %s", project.id, user.username)
    return project


@transaction.atomic
def apply_edit(
    *, project_id, user, changes: dict, justification: str | None = None
) -> Project:
    """
    Applies an edit (fields and/or status) on behalf of a member.
    Raises ProjectNotFoundError, ProjectPermissionError or
    ProjectValidationError; nothing is written when any of them fires.
    """
    # Row lock held until commit: concurrent edits are serialised
    try:
        project = Project.objects.select_for_update().get(pk=project_id)
    except Project.DoesNotExist:
        raise ProjectNotFoundError(f"Project {project_id} not found.")

    # --- Edit permission (role + ownership) ---
    is_owner = (
        project.assigned_to_id is not None
        and project.assigned_to_id == user.id
    )
    if not can_edit(user.role, is_owner):
        logger.warning(
            "Edit denied: %s (%s) on project %s",
            user.username,
            user.role,
            project.id,
        )
        raise ProjectPermissionError(
            "Permission Denied: You cannot edit this project."
        )

    from_status = project.status
    to_status = changes.get("status", from_status)
    justification = (justification or "").strip()
    rejection = False

    # --- Workflow Validation ---
    if to_status != from_status:
        try:
            validate_transition(
                from_status=from_status,
                to_status=to_status,
                role_name=user.role,
            )
        except ProjectPermissionError:
            logger.warning(
                "Transition denied: %s (%s) on project %s, %s -> %s",
                user.username,
                user.role,
                project.id,
                from_status,
                to_status,
            )
            raise

        rejection = is_rejection(from_status, to_status)
        if requires_justification(from_status, to_status) and not (
            justification
        ):
            raise ProjectValidationError(
                "Validation Failed: Mandatory remarks are required for "
                "Rejection, Cancellation, or On Hold status."
            )

    # --- Apply changes ---
    for field_name, value in changes.items():
        if field_name in NON_EDITABLE_FIELDS:
            continue
        setattr(project, field_name, value)
    if justification:
        project.remarks = justification
    project.save()

    # --- Audit ---
    if to_status != from_status:
        action = (
            ActivityLog.Action.REJECTION
            if rejection
            else ActivityLog.Action.STATUS_CHANGE
        )
        details = f"Changed status to {project.get_status_display()}."
    else:
        action = ActivityLog.Action.EDIT
        details = "Updated project details."
    if justification:
        details = f"{details} [Remark: {justification}]"

    record_activity(
        actor=user,
        action=action,
        target=_project_label(project),
        details=details,
        project=project,
        from_status=from_status,
        to_status=to_status,
    )
    logger.info(
        "Project %s edited by %s (%s, %s -> %s)",
        project.id,
        user.username,
        action,
        from_status,
        to_status,
    )
    return project


# --- SLA monitor ---

SLA_MONITOR_LEASE = "sla_monitor"


@dataclass(frozen=True)
class MonitorPassResult:
    """Outcome of one SLA monitor pass."""

    projects_updated: int = 0
    notifications_raised: int = 0
    stopped: bool = False
    skipped: bool = False


def _acquire_lease(key, holder, ttl) -> bool:
    """
    Takes the named lease unless another holder's lease is still live.
    A single conditional UPDATE, so two processes never both win.
    """
    MonitorLease.objects.get_or_create(key=key)
    now = timezone.now()
    taken = (
        MonitorLease.objects.filter(key=key)
        .filter(Q(locked_until__isnull=True) | Q(locked_until__lte=now))
        .update(holder=holder, locked_until=now + ttl)
    )
    return taken == 1


def _renew_lease(key, holder, ttl) -> bool:
    renewed = MonitorLease.objects.filter(key=key, holder=holder).update(
        locked_until=timezone.now() + ttl
    )
    return renewed == 1


def _release_lease(key, holder):
    MonitorLease.objects.filter(key=key, holder=holder).update(
        holder="", locked_until=None
    )


@transaction.atomic
def _refresh_timer(project_id, now, at_risk_days) -> tuple:
    """
    Recomputes one project's timer under a row lock.
    Returns (updated, breach_raised).
    """
    project = (
        Project.objects.select_for_update()
        .filter(pk=project_id)
        .exclude(status__in=TERMINAL_STATUSES)
        .first()
    )
    # Gone or closed since the scan started
    if project is None:
        return False, False

    new_timer_status = compute_timer_status(
        project.target_deadline, now, at_risk_days
    )
    if new_timer_status == project.timer_status:
        return False, False

    previous = project.timer_status
    project.timer_status = new_timer_status
    project.save(update_fields=["timer_status", "updated_at"])
    logger.info(
        "Project %s timer %s -> %s", project.id, previous, new_timer_status
    )

    if new_timer_status == LATE:
        raise_sla_breach(project=project, now=now)
        return True, True
    return True, False


def run_sla_monitor_pass(*, clock=timezone.now, should_stop=None):
    """
    Scan-and-diff over all non-terminal projects.

    Only one pass runs at a time across every process sharing the
    database: a pass that cannot take the monitor lease returns at once
    with skipped=True. Each project is refreshed in its own transaction,
    so stopping between projects (should_stop() returning True, or the
    lease being lost) leaves no partial writes.
    """
    holder = uuid.uuid4().hex
    ttl = timedelta(seconds=settings.SLA_MONITOR_LEASE_SECONDS)
    if not _acquire_lease(SLA_MONITOR_LEASE, holder, ttl):
        logger.info("SLA monitor pass already running elsewhere, skipping")
        return MonitorPassResult(skipped=True)

    try:
        return _scan_projects(
            holder=holder, ttl=ttl, clock=clock, should_stop=should_stop
        )
    finally:
        _release_lease(SLA_MONITOR_LEASE, holder)


def _scan_projects(*, holder, ttl, clock, should_stop):
    now = clock()
    at_risk_days = _get_sla_days("at_risk_days", DEFAULT_AT_RISK_DAYS)
    project_ids = list(
        Project.objects.exclude(status__in=TERMINAL_STATUSES)
        .order_by("id")
        .values_list("id", flat=True)
    )

    updated = raised = 0
    stopped = False
    for project_id in project_ids:
        if should_stop is not None and should_stop():
            stopped = True
            logger.info(
                "SLA monitor pass stopped before project %s", project_id
            )
            break
        if not _renew_lease(SLA_MONITOR_LEASE, holder, ttl):
            stopped = True
            logger.warning(
                "SLA monitor lease lost before project %s", project_id
            )
            break
        was_updated, was_raised = _refresh_timer(
            project_id, now, at_risk_days
        )
        updated += was_updated
        raised += was_raised

    logger.info(
        "SLA monitor pass: %s scanned, %s updated, %s notifications",
        len(project_ids),
        updated,
        raised,
    )
    return MonitorPassResult(
        projects_updated=updated,
        notifications_raised=raised,
        stopped=stopped,
    )


def get_visible_projects(user, queryset=None):
    """Auditors only see the projects assigned to them."""
    if queryset is None:
        queryset = Project.objects.all()
    if user.role == User.Role.AUDITOR:
        return queryset.filter(assigned_to=user)
    return queryset
