"""
Application layer for the audit trail.
The only write path into ActivityLog.
"""

import logging

from .models import ActivityLog

logger = logging.getLogger(__name__)


def record_activity(
    *,
    actor,
    action: str,
    target: str,
    details: str | None = None,
    project=None,
    from_status: str = "",
    to_status: str = "",
) -> ActivityLog:
    """
    Appends one record to the audit trail and returns it.
    Database errors propagate: callers run inside their own
    transaction so a failed append rolls the whole mutation back.
    """
    entry = ActivityLog.objects.create(
        actor=actor,
        actor_name=actor.display_name if actor else "System",
        action=action,
        target=target,
        details=details,
        project_id=project.id if project else None,
        from_status=from_status,
        to_status=to_status,
    )
    logger.debug(
        "Audit %s recorded for %s (project=%s)",
        action,
        entry.actor_name,
        entry.project_id,
    )
    return entry
