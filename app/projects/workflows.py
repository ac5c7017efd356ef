"""
Domain layer - pure, Django-unaware, a table-driven state machine.
Answers who may edit a project, who may move it between statuses,
which moves need a written justification, and how far it is from its SLA.
"""

import math
from datetime import timedelta


class ProjectWorkflowError(Exception):
    """Base class for expected workflow failures."""

    pass


class ProjectNotFoundError(ProjectWorkflowError):
    """The referenced project does not exist."""

    pass


class ProjectPermissionError(ProjectWorkflowError):
    """The actor's role or ownership does not allow the request."""

    pass


class ProjectValidationError(ProjectWorkflowError):
    """A sensitive transition was requested without a justification."""

    pass


# --- 1. Vocabulary ---

STATUSES = (
    "LEAD",
    "PROPOSAL_SENT",
    "PROPOSAL_SIGNED",
    "UNDER_REVIEW",
    "UNDER_PROCESS",
    "ON_HOLD",
    "REVIEW_COMPLETED",
    "COMPLETED",
    "CANCELLED",
    "NOT_ACTIVE",
    "END",
)
TERMINAL_STATUSES = frozenset({"COMPLETED", "CANCELLED", "END"})

ROLES = ("SUPER_ADMIN", "ADMIN", "MANAGER", "AUDITOR", "VIEWER", "SALES")

ON_TRACK = "ON_TRACK"
AT_RISK = "AT_RISK"
LATE = "LATE"
DEFAULT_AT_RISK_DAYS = 2


# --- 2. Edit permission ---

ALWAYS = "always"
OWNER_ONLY = "owner_only"
NEVER = "never"

EDIT_POLICY = {
    "SUPER_ADMIN": ALWAYS,
    "ADMIN": ALWAYS,
    "MANAGER": ALWAYS,
    "AUDITOR": OWNER_ONLY,
    "VIEWER": NEVER,
    "SALES": NEVER,
}


def can_edit(role_name: str, is_owner: bool) -> bool:
    """Whether a role may edit a project at all (fields or status)."""
    policy = EDIT_POLICY.get(role_name, NEVER)
    if policy == ALWAYS:
        return True
    if policy == OWNER_ONLY:
        return bool(is_owner)
    return False


# --- 3. Transition matrix ---

# Wildcards used only inside TRANSITION_RULES; they are expanded below
# into explicit (from, to) pairs, never evaluated at check time.
ANY = "*"
OPEN = "<open>"

TRANSITION_RULES = {
    "SUPER_ADMIN": [(ANY, ANY)],
    "ADMIN": [(ANY, ANY)],
    "MANAGER": [
        ("UNDER_REVIEW", "REVIEW_COMPLETED"),  # approve review
        (OPEN, "ON_HOLD"),
        (OPEN, "CANCELLED"),
        (ANY, "UNDER_PROCESS"),  # send back for rework
    ],
    "AUDITOR": [
        (ANY, "UNDER_PROCESS"),  # start / continue work
        ("UNDER_PROCESS", "UNDER_REVIEW"),  # submit for review
        ("LEAD", "PROPOSAL_SENT"),
    ],
    "VIEWER": [],
    "SALES": [],
}


def _matches(pattern: str, status: str) -> bool:
    if pattern == ANY:
        return True
    if pattern == OPEN:
        return status not in TERMINAL_STATUSES
    return pattern == status


def build_allowed_transitions(rules: dict) -> dict:
    """
    Expands per-role rules into the explicit matrix
    { 'UNDER_REVIEW': { 'REVIEW_COMPLETED': ['ADMIN', 'MANAGER', ...] } }.
    Every status gets an entry, terminal ones included.
    """
    allowed = {status: {} for status in STATUSES}
    for role_name, role_rules in rules.items():
        for from_pattern, to_pattern in role_rules:
            for from_status in STATUSES:
                if not _matches(from_pattern, from_status):
                    continue
                for to_status in STATUSES:
                    if to_status == from_status:
                        continue
                    if not _matches(to_pattern, to_status):
                        continue
                    roles = allowed[from_status].setdefault(to_status, [])
                    if role_name not in roles:
                        roles.append(role_name)
    return allowed


ALLOWED_TRANSITIONS = build_allowed_transitions(TRANSITION_RULES)


def validate_transition(
    *,
    from_status: str,
    to_status: str,
    role_name: str,
    allowed_transitions: dict = ALLOWED_TRANSITIONS,
):
    """
    Validates a status change against the transition matrix.
    Raises ProjectPermissionError if the edge or the role is not allowed.
    """
    allowed_roles = allowed_transitions.get(from_status, {}).get(to_status)

    if not allowed_roles:
        raise ProjectPermissionError(
            f"Transition from '{from_status}' to '{to_status}'"
            " is not defined."
        )

    if role_name not in allowed_roles:
        raise ProjectPermissionError(
            f"Role '{role_name}' is not authorized to move from"
            f" '{from_status}' to '{to_status}'."
        )


def can_transition(role_name: str, from_status: str, to_status: str) -> bool:
    """Boolean form of validate_transition."""
    try:
        validate_transition(
            from_status=from_status,
            to_status=to_status,
            role_name=role_name,
        )
    except ProjectPermissionError:
        return False
    return True


def get_available_transitions(from_status: str, role_name: str) -> list:
    """Target statuses the role may move a project to, in status order."""
    possible = ALLOWED_TRANSITIONS.get(from_status, {})
    return [
        to_status
        for to_status in STATUSES
        if role_name in possible.get(to_status, [])
    ]


# --- 4. Mandatory justification ---

REJECTION_SOURCES = frozenset({"UNDER_REVIEW", "REVIEW_COMPLETED"})
CRITICAL_TARGETS = frozenset({"ON_HOLD", "CANCELLED"})


def is_rejection(from_status: str, to_status: str) -> bool:
    return from_status in REJECTION_SOURCES and to_status == "UNDER_PROCESS"


def is_critical_action(to_status: str) -> bool:
    return to_status in CRITICAL_TARGETS


def requires_justification(from_status: str, to_status: str) -> bool:
    """Rejections and critical actions need remarks, whatever the role."""
    if from_status == to_status:
        return False
    return is_rejection(from_status, to_status) or is_critical_action(
        to_status
    )


# --- 5. SLA timer ---


def days_remaining(deadline, now) -> int:
    """Whole days until the deadline, rounded up."""
    return math.ceil((deadline - now) / timedelta(days=1))


def compute_timer_status(
    deadline, now, at_risk_days: int = DEFAULT_AT_RISK_DAYS
) -> str:
    """
    LATE once the deadline has passed, AT_RISK within at_risk_days,
    ON_TRACK otherwise.
    """
    if deadline < now:
        return LATE
    if days_remaining(deadline, now) <= at_risk_days:
        return AT_RISK
    return ON_TRACK
