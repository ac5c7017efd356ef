"""
Data models for the project domain.
"""

from django.core.validators import MinValueValidator
from django.db import models
from django.conf import settings


class Project(models.Model):
    """A client engagement tracked from lead to closure."""

    class Status(models.TextChoices):
        LEAD = "LEAD", "Lead"
        PROPOSAL_SENT = "PROPOSAL_SENT", "Proposal Sent"
        PROPOSAL_SIGNED = "PROPOSAL_SIGNED", "Proposal Signed"
        UNDER_REVIEW = "UNDER_REVIEW", "Under Review"
        UNDER_PROCESS = "UNDER_PROCESS", "Under Process"
        ON_HOLD = "ON_HOLD", "On Hold"
        REVIEW_COMPLETED = "REVIEW_COMPLETED", "Review Completed"
        COMPLETED = "COMPLETED", "Completed"
        CANCELLED = "CANCELLED", "Cancelled"
        NOT_ACTIVE = "NOT_ACTIVE", "Not Active"
        END = "END", "End"

    class TimerStatus(models.TextChoices):
        ON_TRACK = "ON_TRACK", "On Track"
        AT_RISK = "AT_RISK", "At Risk"
        LATE = "LATE", "Late"

    class ServiceType(models.TextChoices):
        AUDIT = "AUDIT", "Audit"
        INTERNAL_AUDIT = "INTERNAL_AUDIT", "Internal Audit"
        ACCOUNTING = "ACCOUNTING", "Accounting"
        TAX = "TAX", "Tax"
        CONSULTING = "CONSULTING", "Consulting"
        ICV_CERTIFICATION = "ICV_CERTIFICATION", "ICV Certification"
        ISO_CERTIFICATION = "ISO_CERTIFICATION", "ISO Certification"
        VAT_REGISTRATION = "VAT_REGISTRATION", "VAT Registration"
        VAT_FILING = "VAT_FILING", "VAT Filing"
        CT_REGISTRATION = "CT_REGISTRATION", "Corporate Tax Registration"
        CT_FILING = "CT_FILING", "Corporate Tax Filing"
        LIQUIDATION = "LIQUIDATION", "Liquidation"
        ESR = "ESR", "ESR"
        FEASIBILITY_STUDY = "FEASIBILITY_STUDY", "Feasibility Study"
        OTHER = "OTHER", "Other"

    project_name = models.CharField(max_length=255)
    client_name = models.CharField(max_length=255)
    service_type = models.CharField(
        max_length=30, choices=ServiceType.choices, default=ServiceType.OTHER
    )
    contact_person = models.CharField(max_length=255, blank=True)
    email = models.EmailField(blank=True, null=True)
    phone = models.CharField(max_length=50, blank=True)
    amount = models.DecimalField(max_digits=18, decimal_places=2, default=0)

    start_date = models.DateField(blank=True, null=True)
    target_deadline = models.DateTimeField()

    status = models.CharField(
        max_length=30,
        choices=Status.choices,
        default=Status.LEAD,
        db_index=True,
    )
    # Derived by the SLA monitor, never edited by hand
    timer_status = models.CharField(
        max_length=20,
        choices=TimerStatus.choices,
        default=TimerStatus.ON_TRACK,
    )
    remarks = models.TextField(blank=True)

    assigned_to = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="assigned_projects",
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="created_projects",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-id"]

    def __str__(self):
        return self.project_name


class SlaConfig(models.Model):
    """Tunable SLA thresholds, e.g. at_risk_days; read by the monitor."""

    key = models.CharField(primary_key=True, max_length=50)
    value_int = models.IntegerField(validators=[MinValueValidator(0)])
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "SLA Setting"
        verbose_name_plural = "SLA Settings"

    def __str__(self):
        return self.key


class MonitorLease(models.Model):
    """
    Cross-process guard for a recurring job such as the SLA monitor pass.
    Held while locked_until is in the future; expires on its own if the
    holder dies.
    """

    key = models.CharField(primary_key=True, max_length=50)
    holder = models.CharField(max_length=64, blank=True)
    locked_until = models.DateTimeField(blank=True, null=True)

    def __str__(self):
        return self.key
