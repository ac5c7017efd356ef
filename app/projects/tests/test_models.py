"""
Tests for project models.
"""

from django.core.exceptions import ValidationError
from django.test import TestCase

from projects.models import MonitorLease, SlaConfig


class SlaConfigModelTests(TestCase):
    """Tests for the SlaConfig model."""

    def test_default_threshold_is_seeded(self):
        self.assertEqual(
            SlaConfig.objects.get(key="at_risk_days").value_int, 2
        )

    def test_negative_value_is_invalid(self):
        config = SlaConfig(key="escalation_days", value_int=-1)

        with self.assertRaises(ValidationError) as cm:
            config.full_clean()

        self.assertIn("value_int", cm.exception.message_dict)

    def test_zero_is_valid(self):
        config = SlaConfig(key="escalation_days", value_int=0)

        config.full_clean()


class MonitorLeaseModelTests(TestCase):
    """Tests for the MonitorLease model."""

    def test_sla_monitor_lease_is_seeded_free(self):
        lease = MonitorLease.objects.get(key="sla_monitor")

        self.assertEqual(str(lease), "sla_monitor")
        self.assertEqual(lease.holder, "")
        self.assertIsNone(lease.locked_until)
