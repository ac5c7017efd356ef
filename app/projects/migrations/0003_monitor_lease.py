# Manually created: SLA monitor lease row and at_risk_days lower bound.

import django.core.validators
from django.db import migrations, models


def create_sla_monitor_lease(apps, schema_editor):
    MonitorLease = apps.get_model("projects", "MonitorLease")
    MonitorLease.objects.get_or_create(key="sla_monitor")


def remove_sla_monitor_lease(apps, schema_editor):
    MonitorLease = apps.get_model("projects", "MonitorLease")
    MonitorLease.objects.filter(key="sla_monitor").delete()


class Migration(migrations.Migration):
    dependencies = [
        ("projects", "0002_default_sla_config"),
    ]

    operations = [
        migrations.CreateModel(
            name="MonitorLease",
            fields=[
                (
                    "key",
                    models.CharField(
                        max_length=50, primary_key=True, serialize=False
                    ),
                ),
                ("holder", models.CharField(blank=True, max_length=64)),
                (
                    "locked_until",
                    models.DateTimeField(blank=True, null=True),
                ),
            ],
        ),
        migrations.AlterField(
            model_name="slaconfig",
            name="value_int",
            field=models.IntegerField(
                validators=[django.core.validators.MinValueValidator(0)]
            ),
        ),
        migrations.RunPython(
            create_sla_monitor_lease, remove_sla_monitor_lease
        ),
    ]
