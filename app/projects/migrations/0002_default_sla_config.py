# Manually created to seed the SLA thresholds read by the monitor.

from django.db import migrations


def create_default_sla_config(apps, schema_editor):
    SlaConfig = apps.get_model("projects", "SlaConfig")
    SlaConfig.objects.get_or_create(
        key="at_risk_days", defaults={"value_int": 2}
    )


def remove_default_sla_config(apps, schema_editor):
    SlaConfig = apps.get_model("projects", "SlaConfig")
    SlaConfig.objects.filter(key="at_risk_days").delete()


class Migration(migrations.Migration):
    dependencies = [
        ("projects", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(
            create_default_sla_config, remove_default_sla_config
        ),
    ]
