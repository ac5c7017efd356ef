import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="SlaConfig",
            fields=[
                (
                    "key",
                    models.CharField(
                        max_length=50, primary_key=True, serialize=False
                    ),
                ),
                ("value_int", models.IntegerField()),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "SLA Setting",
                "verbose_name_plural": "SLA Settings",
            },
        ),
        migrations.CreateModel(
            name="Project",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("project_name", models.CharField(max_length=255)),
                ("client_name", models.CharField(max_length=255)),
                (
                    "service_type",
                    models.CharField(
                        choices=[
                            ("AUDIT", "Audit"),
                            ("INTERNAL_AUDIT", "Internal Audit"),
                            ("ACCOUNTING", "Accounting"),
                            ("TAX", "Tax"),
                            ("CONSULTING", "Consulting"),
                            ("ICV_CERTIFICATION", "ICV Certification"),
                            ("ISO_CERTIFICATION", "ISO Certification"),
                            ("VAT_REGISTRATION", "VAT Registration"),
                            ("VAT_FILING", "VAT Filing"),
                            ("CT_REGISTRATION", "Corporate Tax Registration"),
                            ("CT_FILING", "Corporate Tax Filing"),
                            ("LIQUIDATION", "Liquidation"),
                            ("ESR", "ESR"),
                            ("FEASIBILITY_STUDY", "Feasibility Study"),
                            ("OTHER", "Other"),
                        ],
                        default="OTHER",
                        max_length=30,
                    ),
                ),
                (
                    "contact_person",
                    models.CharField(blank=True, max_length=255),
                ),
                (
                    "email",
                    models.EmailField(blank=True, max_length=254, null=True),
                ),
                ("phone", models.CharField(blank=True, max_length=50)),
                (
                    "amount",
                    models.DecimalField(
                        decimal_places=2, default=0, max_digits=18
                    ),
                ),
                ("start_date", models.DateField(blank=True, null=True)),
                ("target_deadline", models.DateTimeField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("LEAD", "Lead"),
                            ("PROPOSAL_SENT", "Proposal Sent"),
                            ("PROPOSAL_SIGNED", "Proposal Signed"),
                            ("UNDER_REVIEW", "Under Review"),
                            ("UNDER_PROCESS", "Under Process"),
                            ("ON_HOLD", "On Hold"),
                            ("REVIEW_COMPLETED", "Review Completed"),
                            ("COMPLETED", "Completed"),
                            ("CANCELLED", "Cancelled"),
                            ("NOT_ACTIVE", "Not Active"),
                            ("END", "End"),
                        ],
                        db_index=True,
                        default="LEAD",
                        max_length=30,
                    ),
                ),
                (
                    "timer_status",
                    models.CharField(
                        choices=[
                            ("ON_TRACK", "On Track"),
                            ("AT_RISK", "At Risk"),
                            ("LATE", "Late"),
                        ],
                        default="ON_TRACK",
                        max_length=20,
                    ),
                ),
                ("remarks", models.TextField(blank=True)),
                (
                    "assigned_to",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="assigned_projects",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="created_projects",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-id"],
            },
        ),
    ]
