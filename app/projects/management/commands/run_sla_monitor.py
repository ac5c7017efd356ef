"""
Runs the SLA monitor, once or on a fixed interval until interrupted.
"""

import time

from django.core.management.base import BaseCommand, CommandError

from projects.scheduler import SlaMonitorScheduler
from projects.services import run_sla_monitor_pass


class Command(BaseCommand):
    help = "Recompute project SLA timers and raise breach notifications."

    def add_arguments(self, parser):
        parser.add_argument(
            "--once",
            action="store_true",
            help="Run a single pass and exit.",
        )
        parser.add_argument(
            "--interval",
            type=int,
            default=None,
            help="Seconds between passes (default: settings value).",
        )

    def handle(self, *args, **options):
        if options["once"]:
            result = run_sla_monitor_pass()
            if result.skipped:
                self.stdout.write(
                    self.style.WARNING(
                        "An SLA monitor pass is already running, skipped."
                    )
                )
                return
            self.stdout.write(
                self.style.SUCCESS(
                    f"Updated {result.projects_updated} projects, "
                    f"raised {result.notifications_raised} notifications."
                )
            )
            return

        try:
            scheduler = SlaMonitorScheduler(
                interval_seconds=options["interval"]
            )
        except ValueError as e:
            raise CommandError(str(e))

        scheduler.start()
        self.stdout.write(
            f"SLA monitor running every {scheduler.interval_seconds}s, "
            "Ctrl+C to stop."
        )
        try:
            while scheduler.is_running:
                time.sleep(1)
        except KeyboardInterrupt:
            pass
        finally:
            scheduler.stop()
