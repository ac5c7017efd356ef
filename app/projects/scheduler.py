"""
Background scheduler for the SLA monitor.
Runs a pass on start and then every interval_seconds on its own thread.
The pass itself guarantees a single run across processes.
"""

import logging
import threading

from django.conf import settings
from django.db import close_old_connections
from django.utils import timezone

from notifications.services import prune_notifications
from .services import run_sla_monitor_pass

logger = logging.getLogger(__name__)


class SlaMonitorScheduler:
    """Fixed-interval owner of the SLA monitor pass."""

    def __init__(self, interval_seconds=None, clock=timezone.now):
        if interval_seconds is None:
            interval_seconds = settings.SLA_MONITOR_INTERVAL_SECONDS
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.interval_seconds = interval_seconds
        self.clock = clock
        self._stop_event = threading.Event()
        self._thread = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        """Starts the worker thread; calling it twice is a no-op."""
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run_forever, name="sla-monitor", daemon=True
        )
        self._thread.start()
        logger.info(
            "SLA monitor scheduler started (every %ss)", self.interval_seconds
        )

    def stop(self, timeout=None):
        """Signals the worker and waits for the current pass to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("SLA monitor scheduler stopped")

    def run_once(self):
        """
        Runs a single pass followed by notification pruning.
        Pruning is skipped when another process holds the monitor lease.
        """
        result = run_sla_monitor_pass(
            clock=self.clock, should_stop=self._stop_event.is_set
        )
        if not result.skipped:
            prune_notifications(now=self.clock())
        return result

    def _run_forever(self):
        while not self._stop_event.is_set():
            try:
                self.run_once()
            except Exception:
                # The next tick retries from scratch
                logger.exception("SLA monitor pass failed")
            finally:
                close_old_connections()
            self._stop_event.wait(self.interval_seconds)
