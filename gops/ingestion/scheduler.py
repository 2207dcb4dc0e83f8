"""
Background refresh scheduler.

Runs a refresh cycle once at startup and then on a fixed period in a
daemon thread. Ticks never overlap: the loop waits for a cycle to finish
before scheduling the next one, so a slow cycle pushes the next tick back
instead of queueing another.
"""

import logging
import threading
import time
from typing import Optional

from gops.config import config
from gops.ingestion.pipeline import RefreshCycle

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Drives a RefreshCycle from a background thread."""

    def __init__(self, cycle: RefreshCycle, interval: Optional[float] = None):
        self.cycle = cycle
        self.interval = interval or config.refresh.interval_seconds

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._tick_count: int = 0

    def _tick(self) -> None:
        try:
            self.cycle.run()
        except Exception as e:
            # The loop must survive anything a cycle throws
            logger.exception(f'Refresh cycle crashed: {e}')
        self._tick_count += 1

    def run_continuous(self) -> None:
        """
        Run the refresh loop until stop() is called.

        This method blocks - use start_background() for non-blocking.
        """
        logger.info(f'Starting cache refresh loop (interval={self.interval}s)')

        while not self._stop_event.is_set():
            started = time.monotonic()
            self._tick()
            elapsed = time.monotonic() - started
            self._stop_event.wait(max(0.0, self.interval - elapsed))

        logger.info('Cache refresh loop stopped')

    def start_background(self) -> None:
        """Start the refresh loop in a daemon thread."""
        if self.running:
            logger.warning('Refresh scheduler already running')
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self.run_continuous,
            name='gops-refresh',
            daemon=True,
        )
        self._thread.start()
        logger.info('Background refresh started')

    def stop(self, timeout: float = 5) -> None:
        """Stop the refresh loop."""
        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=timeout)
        logger.info('Refresh scheduler stopped')

    @property
    def running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())

    @property
    def stats(self) -> dict:
        """Get scheduler statistics."""
        return {
            'running': self.running,
            'interval_seconds': self.interval,
            'tick_count': self._tick_count,
        }
