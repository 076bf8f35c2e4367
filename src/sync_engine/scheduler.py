"""Timer-driven sync passes.

AutoSyncScheduler calls a callback on a repeating wall-clock interval from a
daemon thread. Changing the interval tears the timer down and starts a new
one. There is no drift compensation and no catch-up for missed ticks, and
stopping the timer never interrupts a pass that is already running.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class AutoSyncScheduler:
    """Repeating timer that requests sync passes.

    Example:
        >>> scheduler = AutoSyncScheduler(service.sync_documents)
        >>> scheduler.start(interval_minutes=30)
        >>> scheduler.restart(interval_minutes=15)
        >>> scheduler.stop()
    """

    def __init__(self, callback: Callable[[], object]):
        self.callback = callback
        self.interval_minutes: Optional[int] = None
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._stop_event is not None and not self._stop_event.is_set()

    def start(self, interval_minutes: int) -> None:
        """Start ticking every interval_minutes, replacing any existing timer."""
        if self._stop_event is not None:
            self.stop()

        self.interval_minutes = interval_minutes
        stop_event = threading.Event()
        self._stop_event = stop_event
        self._thread = threading.Thread(
            target=self._run,
            args=(stop_event, interval_minutes * 60),
            name="mdsync-auto-sync",
            daemon=True,
        )
        self._thread.start()
        logger.info(f"Auto-sync started (every {interval_minutes} minute(s))")

    def stop(self) -> None:
        """Stop the timer. A pass already in progress runs to completion."""
        if self._stop_event is None:
            return
        self._stop_event.set()
        self._stop_event = None
        self._thread = None
        logger.info("Auto-sync stopped")

    def restart(self, interval_minutes: int) -> None:
        self.stop()
        self.start(interval_minutes)

    def _run(self, stop_event: threading.Event, interval_seconds: float) -> None:
        while not stop_event.wait(interval_seconds):
            try:
                self.callback()
            except Exception:
                logger.exception("Scheduled sync pass raised an error")
