"""Periodic timer producer and main loop frame rate."""
import logging
import threading
import time
from typing import Optional, TYPE_CHECKING

from break_timer.core.messages import Tick

if TYPE_CHECKING:
    from break_timer.core.MessageQueue import MessageQueue
    from break_timer.utils.Settings import Settings


class TimingController:
    """Pushes a Tick into the message queue every tick interval."""

    def __init__(self, settings: 'Settings', queue: 'MessageQueue'):
        """
        Args:
            settings: Application settings containing timing configuration
            queue: Queue the ticks are delivered to
        """
        self.settings = settings
        self.queue = queue
        self.main_loop_fps: int = 30
        self.tick_interval: float = 1.0

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

        self.update_from_settings()

    def update_from_settings(self) -> None:
        timing = self.settings.get("timing", {})
        self.main_loop_fps = timing.get("main_loop_fps", 30)
        self.tick_interval = timing.get("tick_interval", 1.0)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        logging.debug(f"Timer started with {self.tick_interval}s interval")

    def stop(self) -> None:
        self._stop_event.set()
        if self._thread:
            self._thread.join()
            self._thread = None

    def _run(self) -> None:
        # Deadlines are absolute so sleep jitter does not add up
        next_tick = time.monotonic() + self.tick_interval
        while not self._stop_event.wait(max(0.0, next_tick - time.monotonic())):
            self.queue.push(Tick())
            next_tick += self.tick_interval
