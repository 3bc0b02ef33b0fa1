"""Application state for the break timer."""
from dataclasses import dataclass

DEFAULT_DELAY = 3600
FALLBACK_DELAY = 600
DEFAULT_NOTIFICATION_TEXT = "Break time! 🦆"


@dataclass
class ApplicationState:
    """Single mutable snapshot of application data.

    Only the update policy mutates an instance of this class. `delay_text`
    holds exactly what the user typed, `delay` the last successfully parsed
    value (or 0 after a failed parse).
    """
    counter: int = 0
    delay: int = DEFAULT_DELAY
    delay_text: str = str(DEFAULT_DELAY)
    notification_text: str = DEFAULT_NOTIFICATION_TEXT
    log_message: str = ""

    @property
    def effective_delay(self) -> int:
        """Interval used for trigger arithmetic, never zero."""
        return self.delay if self.delay > 0 else FALLBACK_DELAY

    @property
    def next_break_in(self) -> int:
        delay = self.effective_delay
        return delay - (self.counter % delay)
