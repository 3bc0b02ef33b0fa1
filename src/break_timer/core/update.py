"""State transition policy for the break timer."""
import logging
from typing import Protocol

from break_timer.core.ApplicationState import ApplicationState
from break_timer.core.messages import (
    DelayTextChanged,
    LogMessageSet,
    Message,
    NotificationTextChanged,
    RawInputOccurred,
    Tick,
)
from break_timer.notifications.Notifier import Duration, Sound

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

EMPTY_ERROR = "cannot parse integer from empty string"
INVALID_DIGIT_ERROR = "invalid digit found in string"
POS_OVERFLOW_ERROR = "number too large to fit in target type"
NEG_OVERFLOW_ERROR = "number too small to fit in target type"


class NotificationService(Protocol):
    def show(self, title: str, sound: Sound, duration: Duration) -> None:
        ...


def parse_delay(text: str) -> int:
    """
    Parse a signed base-10 32 bit integer.

    Accepts an optional single leading sign followed by ASCII digits only.
    Raises ValueError with a human readable description otherwise.
    """
    if not text:
        raise ValueError(EMPTY_ERROR)

    digits = text
    if text[0] in "+-":
        digits = text[1:]

    # str.isdigit() also accepts non-ASCII digits
    if not digits or not all("0" <= char <= "9" for char in digits):
        raise ValueError(INVALID_DIGIT_ERROR)

    value = int(text)
    if value > INT32_MAX:
        raise ValueError(POS_OVERFLOW_ERROR)
    if value < INT32_MIN:
        raise ValueError(NEG_OVERFLOW_ERROR)

    return value


def update(
    state: ApplicationState,
    message: Message,
    notifier: NotificationService
) -> ApplicationState:
    """
    Apply a single message to the state.

    The state is mutated in place and returned. A `Tick` that lands on a
    multiple of the effective delay shows a notification, any exception
    raised by the notifier is propagated to the caller.
    """
    match message:
        case Tick():
            state.counter += 1

            if state.counter % state.effective_delay == 0:
                logging.info(f"Break reminder after {state.counter} seconds")
                notifier.show(state.notification_text, Sound.REMINDER, Duration.SHORT)

        case DelayTextChanged(text=text):
            state.delay_text = text
            try:
                state.delay = parse_delay(text)
                _set_log_message(state, "")
            except ValueError as e:
                logging.debug(f"Invalid delay {text!r}: {e}")
                state.delay_text = ""
                state.delay = 0
                _set_log_message(state, str(e))

        case NotificationTextChanged(text=text):
            state.notification_text = text

        case LogMessageSet(text=text):
            _set_log_message(state, text)

        case RawInputOccurred():
            pass

    return state


def _set_log_message(state: ApplicationState, text: str) -> None:
    state.log_message = text
