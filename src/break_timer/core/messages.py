"""
Closed set of messages that can change the application state.

Every message is an immutable value. Producers (the timer thread, the
pygame event pump and the widgets) create them, the update policy consumes
them.
"""
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Tick:
    """One second elapsed, or the Increment button was pressed."""
    pass


@dataclass(frozen=True)
class DelayTextChanged:
    text: str


@dataclass(frozen=True)
class NotificationTextChanged:
    text: str


@dataclass(frozen=True)
class RawInputOccurred:
    """Platform input event without a dedicated handler."""
    pass


@dataclass(frozen=True)
class LogMessageSet:
    text: str


Message = Union[
    Tick,
    DelayTextChanged,
    NotificationTextChanged,
    RawInputOccurred,
    LogMessageSet,
]
