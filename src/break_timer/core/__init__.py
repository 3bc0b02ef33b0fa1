from .ApplicationState import ApplicationState
from .MessageQueue import MessageQueue
from .messages import (
  DelayTextChanged,
  LogMessageSet,
  Message,
  NotificationTextChanged,
  RawInputOccurred,
  Tick,
)
from .update import parse_delay, update

__all__ = [
  "ApplicationState",
  "MessageQueue",
  "DelayTextChanged",
  "LogMessageSet",
  "Message",
  "NotificationTextChanged",
  "RawInputOccurred",
  "Tick",
  "parse_delay",
  "update",
]
