from .Notifier import Duration, Notifier, Sound
from .ChimePlayer import ChimePlayer

__all__ = [
  "ChimePlayer",
  "Duration",
  "Notifier",
  "Sound",
]
