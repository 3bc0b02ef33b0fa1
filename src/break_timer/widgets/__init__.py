from .BaseWidget import BaseWidget
from .Button import Button
from .Label import Label
from .TextInput import TextInput

__all__ = [
  "BaseWidget",
  "Button",
  "Label",
  "TextInput",
]
