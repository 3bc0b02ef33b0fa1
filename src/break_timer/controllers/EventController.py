"""Translates pygame events into messages."""
import logging
from typing import Callable, Sequence

import pygame

from break_timer.core.messages import LogMessageSet, Message, RawInputOccurred
from break_timer.core.MessageQueue import MessageQueue
from break_timer.widgets.BaseWidget import BaseWidget

MOUSE_BUTTON_NAMES = {
    pygame.BUTTON_LEFT: "Left",
    pygame.BUTTON_MIDDLE: "Middle",
    pygame.BUTTON_RIGHT: "Right",
    pygame.BUTTON_X1: "Back",
    pygame.BUTTON_X2: "Forward",
}

# Legacy scroll wheel buttons, SDL reports scrolling as MOUSEWHEEL as well
WHEEL_BUTTONS = (pygame.BUTTON_WHEELUP, pygame.BUTTON_WHEELDOWN)


def describe_mouse_button(button: int) -> str:
    return MOUSE_BUTTON_NAMES.get(button, f"Other({button})")


def event_to_message(event: pygame.event.Event) -> Message:
    if event.type == pygame.MOUSEBUTTONDOWN and event.button not in WHEEL_BUTTONS:
        return LogMessageSet(f"Button {describe_mouse_button(event.button)} pressed")

    return RawInputOccurred()


class EventController:
    def __init__(
        self,
        on_quit: Callable[[], None],
        queue: MessageQueue,
        widgets: Sequence[BaseWidget] = ()
    ):
        self.on_quit = on_quit
        self.queue = queue
        self.widgets = widgets

    def handle_events(self) -> bool:
        """Returns False if application should quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.debug("Window closed")
                self.on_quit()
                return False

            self.queue.push(event_to_message(event))

            for widget in self.widgets:
                widget.handle_event(event)

        return True
