"""Builds the widget tree and draws it from the application state."""
from typing import Callable, List, Tuple

import pygame

from break_timer.core.ApplicationState import ApplicationState
from break_timer.core.messages import (
    DelayTextChanged,
    Message,
    NotificationTextChanged,
    Tick,
)
from break_timer.utils.colors import BACKGROUND, PRIMARY_WEAK, TEXT_MUTED
from break_timer.utils.fonts import INPUT_SIZE, SMALL_SIZE, TEXT_SIZE, get_font
from break_timer.widgets import BaseWidget, Button, Label, TextInput


class Renderer:
    COLUMN_WIDTH = 200
    SPACING = 20
    BORDER_WIDTH = 5

    def __init__(
        self,
        size: Tuple[int, int],
        dispatch: Callable[[Message], None]
    ) -> None:
        self.size = size

        text_font = get_font(TEXT_SIZE)
        input_font = get_font(INPUT_SIZE)

        self.running_label = Label(text_font)
        self.next_break_label = Label(text_font)
        # Manual fast forward, indistinguishable from a timer tick
        self.increment_button = Button(
            "Increment",
            text_font,
            lambda: dispatch(Tick()),
            width=self.COLUMN_WIDTH
        )
        self.delay_input = TextInput(
            "Delay in seconds",
            input_font,
            self.COLUMN_WIDTH,
            on_change=lambda text: dispatch(DelayTextChanged(text))
        )
        self.notification_input = TextInput(
            "Notification text",
            input_font,
            self.COLUMN_WIDTH,
            on_change=lambda text: dispatch(NotificationTextChanged(text))
        )
        self.log_label = Label(
            get_font(SMALL_SIZE),
            color=TEXT_MUTED,
            width=self.COLUMN_WIDTH,
            height=100
        )

        self.widgets: List[BaseWidget] = [
            self.running_label,
            self.next_break_label,
            self.increment_button,
            self.delay_input,
            self.notification_input,
            self.log_label,
        ]

    @property
    def interactive_widgets(self) -> List[BaseWidget]:
        return [self.increment_button, self.delay_input, self.notification_input]

    def sync(self, state: ApplicationState) -> None:
        """Copy the state into the widgets."""
        self.running_label.set_text(f"Running for {state.counter} seconds")
        self.next_break_label.set_text(f"Next break in {state.next_break_in} seconds")
        self.delay_input.set_value(state.delay_text)
        self.notification_input.set_value(state.notification_text)
        self.log_label.set_text(state.log_message)

    def layout(self) -> None:
        """Stack the widgets in a column centered in the window."""
        column_width = max(widget.width for widget in self.widgets)
        column_height = (
            sum(widget.height for widget in self.widgets) +
            self.SPACING * (len(self.widgets) - 1)
        )

        x = (self.size[0] - column_width) // 2
        y = (self.size[1] - column_height) // 2
        for widget in self.widgets:
            widget.set_position(x, y)
            y += widget.height + self.SPACING

    def render(self, screen: pygame.Surface, state: ApplicationState) -> None:
        self.sync(state)
        self.layout()

        screen.fill(BACKGROUND)
        pygame.draw.rect(screen, PRIMARY_WEAK, screen.get_rect(), width=self.BORDER_WIDTH)

        for widget in self.widgets:
            widget.draw(screen)

        pygame.display.flip()
