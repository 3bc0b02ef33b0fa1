from typing import List, Optional, Tuple

import pygame
from pygame import Surface
from pygame.freetype import Font

from break_timer.utils.colors import TEXT
from break_timer.utils.helpers import render_text_full_height, wrap_text
from .BaseWidget import BaseWidget


class Label(BaseWidget):
    """
    Static text, optionally wrapped into a fixed size box.

    Without a width the label is as wide as its text. With a height the
    box keeps that height no matter how many lines are rendered.
    """
    LINE_SPACING = 2

    def __init__(
        self,
        font: Font,
        text: str = "",
        color: Tuple[int, int, int] = TEXT,
        width: Optional[int] = None,
        height: Optional[int] = None
    ) -> None:
        super().__init__()

        self.font = font
        self.color = color
        self.fixed_width = width
        self.fixed_height = height

        self.text: Optional[str] = None
        self.line_surfaces: List[Surface] = []
        self.set_text(text)

    def set_text(self, text: str) -> None:
        if text == self.text:
            return

        self.text = text
        if self.fixed_width:
            lines = wrap_text(self.font, text, self.fixed_width)
        else:
            lines = [text] if text else []

        self.line_surfaces = [
            render_text_full_height(self.font, line, self.color)
            for line in lines
        ]

    def handle_event(self, event: pygame.event.Event) -> bool:
        return False

    def get_size(self) -> tuple[int, int]:
        width = self.fixed_width
        if width is None:
            width = max((line.get_width() for line in self.line_surfaces), default=0)

        height = self.fixed_height
        if height is None:
            line_height = self.font.get_sized_height()
            height = max(1, len(self.line_surfaces)) * (line_height + self.LINE_SPACING)

        return width, height

    def _draw(self, surface: Surface) -> None:
        y = self.y
        bottom = self.y + self.height
        for line in self.line_surfaces:
            if y + line.get_height() > bottom:
                break

            surface.blit(line, (self.x, y))
            y += line.get_height() + self.LINE_SPACING
