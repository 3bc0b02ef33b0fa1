from typing import Callable, Optional

import pygame
from pygame import Surface
from pygame.freetype import Font

from break_timer.utils.colors import (
    BORDER,
    PLACEHOLDER,
    PRIMARY,
    SURFACE,
    TEXT,
)
from .BaseWidget import BaseWidget


class TextInput(BaseWidget):
    """
    Single line text field.

    Every edit calls `on_change` with the new value. The owner may replace
    the value at any time with `set_value`, the cursor is clamped to it.
    """
    BG_COLOR = SURFACE
    TEXT_COLOR = TEXT
    PLACEHOLDER_COLOR = PLACEHOLDER
    BORDER_COLOR = BORDER
    BORDER_FOCUSED_COLOR = PRIMARY
    CURSOR_COLOR = TEXT

    BORDER_WIDTH = 1
    BORDER_RADIUS = 2
    CURSOR_WIDTH = 1
    CURSOR_INTERVAL = 500

    def __init__(
        self,
        placeholder: str,
        font: Font,
        width: int,
        on_change: Optional[Callable[[str], None]] = None,
        max_length: int = 64,
        padding: int = 8
    ) -> None:
        super().__init__()

        self.placeholder = placeholder
        self.font = font
        self.on_change = on_change
        self.max_length = max_length
        self.padding = padding

        self.value: str = ""
        self.cursor_pos = 0
        self.cursor_visible = True
        self.cursor_timer = 0

        self.rect = pygame.Rect(0, 0, width, self.font.size + padding * 2)

        self.placeholder_surface, _ = self.font.render(placeholder, self.PLACEHOLDER_COLOR)

    def set_position(self, x: int, y: int) -> None:
        super().set_position(x, y)
        self.rect.topleft = (x, y)

    def get_size(self) -> tuple[int, int]:
        return self.rect.width, self.rect.height

    def get_value(self) -> str:
        return self.value

    def set_value(self, value: str) -> None:
        if value == self.value:
            return

        self.value = value
        self.cursor_pos = min(self.cursor_pos, len(self.value))

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.focused = True
                self._handle_mouse(event.pos)
                return True

            self.focused = False
            return False

        elif event.type == pygame.KEYDOWN and self.focused:
            self._handle_keydown(event)
            return True

        return False

    def _change(self, value: str, cursor_pos: int) -> None:
        self.value = value
        self.cursor_pos = cursor_pos
        self._reset_cursor_blink()

        if self.on_change:
            self.on_change(self.value)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        mods = pygame.key.get_mods()
        before = self.value[:self.cursor_pos]
        after = self.value[self.cursor_pos:]

        if event.key == pygame.K_v and mods & pygame.KMOD_CTRL:
            pasted = self._get_clipboard_text()
            if pasted:
                pasted = pasted[:self.max_length - len(self.value)]
                self._change(before + pasted + after, self.cursor_pos + len(pasted))

        elif event.key == pygame.K_BACKSPACE:
            if self.cursor_pos > 0:
                self._change(before[:-1] + after, self.cursor_pos - 1)

        elif event.key == pygame.K_DELETE:
            if after:
                self._change(before + after[1:], self.cursor_pos)

        elif event.key == pygame.K_LEFT:
            self.cursor_pos = max(0, self.cursor_pos - 1)

        elif event.key == pygame.K_RIGHT:
            self.cursor_pos = min(len(self.value), self.cursor_pos + 1)

        elif event.key == pygame.K_HOME:
            self.cursor_pos = 0

        elif event.key == pygame.K_END:
            self.cursor_pos = len(self.value)

        elif (
            event.unicode and
            event.unicode.isprintable() and
            len(self.value) < self.max_length
        ):
            self._change(before + event.unicode + after, self.cursor_pos + 1)

    def _handle_mouse(self, mouse_pos: tuple[int, int]) -> None:
        rel_x = mouse_pos[0] - self.rect.x - self.padding + self._scroll_offset()
        self.cursor_pos = len(self.value)
        for j in range(len(self.value)):
            if self.font.get_rect(self.value[:j + 1]).width > rel_x:
                self.cursor_pos = j
                break

        self._reset_cursor_blink()

    def _get_clipboard_text(self) -> str:
        text = pygame.scrap.get_text() or ""
        return "".join(char for char in text if char.isprintable()).strip()

    def _reset_cursor_blink(self) -> None:
        self.cursor_visible = True
        self.cursor_timer = pygame.time.get_ticks()

    def _update_cursor_blink(self) -> None:
        current_time = pygame.time.get_ticks()
        if current_time - self.cursor_timer >= self.CURSOR_INTERVAL:
            self.cursor_visible = not self.cursor_visible
            self.cursor_timer = current_time

    def _scroll_offset(self) -> int:
        """Horizontal shift keeping the cursor inside the field."""
        inner_width = self.rect.width - self.padding * 2
        cursor_x = self.font.get_rect(self.value[:self.cursor_pos]).width
        return max(0, cursor_x - inner_width)

    def _draw(self, surface: Surface) -> None:
        pygame.draw.rect(surface, self.BG_COLOR, self.rect, border_radius=self.BORDER_RADIUS)
        border_color = self.BORDER_FOCUSED_COLOR if self.focused else self.BORDER_COLOR
        pygame.draw.rect(
            surface,
            border_color,
            self.rect,
            width=self.BORDER_WIDTH,
            border_radius=self.BORDER_RADIUS
        )

        inner = self.rect.inflate(-self.padding * 2, 0)
        previous_clip = surface.get_clip()
        surface.set_clip(inner)

        offset = self._scroll_offset()
        text_y = self.rect.centery - self.font.size // 2
        if self.value:
            text_surface, _ = self.font.render(self.value, self.TEXT_COLOR)
            surface.blit(text_surface, (inner.x - offset, text_y))
        elif not self.focused:
            surface.blit(self.placeholder_surface, (inner.x, text_y))

        self._update_cursor_blink()
        if self.focused and self.cursor_visible:
            cursor_x = inner.x - offset + self.font.get_rect(self.value[:self.cursor_pos]).width
            pygame.draw.line(
                surface,
                self.CURSOR_COLOR,
                (cursor_x, text_y),
                (cursor_x, text_y + self.font.size),
                self.CURSOR_WIDTH
            )

        surface.set_clip(previous_clip)
