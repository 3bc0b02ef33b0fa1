from typing import Callable, Dict, Optional

import pygame
from pygame import Rect, Surface
from pygame.freetype import Font

from break_timer.utils.colors import (
    PRIMARY,
    PRIMARY_STRONG,
    PRIMARY_WEAK,
    BACKGROUND,
)
from .BaseWidget import BaseWidget


class Button(BaseWidget):
    FONT_COLOR = BACKGROUND

    BG_COLOR = PRIMARY
    HOVER_COLOR = PRIMARY_STRONG
    ACTIVE_COLOR = PRIMARY_WEAK

    BORDER_RADIUS = 2

    def __init__(
        self,
        label: str,
        font: Font,
        callback: Callable[[], None],
        width: Optional[int] = None,
        height: Optional[int] = None
    ) -> None:
        super().__init__()

        self.label = label
        self.font = font
        self.callback = callback

        _, label_rect = self.font.render(self.label)

        vertical_padding = int(font.size / 100 * 40)
        horizontal_padding = font.size

        self.rect = Rect(
            0,
            0,
            width or label_rect.width + horizontal_padding * 2,
            height or font.size + vertical_padding * 2
        )

        self.hovered = False

        self.cached_surfaces: Dict[str, Surface] = {}
        self._render_all_button_states()
        self._current_state = 'normal'

    def get_size(self) -> tuple[int, int]:
        return self.rect.width, self.rect.height

    def set_position(self, x: int, y: int) -> None:
        super().set_position(x, y)
        self.rect.topleft = (x, y)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            was_hovered = self.hovered
            self.hovered = self.rect.collidepoint(event.pos)

            if was_hovered != self.hovered:
                self._update_state()

            return self.hovered

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.focused = True
                self._update_state()
                return True

            return False

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            was_focused = self.focused
            if self.focused and self.rect.collidepoint(event.pos):
                self.callback()

            self.focused = False
            self._update_state()

            return was_focused

        return False

    def _update_state(self) -> None:
        if self.focused:
            self._current_state = 'active'
        elif self.hovered:
            self._current_state = 'hover'
        else:
            self._current_state = 'normal'

    def _draw(self, surface: Surface) -> None:
        surface.blit(self.cached_surfaces[self._current_state], self.rect.topleft)

    def _render_all_button_states(self) -> None:
        """Pre-render every state together with the label."""
        states = {
            'normal': self.BG_COLOR,
            'hover': self.HOVER_COLOR,
            'active': self.ACTIVE_COLOR,
        }

        for state_name, bg_color in states.items():
            button_surface = Surface(self.rect.size, pygame.SRCALPHA)
            pygame.draw.rect(
                button_surface,
                bg_color,
                button_surface.get_rect(),
                border_radius=self.BORDER_RADIUS
            )

            label_surface, label_rect = self.font.render(self.label, self.FONT_COLOR)
            label_rect.center = (self.rect.width // 2, self.rect.height // 2)
            button_surface.blit(label_surface, label_rect)

            self.cached_surfaces[state_name] = button_surface
