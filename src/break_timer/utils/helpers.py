from typing import List, Tuple

import pygame
from pygame.freetype import Font


def render_text_full_height(
    font: Font,
    text: str,
    color: Tuple[int, int, int]
) -> pygame.Surface:
    """Render text onto a surface as high as the font's full line height."""
    text_surface, rect = font.render(text, color)

    ascent = font.get_sized_ascender()
    descent = font.get_sized_descender()
    full_height = ascent - descent

    full_surface = pygame.Surface((text_surface.get_width(), full_height), pygame.SRCALPHA)

    # Position so baseline is at 'ascent' pixels from top
    y_offset = ascent - rect.y

    full_surface.blit(text_surface, (0, y_offset))

    return full_surface


def wrap_text(font: Font, text: str, max_width: int) -> List[str]:
    """
    Split text into lines no wider than max_width.

    Words wider than max_width get a line of their own.
    """
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and font.get_rect(candidate).width > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)

    return lines
