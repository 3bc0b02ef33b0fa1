import pygame
from pygame.freetype import Font

TEXT_SIZE = 18
INPUT_SIZE = 16
SMALL_SIZE = 10


def get_font(size: int) -> Font:
    """Default font shipped with pygame at the given size."""
    if not pygame.freetype.get_init():
        pygame.freetype.init()

    return Font(None, size)
