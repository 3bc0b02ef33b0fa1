"""Window creation for the fixed size, non-resizable main window."""
import logging
import sys
from pathlib import Path
from typing import Tuple

import pygame


class DisplayController:
    def __init__(self, size: Tuple[int, int], title: str):
        self.size = size
        self.title = title

        if not pygame.get_init():
            pygame.init()

        self.screen: pygame.Surface = self._create_screen()

        # Repeat keydown events when a key is held
        pygame.key.set_repeat(400, 40)

    def _create_screen(self) -> pygame.Surface:
        pygame.display.set_caption(self.title)

        try:
            icon = pygame.image.load(str(self._icon_path()))
            pygame.display.set_icon(icon)
        except Exception as e:
            logging.info(f"Failed setting icon: {e}")

        # No RESIZABLE flag, the window keeps its size
        return pygame.display.set_mode(self.size, pygame.DOUBLEBUF)

    def _icon_path(self) -> Path:
        if getattr(sys, 'frozen', False):
            # Running in PyInstaller bundle
            base_path = Path(sys._MEIPASS) / "break_timer"
        else:
            base_path = Path(__file__).parent.parent

        return base_path / "assets" / "icon.xpm"

    def get_screen(self) -> pygame.Surface:
        return self.screen

    def get_size(self) -> Tuple[int, int]:
        return self.screen.get_size()
