import logging
import signal
from typing import Any, Optional

import pygame

from break_timer.core.ApplicationState import (
    DEFAULT_DELAY,
    DEFAULT_NOTIFICATION_TEXT,
    ApplicationState,
)
from break_timer.core.MessageQueue import MessageQueue
from break_timer.core.Renderer import Renderer
from break_timer.core.messages import Message
from break_timer.core.update import NotificationService, update
from break_timer.controllers.DisplayController import DisplayController
from break_timer.controllers.EventController import EventController
from break_timer.controllers.TimingController import TimingController
from break_timer.utils.Settings import Settings


class AppState:
    """
    Owns the application state and runs one iteration of the loop at a time.

    Messages from the timer thread, the pygame event pump and the widgets
    all go through a single queue which is drained on the main thread, so
    `update` never runs concurrently with itself.
    """

    def __init__(self, settings: Settings, notifier: NotificationService) -> None:
        self.settings = settings
        self.notifier = notifier
        self.running = True

        reminder = settings.get("reminder", {})
        delay = reminder.get("delay", DEFAULT_DELAY)
        self.state = ApplicationState(
            delay=delay,
            delay_text=str(delay),
            notification_text=reminder.get("text", DEFAULT_NOTIFICATION_TEXT)
        )

        window = settings.get("window", {})
        self.size = (window.get("width", 500), window.get("height", 500))
        self.title = window.get("title", "Timer App")

        self.queue = MessageQueue()

        self.display_controller = DisplayController(self.size, self.title)
        self.renderer = Renderer(self.size, self.dispatch)

        self.event_controller = EventController(
            on_quit=self._on_quit,
            queue=self.queue,
            widgets=self.renderer.interactive_widgets
        )

        self.clock = pygame.time.Clock()
        self.timing_controller = TimingController(settings, self.queue)
        self.timing_controller.start()

        self._setup_signal_handling()

    @property
    def screen(self) -> pygame.Surface:
        return self.display_controller.get_screen()

    def dispatch(self, message: Message) -> None:
        self.queue.push(message)

    def handle_events(self) -> bool:
        """
        Handle pygame events. Returns False if application should quit.
        """
        return self.event_controller.handle_events()

    def update(self) -> None:
        """
        Apply every pending message in arrival order.

        Errors raised by the notifier are not handled here, a failing
        notification service ends the application.
        """
        for message in self.queue.drain():
            update(self.state, message, self.notifier)

    def render(self) -> None:
        self.renderer.render(self.screen, self.state)

    def tick(self) -> None:
        self.clock.tick(self.timing_controller.main_loop_fps)

    def shutdown(self) -> None:
        logging.info("Shutting down...")
        self.timing_controller.stop()
        pygame.quit()

    def _on_quit(self) -> None:
        self.running = False

    def _setup_signal_handling(self) -> None:
        signal.signal(signal.SIGINT, self._signal_handler)

    def _signal_handler(
        self,
        sig: Optional[int] = None,
        frame: Optional[Any] = None
    ) -> None:
        self.running = False
