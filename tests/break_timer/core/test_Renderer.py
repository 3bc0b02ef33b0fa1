import os
os.environ["SDL_VIDEODRIVER"] = "dummy"

import unittest
from unittest.mock import Mock

import pygame

from break_timer.core.ApplicationState import ApplicationState
from break_timer.core.Renderer import Renderer
from break_timer.utils.colors import PRIMARY_WEAK
from break_timer.core.messages import (
    DelayTextChanged,
    NotificationTextChanged,
    Tick,
)


class TestRenderer(unittest.TestCase):
    def setUp(self):
        pygame.init()
        self.screen = pygame.display.set_mode((500, 500))
        self.dispatch = Mock()
        self.renderer = Renderer((500, 500), self.dispatch)

    def tearDown(self):
        pygame.quit()

    def test_sync_labels(self):
        state = ApplicationState(counter=10, delay=60, log_message="oops")
        self.renderer.sync(state)

        self.assertEqual(self.renderer.running_label.text, "Running for 10 seconds")
        self.assertEqual(self.renderer.next_break_label.text, "Next break in 50 seconds")
        self.assertEqual(self.renderer.log_label.text, "oops")

    def test_sync_inputs(self):
        state = ApplicationState(delay_text="", notification_text="Walk")
        self.renderer.sync(state)

        self.assertEqual(self.renderer.delay_input.get_value(), "")
        self.assertEqual(self.renderer.notification_input.get_value(), "Walk")

    def test_zero_delay_does_not_divide_by_zero(self):
        self.renderer.sync(ApplicationState(counter=5, delay=0))
        self.assertEqual(self.renderer.next_break_label.text, "Next break in 595 seconds")

    def test_button_dispatches_tick(self):
        self.renderer.increment_button.callback()
        self.dispatch.assert_called_once_with(Tick())

    def test_inputs_dispatch_changes(self):
        self.renderer.delay_input.on_change("12")
        self.renderer.notification_input.on_change("Stretch")

        self.dispatch.assert_any_call(DelayTextChanged("12"))
        self.dispatch.assert_any_call(NotificationTextChanged("Stretch"))

    def test_layout_stacks_widgets_in_order(self):
        self.renderer.sync(ApplicationState())
        self.renderer.layout()

        widgets = self.renderer.widgets
        for above, below in zip(widgets, widgets[1:]):
            self.assertEqual(below.y, above.y + above.height + Renderer.SPACING)

        self.assertEqual(len({widget.x for widget in widgets}), 1)
        self.assertGreater(widgets[0].y, 0)

    def test_interactive_widgets(self):
        self.assertEqual(
            self.renderer.interactive_widgets,
            [
                self.renderer.increment_button,
                self.renderer.delay_input,
                self.renderer.notification_input,
            ]
        )

    def test_render(self):
        self.renderer.render(self.screen, ApplicationState())
        # Border is drawn along the window edge
        self.assertEqual(tuple(self.screen.get_at((0, 0)))[:3], PRIMARY_WEAK)
