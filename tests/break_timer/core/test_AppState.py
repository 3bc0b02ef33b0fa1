import os
os.environ["SDL_VIDEODRIVER"] = "dummy"

import unittest
from unittest.mock import Mock

import pygame

from break_timer.core.AppState import AppState
from break_timer.core.messages import DelayTextChanged, NotificationTextChanged, Tick
from break_timer.exceptions import NotificationError
from break_timer.notifications.Notifier import Duration, Sound
from break_timer.utils.Settings import Settings


class TestAppState(unittest.TestCase):
    def setUp(self):
        # Ticks are dispatched by hand, keep the timer thread quiet
        self.settings = Settings({"timing": {"tick_interval": 3600}})
        self.notifier = Mock()
        self.app = AppState(self.settings, self.notifier)

    def tearDown(self):
        self.app.shutdown()

    def test_initial_state_from_settings(self):
        app_state = self.app.state

        self.assertEqual(app_state.counter, 0)
        self.assertEqual(app_state.delay, 3600)
        self.assertEqual(app_state.delay_text, "3600")
        self.assertEqual(app_state.notification_text, "Break time! 🦆")
        self.assertEqual(self.app.screen.get_size(), (500, 500))

    def test_timer_runs_until_shutdown(self):
        self.assertTrue(self.app.timing_controller.running)

        self.app.shutdown()

        self.assertFalse(self.app.timing_controller.running)

    def test_messages_applied_in_order(self):
        self.app.dispatch(DelayTextChanged("abc"))
        self.app.dispatch(DelayTextChanged("2"))
        self.app.dispatch(NotificationTextChanged("Stretch"))
        self.app.dispatch(Tick())
        self.app.dispatch(Tick())

        self.app.update()

        self.assertEqual(self.app.state.delay, 2)
        self.assertEqual(self.app.state.log_message, "")
        self.assertEqual(self.app.state.counter, 2)
        self.notifier.show.assert_called_once_with("Stretch", Sound.REMINDER, Duration.SHORT)

    def test_notification_error_propagates(self):
        self.notifier.show.side_effect = NotificationError("unable to toast")
        self.app.dispatch(DelayTextChanged("1"))
        self.app.dispatch(Tick())

        with self.assertRaises(NotificationError):
            self.app.update()

    def test_mouse_press_sets_log_message(self):
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"button": 3, "pos": (1, 1)}))

        self.assertTrue(self.app.handle_events())
        self.app.update()

        self.assertEqual(self.app.state.log_message, "Button Right pressed")

    def test_quit_event_stops_loop(self):
        pygame.event.post(pygame.event.Event(pygame.QUIT))

        self.assertFalse(self.app.handle_events())
        self.assertFalse(self.app.running)

    def test_render_reflects_failed_parse(self):
        self.app.dispatch(DelayTextChanged("x"))
        self.app.update()
        self.app.render()

        self.assertEqual(self.app.renderer.delay_input.get_value(), "")
        self.assertEqual(self.app.renderer.next_break_label.text, "Next break in 600 seconds")

    def test_signal_handler_stops_loop(self):
        self.app._signal_handler()
        self.assertFalse(self.app.running)

    def test_tick_limits_frame_rate(self):
        self.app.clock = Mock()
        self.app.tick()
        self.app.clock.tick.assert_called_once_with(30)
