from unittest.mock import patch

from break_timer.Init import Init
from break_timer.notifications import ChimePlayer, Notifier


class TestInit:
    def test_settings_with_overrides(self):
        settings = Init.settings({"reminder": {"delay": 10}})
        assert settings.get("reminder")["delay"] == 10

    def test_notifier_from_defaults(self):
        notifier = Init.notifier(Init.settings())

        assert isinstance(notifier, Notifier)
        assert notifier.app_name == "Timer App"
        assert notifier.strict is True
        assert isinstance(notifier.sound_player, ChimePlayer)

    def test_notifier_without_sound(self):
        settings = Init.settings({"notification": {"sound": False, "strict": False}})
        notifier = Init.notifier(settings)

        assert notifier.sound_player is None
        assert notifier.strict is False
