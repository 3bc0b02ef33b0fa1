from typing import Any, Dict, Optional

from break_timer.notifications import ChimePlayer, Notifier
from break_timer.utils.Settings import Settings


class Init:
    """
    Factory to help with initialization of core components
    """

    @classmethod
    def settings(cls, overrides: Optional[Dict[str, Any]] = None) -> Settings:
        return Settings(overrides)

    @classmethod
    def notifier(cls, settings: Settings) -> Notifier:
        config = settings.get("notification", {})

        sound_player = ChimePlayer() if config.get("sound", True) else None

        return Notifier(
            app_name=config.get("app_name", "Timer App"),
            message=config.get("message", ""),
            sound_player=sound_player,
            strict=config.get("strict", True)
        )
