from typing import Any, Dict, Optional
import copy

from break_timer.core.ApplicationState import (
    DEFAULT_DELAY,
    DEFAULT_NOTIFICATION_TEXT,
)


class Settings:
    """
    In-memory application settings.

    Nothing is persisted, every run starts from DEFAULTS merged with the
    overrides passed in.
    """
    DEFAULTS: Dict[str, Any] = {
        "window": {
            "title": "Timer App",
            "width": 500,
            "height": 500,
        },
        "timing": {
            "main_loop_fps": 30,
            "tick_interval": 1.0,
        },
        "reminder": {
            "delay": DEFAULT_DELAY,
            "text": DEFAULT_NOTIFICATION_TEXT,
        },
        "notification": {
            "app_name": "Timer App",
            "message": "",
            "sound": True,
            "strict": True,
        },
    }

    def __init__(self, overrides: Optional[Dict[str, Any]] = None) -> None:
        self.settings = self._merge(copy.deepcopy(self.DEFAULTS), overrides or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in override.items():
            if (
                key in base
                and isinstance(base[key], dict)
                and isinstance(value, dict)
            ):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base
