"""Desktop notifications through the OS notification service."""
from enum import Enum
import logging
from typing import Optional, TYPE_CHECKING

from plyer import notification

from break_timer.exceptions import NotificationError

if TYPE_CHECKING:
    from break_timer.notifications.ChimePlayer import ChimePlayer


class Sound(Enum):
    REMINDER = "reminder"
    SILENT = "silent"


class Duration(Enum):
    """Toast display time in seconds."""
    SHORT = 7
    LONG = 25


class Notifier:
    def __init__(
        self,
        app_name: str,
        message: str = "",
        sound_player: Optional['ChimePlayer'] = None,
        strict: bool = True
    ) -> None:
        """
        :param app_name: Application name shown by the notification service
        :param message: Body text of every notification
        :param sound_player: Plays the reminder sound, None for silence
        :param strict: Raise NotificationError on failure instead of logging
        """
        self.app_name = app_name
        self.message = message
        self.sound_player = sound_player
        self.strict = strict

    def show(
        self,
        title: str,
        sound: Sound = Sound.REMINDER,
        duration: Duration = Duration.SHORT
    ) -> None:
        try:
            notification.notify(
                title=title,
                message=self.message,
                app_name=self.app_name,
                timeout=duration.value
            )
        except Exception as e:
            if self.strict:
                raise NotificationError(f"Unable to show notification: {e}") from e

            logging.error(f"Unable to show notification: {e}")
            return

        logging.debug(f"Notification shown: {title!r}")

        if sound is Sound.REMINDER and self.sound_player:
            self.sound_player.play()
