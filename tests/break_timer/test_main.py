from unittest.mock import MagicMock, patch

import pytest

from break_timer import main
from break_timer.exceptions import NotificationError


@pytest.fixture
def mock_app():
    with patch("break_timer.main.configure_logging"), \
         patch("break_timer.main.Init"), \
         patch("break_timer.main.AppState") as mock_app_cls:
        app = MagicMock()
        app.running = True
        mock_app_cls.return_value = app
        yield app


class TestMain:
    def test_loop_ends_when_window_closes(self, mock_app):
        mock_app.handle_events.side_effect = [True, True, False]

        with pytest.raises(SystemExit) as exc:
            main.main()

        assert exc.value.code == 0
        assert mock_app.update.call_count == 2
        assert mock_app.render.call_count == 2
        mock_app.shutdown.assert_called_once()

    def test_notification_error_is_fatal(self, mock_app):
        mock_app.handle_events.return_value = True
        mock_app.update.side_effect = NotificationError("unable to toast")

        with pytest.raises(SystemExit) as exc:
            main.main()

        assert exc.value.code == 1
        mock_app.render.assert_not_called()
        mock_app.shutdown.assert_called_once()

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            main.configure_logging(["--log", "LOUD"])
