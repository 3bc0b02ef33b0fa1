import argparse
from datetime import datetime
import logging
import sys

from break_timer.Init import Init
from break_timer.core.AppState import AppState
from break_timer.exceptions import NotificationError


def configure_logging(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Break reminder timer")
    parser.add_argument(
        "--log",
        default="ERROR",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default is ERROR."
    )
    parser.add_argument(
        "--log-to-file",
        action="store_true",
        help="Save logs to txt file."
    )

    args, unknown = parser.parse_known_args(argv)

    level_name = args.log.upper()
    level = getattr(logging, level_name, None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {args.log}")

    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler()]

    if args.log_to_file:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H:%M:%S")
        handlers.append(logging.FileHandler(f"{timestamp}.txt"))

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=handlers
    )


def main() -> None:
    configure_logging()

    settings = Init.settings()
    app = AppState(settings, Init.notifier(settings))

    exit_code = 0
    try:
        while app.running:
            if not app.handle_events():
                break

            app.update()
            app.render()

            app.tick()

    except NotificationError as e:
        logging.critical(f"{e}")
        exit_code = 1

    finally:
        app.shutdown()

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
