import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path


def default_log_dir() -> Path:
    return Path.cwd() / "logs"


def configure_logging(log_dir: Path | None = None) -> None:
    log_dir = log_dir or default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    file_formatter = logging.Formatter(
        "%(asctime)s.%(msecs)03d - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s",
        datefmt="%H:%M:%S",
    )

    # everything, rotated often since moves are logged at debug level
    debug_handler = TimedRotatingFileHandler(
        log_dir / "debug.log", when="M", interval=30, backupCount=1, encoding="utf-8"
    )
    debug_handler.setLevel(logging.DEBUG)
    debug_handler.setFormatter(file_formatter)

    info_handler = TimedRotatingFileHandler(log_dir / "info.log", when="D", interval=1, backupCount=7, encoding="utf-8")
    info_handler.setLevel(logging.INFO)
    info_handler.setFormatter(file_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers = []
    root_logger.addHandler(info_handler)
    root_logger.addHandler(debug_handler)

    # Make sure uncaught exceptions are logged
    sys.excepthook = lambda exctype, value, traceback: root_logger.error(
        "Uncaught exception:", exc_info=(exctype, value, traceback)
    )
