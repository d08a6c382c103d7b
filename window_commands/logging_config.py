"""Logging setup for window-commands.

Everything logs under the ``window_commands`` logger. The rotating log file
lives in a ``logs`` directory beside the config file, and the level comes
from ``settings.log_level`` unless the command line overrides it.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO

from window_commands.config import get_config_dir
from window_commands.exceptions import WindowCommandsError
from window_commands.models import AppConfig

LOGGER_NAME = "window_commands"
LOG_FILENAME = "window-commands.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3


def get_log_file_path() -> Path:
    """Get the log file path under the config dir, creating its directory."""
    log_dir = get_config_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / LOG_FILENAME


def setup_logging(
    config: AppConfig,
    *,
    level: str | None = None,
    log_to_file: bool = True,
    log_to_console: bool = False,
    console_stream: TextIO = sys.stderr,
) -> logging.Logger:
    """Configure the package logger for one session.

    Args:
        config: Application config supplying ``settings.log_level``.
        level: Level name that overrides the configured one.
        log_to_file: Whether to write the rotating log file.
        log_to_console: Whether to also log to ``console_stream``.
        console_stream: Stream for console output.

    Returns:
        The ``window_commands`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or config.settings.log_level).upper())
    logger.handlers.clear()

    handlers: list[logging.Handler] = []
    if log_to_file:
        handlers.append(
            RotatingFileHandler(
                get_log_file_path(),
                maxBytes=MAX_BYTES,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    if log_to_console:
        handlers.append(logging.StreamHandler(console_stream))

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def log_command_error(
    logger: logging.Logger, command: str, error: WindowCommandsError
) -> None:
    """Log a failed command. The traceback is kept only at DEBUG level."""
    exc_info = error if logger.isEnabledFor(logging.DEBUG) else None
    logger.error(f"Command {command} failed: {error}", exc_info=exc_info)


def get_recent_logs(lines: int = 100) -> list[str]:
    """Get the last ``lines`` lines of the log file."""
    log_file = get_log_file_path()
    if not log_file.exists():
        return []

    with open(log_file, encoding="utf-8") as f:
        return f.readlines()[-lines:]
