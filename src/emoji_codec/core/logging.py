"""Centralized logging setup for emoji-codec.

Every module logs through a child of the ``emoji_codec`` package logger
(``get_logger(__name__)``) and never configures handlers itself. The package
logger carries only a NullHandler until an application (normally the CLI)
calls ``setup_logging``, which sets one level for the whole package and
attaches the sinks:

- console: a stderr stream handler, written synchronously
- file: a rotating log file fed through a queue listener thread
"""

import atexit
import logging
import os
import sys
import threading
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import SimpleQueue

from ..exceptions import ConfigurationError

PACKAGE_LOGGER = "emoji_codec"
LOG_FILENAME = "emoji-codec.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_SETUP_LOCK = threading.Lock()
_file_listener: QueueListener | None = None

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes"}


def _resolve_level(log_level: str | int) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(log_level.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {log_level!r}")
    return level


def _logs_dir() -> Path | None:
    env_dir = os.environ.get("EMOJI_CODEC_LOG_DIR")
    logs_dir = Path(env_dir) if env_dir else Path.home() / ".emoji-codec" / "logs"
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return logs_dir


def _file_handler(formatter: logging.Formatter) -> QueueHandler | None:
    """Start the file listener and return the queue handler that feeds it."""
    global _file_listener
    logs_dir = _logs_dir()
    if logs_dir is None:
        return None
    try:
        rotating = RotatingFileHandler(
            logs_dir / LOG_FILENAME, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
    except OSError:
        return None
    rotating.setFormatter(formatter)

    queue: SimpleQueue = SimpleQueue()
    _file_listener = QueueListener(queue, rotating)
    _file_listener.start()
    return QueueHandler(queue)


def shutdown_logging() -> None:
    """Flush and detach every sink, leaving the package logger silent again."""
    global _file_listener
    with _SETUP_LOCK:
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()
        if _file_listener is not None:
            _file_listener.stop()
            for handler in _file_listener.handlers:
                handler.close()
            _file_listener = None
        package_logger.addHandler(logging.NullHandler())
        package_logger.setLevel(logging.NOTSET)
        package_logger.propagate = True


atexit.register(shutdown_logging)


def setup_logging(
    log_level: str | int = "INFO",
    include_console: bool | None = None,
    include_file: bool | None = None,
) -> logging.Logger:
    """Configure the ``emoji_codec`` package logger.

    Calling it again replaces the previous configuration, so the CLI can apply
    the level from the config file or ``--debug`` after modules were imported.

    Args:
        log_level: Level for the whole package (DEBUG, INFO, WARNING, ERROR)
        include_console: Whether to log to stderr. If None, uses
            EMOJI_CODEC_CONSOLE_LOGS ("1"/"true"/"yes" enables).
        include_file: Whether to log to ``emoji-codec.log`` under
            EMOJI_CODEC_LOG_DIR (default ``~/.emoji-codec/logs``). If None,
            uses EMOJI_CODEC_FILE_LOGS.

    Returns:
        The package logger

    """
    level = _resolve_level(log_level)
    if include_console is None:
        include_console = _is_truthy(os.environ.get("EMOJI_CODEC_CONSOLE_LOGS"))
    if include_file is None:
        include_file = _is_truthy(os.environ.get("EMOJI_CODEC_FILE_LOGS"))

    shutdown_logging()

    with _SETUP_LOCK:
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        handlers: list[logging.Handler] = []

        if include_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            handlers.append(console_handler)

        if include_file:
            queue_handler = _file_handler(formatter)
            if queue_handler is not None:
                handlers.append(queue_handler)

        package_logger.setLevel(level)
        if handlers:
            for handler in list(package_logger.handlers):
                package_logger.removeHandler(handler)
            for handler in handlers:
                package_logger.addHandler(handler)
            # Sinks attached; records stop here instead of reaching the root logger
            package_logger.propagate = False

    return package_logger


def get_logger(module_name: str) -> logging.Logger:
    """Return a module logger that propagates to the package logger."""
    return logging.getLogger(module_name)


__all__ = ["PACKAGE_LOGGER", "get_logger", "setup_logging", "shutdown_logging"]
