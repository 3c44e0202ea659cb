"""Logging for solrql.

Every logger lives under the ``solrql`` namespace (``solrql.query``,
``solrql.client``), so applications tune the whole package through one
logger. The namespace logger takes its level from LOG_LEVEL the first time a
`Logger` is created.
"""

import logging
from typing import Optional

from solrql.settings import settings as api_settings

ROOT_LOGGER = "solrql"

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_configured = False


def level_for(name: Optional[str]) -> int:
    """Map a level name to its logging constant; unknown or unset names give INFO."""
    return _LEVELS.get((name or "").upper(), logging.INFO)


def setup_package_logging(level: str = "INFO") -> None:
    """Configure the ``solrql`` logger once.

    A stream handler is attached only when neither the package logger nor the
    root logger has handlers, so an application's own logging setup wins.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO")
    """
    global _configured
    if _configured:
        return
    package_logger = logging.getLogger(ROOT_LOGGER)
    package_logger.setLevel(level_for(level))
    if not package_logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        package_logger.addHandler(handler)
    _configured = True


def get_logger(name: Optional[str] = None) -> "Logger":
    """Return a logger inside the ``solrql`` namespace.

    Module names already under ``solrql`` are used as-is; anything else is
    nested below it.
    """
    if not name or name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return Logger(name or ROOT_LOGGER)
    return Logger(f"{ROOT_LOGGER}.{name}")


class Logger:
    """Thin wrapper over a standard logger.

    `message` is for events worth seeing at the configured LOG_LEVEL, such as
    client creation; `debug` is for per-query detail.
    """

    def __init__(self, name: str) -> None:
        if not _configured:
            setup_package_logging(api_settings.LOG_LEVEL)
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)

    def message(self, msg: str, *args, **kwargs) -> None:
        self._logger.log(level_for(api_settings.LOG_LEVEL), msg, *args, **kwargs)
