from typing import NotRequired, TypedDict
import logging
from scripts.astappcnt.utils import resolve_config


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": "astappcnt",
    "is_enabled": True,
    "level": logging.WARNING,
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Logger:
    """Per-instance gate in front of a shared named logger.

    ``is_enabled`` and ``level`` only filter what this instance forwards; the
    named logger's own level, handlers and ``disabled`` flag are left to the
    host application (or to ``configure_logging``).
    """

    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        self.logger = logging.getLogger(self.config["name"])

    def is_enabled_for(self, level: int) -> bool:
        return self.config["is_enabled"] and level >= self.config["level"]

    def log(self, level: int, message: str) -> None:
        if self.is_enabled_for(level):
            self.logger.log(level, message)

    def debug(self, message: str) -> None:
        self.log(logging.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(logging.INFO, message)

    def warning(self, message: str) -> None:
        self.log(logging.WARNING, message)


def configure_logging(level: int = logging.WARNING, name: str = DEFAULT_LOGGER_CONFIG["name"]) -> logging.Logger:
    """Attach a stream handler to the package logger; meant for entry points such as the CLI."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = ["Logger", "LoggerConfig", "DEFAULT_LOGGER_CONFIG", "configure_logging"]
