"""Logging helpers shared by every layer of the wallet dashboard.

Loggers are built once per name and write both to a dated file under
``logs/<subdir>/`` in the project root and, optionally, to the console.
"""

from datetime import datetime
import logging
from pathlib import Path
from typing import Callable, Optional

from wallet_dashboard.utils.utils import get_project_root


_DEFAULT_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class LoggerBuilder:
    """Fluent builder for standard library loggers."""

    def __init__(self) -> None:
        self._name = "wallet_dashboard"
        self._subdir = "app"
        self._prefix = "app_logs"
        self._console = True
        self._level = logging.INFO
        self._formatter_factory: Callable[[], logging.Formatter] = (
            self._default_formatter
        )
        self._file_handler_factory = self._default_file_handler
        self._console_handler_factory = self._default_console_handler
        self._built: Optional[logging.Logger] = None

    def name(self, value: str) -> "LoggerBuilder":
        self._name = value
        return self

    def subdir(self, value: str) -> "LoggerBuilder":
        self._subdir = value
        return self

    def prefix(self, value: str) -> "LoggerBuilder":
        self._prefix = value
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, value: int) -> "LoggerBuilder":
        self._level = value
        return self

    def formatter(
        self,
        factory: Callable[[], logging.Formatter],
    ) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(self, factory) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(self, factory) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Create the configured logger, reusing it on later calls.

        Returns:
            logging.Logger: Logger with file and optional console handlers.
        """
        if self._built is not None:
            return self._built

        logger = logging.getLogger(self._name)
        logger.setLevel(self._level)
        logger.propagate = False

        fmt = self._formatter_factory()
        log_dir = get_project_root() / "logs" / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"

        if not any(
            isinstance(h, logging.FileHandler)
            and h.baseFilename == str(log_path)
            for h in logger.handlers
        ):
            logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console and not any(
            type(h) is logging.StreamHandler for h in logger.handlers
        ):
            logger.addHandler(self._console_handler_factory(fmt))

        self._built = logger
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return datetime.now().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(_DEFAULT_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.FileHandler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(
        fmt: logging.Formatter,
    ) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton facade over a built standard library logger."""

    _instance: Optional["Logger"] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, name: str = "wallet_dashboard") -> None:
        if self._initialized:
            return
        self.logger = self._builder(name).build()
        self._initialized = True

    @staticmethod
    def _builder(name: str) -> LoggerBuilder:
        return LoggerBuilder().name(name)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def critical(self, message: str) -> None:
        self.logger.critical(message)


class AppLogger(Logger):
    """Application-wide logger writing to ``logs/app``."""

    _instance: Optional["AppLogger"] = None

    @staticmethod
    def _builder(name: str) -> LoggerBuilder:
        return LoggerBuilder().name(name).subdir("app").prefix("app_logs")


def get_app_logger() -> AppLogger:
    """Return the shared application logger."""
    return AppLogger("wallet_dashboard")


__all__ = ["LoggerBuilder", "Logger", "AppLogger", "get_app_logger"]
