"""Shared logging utilities for the Docker generator."""
from __future__ import annotations

import logging
import os
from collections import deque
from threading import RLock
from typing import Any, Deque, Optional

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "dockergen"
_DEFAULT_CAPACITY = 512


def _coerce_level(level: str | int | None) -> Optional[int]:
    if level is None:
        return None
    if isinstance(level, int):
        return level
    candidate = getattr(logging, str(level).upper(), None)
    if isinstance(candidate, int):
        return candidate
    try:
        return int(level)
    except (TypeError, ValueError):
        return None


class SessionLogHandler(logging.Handler):
    """Logging handler that keeps the records of the current wizard session."""

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        super().__init__()
        self._buffer: Deque[dict[str, Any]] = deque(maxlen=capacity)
        self._lock = RLock()

    def emit(self, record: logging.LogRecord) -> None:
        entry = {
            "logger": record.name,
            "levelno": record.levelno,
            "message": record.getMessage(),
        }
        with self._lock:
            self._buffer.append(entry)

    def records(self, *, levelno: Optional[int] = None) -> list[dict[str, Any]]:
        with self._lock:
            snapshot = list(self._buffer)
        if levelno is not None:
            snapshot = [item for item in snapshot if item["levelno"] >= levelno]
        return snapshot

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()


class LogManager:
    """Coordinator for the package logger, its console output and session buffer."""

    def __init__(self, capacity: int = _DEFAULT_CAPACITY) -> None:
        self.handler = SessionLogHandler(capacity)
        self.console_handler: Optional[logging.Handler] = None
        self._lock = RLock()
        self._configured = False

    @property
    def configured(self) -> bool:
        return self._configured

    def configure(self, *, level: str | int | None = None, console: Optional[Console] = None) -> None:
        with self._lock:
            target_logger = logging.getLogger(_LOGGER_NAME)
            if self.handler not in target_logger.handlers:
                target_logger.addHandler(self.handler)
            target_logger.setLevel(logging.DEBUG)

            if console is not None or self.console_handler is None:
                if self.console_handler is not None:
                    target_logger.removeHandler(self.console_handler)
                self.console_handler = RichHandler(
                    console=console or Console(stderr=True),
                    show_time=False,
                    show_path=False,
                    markup=False,
                )
                target_logger.addHandler(self.console_handler)
            resolved_level = _coerce_level(level)
            self.console_handler.setLevel(resolved_level if resolved_level is not None else logging.WARNING)
            self._configured = True

    def error_messages(self) -> list[str]:
        return [item["message"] for item in self.handler.records(levelno=logging.ERROR)]

    def error_count(self) -> int:
        return len(self.error_messages())

    def clear(self) -> None:
        self.handler.clear()


_LOG_MANAGER = LogManager()


def ensure_configured() -> None:
    if not _LOG_MANAGER.configured:
        _LOG_MANAGER.configure(level=os.getenv("DOCKERGEN_LOG_LEVEL"))


def configure_logging(*, level: str | int | None = None, console: Optional[Console] = None) -> None:
    _LOG_MANAGER.configure(level=level, console=console)


def get_log_manager() -> LogManager:
    ensure_configured()
    return _LOG_MANAGER


def get_logger(name: str) -> logging.Logger:
    ensure_configured()
    return logging.getLogger(name)


__all__ = [
    "LogManager",
    "SessionLogHandler",
    "configure_logging",
    "get_log_manager",
    "get_logger",
]
