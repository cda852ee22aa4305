"""Levelled console logger for the daemon."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import TextIO

from taskmaster.errors import UnexpectedValueError

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


class LogLevel(IntEnum):
    """Severity of a log message, ordered from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5

    def __str__(self) -> str:
        return self.name


def parse_level(s: str) -> LogLevel:
    """Return the level named by ``s``, ignoring case.

    Raises UnexpectedValueError for an unknown name.
    """
    try:
        return LogLevel[s.upper()]
    except KeyError:
        raise UnexpectedValueError(s) from None


@dataclass
class Logger:
    """Writes timestamped messages at or above a threshold level.

    A new logger is disabled and writes nothing until enable() is called.
    """

    level: LogLevel = LogLevel.INFO
    enabled: bool = False
    stream: TextIO | None = None

    def _log(self, level: LogLevel, message: str) -> None:
        if not self.enabled or self.level > level:
            return
        timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        out = self.stream if self.stream is not None else sys.stdout
        print(f"[{timestamp}] [{level}] {message}", file=out)

    def trace(self, message: str) -> None:
        self._log(LogLevel.TRACE, message)

    def debug(self, message: str) -> None:
        self._log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(LogLevel.INFO, message)

    def warn(self, message: str) -> None:
        self._log(LogLevel.WARN, message)

    def error(self, message: str) -> None:
        self._log(LogLevel.ERROR, message)

    def critical(self, message: str) -> None:
        self._log(LogLevel.CRITICAL, message)

    def change_level(self, level: LogLevel) -> None:
        """Set the threshold below which messages are dropped."""
        self.level = level

    def enable(self) -> None:
        """Start writing messages."""
        self.enabled = True