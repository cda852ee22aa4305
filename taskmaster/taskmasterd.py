"""Daemon settings and the names of configuration sections and keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from taskmaster.logger import LogLevel

TASKMASTERD = "taskmasterd"


@dataclass
class Taskmasterd:
    """Settings from the ``[taskmasterd]`` section."""

    logfile: str = ""
    loglevel: LogLevel = LogLevel.INFO


class TaskmasterdSection(str, Enum):
    """Keys accepted in the ``[taskmasterd]`` section."""

    LOGFILE = "logfile"
    LOGLEVEL = "loglevel"

    def __str__(self) -> str:
        return self.value


class Section(str, Enum):
    """Kinds of section a configuration file may hold."""

    TASKMASTERD = "taskmasterd"
    PROGRAM = "program"

    def __str__(self) -> str:
        return self.value