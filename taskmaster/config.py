"""Loaded configuration and the runtime state that carries it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from taskmaster.errors import ConfigFileNotFoundError
from taskmaster.logger import Logger
from taskmaster.program import Program
from taskmaster.taskmasterd import Taskmasterd

DEFAULT_CONFIG_PATHS: tuple[str, ...] = ("./taskmaster.conf",)


@dataclass
class Config:
    """Programs and daemon settings read from a configuration file."""

    programs: dict[str, Program] = field(default_factory=dict)
    taskmasterd: Taskmasterd = field(default_factory=Taskmasterd)

    def get_program(self, name: str) -> Program | None:
        """Return the program called ``name``, or None."""
        return self.programs.get(name)

    def find_program(self, name: str) -> Program | None:
        """Return the program called ``name``, or None."""
        return self.programs.get(name)


def find_config(paths: Iterable[str] = DEFAULT_CONFIG_PATHS) -> str:
    """Return the first of ``paths`` that is a regular file.

    Raises ConfigFileNotFoundError when none is.
    """
    for path in paths:
        if Path(path).is_file():
            return str(path)
    raise ConfigFileNotFoundError()


@dataclass
class RuntimeContext:
    """State shared by the daemon while it runs."""

    config: Config = field(default_factory=Config)
    logger: Logger = field(default_factory=Logger)