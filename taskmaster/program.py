"""Program definitions and the builder that assembles them."""

from __future__ import annotations

import signal
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from taskmaster.errors import (
    MissingProgramCommandError,
    MissingProgramNameError,
    UnexpectedValueError,
)

PROGRAM = "program"


class AutoRestart(str, Enum):
    """When a program is restarted after it exits."""

    UNEXPECTED = "unexpected"
    TRUE = "true"
    FALSE = "false"


class ProgramSection(str, Enum):
    """Keys accepted in a ``[program:<name>]`` section."""

    COMMAND = "command"
    NUMPROCS = "numprocs"
    AUTOSTART = "autostart"
    AUTORESTART = "autorestart"
    EXITCODES = "exitcodes"
    STARTSECS = "startsecs"
    STARTRETRIES = "startretries"
    STOPSIGNAL = "stopsignal"
    STOPWAITSECS = "stopwaitsecs"
    STDOUTLOGFILE = "stdout_logfile"
    STDERRLOGFILE = "stderr_logfile"
    ENVIRONMENT = "environment"
    DIRECTORY = "directory"
    UMASK = "umask"

    def __str__(self) -> str:
        return self.value


@dataclass
class Program:
    """A supervised program and its settings."""

    programname: str
    command: list[str]
    numprocs: int = 1
    autostart: bool = True
    autorestart: AutoRestart = AutoRestart.UNEXPECTED
    exitcodes: list[int] = field(default_factory=lambda: [0])
    startsecs: int = 1
    startretries: int = 3
    stopsignal: int = int(signal.SIGTERM)
    stopwaitsecs: int = 10
    stdout_logfile: str | None = None
    stderr_logfile: str | None = None
    environment: list[str] | None = None
    directory: str | None = None
    umask: int | None = None
    processnames: set[str] = field(init=False)

    def __post_init__(self) -> None:
        if self.stdout_logfile is None:
            self.stdout_logfile = f"{self.programname}.log"
        if self.stderr_logfile is None:
            self.stderr_logfile = f"{self.programname}_err.log"
        self.processnames = {
            f"{self.programname}{i}" for i in range(1, self.numprocs)
        }


_PROGRAMNAME = "programname"
_FIELDS = frozenset({_PROGRAMNAME, *(key.value for key in ProgramSection)})


class ProgramBuilder:
    """Collects program settings one at a time and builds a Program."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def set(self, field: ProgramSection | str, value: Any) -> ProgramBuilder:
        """Record ``value`` for ``field`` and return the builder.

        ``field`` is a ProgramSection or one of its key names, or
        ``"programname"``. Any other name raises UnexpectedValueError.
        """
        key = field.value if isinstance(field, ProgramSection) else field
        if key not in _FIELDS:
            raise UnexpectedValueError(str(key))
        self._values[key] = value
        return self

    def build(self) -> Program:
        """Return the Program; a name and a command must have been set."""
        if _PROGRAMNAME not in self._values:
            raise MissingProgramNameError()
        if ProgramSection.COMMAND.value not in self._values:
            raise MissingProgramCommandError()
        return Program(**self._values)