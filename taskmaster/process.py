"""Records of running processes, grouped by program."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class ProcessState(Enum):
    """Life-cycle state of a supervised process."""

    STOPPED = auto()
    STARTING = auto()
    BACKOFF = auto()
    STOPPING = auto()
    EXITED = auto()
    FATAL = auto()
    UNKNOWN = auto()


@dataclass
class Process:
    """One operating-system process started for a program."""

    pid: int
    name: str
    state: ProcessState


@dataclass
class ProcessGroup:
    """The processes started for one program, keyed by process name."""

    programname: str
    processes: dict[str, Process] = field(default_factory=dict)


@dataclass
class ProcessManager:
    """All process groups, keyed by program name."""

    process_groups: dict[str, ProcessGroup] = field(default_factory=dict)