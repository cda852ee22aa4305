"""Commands that can be run from the interactive prompt."""

from __future__ import annotations

from collections.abc import Sequence

from taskmaster.commandline import CommandLine
from taskmaster.config import Config
from taskmaster.errors import InvalidArgsError, ProcessNameNotFoundError
from taskmaster.program import Program


def add(args: Sequence[str], config: Config) -> list[Program]:
    """Look up every program named in ``args`` and return them in order.

    Raises InvalidArgsError when no name is given and
    ProcessNameNotFoundError when a name is unknown.
    """
    if not args:
        raise InvalidArgsError()
    programs = []
    for programname in args:
        program = config.find_program(programname)
        if program is None:
            raise ProcessNameNotFoundError()
        programs.append(program)
    return programs


def execute(command: CommandLine, config: Config) -> list[Program]:
    """Run ``command`` against ``config``."""
    return add(command.args, config)