"""Reading commands typed at the interactive prompt."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

from taskmaster.errors import CommandLineError, EmptyCommandError

PROMPT = "> "


@dataclass
class CommandLine:
    """A command name and its arguments."""

    command: str
    args: list[str] = field(default_factory=list)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> CommandLine:
        """Build from a sequence of words; the first is the command.

        Raises EmptyCommandError when there are no words.
        """
        command, *args = list(words) or [None]
        if command is None:
            raise EmptyCommandError()
        return cls(command, args)


def readline(stdin: TextIO | None = None, stderr: TextIO | None = None) -> CommandLine:
    """Show the prompt on ``stderr`` and read one command from ``stdin``."""
    stdin = stdin if stdin is not None else sys.stdin
    stderr = stderr if stderr is not None else sys.stderr
    try:
        stderr.write(PROMPT)
        stderr.flush()
        line = stdin.readline()
    except OSError as exc:
        raise CommandLineError(f"IO error: {exc}") from exc
    return CommandLine.from_words(line.split())