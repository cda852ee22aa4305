"""Entry point of the taskmaster daemon."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from taskmaster.adapter import parse_config
from taskmaster.commandline import readline
from taskmaster.config import RuntimeContext
from taskmaster.errors import CommandLineError, ConfigParseError


def _program_name() -> str:
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "taskmaster"


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration, then read and echo one command."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print(f"Usage: {_program_name()} <config_file_path>", file=sys.stderr)
        return 1
    file_path = args[0] if args else None

    context = RuntimeContext()
    try:
        parse_config(context, file_path)
    except ConfigParseError as exc:
        print(f"Error parsing config: {exc}", file=sys.stderr)
    context.logger.info("starting taskmasterd")

    try:
        line = readline()
    except CommandLineError as exc:
        print(f"Error reading line: {exc}", file=sys.stderr)
    else:
        print(f"Command: {line!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())