"""Parsers for the values of ``[program:<name>]`` configuration keys."""

from __future__ import annotations

import re
from enum import Enum, auto

from taskmaster.errors import UnexpectedValueError
from taskmaster.program import AutoRestart

_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")
_COMMAND_SEPARATORS = re.compile(r"[ \t]")
_EXITCODE_SEPARATORS = re.compile(r"[, \t]")

_U8_MAX = 2**8 - 1
_U16_MAX = 2**16 - 1
_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a plain decimal integer in ``[low, high]``.

    No surrounding whitespace, no underscores; a sign only where ``low``
    allows negatives. Raises UnexpectedValueError otherwise.
    """
    pattern = _SIGNED if low < 0 else _UNSIGNED
    if pattern.fullmatch(text) is None:
        raise UnexpectedValueError(text)
    number = int(text)
    if not low <= number <= high:
        raise UnexpectedValueError(text)
    return number


def _parse_flag(text: str, choices: dict[str, object]) -> object:
    try:
        return choices[text.lower()]
    except KeyError:
        raise UnexpectedValueError(text) from None


def _parse_text(text: object) -> str:
    """Accept any string as given; anything else is an unexpected value."""
    if not isinstance(text, str):
        raise UnexpectedValueError(repr(text))
    return text


def parse_command(command: str) -> list[str]:
    """Split a command line on spaces and tabs; it must not be empty."""
    words = [word for word in _COMMAND_SEPARATORS.split(command) if word]
    if not words:
        raise UnexpectedValueError(command)
    return words


def parse_numprocs(numprocs: str) -> int:
    """Number of processes, 0 to 255."""
    return _parse_int(numprocs, 0, _U8_MAX)


def parse_autostart(autostart: str) -> bool:
    """``true`` or ``false``, in any case."""
    return bool(_parse_flag(autostart, {"true": True, "false": False}))


def parse_autorestart(autorestart: str) -> AutoRestart:
    """``true``, ``false`` or ``unexpected``, in any case."""
    result = _parse_flag(
        autorestart,
        {
            "true": AutoRestart.TRUE,
            "false": AutoRestart.FALSE,
            "unexpected": AutoRestart.UNEXPECTED,
        },
    )
    assert isinstance(result, AutoRestart)
    return result


def parse_exitcodes(exitcodes: str) -> list[int]:
    """Exit codes separated by commas, spaces or tabs; at least one."""
    codes = [
        _parse_int(token, _I32_MIN, _I32_MAX)
        for token in _EXITCODE_SEPARATORS.split(exitcodes)
        if token
    ]
    if not codes:
        raise UnexpectedValueError(exitcodes)
    return codes


def parse_startsecs(startsecs: str) -> int:
    """Seconds before a start counts as successful, 0 to 255."""
    return _parse_int(startsecs, 0, _U8_MAX)


def parse_startretries(startretries: str) -> int:
    """Number of start attempts, 0 to 255."""
    return _parse_int(startretries, 0, _U8_MAX)


def parse_stopsignal(stopsignal: str) -> int:
    """Signal number sent to stop the program."""
    return _parse_int(stopsignal, _I32_MIN, _I32_MAX)


def parse_stopwaitsecs(stopwaitsecs: str) -> int:
    """Seconds to wait for the program to stop."""
    return _parse_int(stopwaitsecs, 0, _U32_MAX)


def parse_stdout_logfile(stdout_logfile: str) -> str:
    """Path of the file receiving the program's standard output."""
    return _parse_text(stdout_logfile)


def parse_stderr_logfile(stderr_logfile: str) -> str:
    """Path of the file receiving the program's standard error."""
    return _parse_text(stderr_logfile)


class _State(Enum):
    START = auto()
    KEY = auto()
    VALUE = auto()
    QUOTED_VALUE = auto()
    END = auto()


def _check_environment_key(key: str) -> None:
    if not key or not all(c.isascii() and c.isalnum() for c in key):
        raise UnexpectedValueError(key)
    if key.isdigit() and int(key) <= _I32_MAX:
        raise UnexpectedValueError(f"{key}: not a valid identifer")


def parse_environment(environment: str) -> list[str]:
    """Parse ``KEY=value,KEY2="quoted, value"`` into ``KEY=value`` strings.

    Values may contain single- or double-quoted parts, in which commas and
    the other quote character are taken literally. Keys must be ASCII
    letters and digits and not a number.
    """
    entries: list[str] = []
    key = ""
    value = ""
    delimiter = ""
    state = _State.START

    for c in environment:
        if state is _State.END:
            key, value, delimiter = "", "", ""
            state = _State.START
        if state is _State.START:
            if c.isspace():
                continue
            state = _State.KEY
        if state is _State.KEY:
            if c == "=":
                _check_environment_key(key)
                state = _State.VALUE
            else:
                key += c
        elif state is _State.VALUE:
            if c in ("'", '"'):
                delimiter = c
                state = _State.QUOTED_VALUE
            elif c == ",":
                entries.append(f"{key}={value}")
                state = _State.END
            else:
                value += c
        elif state is _State.QUOTED_VALUE:
            if c == delimiter:
                delimiter = ""
                state = _State.VALUE
            else:
                value += c

    if state is _State.VALUE:
        entries.append(f"{key}={value}")
        state = _State.END
    if state not in (_State.START, _State.END):
        raise UnexpectedValueError(environment)
    return entries


def parse_directory(directory: str) -> str:
    """Working directory of the program."""
    return _parse_text(directory)


def parse_umask(umask: str) -> int:
    """File creation mask, read as a decimal number from 0 to 65535."""
    return _parse_int(umask, 0, _U16_MAX)