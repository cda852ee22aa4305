"""Loads a configuration file into a runtime context."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from taskmaster import parser
from taskmaster.config import RuntimeContext, find_config
from taskmaster.errors import (
    ConfigParseError,
    CriticalError,
    DuplicatedValueError,
    MissingCommandError,
    MissingProgramCommandError,
    MissingProgramNameError,
    UnexpectedValueError,
)
from taskmaster.logger import parse_level
from taskmaster.program import PROGRAM, ProgramBuilder, ProgramSection
from taskmaster.taskmasterd import TASKMASTERD, TaskmasterdSection

_Section = tuple[str | None, list[tuple[str, str]]]

_PROGRAM_PARSERS: dict[ProgramSection, Callable[[str], Any]] = {
    ProgramSection.COMMAND: parser.parse_command,
    ProgramSection.NUMPROCS: parser.parse_numprocs,
    ProgramSection.AUTOSTART: parser.parse_autostart,
    ProgramSection.AUTORESTART: parser.parse_autorestart,
    ProgramSection.EXITCODES: parser.parse_exitcodes,
    ProgramSection.STARTSECS: parser.parse_startsecs,
    ProgramSection.STARTRETRIES: parser.parse_startretries,
    ProgramSection.STOPSIGNAL: parser.parse_stopsignal,
    ProgramSection.STOPWAITSECS: parser.parse_stopwaitsecs,
    ProgramSection.STDOUTLOGFILE: parser.parse_stdout_logfile,
    ProgramSection.STDERRLOGFILE: parser.parse_stderr_logfile,
    ProgramSection.ENVIRONMENT: parser.parse_environment,
    ProgramSection.DIRECTORY: parser.parse_directory,
    ProgramSection.UMASK: parser.parse_umask,
}


def _ini_error(detail: object) -> ConfigParseError:
    return ConfigParseError(f"config file parse error: {detail}")


def _read_ini(path: str) -> list[_Section]:
    """Read an INI file into sections of ordered key/value pairs.

    Keys before the first header land in a leading unnamed section.
    Repeated sections and keys are kept, in file order.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise _ini_error(exc) from exc

    sections: list[_Section] = [(None, [])]
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line.startswith("["):
            if not line.endswith("]"):
                raise _ini_error(f"line {lineno}: unterminated section header")
            sections.append((line[1:-1].strip(), []))
            continue
        positions = [pos for pos in (line.find("="), line.find(":")) if pos >= 0]
        if not positions:
            raise _ini_error(f"line {lineno}: expecting '=' or ':'")
        split_at = min(positions)
        key = line[:split_at].strip()
        value = line[split_at + 1 :].strip()
        sections[-1][1].append((key, value))
    return sections


def _parse_taskmasterd(context: RuntimeContext, props: list[tuple[str, str]]) -> None:
    logger = context.logger
    settings = context.config.taskmasterd
    for key, value in props:
        try:
            section_key = TaskmasterdSection(key)
        except ValueError:
            raise UnexpectedValueError(key) from None
        if section_key is TaskmasterdSection.LOGFILE:
            logger.debug(f"logfile: {value}")
            settings.logfile = value
        else:
            level = parse_level(value)
            logger.debug(f"loglevel: {level}")
            settings.loglevel = level
            logger.change_level(level)
        logger.enable()


def _parse_program(
    context: RuntimeContext, section: str, props: list[tuple[str, str]]
) -> None:
    parts = section.split(":")
    if len(parts) != 2:
        raise UnexpectedValueError(section)
    program_name = parts[1]
    programs = context.config.programs
    if program_name in programs:
        raise DuplicatedValueError(program_name)

    builder = ProgramBuilder().set("programname", program_name)
    for key, value in props:
        try:
            section_key = ProgramSection(key)
        except ValueError:
            raise UnexpectedValueError(key) from None
        builder.set(section_key, _PROGRAM_PARSERS[section_key](value))

    try:
        program = builder.build()
    except MissingProgramCommandError:
        raise MissingCommandError(program_name) from None
    except MissingProgramNameError as exc:
        raise CriticalError(str(exc)) from None
    programs[program_name] = program


def parse_config(context: RuntimeContext, file_path: str | None = None) -> None:
    """Load the configuration at ``file_path`` into ``context``.

    Without a path the default locations are searched. Raises a
    ConfigParseError subclass on any problem.
    """
    logger = context.logger
    logger.info("Parsing configuration file.")
    path = file_path if file_path is not None else find_config()

    for section, props in _read_ini(path):
        if section is None:
            logger.debug("Skipping empty section.")
        elif section == TASKMASTERD:
            logger.debug("Parsing taskmasterd section.")
            _parse_taskmasterd(context, props)
        elif section.startswith(PROGRAM):
            logger.debug(f"Parsing program section: {section}")
            _parse_program(context, section, props)
        else:
            logger.error(f"Parsing unknown section: {section}")
            raise UnexpectedValueError(section)