"""Exception hierarchy used throughout taskmaster."""

from __future__ import annotations


class TaskmasterError(Exception):
    """Base class for every error raised by taskmaster."""


class _ValueCarryingMixin:
    """Keeps the offending value alongside the formatted message."""

    value: str


# --- command line -----------------------------------------------------------


class CommandLineError(TaskmasterError):
    """A line typed at the prompt could not be read or understood."""


class EmptyCommandError(CommandLineError):
    """The line typed at the prompt held no command."""

    def __init__(self) -> None:
        super().__init__("empty command.")


# --- command execution ------------------------------------------------------


class ExecError(TaskmasterError):
    """A command could not be carried out."""


class InvalidArgsError(ExecError):
    """The command was given arguments it does not accept."""

    def __init__(self) -> None:
        super().__init__("invalid arguments.")


class InvalidLengthError(ExecError):
    """The command was given the wrong number of arguments."""

    def __init__(self) -> None:
        super().__init__("invalid arguments length.")


class ProcessNameNotFoundError(ExecError):
    """A named program or process is not known."""

    def __init__(self) -> None:
        super().__init__("process name not found.")


# --- configuration ----------------------------------------------------------


class ConfigParseError(TaskmasterError):
    """The configuration could not be loaded."""


class ConfigFileNotFoundError(ConfigParseError):
    """No configuration file could be located."""

    def __init__(self) -> None:
        super().__init__("config file not found.")


class PermissionDeniedError(_ValueCarryingMixin, ConfigParseError):
    """The configuration file exists but cannot be read."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"cannot read a file: {value}")


class UnexpectedValueError(_ValueCarryingMixin, ConfigParseError):
    """A key, section or value in the configuration is not valid."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"unexpected value: {value}")


class DuplicatedValueError(_ValueCarryingMixin, ConfigParseError):
    """Something that must be unique appears more than once."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"duplicated value: {value}")


class MissingCommandError(_ValueCarryingMixin, ConfigParseError):
    """A program section has no command."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"command is required in program section: {value}")


class CriticalError(_ValueCarryingMixin, ConfigParseError):
    """An internal inconsistency was found while loading the configuration."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"error: {value}")


# --- program building -------------------------------------------------------


class ProgramBuilderError(TaskmasterError):
    """A program definition is incomplete."""


class MissingProgramNameError(ProgramBuilderError):
    """The program definition has no name."""

    def __init__(self) -> None:
        super().__init__("programname is required.")


class MissingProgramCommandError(ProgramBuilderError):
    """The program definition has no command."""

    def __init__(self) -> None:
        super().__init__("command is required in program section.")