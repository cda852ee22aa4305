import io
import re

import pytest

from taskmaster.errors import UnexpectedValueError
from taskmaster.logger import LogLevel, Logger, parse_level

LINE = re.compile(r"^\[\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}\] \[(\w+)\] (.*)$")

NAMES = ["TRACE", "DEBUG", "INFO", "WARN", "ERROR", "CRITICAL"]


def _levels(text):
    return [LINE.match(line).group(1) for line in text.splitlines()]


@pytest.mark.parametrize("name", NAMES)
def test_parse_level_round_trip(name):
    assert str(parse_level(name)) == name
    assert parse_level(name.lower()) is parse_level(name)


def test_parse_level_unknown():
    with pytest.raises(UnexpectedValueError) as info:
        parse_level("verbose")
    assert info.value.value == "verbose"


def test_levels_are_ordered():
    levels = [parse_level(name) for name in NAMES]
    ranks = [int(level) for level in levels]
    assert ranks == sorted(ranks)
    assert len(set(ranks)) == len(NAMES)


def test_default_logger_is_disabled_at_info():
    logger = Logger()
    assert logger.level is LogLevel.INFO
    assert logger.enabled is False


def test_disabled_logger_writes_nothing():
    buf = io.StringIO()
    logger = Logger(stream=buf)
    logger.critical("hello")
    assert buf.getvalue() == ""


def test_enabled_logger_line_format():
    buf = io.StringIO()
    logger = Logger(stream=buf)
    logger.enable()
    logger.info("starting taskmasterd")
    match = LINE.match(buf.getvalue().rstrip("\n"))
    assert match is not None
    assert match.group(1) == "INFO"
    assert match.group(2) == "starting taskmasterd"


def test_messages_below_level_dropped():
    buf = io.StringIO()
    logger = Logger(stream=buf)
    logger.enable()
    logger.trace("t")
    logger.debug("d")
    logger.info("i")
    logger.warn("w")
    logger.error("e")
    logger.critical("c")
    assert _levels(buf.getvalue()) == ["INFO", "WARN", "ERROR", "CRITICAL"]


def test_change_level_lowers_threshold():
    buf = io.StringIO()
    logger = Logger(stream=buf)
    logger.enable()
    logger.change_level(LogLevel.TRACE)
    logger.trace("t")
    logger.debug("d")
    assert _levels(buf.getvalue()) == ["TRACE", "DEBUG"]


def test_change_level_raises_threshold():
    buf = io.StringIO()
    logger = Logger(stream=buf)
    logger.enable()
    logger.change_level(LogLevel.CRITICAL)
    logger.error("e")
    logger.critical("c")
    assert _levels(buf.getvalue()) == ["CRITICAL"]


def test_default_stream_is_stdout(capsys):
    logger = Logger()
    logger.enable()
    logger.warn("careful")
    out = capsys.readouterr().out
    assert _levels(out) == ["WARN"]
    assert out.rstrip("\n").endswith("careful")