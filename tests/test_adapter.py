import signal

import pytest

from taskmaster.adapter import parse_config
from taskmaster.config import RuntimeContext
from taskmaster.errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    DuplicatedValueError,
    MissingCommandError,
    UnexpectedValueError,
)
from taskmaster.logger import LogLevel
from taskmaster.program import AutoRestart


def _load(tmp_path, text):
    path = tmp_path / "taskmaster.conf"
    path.write_text(text)
    context = RuntimeContext()
    parse_config(context, str(path))
    return context


def test_full_program_section(tmp_path):
    context = _load(
        tmp_path,
        "[program:web]\n"
        "command=python -m http.server\n"
        "numprocs=3\n"
        "autostart=false\n"
        "autorestart=true\n"
        "exitcodes=0,2\n"
        "startsecs=5\n"
        "startretries=7\n"
        "stopsignal=2\n"
        "stopwaitsecs=30\n"
        "stdout_logfile=/tmp/web.out\n"
        "stderr_logfile=/tmp/web.err\n"
        "environment=A=1,B=two\n"
        "directory=/srv\n"
        "umask=22\n",
    )
    program = context.config.get_program("web")
    assert program.command == ["python", "-m", "http.server"]
    assert program.numprocs == 3
    assert program.autostart is False
    assert program.autorestart is AutoRestart.TRUE
    assert program.exitcodes == [0, 2]
    assert program.startsecs == 5
    assert program.startretries == 7
    assert program.stopsignal == 2
    assert program.stopwaitsecs == 30
    assert program.stdout_logfile == "/tmp/web.out"
    assert program.stderr_logfile == "/tmp/web.err"
    assert program.environment == ["A=1", "B=two"]
    assert program.directory == "/srv"
    assert program.umask == 22


def test_defaults_fill_missing_keys(tmp_path):
    context = _load(tmp_path, "[program:job]\ncommand=ls\n")
    program = context.config.get_program("job")
    assert program.numprocs == 1
    assert program.autostart is True
    assert program.autorestart is AutoRestart.UNEXPECTED
    assert program.exitcodes == [0]
    assert program.stopsignal == int(signal.SIGTERM)
    assert program.stdout_logfile == "job.log"
    assert program.stderr_logfile == "job_err.log"


def test_several_programs_and_comments(tmp_path):
    context = _load(
        tmp_path,
        "; leading comment\n"
        "[program:a]\n"
        "# another comment\n"
        "command = ls\n"
        "\n"
        "[program:b]\n"
        "command=sleep 1\n",
    )
    assert set(context.config.programs) == {"a", "b"}
    assert context.config.get_program("b").command == ["sleep", "1"]


def test_bad_loglevel(tmp_path):
    with pytest.raises(UnexpectedValueError) as info:
        _load(tmp_path, "[taskmasterd]\nloglevel=loud\n")
    assert info.value.value == "loud"


def test_unknown_taskmasterd_key(tmp_path):
    with pytest.raises(UnexpectedValueError) as info:
        _load(tmp_path, "[taskmasterd]\ncolor=red\n")
    assert info.value.value == "color"


def test_unknown_section(tmp_path):
    with pytest.raises(UnexpectedValueError) as info:
        _load(tmp_path, "[foo]\nkey=value\n")
    assert info.value.value == "foo"


def test_unknown_program_key(tmp_path):
    with pytest.raises(UnexpectedValueError) as info:
        _load(tmp_path, "[program:web]\ncommand=ls\nbogus=1\n")
    assert info.value.value == "bogus"


@pytest.mark.parametrize("header", ["program", "program:a:b"])
def test_malformed_program_header(tmp_path, header):
    with pytest.raises(UnexpectedValueError) as info:
        _load(tmp_path, f"[{header}]\ncommand=ls\n")
    assert info.value.value == header


def test_duplicated_program(tmp_path):
    with pytest.raises(DuplicatedValueError) as info:
        _load(tmp_path, "[program:web]\ncommand=ls\n[program:web]\ncommand=ls\n")
    assert info.value.value == "web"


def test_missing_command(tmp_path):
    with pytest.raises(MissingCommandError) as info:
        _load(tmp_path, "[program:web]\nnumprocs=2\n")
    assert info.value.value == "web"


def test_invalid_program_value(tmp_path):
    with pytest.raises(UnexpectedValueError) as info:
        _load(tmp_path, "[program:web]\ncommand=ls\nnumprocs=256\n")
    assert info.value.value == "256"


def test_line_without_separator(tmp_path):
    with pytest.raises(ConfigParseError):
        _load(tmp_path, "[program:web]\njust some words\n")


def test_explicit_missing_file(tmp_path):
    with pytest.raises(ConfigParseError):
        parse_config(RuntimeContext(), str(tmp_path / "absent.conf"))


def test_default_location_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ConfigFileNotFoundError):
        parse_config(RuntimeContext())


def test_default_location_found(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "taskmaster.conf").write_text("[program:cat]\ncommand=cat\n")
    context = RuntimeContext()
    parse_config(context)
    assert context.config.get_program("cat").command == ["cat"]