# taskmaster

The configuration side of a small process supervisor. It reads an INI file
that describes the daemon and the programs it would manage, checks every
setting, and then shows a prompt and reads one control command.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Running the daemon

    taskmasterd [CONFIG_FILE]

With no argument, `./taskmaster.conf` is used if it is a regular file. More
than one argument prints a usage line on standard error and exits with
status 1. A problem in the configuration is reported on standard error as
`Error parsing config: ...` and the program carries on. It then shows the
prompt `> ` on standard error, reads one line from standard input, prints
the parsed command (for example `Command: CommandLine(command='add', args=['web'])`)
and exits.

## What it does not do

No processes are started, watched, restarted or stopped. The prompt reads a
single line and echoes it; it does not run it. `taskmaster.commands.add`
only looks up the named programs in a `Config` and returns them, raising
`InvalidArgsError` when no name is given and `ProcessNameNotFoundError` for
an unknown one. `taskmaster.process` holds plain records (`Process`,
`ProcessGroup`, `ProcessManager`, `ProcessState`) with no behaviour.

## Configuration

```ini
[taskmasterd]
logfile = taskmasterd.log
loglevel = debug

[program:web]
command = /usr/bin/python3 -m http.server 8000
numprocs = 2
autostart = true
autorestart = unexpected
exitcodes = 0,2
startsecs = 1
startretries = 3
stopsignal = 15
stopwaitsecs = 10
stdout_logfile = web.log
stderr_logfile = web_err.log
environment = PORT=8000,GREETING="hello, world"
directory = /tmp
umask = 022
```

Lines starting with `;` or `#` are comments. A key is separated from its
value by the first `=` or `:`. Keys that come before the first section
header are ignored.

`[taskmasterd]` accepts:

- `logfile`: a path, stored in the settings. Log messages are not written
  to it.
- `loglevel`: one of `trace`, `debug`, `info`, `warn`, `error`, `critical`
  (case-insensitive).

Reading any key of this section turns logging on. Messages at or above the
level are printed to standard output as
`[YYYY/MM/DD HH:MM:SS] [LEVEL] message`. Before that, nothing is logged.

Each `[program:<name>]` section must have a `command`, which is split on
spaces and tabs. The other keys are optional and have these defaults:

| key              | default              | accepted values                          |
|------------------|----------------------|------------------------------------------|
| `numprocs`       | `1`                  | 0–255                                    |
| `autostart`      | `true`               | `true` / `false` (any case)              |
| `autorestart`    | `unexpected`         | `true` / `false` / `unexpected` (any case) |
| `exitcodes`      | `0`                  | integers, separated by commas or blanks  |
| `startsecs`      | `1`                  | 0–255                                    |
| `startretries`   | `3`                  | 0–255                                    |
| `stopsignal`     | `15` (SIGTERM)       | integer signal number                    |
| `stopwaitsecs`   | `10`                 | 0–4294967295                             |
| `stdout_logfile` | `<name>.log`         | path                                     |
| `stderr_logfile` | `<name>_err.log`     | path                                     |
| `environment`    | none                 | `KEY=value` pairs, separated by commas   |
| `directory`      | none                 | path                                     |
| `umask`          | none                 | 0–65535, read as a decimal number        |

Environment values may contain parts quoted with `'` or `"`, inside which
commas are taken literally. Keys must be non-empty, ASCII letters and digits
only, and not a plain number.

An unknown section or key, a section name with more than one `:`, a
duplicate program name, a program without `command` or a badly formed value
is a configuration error.

## Using the library

```python
from taskmaster.adapter import parse_config
from taskmaster.config import RuntimeContext
from taskmaster.parser import parse_environment

context = RuntimeContext()
parse_config(context, "taskmaster.conf")
web = context.config.get_program("web")
print(web.command, web.numprocs, web.autorestart)

parse_environment('A=1,B="x, y"')   # ['A=1', 'B=x, y']
```

`parse_config(context)` without a path searches the default locations with
`taskmaster.config.find_config`, which raises `ConfigFileNotFoundError` when
none exists. Configuration problems raise subclasses of
`taskmaster.errors.ConfigParseError`, such as `UnexpectedValueError`,
`DuplicatedValueError` and `MissingCommandError`.

Programs can also be assembled directly:

```python
from taskmaster.program import ProgramBuilder, ProgramSection

program = (
    ProgramBuilder()
    .set("programname", "web")
    .set(ProgramSection.COMMAND, ["sleep", "10"])
    .build()
)
```

`taskmaster.commandline.readline()` shows the prompt and returns a
`CommandLine` with `command` and `args`; an empty line raises
`EmptyCommandError`.

## XML-RPC demo

A small XML-RPC service with the methods `hello(name)`, `map_h()` and
`person()`:

    taskmaster-rpcserver [--host HOST] [--port PORT]

It listens on `0.0.0.0:3000` by default until interrupted with Ctrl-C. A
matching client calls the three methods and prints the results:

    taskmaster-rpcclient [URL]

The URL defaults to `http://0.0.0.0:3000/`. The client exits with status 1
if a call fails and 2 if given more than one argument.