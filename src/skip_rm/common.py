from __future__ import annotations

import logging
import shlex
import signal
import subprocess
import sys
from collections.abc import Sequence
from functools import wraps
from typing import Callable, Literal, NoReturn, TypeVar

import coloredlogs

T = TypeVar("T")

LogLevel = Literal["ERROR", "WARNING", "INFO", "DEBUG"]

# Exit codes used by shells when a command could not be run
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


def main_func(func: Callable[[T], int]) -> Callable[[T], None]:
    # Ensure that tap finds the correct annotations
    @wraps(func)
    def _wrapper(arg: T) -> None:
        sys.exit(func(arg))

    return _wrapper


def eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def abort(log: logging.Logger, msg: str, *values: object) -> NoReturn:
    log.error(msg, *values)
    sys.exit(1)


def quote(*values: object) -> str:
    return " ".join(shlex.quote(str(value)) for value in values)


def setup_logging(name: str, *, log_level: LogLevel) -> logging.Logger:
    coloredlogs.install(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        level=log_level,
        milliseconds=True,
    )

    return logging.getLogger(name)


def returncode_to_exit_status(returncode: int) -> int:
    """Converts a Popen returncode to the status a shell would report."""
    if returncode < 0:
        # Killed by signal N
        return 128 - returncode

    return returncode


def run_command(
    log: logging.Logger,
    command: Sequence[str],
) -> int:
    """Runs a command attached to the current terminal and waits for it to exit.

    Standard input, output, and error are inherited from the calling process. The
    exit status of the command is returned as reported by a shell; if the command
    could not be started, 127 is returned when the executable does not exist, and
    126 is returned for any other start-up failure.
    """
    log.debug("Running command %s", quote(*command))
    if not command:
        raise ValueError(command)

    try:
        proc = subprocess.Popen(command, shell=False)
    except FileNotFoundError as error:
        log.error("could not run %s: %s", quote(command[0]), error.strerror)
        return EXIT_NOT_FOUND
    except OSError as error:
        log.error("could not run %s: %s", quote(command[0]), error.strerror)
        return EXIT_NOT_EXECUTABLE

    with proc:
        # SIGINT from the terminal is also sent to the command, which handles it
        handler = signal.signal(signal.SIGINT, signal.SIG_IGN)
        try:
            returncode = proc.wait()
        finally:
            signal.signal(signal.SIGINT, signal.SIG_DFL if handler is None else handler)

    if returncode < 0:
        try:
            name = signal.Signals(-returncode).name
        except ValueError:
            name = str(-returncode)

        log.debug("%s was killed by %s", quote(command[0]), name)

    return returncode_to_exit_status(returncode)
