from __future__ import annotations

import enum
from collections.abc import Callable, Iterable

from skip_rm.common import eprint
from skip_rm.matchers import Matchers

__all__ = [
    "Mode",
    "filter_args",
    "report_skipped",
]


class Mode(enum.Enum):
    # Skip arguments matching any pattern
    BLACKLIST = "blacklist"
    # Skip arguments not matching any pattern
    WHITELIST = "whitelist"


def report_skipped(arg: str) -> None:
    eprint(f"skipping {arg}...")


def filter_args(
    mode: Mode,
    matchers: Matchers,
    args: Iterable[str],
    *,
    on_skip: Callable[[str], None] = report_skipped,
) -> list[str]:
    """Removes protected paths from the arguments of a command.

    `args` must not include the name of the program. Arguments starting with a dash
    are assumed to be options and are passed through untested, unless they follow
    an `--` argument; a single dash is always tested. The `--` argument itself is
    always passed through. Every removed argument is passed to `on_skip`.
    """
    result: list[str] = []
    double_dash = False
    for arg in args:
        if arg == "--":
            double_dash = True
            result.append(arg)
            continue
        elif arg != "-" and arg.startswith("-") and not double_dash:
            result.append(arg)
            continue

        if matchers.is_match(arg) == (mode is Mode.BLACKLIST):
            on_skip(arg)
        else:
            result.append(arg)

    return result
