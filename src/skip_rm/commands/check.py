from __future__ import annotations

from pathlib import Path
from typing import Literal

import typed_argparse as tap

from skip_rm.commands.common import load_config, load_matchers
from skip_rm.common import main_func, quote, setup_logging
from skip_rm.filters import filter_args, report_skipped


class Args(tap.TypedArgs):
    arguments: list[str] = tap.arg(
        positional=True,
        nargs="*",
        metavar="ARG",
        help="Arguments as they would be passed to the wrapped command; use `--` "
        "before the first argument if any argument starts with a dash. Depending on "
        "the Python version, later `--` arguments may also be removed, unlike when "
        "running the wrapper itself",
    )
    config: Path | None = tap.arg(
        metavar="TOML",
        type=Path,
        help="Path to TOML configuration file; by default the user configuration "
        "file is used if it exists, and otherwise the system configuration file",
    )

    ####################################################################################
    # Logging

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = tap.arg(
        default="WARNING",
        help="Verbosity level for console logging",
    )


@main_func
def main(args: Args) -> int:
    log = setup_logging("check", log_level=args.log_level)
    config = load_config(log, args.config)
    matchers = load_matchers(log, config)

    skipped: list[str] = []

    def _on_skip(arg: str) -> None:
        skipped.append(arg)
        report_skipped(arg)

    forwarded = filter_args(
        config.filter_mode,
        matchers,
        args.arguments,
        on_skip=_on_skip,
    )

    # The command is printed, but never run
    print(quote(config.command, *forwarded))

    return 1 if skipped else 0
