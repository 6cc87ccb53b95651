from __future__ import annotations

from pathlib import Path
from typing import Literal

import typed_argparse as tap

from skip_rm.commands.common import load_config, load_matchers
from skip_rm.common import main_func, quote, setup_logging


class Args(tap.TypedArgs):
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
    log = setup_logging("show-config", log_level=args.log_level)
    config = load_config(log, args.config)
    # Also verifies that every pattern compiles
    matchers = load_matchers(log, config)

    print("command =", quote(config.command))
    print("matcher =", config.matcher)
    print("mode =", config.mode)
    print("blacklist =", quote(config.blacklist))
    print("whitelist =", quote(config.whitelist))
    print(f"{len(matchers)} patterns in", quote(config.list_file))

    return 0
