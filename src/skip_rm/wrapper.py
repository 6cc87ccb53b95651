"""Protective wrapper for `rm` and similar commands.

Every argument is meant for the wrapped command, so the wrapper accepts no options
of its own. Logging verbosity may be set with the `SKIP_RM_LOG_LEVEL` environment
variable.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from skip_rm.commands.common import load_config, load_matchers
from skip_rm.common import LogLevel, quote, run_command, setup_logging
from skip_rm.filters import filter_args

LOG_LEVEL_ENV = "SKIP_RM_LOG_LEVEL"
LOG_LEVELS: tuple[LogLevel, ...] = ("ERROR", "WARNING", "INFO", "DEBUG")


def _log_level() -> LogLevel:
    value = os.environ.get(LOG_LEVEL_ENV, "").upper()
    for level in LOG_LEVELS:
        if level == value:
            return level

    return "WARNING"


def main(argv: Sequence[str]) -> int:
    log = setup_logging("skip-rm", log_level=_log_level())
    config = load_config(log)
    matchers = load_matchers(log, config)

    # The first argument is the name of this program
    args = filter_args(config.filter_mode, matchers, argv[1:])
    log.debug("forwarding %s", quote(config.command, *args))

    return run_command(log, [config.command, *args])


def main_w() -> None:
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    main_w()
