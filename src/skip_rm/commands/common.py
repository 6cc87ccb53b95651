from __future__ import annotations

import logging
from pathlib import Path

from skip_rm.common import abort
from skip_rm.config import Config, ConfigError
from skip_rm.matchers import Matchers, PatternError


def load_config(log: logging.Logger, filepath: Path | None = None) -> Config:
    """Loads the given configuration file, or the first readable default file."""
    try:
        if filepath is None:
            return Config.discover()

        return Config.load(filepath)
    except ConfigError as error:
        abort(log, "%s", error)
    except OSError as error:
        abort(log, "could not read configuration file: %s", error)


def load_matchers(log: logging.Logger, config: Config) -> Matchers:
    """Compiles the patterns listed in the file selected by the configured mode."""
    try:
        matchers = Matchers.load(config.matcher_kind, config.list_file)
    except PatternError as error:
        abort(log, "%s", error)
    except (OSError, UnicodeDecodeError) as error:
        abort(log, "could not read list of patterns: %s", error)

    log.debug(
        "using %i %s patterns in %s mode",
        len(matchers),
        config.matcher,
        config.mode,
    )

    return matchers
