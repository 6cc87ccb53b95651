from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import tomli
from koda_validate import (
    Choices,
    DataclassValidator,
    Invalid,
    NotBlank,
    StringValidator,
    TypeErr,
    Valid,
    ValidationResult,
    Validator,
)

from skip_rm.filters import Mode
from skip_rm.matchers import MatcherKind

__all__ = [
    "CONFIG_FILES",
    "Config",
    "ConfigError",
]

# Configuration files in search order
CONFIG_FILES = (
    Path("~/.config/skip-rm/skip-rm.toml"),
    Path("/etc/skip-rm/skip-rm.toml"),
)

_LOG = logging.getLogger("config")

MATCHER_KINDS = {kind.value for kind in MatcherKind}
MODES = {mode.value for mode in Mode}


class ConfigError(RuntimeError):
    """Errors relating to finding, parsing, or validating configuration files."""


class ValidatePath(Validator[Path]):
    def __call__(self, val: object) -> ValidationResult[Path]:
        if isinstance(val, str) and val:
            return Valid(Path(val).expanduser())
        elif isinstance(val, Path):
            return Valid(val.expanduser())
        else:
            return Invalid(TypeErr(Path), val, self)


@dataclasses.dataclass(frozen=True)
class Config:
    # Name of or path to the wrapped command
    command: Annotated[str, StringValidator(NotBlank())]
    matcher: Annotated[str, StringValidator(Choices(MATCHER_KINDS))]
    mode: Annotated[str, StringValidator(Choices(MODES))]
    blacklist: Annotated[Path, ValidatePath()]
    whitelist: Annotated[Path, ValidatePath()]

    @property
    def matcher_kind(self) -> MatcherKind:
        return MatcherKind(self.matcher)

    @property
    def filter_mode(self) -> Mode:
        return Mode(self.mode)

    @property
    def list_file(self) -> Path:
        """The list of patterns used by the current mode."""
        if self.filter_mode is Mode.BLACKLIST:
            return self.blacklist

        return self.whitelist

    @classmethod
    def load(cls, filepath: Path) -> Config:
        with filepath.open("rb") as handle:
            try:
                toml: object = tomli.load(handle)
            except (tomli.TOMLDecodeError, UnicodeDecodeError) as error:
                raise ConfigError(f"error parsing {filepath}: {error}") from error

        validator = DataclassValidator(Config, fail_on_unknown_keys=True)
        result = validator(toml)
        if not isinstance(result, Valid):
            raise ConfigError(f"{filepath} is invalid: {result.err_type}")

        return result.val

    @classmethod
    def discover(cls, candidates: Sequence[Path] | None = None) -> Config:
        """Loads the first readable configuration file.

        Files that cannot be opened are skipped, but a file that is readable and
        invalid is an error; later candidates are not considered in that case.
        """
        if candidates is None:
            candidates = CONFIG_FILES

        for candidate in candidates:
            filepath = candidate.expanduser()
            try:
                config = cls.load(filepath)
            except OSError as error:
                _LOG.debug("could not read %s: %s", filepath, error)
                continue

            _LOG.debug("loaded configuration from %s", filepath)
            return config

        raise ConfigError(
            "no configuration file found at {}".format(
                ", ".join(str(it) for it in candidates)
            )
        )
