from __future__ import annotations

import enum
import logging
import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from skip_rm.globbing import glob_to_regex

__all__ = [
    "Matcher",
    "MatcherKind",
    "Matchers",
    "PatternError",
    "absolutize",
]

_LOG = logging.getLogger("matchers")


class PatternError(ValueError):
    """Raised when a pattern cannot be compiled into a regular expression."""


class MatcherKind(enum.Enum):
    STRING = "string"
    GLOB = "glob"
    REGEX = "regex"


def absolutize(path: str) -> str:
    """Lexically converts a path to an absolute path without `.` and `..` segments.

    Relative paths are resolved against the current working directory. Neither the
    filesystem nor symbolic links are consulted.
    """
    path = os.path.abspath(path)
    # POSIX allows implementation defined semantics for exactly two leading slashes
    if path.startswith("//"):
        path = "/" + path.lstrip("/")

    return path


@dataclass(frozen=True)
class Matcher:
    kind: MatcherKind
    # The pattern as written in the list file
    pattern: str
    # Compiled, anchored expression for glob and regex matchers
    regex: re.Pattern[str] | None = None

    def is_match(self, candidate: str) -> bool:
        """Returns true if the absolute form of `candidate` matches the pattern."""
        path = absolutize(candidate)
        if self.kind is MatcherKind.STRING:
            # The pattern itself is neither expanded nor made absolute
            return path == self.pattern
        elif self.regex is None:
            raise AssertionError(f"{self.kind} matcher without expression")

        return self.regex.fullmatch(path) is not None

    @staticmethod
    def new(kind: MatcherKind, pattern: str) -> Matcher:
        if kind is MatcherKind.STRING:
            return Matcher(kind=kind, pattern=pattern)
        elif kind is MatcherKind.GLOB:
            expression = glob_to_regex(pattern)
        else:
            expression = f"^{pattern}$"

        try:
            regex = re.compile(expression)
        except re.error as error:
            raise PatternError(
                f"invalid {kind.value} pattern {pattern!r}: {error}"
            ) from error

        return Matcher(kind=kind, pattern=pattern, regex=regex)


class Matchers:
    """An ordered collection of matchers; a path matches if any matcher matches."""

    __slots__ = ["_matchers"]

    _matchers: tuple[Matcher, ...]

    def __init__(self, matchers: Iterable[Matcher]) -> None:
        self._matchers = tuple(matchers)

    def is_match(self, candidate: str) -> bool:
        return any(matcher.is_match(candidate) for matcher in self._matchers)

    def __iter__(self) -> Iterator[Matcher]:
        return iter(self._matchers)

    def __len__(self) -> int:
        return len(self._matchers)

    @staticmethod
    def new(kind: MatcherKind, patterns: Iterable[str]) -> Matchers:
        return Matchers(Matcher.new(kind, pattern) for pattern in patterns)

    @staticmethod
    def load(kind: MatcherKind, filepath: Path) -> Matchers:
        """Creates a matcher for every line in a list file.

        Only line terminators are removed, so blank lines result in matchers that
        never match an absolute path.
        """
        with filepath.open(encoding="utf-8") as handle:
            patterns = [line.removesuffix("\n") for line in handle]

        _LOG.debug("read %i %s patterns from %s", len(patterns), kind.value, filepath)

        return Matchers.new(kind, patterns)
