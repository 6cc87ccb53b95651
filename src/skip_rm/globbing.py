"""Translation of shell glob patterns into regular expressions.

Supports `?`, `*`, globstar (`**`) and bracket expressions, including negation with
a leading `!`. Brace expansion and `extglob` forms are not supported, and character
classes (`[:alpha:]`) inside brackets are copied through without being validated.
"""

from __future__ import annotations

import os

__all__ = [
    "glob_to_regex",
    "translate_glob",
]

# Characters escaped outside of bracket expressions
REGEX_SPECIAL_CHARS = frozenset("()[]{}?*+-|^$\\.&~# ")


def translate_glob(pattern: str) -> str:
    """Translate a glob pattern into an (unanchored) regular expression.

    `?` and `*` never match a path separator, while `**` matches across separators.
    A `[` without a closing `]` is treated as a literal character.
    """
    chars = list(pattern)
    result: list[str] = []

    idx = 0
    while idx < len(chars):
        char = chars[idx]
        if char == "?":
            result.append("[^/]")
        elif char == "*":
            if idx + 1 < len(chars) and chars[idx + 1] == "*":
                result.append(".*")
                idx += 1
            else:
                result.append("[^/]*")
        elif char == "[":
            end = idx + 1
            while end < len(chars) and chars[end] != "]":
                end += 1

            if end >= len(chars):
                result.append("\\[")
            else:
                if chars[idx + 1] == "!":
                    chars[idx + 1] = "^"

                body = "".join(chars[idx + 1 : end]).replace("\\", "\\\\")
                result.append(f"[{body}]")
                idx = end
        elif char in REGEX_SPECIAL_CHARS:
            result.append(f"\\{char}")
        else:
            result.append(char)

        idx += 1

    return "".join(result)


def glob_to_regex(pattern: str) -> str:
    """Expand `~` in a glob pattern and translate it into an anchored expression."""
    return f"^{translate_glob(os.path.expanduser(pattern))}$"
