from __future__ import annotations

import os
from pathlib import Path

import pytest

from skip_rm.filters import Mode, filter_args
from skip_rm.matchers import Matcher, MatcherKind, Matchers, absolutize


@pytest.fixture(autouse=True)
def _chdir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)


def strings(*patterns: str) -> Matchers:
    return Matchers.new(MatcherKind.STRING, patterns)


def globs(*patterns: str) -> Matchers:
    return Matchers.new(MatcherKind.GLOB, patterns)


def run_filter(
    mode: Mode,
    matchers: Matchers,
    args: list[str],
) -> tuple[list[str], list[str]]:
    skipped: list[str] = []
    result = filter_args(mode, matchers, args, on_skip=skipped.append)

    return result, skipped


########################################################################################
# Blacklist


def test_blacklist() -> None:
    matchers = strings(absolutize("/etc/passwd"))

    assert run_filter(Mode.BLACKLIST, matchers, ["-rf", "/etc/passwd", "/tmp/x"]) == (
        ["-rf", "/tmp/x"],
        ["/etc/passwd"],
    )


def test_blacklist__reports_skipped(capsys: pytest.CaptureFixture[str]) -> None:
    matchers = strings("/etc/passwd")

    assert filter_args(Mode.BLACKLIST, matchers, ["-rf", "/etc/passwd", "/tmp/x"]) == [
        "-rf",
        "/tmp/x",
    ]

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "skipping /etc/passwd...\n"


def test_blacklist__skipped_argument_is_reported_as_written(
    capsys: pytest.CaptureFixture[str],
) -> None:
    matchers = globs("/etc/**")

    assert filter_args(Mode.BLACKLIST, matchers, ["/etc/../etc/./hosts"]) == []
    assert capsys.readouterr().err == "skipping /etc/../etc/./hosts...\n"


def test_blacklist__relative_paths() -> None:
    matchers = strings(absolutize("important"))

    assert run_filter(Mode.BLACKLIST, matchers, ["important", "./x/../important"]) == (
        [],
        ["important", "./x/../important"],
    )


def test_blacklist__empty_list() -> None:
    assert run_filter(Mode.BLACKLIST, Matchers([]), ["-r", "/", "/etc"]) == (
        ["-r", "/", "/etc"],
        [],
    )


def test_blacklist__no_arguments() -> None:
    assert run_filter(Mode.BLACKLIST, globs("**"), []) == ([], [])


def test_blacklist__preserves_order() -> None:
    matchers = globs("/boot/**")
    args = ["/b", "-v", "/boot/vmlinuz", "/a", "/boot/grub", "/c"]

    assert run_filter(Mode.BLACKLIST, matchers, args) == (
        ["/b", "-v", "/a", "/c"],
        ["/boot/vmlinuz", "/boot/grub"],
    )


########################################################################################
# Whitelist


def test_whitelist() -> None:
    matchers = globs("/tmp/*")

    assert run_filter(Mode.WHITELIST, matchers, ["-rf", "/etc/passwd", "/tmp/x"]) == (
        ["-rf", "/tmp/x"],
        ["/etc/passwd"],
    )


def test_whitelist__empty_list() -> None:
    assert run_filter(Mode.WHITELIST, Matchers([]), ["-r", "/tmp/x", "--", "-f"]) == (
        ["-r", "--"],
        ["/tmp/x", "-f"],
    )


def test_whitelist__nested_paths() -> None:
    matchers = globs("/tmp/**")
    args = ["/tmp/a/b", "/tmp", "/tmp/../etc"]

    assert run_filter(Mode.WHITELIST, matchers, args) == (
        ["/tmp/a/b"],
        ["/tmp", "/tmp/../etc"],
    )


########################################################################################
# Options, `-`, and `--`


def test_double_dash__enables_testing_of_options() -> None:
    matchers = strings(absolutize("-rf"))

    assert run_filter(Mode.BLACKLIST, matchers, ["--", "-rf"]) == (["--"], ["-rf"])
    assert run_filter(Mode.BLACKLIST, matchers, ["-rf"]) == (["-rf"], [])


def test_double_dash__only_affects_later_arguments() -> None:
    matchers = strings(absolutize("-f"))

    assert run_filter(Mode.BLACKLIST, matchers, ["-f", "--", "-f"]) == (
        ["-f", "--"],
        ["-f"],
    )


def test_double_dash__is_never_tested() -> None:
    matchers = strings(absolutize("--"))

    assert run_filter(Mode.BLACKLIST, matchers, ["--", "--"]) == (["--", "--"], [])
    assert run_filter(Mode.WHITELIST, Matchers([]), ["--", "--"]) == (["--", "--"], [])


def test_options__not_tested_in_whitelist_mode() -> None:
    assert run_filter(Mode.WHITELIST, Matchers([]), ["-r", "--force"]) == (
        ["-r", "--force"],
        [],
    )


def test_single_dash__always_tested() -> None:
    matchers = strings(absolutize("-"))

    assert run_filter(Mode.BLACKLIST, matchers, ["-"]) == ([], ["-"])
    assert run_filter(Mode.BLACKLIST, Matchers([]), ["-"]) == (["-"], [])
    assert run_filter(Mode.WHITELIST, Matchers([]), ["-"]) == ([], ["-"])
    assert run_filter(Mode.WHITELIST, matchers, ["-", "--", "-"]) == (
        ["-", "--", "-"],
        [],
    )


def test_single_dash__is_a_relative_path() -> None:
    matchers = strings(os.path.join(os.getcwd(), "-"))

    assert run_filter(Mode.BLACKLIST, matchers, ["-", "./-"]) == ([], ["-", "./-"])


########################################################################################
# Idempotence


@pytest.mark.parametrize("mode", list(Mode))
def test_filter_is_idempotent(mode: Mode) -> None:
    matchers = Matchers(
        [
            Matcher.new(MatcherKind.GLOB, "/tmp/**"),
            Matcher.new(MatcherKind.STRING, absolutize("-x")),
        ]
    )
    args = ["-r", "/tmp/a", "/etc/b", "-", "--", "-x", "/tmp/c", "-y", "d"]

    once, _ = run_filter(mode, matchers, args)
    twice, skipped = run_filter(mode, matchers, once)

    assert twice == once
    assert skipped == []
