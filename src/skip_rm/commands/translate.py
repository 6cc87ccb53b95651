from __future__ import annotations

import typed_argparse as tap

from skip_rm.common import main_func
from skip_rm.globbing import glob_to_regex


class Args(tap.TypedArgs):
    patterns: list[str] = tap.arg(
        positional=True,
        nargs="+",
        metavar="GLOB",
        help="Glob patterns to translate into regular expressions",
    )


@main_func
def main(args: Args) -> int:
    for pattern in args.patterns:
        print(glob_to_regex(pattern))

    return 0
