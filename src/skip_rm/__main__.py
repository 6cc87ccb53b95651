from __future__ import annotations

import sys

import typed_argparse as tap

from skip_rm.commands import check, show_config, translate


def main_w() -> None:
    tap.Parser(
        tap.SubParserGroup(
            tap.SubParser("check", check.Args),
            tap.SubParser("show-config", show_config.Args),
            tap.SubParser("translate", translate.Args),
        ),
    ).bind(
        check.main,
        show_config.main,
        translate.main,
    ).run(sys.argv[1:])


if __name__ == "__main__":
    main_w()
