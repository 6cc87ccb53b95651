from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Writes a configuration file using list files in `tmp_path`."""

    def _write_config(
        *,
        command: str = "true",
        matcher: str = "string",
        mode: str = "blacklist",
        blacklist: list[str] | None = None,
        whitelist: list[str] | None = None,
        filename: str = "skip-rm.toml",
    ) -> Path:
        blacklist_file = tmp_path / "blacklist"
        blacklist_file.write_text("".join(f"{it}\n" for it in blacklist or ()))
        whitelist_file = tmp_path / "whitelist"
        whitelist_file.write_text("".join(f"{it}\n" for it in whitelist or ()))

        filepath = tmp_path / filename
        filepath.write_text(
            f'command = "{command}"\n'
            f'matcher = "{matcher}"\n'
            f'mode = "{mode}"\n'
            f'blacklist = "{blacklist_file}"\n'
            f'whitelist = "{whitelist_file}"\n'
        )

        return filepath

    return _write_config
