"""Locate and read ``friendgraph.toml``.

Lookup order: an explicit ``-c PATH``, then ``$FRIENDGRAPH_CONFIG``, then
the nearest ``friendgraph.toml`` in the start directory or any parent.
The directory holding the file becomes the project root. A path that was
asked for by name must exist; finding nothing on the walk just means the
code defaults apply.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "friendgraph.toml"
CONFIG_ENV_VAR = "FRIENDGRAPH_CONFIG"


def find_config(start: Path | None = None, *, explicit: str | Path | None = None) -> Path | None:
    """Return the config file to use, or None to run on defaults.

    Raises:
        click.ClickException: *explicit* or ``$FRIENDGRAPH_CONFIG`` names a
            file that does not exist.
    """
    requested = explicit or os.environ.get(CONFIG_ENV_VAR)
    if requested:
        path = Path(requested)
        if not path.is_file():
            msg = f"Config file not found: {path}"
            raise click.ClickException(msg)
        return path.resolve()

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: The file is unreadable or not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
