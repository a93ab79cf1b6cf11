"""Standalone commands: load and save the network file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from friendgraph.commands._base import FgCommand
from friendgraph.services.store import StoreService

if TYPE_CHECKING:
    from friendgraph.commands._context import AppContext


@click.command(
    cls=FgCommand,
    examples="""\
  friendgraph load EdgeList.txt
  friendgraph --file network.txt load backups/EdgeList.txt""",
)
@click.argument("source")
@click.pass_obj
def load(app: AppContext, source: str) -> None:
    """Replace the working network with the contents of SOURCE.

    SOURCE is tried as given, then in each [network] search_dirs entry.
    The working network is only replaced if SOURCE loads successfully.
    """
    app.emit(StoreService(app.network).load(source))


@click.command(
    cls=FgCommand,
    examples="""\
  friendgraph save network
  friendgraph save exports/network.txt""",
)
@click.argument("dest")
@click.pass_obj
def save(app: AppContext, dest: str) -> None:
    """Write the working network to DEST (".txt" is appended if missing)."""
    app.emit(StoreService(app.network).save(dest))
