"""Subcommand modules for friendgraph.

register_commands() uses deferred imports so ``friendgraph --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    3 groups (have subcommands) + 3 standalone commands.
    """
    # --- Groups ---
    from friendgraph.commands.friends import friend
    from friendgraph.commands.graph import graph
    from friendgraph.commands.people import person

    cli.add_command(person)
    cli.add_command(friend)
    cli.add_command(graph)

    # --- Standalone commands ---
    from friendgraph.commands.shell import shell
    from friendgraph.commands.store import load, save

    cli.add_command(load)
    cli.add_command(save)
    cli.add_command(shell)
