"""Standalone command: interactive numbered menu.

The shell keeps one network in memory for the whole session. Changes
are written only when the user picks "Save network to a file".
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from friendgraph.commands._base import FgCommand
from friendgraph.services.friends import FriendshipService
from friendgraph.services.graph import GraphService
from friendgraph.services.people import PeopleService
from friendgraph.services.store import StoreService

if TYPE_CHECKING:
    from friendgraph.commands._context import AppContext
    from friendgraph.services.result import ServiceResult

_MENU = """\
---------------------------
Social Network Menu
---------------------------
1. Add a person
2. Add connection between two people
3. Remove connection between two people
4. Remove a person from the network
5. Check if two people are friends
6. Get friend recommendations for a person
7. Find shortest path between two people
8. Find shortest path avoiding certain people
9. Display all people in network
10. Display all friendships
11. Load network from file
12. Save network to a .txt file
0. Exit
---------------------------"""


def _build_actions(app: AppContext) -> dict[int, Callable[[], ServiceResult]]:
    network = app.network
    people = PeopleService(network)
    friends = FriendshipService(network)
    graph = GraphService(network)
    store = StoreService(network)

    def ask(prompt: str) -> str:
        return str(click.prompt(prompt, type=str)).strip()

    def recommend() -> ServiceResult:
        name = ask("Enter person's name")
        top = click.prompt(
            "Enter number of recommendations",
            type=click.IntRange(min=0),
            default=app.settings.recommend.default_top,
        )
        return graph.recommend(name, top=top)

    def path_avoiding() -> ServiceResult:
        source = ask("Enter starting person's name")
        target = ask("Enter destination person's name")
        avoid = click.prompt(
            "Enter names to avoid (separated by spaces)", type=str, default=""
        )
        return graph.path_avoiding(source, target, avoid.split())

    return {
        1: lambda: people.add_person(ask("Enter person's name")),
        2: lambda: friends.add_friend(
            ask("Enter first person's name"), ask("Enter second person's name")
        ),
        3: lambda: friends.remove_friend(
            ask("Enter first person's name"), ask("Enter second person's name")
        ),
        4: lambda: people.remove_person(ask("Enter person's name to remove")),
        5: lambda: friends.check_friends(
            ask("Enter first person's name"), ask("Enter second person's name")
        ),
        6: recommend,
        7: lambda: graph.path(
            ask("Enter starting person's name"), ask("Enter destination person's name")
        ),
        8: path_avoiding,
        9: people.list_people,
        10: friends.list_friendships,
        11: lambda: store.load(
            click.prompt("Enter the file to load", default=app.settings.network.file)
        ),
        12: lambda: store.save(ask("Enter the name for the output text file")),
    }


@click.command(
    cls=FgCommand,
    examples="""\
  friendgraph shell
  friendgraph --file network.txt shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Run the interactive social network menu."""
    actions = _build_actions(app)
    while True:
        click.echo(_MENU)
        choice = click.prompt("Enter your choice", type=click.IntRange(0, len(actions)))
        if choice == 0:
            break
        app.render(actions[choice]())
        click.echo()

    if app.network.unsaved:
        click.echo("WARNING: unsaved changes were discarded", err=True)
    click.echo("Goodbye.")
