"""Command group: friendships between people."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from friendgraph.commands._base import PERSON, FgGroup
from friendgraph.services.friends import FriendshipService

if TYPE_CHECKING:
    from friendgraph.commands._context import AppContext

_FRIEND_EXAMPLES = """\
  friendgraph friend add Alice Bob
  friendgraph friend remove Alice Bob
  friendgraph friend check Alice Bob
  friendgraph friend list
  friendgraph friend mutual Alice Carol"""


@click.group(cls=FgGroup, examples=_FRIEND_EXAMPLES)
@click.pass_obj
def friend(app: AppContext) -> None:
    """Create, remove, and inspect friendships."""


@friend.command(
    examples="""\
  friendgraph friend add Alice Bob"""
)
@click.argument("name1", type=PERSON)
@click.argument("name2", type=PERSON)
@click.pass_obj
def add(app: AppContext, name1: str, name2: str) -> None:
    """Make two existing people friends."""
    app.emit(FriendshipService(app.network).add_friend(name1, name2))


@friend.command(
    examples="""\
  friendgraph friend remove Alice Bob"""
)
@click.argument("name1", type=PERSON)
@click.argument("name2", type=PERSON)
@click.pass_obj
def remove(app: AppContext, name1: str, name2: str) -> None:
    """End the friendship between two people."""
    app.emit(FriendshipService(app.network).remove_friend(name1, name2))


@friend.command(
    examples="""\
  friendgraph friend check Alice Bob
  friendgraph -q friend check Alice Bob"""
)
@click.argument("name1", type=PERSON)
@click.argument("name2", type=PERSON)
@click.pass_obj
def check(app: AppContext, name1: str, name2: str) -> None:
    """Check whether two people are friends."""
    app.emit(FriendshipService(app.network).check_friends(name1, name2))


@friend.command(
    name="list",
    examples="""\
  friendgraph friend list
  friendgraph --json friend list""",
)
@click.pass_obj
def list_friendships(app: AppContext) -> None:
    """Display every person with their friends."""
    app.emit(FriendshipService(app.network).list_friendships())


@friend.command(
    examples="""\
  friendgraph friend mutual Alice Carol"""
)
@click.argument("name1", type=PERSON)
@click.argument("name2", type=PERSON)
@click.pass_obj
def mutual(app: AppContext, name1: str, name2: str) -> None:
    """List the friends two people have in common."""
    app.emit(FriendshipService(app.network).mutual_friends(name1, name2))
