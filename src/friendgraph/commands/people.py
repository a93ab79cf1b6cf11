"""Command group: people in the network."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from friendgraph.commands._base import PERSON, FgGroup
from friendgraph.services.people import PeopleService

if TYPE_CHECKING:
    from friendgraph.commands._context import AppContext

_PERSON_EXAMPLES = """\
  friendgraph person add Alice Bob
  friendgraph person remove Bob
  friendgraph person list
  friendgraph person friends Alice"""


@click.group(cls=FgGroup, examples=_PERSON_EXAMPLES)
@click.pass_obj
def person(app: AppContext) -> None:
    """Add, remove, and list people."""


@person.command(
    examples="""\
  friendgraph person add Alice
  friendgraph person add Alice Bob Carol"""
)
@click.argument("names", nargs=-1, required=True)
@click.pass_obj
def add(app: AppContext, names: tuple[str, ...]) -> None:
    """Add one or more people to the network."""
    app.emit(PeopleService(app.network).add_person(*names))


@person.command(
    examples="""\
  friendgraph person remove Bob"""
)
@click.argument("name", type=PERSON)
@click.pass_obj
def remove(app: AppContext, name: str) -> None:
    """Remove a person and all of their friendships."""
    app.emit(PeopleService(app.network).remove_person(name))


@person.command(
    name="list",
    examples="""\
  friendgraph person list
  friendgraph --json person list""",
)
@click.pass_obj
def list_people(app: AppContext) -> None:
    """Display all people in the network."""
    app.emit(PeopleService(app.network).list_people())


@person.command(
    examples="""\
  friendgraph person friends Alice
  friendgraph -q person friends Alice"""
)
@click.argument("name", type=PERSON)
@click.pass_obj
def friends(app: AppContext, name: str) -> None:
    """List a person's direct friends."""
    app.emit(PeopleService(app.network).friends_of(name))
