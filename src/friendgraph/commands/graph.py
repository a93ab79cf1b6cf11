"""Command group: recommendations and path search."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from friendgraph.commands._base import PERSON, FgGroup
from friendgraph.services.graph import GraphService

if TYPE_CHECKING:
    from friendgraph.commands._context import AppContext

_GRAPH_EXAMPLES = """\
  friendgraph graph recommend Alice
  friendgraph graph recommend Alice --top 3
  friendgraph graph path Alice Dave
  friendgraph graph path Alice Dave --avoid Bob --avoid Carol"""


@click.group(cls=FgGroup, examples=_GRAPH_EXAMPLES)
@click.pass_obj
def graph(app: AppContext) -> None:
    """Recommend friends and search for paths between people."""


@graph.command(
    examples="""\
  friendgraph graph recommend Alice
  friendgraph graph recommend Alice --top 10
  friendgraph --json graph recommend Alice"""
)
@click.argument("name", type=PERSON)
@click.option("--top", default=None, type=int, help="Max results (default from config).")
@click.pass_obj
def recommend(app: AppContext, name: str, top: int | None) -> None:
    """Recommend friends by number of mutual friends."""
    if top is None:
        top = app.settings.recommend.default_top
    app.emit(GraphService(app.network).recommend(name, top=top))


@graph.command(
    examples="""\
  friendgraph graph path Alice Dave
  friendgraph graph path Alice Dave --avoid Bob
  friendgraph -q graph path Alice Dave"""
)
@click.argument("source", type=PERSON)
@click.argument("target", type=PERSON)
@click.option(
    "--avoid",
    multiple=True,
    type=PERSON,
    help="Person the path must not pass through (repeatable).",
)
@click.pass_obj
def path(app: AppContext, source: str, target: str, avoid: tuple[str, ...]) -> None:
    """Find the shortest chain of friends between two people."""
    svc = GraphService(app.network)
    if avoid:
        app.emit(svc.path_avoiding(source, target, avoid))
    else:
        app.emit(svc.path(source, target))
