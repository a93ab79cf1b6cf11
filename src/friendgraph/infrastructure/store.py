"""GraphStore: adjacency-list text codec.

One line per person::

    Alice: Bob Carol
    Bob: Alice
    Dave:

The name before the colon is trimmed; friends are whitespace-separated.
Loading always builds a fresh :class:`SocialGraph` so a caller can swap it
in only after the whole file has been read and parsed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from friendgraph.infrastructure.graph.engine import SocialGraph

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class GraphStoreError(Exception):
    """A network file could not be read or written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def parse_adjacency(text: str) -> SocialGraph:
    """Parse adjacency-list *text* into a new graph.

    Blank lines are skipped. A line without a colon is read as a person
    with no friends. A line with an empty name before the colon is skipped.
    """
    graph = SocialGraph()
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue

        source, sep, rest = line.partition(":")
        source = source.strip()
        if not sep:
            logger.warning(
                "Line %d has no ':' separator; reading %r as a lone person", lineno, source
            )
        if not source:
            logger.warning("Line %d has no name before ':'; skipped", lineno)
            continue

        graph.add_person(source)
        for neighbor in rest.split():
            graph.add_person(neighbor)
            graph.add_friend(source, neighbor)

    return graph


def render_adjacency(graph: SocialGraph) -> str:
    """Render *graph* as adjacency-list text, one newline-terminated line per person."""
    lines = [f"{name}: {' '.join(graph.friends_of(name))}\n" for name in graph.people()]
    return "".join(lines)


def load_graph(path: Path) -> SocialGraph:
    """Read and parse the network file at *path*.

    Raises:
        GraphStoreError: The file is missing, unreadable, or not UTF-8.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Could not read network file {path}: {exc}"
        raise GraphStoreError(msg, path) from exc

    graph = parse_adjacency(text)
    logger.debug(
        "Loaded %d people and %d friendships from %s",
        len(graph),
        graph.number_of_friendships(),
        path,
    )
    return graph


def save_graph(graph: SocialGraph, path: Path) -> None:
    """Write *graph* to *path*, replacing any existing file.

    Raises:
        GraphStoreError: The file could not be written.
    """
    try:
        path.write_text(render_adjacency(graph), encoding="utf-8")
    except OSError as exc:
        msg = f"Could not write network file {path}: {exc}"
        raise GraphStoreError(msg, path) from exc

    logger.debug("Saved %d people to %s", len(graph), path)
