"""Network: owner of the live SocialGraph and its working file.

The Network is the single dependency injected into every service. It
holds the current graph for the lifetime of the process and replaces it
wholesale on :meth:`load`: the source file is read and parsed into a
fresh graph first, and only a fully parsed graph is swapped in. A failed
load leaves the current graph untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from friendgraph.infrastructure.graph.engine import SocialGraph
from friendgraph.infrastructure.store import GraphStoreError, load_graph, save_graph

if TYPE_CHECKING:
    from friendgraph.config.settings import FriendGraphSettings

logger = logging.getLogger(__name__)


class Network:
    """The current social graph plus the file it is persisted to."""

    def __init__(self, settings: FriendGraphSettings) -> None:
        self._settings = settings
        self._graph = SocialGraph()
        # dirty: the working file is stale. unsaved: no save since the last change.
        self._dirty = False
        self._unsaved = False

    @property
    def graph(self) -> SocialGraph:
        return self._graph

    @property
    def working_file(self) -> Path:
        return self._settings.working_file

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def unsaved(self) -> bool:
        """True if the graph changed since it was last opened, loaded, or saved anywhere."""
        return self._unsaved

    def mark_dirty(self) -> None:
        self._dirty = True
        self._unsaved = True

    def open(self) -> Network:
        """Load the working file if it exists; otherwise start empty."""
        path = self.working_file
        if path.is_file():
            self._graph = load_graph(path)
            logger.debug("Opened network %s", path)
        else:
            logger.debug("No network file at %s; starting empty", path)
        self._dirty = False
        self._unsaved = False
        return self

    def resolve_source(self, source: str | Path) -> Path:
        """Find a file to load from *source*.

        Tries *source* as given (relative to the project root), then inside
        each ``[network] search_dirs`` entry in order.

        Raises:
            GraphStoreError: No candidate exists.
        """
        root = self._settings.project_root
        given = Path(source)
        candidates = [given if given.is_absolute() else root / given]
        for directory in self._settings.network.search_dirs:
            base = Path(directory)
            if not base.is_absolute():
                base = root / base
            candidates.append(base / given.name)

        for candidate in candidates:
            if candidate.is_file():
                return candidate

        tried = ", ".join(str(c) for c in candidates)
        msg = f"Network file not found: {source} (tried {tried})"
        raise GraphStoreError(msg, given)

    def load(self, source: str | Path) -> Path:
        """Replace the current graph with the contents of *source*.

        Returns the path actually read.

        Raises:
            GraphStoreError: The file is missing or unreadable; the current
                graph is unchanged.
        """
        path = self.resolve_source(source)
        fresh = load_graph(path)
        self._graph = fresh
        self._dirty = True
        self._unsaved = False
        return path

    def target_path(self, dest: str | Path | None = None) -> Path:
        """Resolve a save destination, appending ``[network] save_suffix`` if missing."""
        if dest is None:
            return self.working_file
        path = Path(dest)
        suffix = self._settings.network.save_suffix
        if suffix and not path.name.endswith(suffix):
            path = path.with_name(path.name + suffix)
        if not path.is_absolute():
            path = self._settings.project_root / path
        return path

    def save(self, dest: str | Path | None = None) -> Path:
        """Write the current graph to *dest* (default: the working file).

        Writing to the working file, by name or by default, clears ``dirty``.

        Raises:
            GraphStoreError: The file could not be written.
        """
        path = self.target_path(dest)
        save_graph(self._graph, path)
        if path == self.working_file:
            self._dirty = False
        self._unsaved = False
        return path

    def commit(self) -> bool:
        """Persist pending mutations to the working file.

        Returns True if a write happened.
        """
        if not self._dirty:
            return False
        self.save()
        return True
