"""StoreService: load and save the network as an adjacency-list file."""

from __future__ import annotations

import logging
from pathlib import Path

from friendgraph.infrastructure.store import GraphStoreError
from friendgraph.services.base import BaseService
from friendgraph.services.result import ServiceResult
from friendgraph.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class StoreService(BaseService):
    """Moves the whole graph between memory and disk."""

    @traced
    def load(self, source: str | Path) -> ServiceResult:
        """Replace the network with the contents of *source*.

        On failure the current network is left exactly as it was.
        """
        op = "load"
        with trace_span("read_and_parse") as span:
            try:
                path = self._network.load(source)
            except GraphStoreError as exc:
                logger.debug("Load failed: %s", exc)
                return ServiceResult.failure(op, "IO_ERROR", str(exc), source=str(source))
            if span:
                span.annotate("people", len(self._graph))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "people": len(self._graph),
                "friendships": self._graph.number_of_friendships(),
            },
        )

    @traced
    def save(self, dest: str | Path | None = None) -> ServiceResult:
        """Write the network to *dest* (default: the working file)."""
        op = "save"
        try:
            path = self._network.save(dest)
        except GraphStoreError as exc:
            logger.debug("Save failed: %s", exc)
            return ServiceResult.failure(op, "IO_ERROR", str(exc), dest=str(dest))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "people": len(self._graph),
                "friendships": self._graph.number_of_friendships(),
            },
        )
