"""GraphService: recommendations and shortest-path search.

Read-only queries over ``self._network.graph``. Recommendations rank
non-friends by mutual friend count; paths are breadth-first in
adjacency order, optionally avoiding a set of people.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from friendgraph.services.base import BaseService
from friendgraph.services.result import ServiceResult
from friendgraph.services.telemetry import trace_span, traced


class GraphService(BaseService):
    """Handles friend recommendations and path queries."""

    # ------------------------------------------------------------------
    # recommend: friend-of-friend ranking
    # ------------------------------------------------------------------

    @traced
    def recommend(self, name: str, *, top: int = 5) -> ServiceResult:
        """Suggest up to *top* new friends for *name*.

        Candidates are people who are not yet friends with *name* and share
        at least one friend with them, ranked by mutual friend count.
        Ties keep the order in which people joined the network.

        Args:
            name: Person to recommend friends for.
            top: Maximum results to return; 0 returns none.
        """
        op = "recommend"
        if top < 0:
            return ServiceResult.failure(
                op, "INVALID_ARGUMENT", f"--top must be >= 0, got {top}", top=top
            )
        missing = self._require_people(op, name)
        if missing is not None:
            return missing

        with trace_span("rank_candidates") as span:
            ranked = self._graph.rank_recommendations(name)
            if span:
                span.annotate("candidates", len(ranked))

        picked = ranked[:top] if top > 0 else []
        items: list[dict[str, Any]] = [
            {"name": candidate, "mutual_friends": count} for candidate, count in picked
        ]

        return ServiceResult(
            ok=True,
            op=op,
            data={"name": name, "count": len(items), "items": items},
        )

    # ------------------------------------------------------------------
    # path: shortest chain of friends
    # ------------------------------------------------------------------

    @traced
    def path(self, source: str, target: str) -> ServiceResult:
        """Find the shortest chain of friends from *source* to *target*."""
        op = "path"
        missing = self._require_endpoints(op, source, target)
        if missing is not None:
            return missing

        with trace_span("bfs"):
            names = self._graph.shortest_path(source, target)

        if not names:
            return ServiceResult.failure(
                op,
                "NO_PATH",
                f"No path exists between '{source}' and '{target}'",
                source=source,
                target=target,
            )
        return self._path_result(op, source, target, names)

    @traced
    def path_avoiding(
        self,
        source: str,
        target: str,
        avoid: Iterable[str],
    ) -> ServiceResult:
        """Find the shortest chain of friends that never passes through *avoid*.

        Names in *avoid* that are not in the network are ignored, with a
        warning. Avoiding either endpoint means there is no path.
        """
        op = "path_avoiding"
        missing = self._require_endpoints(op, source, target)
        if missing is not None:
            return missing

        blacklist = list(dict.fromkeys(avoid))
        unknown = [name for name in blacklist if name not in self._graph]
        warnings = [f"'{name}' is not in the network; ignored" for name in unknown]

        with trace_span("bfs") as span:
            names = self._graph.shortest_path_avoiding(source, target, blacklist)
            if span:
                span.annotate("blacklist", len(blacklist))

        if not names:
            result = ServiceResult.failure(
                op,
                "NO_PATH",
                "No valid path exists that avoids the specified people",
                source=source,
                target=target,
                avoid=blacklist,
            )
        else:
            result = self._path_result(op, source, target, names, avoid=blacklist)
        return result.model_copy(update={"warnings": warnings})

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _require_endpoints(self, op: str, source: str, target: str) -> ServiceResult | None:
        for name, label in [(source, "source"), (target, "target")]:
            if name not in self._graph:
                return ServiceResult.failure(
                    op,
                    "NOT_FOUND",
                    f"Person '{name}' ({label}) not found in the network",
                    name=name,
                )
        return None

    @staticmethod
    def _path_result(
        op: str,
        source: str,
        target: str,
        names: list[str],
        **extra: Any,
    ) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": source,
                "target": target,
                "length": len(names) - 1,
                "steps": names,
                **extra,
            },
        )
