"""BaseService: shared foundation for the friendgraph services.

Every service receives the :class:`Network` at construction time and
reads ``self._network.graph`` on each call, so a graph swapped in by a
load is picked up immediately.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from friendgraph.domain.people import invalid_names
from friendgraph.services.result import ServiceResult

if TYPE_CHECKING:
    from friendgraph.infrastructure.graph.engine import SocialGraph
    from friendgraph.infrastructure.network import Network

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class PeopleService(BaseService):
            def add_person(self, name: str) -> ServiceResult:
                g = self._graph
                ...
    """

    def __init__(self, network: Network) -> None:
        self._network = network

    @property
    def _graph(self) -> SocialGraph:
        return self._network.graph

    @staticmethod
    def _check_names(op: str, *names: str) -> ServiceResult | None:
        """Return an INVALID_NAME failure if any name cannot be stored, else None."""
        bad = invalid_names(list(names))
        if not bad:
            return None
        return ServiceResult.failure(
            op,
            "INVALID_NAME",
            f"Invalid name {bad[0]!r}: names must be non-empty with no whitespace or ':'",
            names=bad,
        )

    def _require_people(self, op: str, *names: str) -> ServiceResult | None:
        """Return a NOT_FOUND failure for the first unknown name, else None."""
        for name in names:
            if name not in self._graph:
                return ServiceResult.failure(
                    op,
                    "NOT_FOUND",
                    f"Person '{name}' not found in the network",
                    name=name,
                )
        return None
