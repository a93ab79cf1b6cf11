"""PeopleService: add, remove, and list the people in the network."""

from __future__ import annotations

import logging

from friendgraph.services.base import BaseService
from friendgraph.services.result import ServiceResult
from friendgraph.services.telemetry import traced

logger = logging.getLogger(__name__)


class PeopleService(BaseService):
    """Membership operations on people."""

    @traced
    def add_person(self, *names: str) -> ServiceResult:
        """Add one or more people. Names already present are skipped with a warning."""
        op = "add_person"
        if not names:
            return ServiceResult.failure(op, "INVALID_ARGUMENT", "No names given")
        invalid = self._check_names(op, *names)
        if invalid is not None:
            return invalid

        added: list[str] = []
        warnings: list[str] = []
        for name in names:
            if self._graph.add_person(name):
                added.append(name)
            else:
                warnings.append(f"'{name}' is already in the network")

        if added:
            self._network.mark_dirty()
            logger.debug("Added people: %s", added)

        return ServiceResult(
            ok=True,
            op=op,
            data={"added": added, "count": len(added)},
            warnings=warnings,
        )

    @traced
    def remove_person(self, name: str) -> ServiceResult:
        """Remove *name* and every friendship it is part of."""
        op = "remove_person"
        friends = self._graph.friends_of(name)
        if not self._graph.remove_person(name):
            return ServiceResult.failure(
                op,
                "NOT_FOUND",
                f"Person '{name}' not found in the network",
                name=name,
            )

        self._network.mark_dirty()
        logger.debug("Removed %s and %d friendships", name, len(friends))
        return ServiceResult(
            ok=True,
            op=op,
            data={"name": name, "friendships_removed": len(friends)},
        )

    @traced
    def list_people(self) -> ServiceResult:
        """All people in storage order, with their friend counts."""
        g = self._graph
        items = [{"name": name, "friends": len(g.friends_of(name))} for name in g.people()]
        return ServiceResult(
            ok=True,
            op="list_people",
            data={"count": len(items), "items": items},
        )

    @traced
    def friends_of(self, name: str) -> ServiceResult:
        """Direct friends of *name*."""
        op = "friends_of"
        missing = self._require_people(op, name)
        if missing is not None:
            return missing

        friends = self._graph.friends_of(name)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "count": len(friends),
                "items": [{"name": f} for f in friends],
            },
        )
