"""FriendshipService: create, remove, check, and list friendships."""

from __future__ import annotations

import logging

from friendgraph.services.base import BaseService
from friendgraph.services.result import ServiceResult
from friendgraph.services.telemetry import traced

logger = logging.getLogger(__name__)


class FriendshipService(BaseService):
    """Operations on the edges between people."""

    @traced
    def add_friend(self, name1: str, name2: str) -> ServiceResult:
        """Make *name1* and *name2* friends.

        Both people must exist. Self-friendship and an existing friendship
        are no-ops reported as warnings.
        """
        op = "add_friend"
        missing = self._require_people(op, name1, name2)
        if missing is not None:
            return missing

        warnings: list[str] = []
        created = self._graph.add_friend(name1, name2)
        if created:
            self._network.mark_dirty()
        elif name1 == name2:
            warnings.append(f"'{name1}' cannot be friends with themselves")
        else:
            warnings.append(f"'{name1}' and '{name2}' are already friends")

        return ServiceResult(
            ok=True,
            op=op,
            data={"first": name1, "second": name2, "created": created},
            warnings=warnings,
        )

    @traced
    def remove_friend(self, name1: str, name2: str) -> ServiceResult:
        """End the friendship between *name1* and *name2*, if any."""
        removed = self._graph.remove_friend(name1, name2)
        warnings: list[str] = []
        if removed:
            self._network.mark_dirty()
        else:
            warnings.append(f"'{name1}' and '{name2}' were not friends")

        return ServiceResult(
            ok=True,
            op="remove_friend",
            data={"first": name1, "second": name2, "removed": removed},
            warnings=warnings,
        )

    @traced
    def check_friends(self, name1: str, name2: str) -> ServiceResult:
        """Report whether two people are direct friends."""
        return ServiceResult(
            ok=True,
            op="check_friends",
            data={
                "first": name1,
                "second": name2,
                "connected": self._graph.are_connected(name1, name2),
            },
        )

    @traced
    def list_friendships(self) -> ServiceResult:
        """Every person with their friends, in storage and adjacency order."""
        g = self._graph
        items = [{"name": name, "friends": g.friends_of(name)} for name in g.people()]
        return ServiceResult(
            ok=True,
            op="list_friendships",
            data={
                "count": g.number_of_friendships(),
                "items": items,
                "pairs": [list(f.as_tuple()) for f in g.friendships()],
            },
        )

    @traced
    def mutual_friends(self, name1: str, name2: str) -> ServiceResult:
        """Friends that *name1* and *name2* have in common."""
        op = "mutual_friends"
        missing = self._require_people(op, name1, name2)
        if missing is not None:
            return missing

        shared = self._graph.mutual_friends(name1, name2)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "first": name1,
                "second": name2,
                "count": len(shared),
                "items": [{"name": n} for n in shared],
            },
        )
