"""SocialGraph: in-memory undirected friendship graph backed by NetworkX.

People are nodes keyed by name; friendships are unweighted, undirected
edges. The NetworkX adjacency (dict of dicts) gives O(1) membership and
neighbor lookup and keeps insertion order, so every query below is
deterministic for a given sequence of mutations.

Lookups of unknown names never raise: they return False or an empty
list. Invalid mutations (self-friendship, duplicates, unknown endpoints)
are no-ops.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

import networkx as nx

from friendgraph.domain.people import Friendship

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

type _Graph = nx.Graph


class SocialGraph:
    """People and the friendships between them."""

    def __init__(self) -> None:
        self._graph: _Graph = nx.Graph()

    def __contains__(self, name: object) -> bool:
        return name in self._graph

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __iter__(self) -> Iterator[str]:
        return iter(self._graph)

    def __repr__(self) -> str:
        return (
            f"SocialGraph(people={self._graph.number_of_nodes()}, "
            f"friendships={self._graph.number_of_edges()})"
        )

    # ------------------------------------------------------------------
    # Membership & mutation
    # ------------------------------------------------------------------

    def has_person(self, name: str) -> bool:
        return name in self._graph

    def add_person(self, name: str) -> bool:
        """Add *name* if absent. Returns False when the person already exists."""
        if name in self._graph:
            return False
        self._graph.add_node(name)
        return True

    def remove_person(self, name: str) -> bool:
        """Remove *name* and every friendship touching it.

        Returns False if *name* is not in the graph.
        """
        if name not in self._graph:
            return False
        # NetworkX drops incident edges along with the node.
        self._graph.remove_node(name)
        return True

    def add_friend(self, name1: str, name2: str) -> bool:
        """Connect two existing, distinct people.

        Returns True only when a new friendship was created.
        """
        if name1 == name2:
            return False
        if name1 not in self._graph or name2 not in self._graph:
            return False
        if self._graph.has_edge(name1, name2):
            return False
        self._graph.add_edge(name1, name2)
        return True

    def remove_friend(self, name1: str, name2: str) -> bool:
        """Remove the friendship between two people, if there is one."""
        if not self._graph.has_edge(name1, name2):
            return False
        self._graph.remove_edge(name1, name2)
        return True

    def are_connected(self, name1: str, name2: str) -> bool:
        """Return True if *name1* and *name2* are direct friends."""
        return self._graph.has_edge(name1, name2)

    def clear(self) -> None:
        self._graph.clear()

    # ------------------------------------------------------------------
    # Adjacency queries
    # ------------------------------------------------------------------

    def people(self) -> list[str]:
        """All names, in the order they were added."""
        return list(self._graph.nodes)

    def friendships(self) -> list[Friendship]:
        """Every friendship exactly once.

        Ordered by the first endpoint's position in :meth:`people`, then by
        that person's adjacency order.
        """
        return [Friendship(u, v) for u, v in self._graph.edges()]

    def number_of_friendships(self) -> int:
        return self._graph.number_of_edges()

    def friends_of(self, name: str) -> list[str]:
        """Direct friends of *name* in the order the friendships were made."""
        if name not in self._graph:
            return []
        return list(self._graph.adj[name])

    def mutual_friends(self, name1: str, name2: str) -> list[str]:
        """Friends shared by both people, in ``friends_of(name1)`` order."""
        if name1 not in self._graph or name2 not in self._graph:
            return []
        other = self._graph.adj[name2]
        return [n for n in self._graph.adj[name1] if n in other]

    def mutual_friend_count(self, name1: str, name2: str) -> int:
        if name1 not in self._graph or name2 not in self._graph:
            return 0
        return len(self._graph.adj[name1].keys() & self._graph.adj[name2].keys())

    # ------------------------------------------------------------------
    # Recommendation
    # ------------------------------------------------------------------

    def rank_recommendations(self, name: str) -> list[tuple[str, int]]:
        """Score every non-friend of *name* by mutual friend count.

        Candidates with no mutual friends are dropped. The result is sorted
        by count descending; equal counts keep :meth:`people` order since
        ``sorted`` is stable.
        """
        if name not in self._graph:
            return []

        friends = self._graph.adj[name]
        scored: list[tuple[str, int]] = []
        for candidate in self._graph.nodes:
            if candidate == name or candidate in friends:
                continue
            count = self.mutual_friend_count(name, candidate)
            if count > 0:
                scored.append((candidate, count))

        return sorted(scored, key=lambda x: x[1], reverse=True)

    def recommend_friends(self, name: str, k: int) -> list[str]:
        """Return up to *k* suggested friends for *name*, best first."""
        if k <= 0:
            return []
        return [candidate for candidate, _ in self.rank_recommendations(name)[:k]]

    # ------------------------------------------------------------------
    # Shortest paths
    # ------------------------------------------------------------------

    def shortest_path(self, source: str, target: str) -> list[str]:
        """Fewest-hop chain of friends from *source* to *target*, inclusive.

        Empty when either name is unknown or *target* is unreachable.
        """
        return self._bfs(source, target, frozenset())

    def shortest_path_avoiding(
        self,
        source: str,
        target: str,
        blacklist: Iterable[str],
    ) -> list[str]:
        """Like :meth:`shortest_path`, but never passes through *blacklist*.

        A blacklisted endpoint means there is no path. Names in *blacklist*
        that are not in the graph are ignored.
        """
        return self._bfs(source, target, frozenset(blacklist))

    def _bfs(self, source: str, target: str, blocked: frozenset[str]) -> list[str]:
        """Breadth-first search in adjacency order; first discovery is final."""
        g = self._graph
        if source not in g or target not in g:
            return []
        if source in blocked or target in blocked:
            return []

        parents: dict[str, str | None] = {source: None}
        queue: deque[str] = deque([source])

        while queue:
            node = queue.popleft()
            if node == target:
                return self._walk_back(parents, target)
            for neighbor in g.adj[node]:
                if neighbor in parents or neighbor in blocked:
                    continue
                parents[neighbor] = node
                queue.append(neighbor)

        return []

    @staticmethod
    def _walk_back(parents: dict[str, str | None], target: str) -> list[str]:
        path: list[str] = []
        node: str | None = target
        while node is not None:
            path.append(node)
            node = parents[node]
        path.reverse()
        return path
