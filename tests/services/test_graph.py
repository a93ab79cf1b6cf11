"""Tests for GraphService: recommendations and path queries."""

from __future__ import annotations

import pytest

from friendgraph.infrastructure.graph.engine import SocialGraph
from friendgraph.infrastructure.network import Network
from friendgraph.services.graph import GraphService
from tests.conftest import DIAMOND, build_graph


class TestRecommend:
    def test_diamond(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).recommend("A", top=1)
        assert result.ok
        assert result.data == {
            "name": "A",
            "count": 1,
            "items": [{"name": "C", "mutual_friends": 2}],
        }

    def test_ranked_with_scores(self, network: Network) -> None:
        build_graph(
            [("A", "B"), ("A", "X"), ("B", "C"), ("B", "D"), ("X", "D")],
            graph=network.graph,
        )
        result = GraphService(network).recommend("A")
        assert result.data["items"] == [
            {"name": "D", "mutual_friends": 2},
            {"name": "C", "mutual_friends": 1},
        ]

    def test_top_zero(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).recommend("A", top=0)
        assert result.ok
        assert result.data["count"] == 0

    def test_negative_top(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).recommend("A", top=-2)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"

    def test_no_candidates(self, network: Network) -> None:
        build_graph([("A", "B")], graph=network.graph)
        result = GraphService(network).recommend("A")
        assert result.ok
        assert result.data["items"] == []

    def test_ranks_once(self, network: Network, monkeypatch: pytest.MonkeyPatch) -> None:
        build_graph(DIAMOND, graph=network.graph)
        calls: list[str] = []
        original = SocialGraph.rank_recommendations

        def counting(self: SocialGraph, name: str) -> list[tuple[str, int]]:
            calls.append(name)
            return original(self, name)

        monkeypatch.setattr(SocialGraph, "rank_recommendations", counting)
        result = GraphService(network).recommend("A", top=3)
        assert result.data["items"] == [{"name": "C", "mutual_friends": 2}]
        assert calls == ["A"]

    def test_unknown(self, network: Network) -> None:
        result = GraphService(network).recommend("Ghost")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"


class TestPath:
    def test_path(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).path("A", "C")
        assert result.ok
        assert result.data == {
            "source": "A",
            "target": "C",
            "length": 2,
            "steps": ["A", "B", "C"],
        }

    def test_same_person(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).path("A", "A")
        assert result.data["steps"] == ["A"]
        assert result.data["length"] == 0

    def test_unknown_source(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).path("Ghost", "C")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert "(source)" in result.error.message

    def test_unknown_target(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).path("A", "Ghost")
        assert result.error is not None
        assert "(target)" in result.error.message

    def test_no_path(self, network: Network) -> None:
        build_graph([("A", "B"), ("C", "D")], graph=network.graph)
        result = GraphService(network).path("A", "D")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_PATH"


class TestPathAvoiding:
    def test_avoid(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).path_avoiding("A", "C", ["B"])
        assert result.ok
        assert result.data["steps"] == ["A", "D", "C"]
        assert result.data["avoid"] == ["B"]
        assert result.warnings == []

    def test_unknown_avoid_name_warns(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).path_avoiding("A", "C", ["Ghost", "B"])
        assert result.ok
        assert result.data["steps"] == ["A", "D", "C"]
        assert result.warnings == ["'Ghost' is not in the network; ignored"]

    def test_duplicates_collapsed(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).path_avoiding("A", "C", ["B", "B"])
        assert result.data["avoid"] == ["B"]

    def test_blocked(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).path_avoiding("A", "C", ["B", "D"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_PATH"
        assert result.error.detail["avoid"] == ["B", "D"]

    def test_avoiding_endpoint(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        result = GraphService(network).path_avoiding("A", "C", ["C"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_PATH"
