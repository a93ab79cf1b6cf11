"""Tests for telemetry spans and the @traced decorator."""

from __future__ import annotations

import pytest
import structlog

from friendgraph.infrastructure.network import Network
from friendgraph.services.graph import GraphService
from friendgraph.services.result import ServiceResult
from friendgraph.services.telemetry import (
    Span,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)
from tests.conftest import DIAMOND, build_graph


@traced
def _traced_op() -> ServiceResult:
    with trace_span("inner") as span:
        if span:
            span.annotate("items", 3)
    return ServiceResult(ok=True, op="traced_op")


class TestSpan:
    def test_duration_zero_until_ended(self) -> None:
        span = Span(name="x")
        assert span.duration_ms == 0.0
        span.end()
        assert span.duration_ms >= 0.0

    def test_to_dict_nests_children(self) -> None:
        parent = Span(name="parent")
        child = Span(name="child")
        child.annotate("k", 1)
        parent.children.append(child)
        child.end()
        parent.end()
        d = parent.to_dict()
        assert d["name"] == "parent"
        assert d["children"][0]["name"] == "child"
        assert d["children"][0]["annotations"] == {"k": 1}


class TestTraced:
    def test_disabled_leaves_meta_empty(self) -> None:
        result = _traced_op()
        assert result.meta is None
        assert get_current_span() is None

    def test_enabled_injects_telemetry(self) -> None:
        enable_telemetry()
        result = _traced_op()
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"].endswith("_traced_op")
        assert tree["children"][0]["name"] == "inner"
        assert tree["children"][0]["annotations"] == {"items": 3}

    def test_trace_span_outside_traced_call(self) -> None:
        enable_telemetry()
        with trace_span("orphan") as span:
            assert span is None

    def test_service_methods_are_traced(self, network: Network) -> None:
        build_graph(DIAMOND, graph=network.graph)
        enable_telemetry()
        result = GraphService(network).recommend("A")
        assert result.meta is not None
        child_names = [c["name"] for c in result.meta["telemetry"]["children"]]
        assert child_names == ["rank_candidates"]

    @pytest.mark.parametrize("enabled", [False, True])
    def test_binds_op_during_call(self, enabled: bool) -> None:
        seen: dict[str, object] = {}

        @traced
        def rename_person() -> ServiceResult:
            seen.update(structlog.contextvars.get_contextvars())
            return ServiceResult(ok=True, op="rename_person")

        if enabled:
            enable_telemetry()
        rename_person()
        assert seen["op"] == "rename_person"
        assert "op" not in structlog.contextvars.get_contextvars()
