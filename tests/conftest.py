"""Shared pytest fixtures and test helpers for friendgraph tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from friendgraph.config.settings import FriendGraphSettings
from friendgraph.infrastructure.graph.engine import SocialGraph
from friendgraph.infrastructure.network import Network
from friendgraph.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _telemetry_off() -> Generator[None]:
    """``-v`` in a CLI test turns telemetry on for the whole thread; reset it."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory with no config file or env overrides."""
    monkeypatch.delenv("FRIENDGRAPH_CONFIG", raising=False)
    for var in ("FRIENDGRAPH_NETWORK_FILE", "FRIENDGRAPH_PROJECT_ROOT"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> FriendGraphSettings:
    return FriendGraphSettings.from_cli(project_root=project_root)


@pytest.fixture
def network(settings: FriendGraphSettings) -> Network:
    """An empty, opened network whose working file lives in the temp project."""
    return Network(settings).open()


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI reads and writes there.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------

# A-B, B-C, A-D, D-C: two equal-length routes from A to C.
DIAMOND = [("A", "B"), ("B", "C"), ("A", "D"), ("D", "C")]


def build_graph(
    edges: list[tuple[str, str]],
    *,
    people: list[str] | None = None,
    graph: SocialGraph | None = None,
) -> SocialGraph:
    """Add *people* (in order), then every edge endpoint and edge, in order."""
    g = graph if graph is not None else SocialGraph()
    for name in people or []:
        g.add_person(name)
    for a, b in edges:
        g.add_person(a)
        g.add_person(b)
        g.add_friend(a, b)
    return g


def write_network(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path
