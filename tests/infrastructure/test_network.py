"""Tests for Network: working file, atomic load, save targets, commit."""

from __future__ import annotations

from pathlib import Path

import pytest

from friendgraph.config.settings import FriendGraphSettings
from friendgraph.infrastructure.network import Network
from friendgraph.infrastructure.store import GraphStoreError
from tests.conftest import build_graph, write_network


class TestOpen:
    def test_missing_working_file_starts_empty(self, network: Network) -> None:
        assert len(network.graph) == 0
        assert not network.dirty

    def test_reads_working_file(self, settings: FriendGraphSettings) -> None:
        write_network(settings.working_file, "A: B\n")
        network = Network(settings).open()
        assert network.graph.people() == ["A", "B"]
        assert not network.dirty

    def test_working_file_default(self, project_root: Path, network: Network) -> None:
        assert network.working_file == project_root / "EdgeList.txt"

    def test_working_file_override(self, project_root: Path) -> None:
        settings = FriendGraphSettings.from_cli(
            project_root=project_root, network_file="data/net.txt"
        )
        assert Network(settings).working_file == project_root / "data" / "net.txt"


class TestLoad:
    def test_replaces_graph(self, network: Network, project_root: Path) -> None:
        build_graph([("Old", "Timer")], graph=network.graph)
        write_network(project_root / "other.txt", "A: B C\n")
        path = network.load("other.txt")
        assert path == project_root / "other.txt"
        assert network.graph.people() == ["A", "B", "C"]
        assert network.dirty
        assert not network.unsaved

    def test_failed_load_leaves_graph_untouched(self, network: Network) -> None:
        build_graph([("A", "B")], graph=network.graph)
        before = network.graph
        with pytest.raises(GraphStoreError, match="not found"):
            network.load("missing.txt")
        assert network.graph is before
        assert network.graph.people() == ["A", "B"]
        assert network.graph.are_connected("A", "B")
        assert not network.dirty

    def test_unreadable_file_leaves_graph_untouched(
        self, network: Network, project_root: Path
    ) -> None:
        build_graph([("A", "B")], graph=network.graph)
        (project_root / "bad.txt").write_bytes(b"\xff\xfe: \xff\n")
        with pytest.raises(GraphStoreError):
            network.load("bad.txt")
        assert network.graph.people() == ["A", "B"]

    def test_absolute_source(
        self, network: Network, tmp_path_factory: pytest.TempPathFactory
    ) -> None:
        elsewhere = tmp_path_factory.mktemp("elsewhere") / "net.txt"
        write_network(elsewhere, "X: Y\n")
        assert network.load(elsewhere) == elsewhere
        assert network.graph.people() == ["X", "Y"]

    def test_search_dirs_fallback(self, project_root: Path) -> None:
        settings = FriendGraphSettings.from_cli(
            project_root=project_root,
            network={"search_dirs": ["backups", "x64/Debug"]},
        )
        target = project_root / "x64" / "Debug" / "EdgeList.txt"
        target.parent.mkdir(parents=True)
        write_network(target, "A: B\n")
        network = Network(settings).open()
        assert network.load("EdgeList.txt") == target
        assert network.graph.are_connected("A", "B")

    def test_given_path_wins_over_search_dirs(self, project_root: Path) -> None:
        settings = FriendGraphSettings.from_cli(
            project_root=project_root, network={"search_dirs": ["backups"]}
        )
        (project_root / "backups").mkdir()
        write_network(project_root / "backups" / "net.txt", "Backup:\n")
        write_network(project_root / "net.txt", "Main:\n")
        network = Network(settings)
        network.load("net.txt")
        assert network.graph.people() == ["Main"]

    def test_not_found_lists_candidates(self, project_root: Path) -> None:
        settings = FriendGraphSettings.from_cli(
            project_root=project_root, network={"search_dirs": ["backups"]}
        )
        with pytest.raises(GraphStoreError) as exc_info:
            Network(settings).load("net.txt")
        assert "backups" in str(exc_info.value)


class TestSave:
    def test_save_default_writes_working_file(self, network: Network) -> None:
        build_graph([("A", "B")], graph=network.graph)
        network.mark_dirty()
        path = network.save()
        assert path == network.working_file
        assert path.read_text(encoding="utf-8") == "A: B\nB: A\n"
        assert not network.dirty

    def test_save_appends_suffix(self, network: Network, project_root: Path) -> None:
        assert network.target_path("export") == project_root / "export.txt"
        assert network.target_path("export.txt") == project_root / "export.txt"

    def test_save_elsewhere_keeps_dirty(self, network: Network, project_root: Path) -> None:
        build_graph([("A", "B")], graph=network.graph)
        network.mark_dirty()
        path = network.save("copy")
        assert path == project_root / "copy.txt"
        assert path.is_file()
        assert network.dirty
        assert not network.unsaved

    def test_save_to_working_file_by_name_clears_dirty(self, network: Network) -> None:
        network.graph.add_person("A")
        network.mark_dirty()
        path = network.save("EdgeList")
        assert path == network.working_file
        assert not network.dirty
        assert not network.unsaved

    def test_failed_save_keeps_unsaved(self, network: Network) -> None:
        network.mark_dirty()
        with pytest.raises(GraphStoreError):
            network.save("no/such/dir/net")
        assert network.unsaved

    def test_save_failure_raises(self, network: Network) -> None:
        with pytest.raises(GraphStoreError):
            network.save("no/such/dir/net")


class TestCommit:
    def test_clean_commit_is_noop(self, network: Network) -> None:
        assert network.commit() is False
        assert not network.working_file.exists()

    def test_dirty_commit_writes(self, network: Network) -> None:
        network.graph.add_person("A")
        network.mark_dirty()
        assert network.commit() is True
        assert network.working_file.read_text(encoding="utf-8") == "A: \n"
        assert not network.dirty
