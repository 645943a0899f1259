"""Shared pytest fixtures and test doubles for graml tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from graml.infrastructure.graph.store import GraphStore


class PrefixClassmap:
    """Classmap double that tags vertices with ``v:`` and labels with ``e:``."""

    def __init__(self) -> None:
        self.vertex_calls: list[str] = []
        self.edge_calls: list[str] = []

    def resolve_vertex(self, raw_name: str) -> str:
        self.vertex_calls.append(raw_name)
        return f"v:{raw_name}"

    def resolve_edge(self, raw_label: str) -> str:
        self.edge_calls.append(raw_label)
        return f"e:{raw_label}"


class IdentityClassmap:
    def resolve_vertex(self, raw_name: str) -> str:
        return raw_name

    def resolve_edge(self, raw_label: str) -> str:
        return raw_label


class RecordingProps:
    """Property applier double recording ``(raw_name, element_id)`` calls."""

    def __init__(self, props: dict[str, dict[str, Any]] | None = None) -> None:
        self.props = props or {}
        self.calls: list[tuple[str, str]] = []

    def update_vertex_properties(self, raw_name: str, vertex: Any) -> None:
        self.calls.append((raw_name, vertex.id))
        for key, value in self.props.get(raw_name, {}).items():
            vertex.set_property(key, value)

    def update_edge_properties(self, raw_label: str, edge: Any) -> None:
        self.calls.append((raw_label, edge.id))
        for key, value in self.props.get(raw_label, {}).items():
            edge.set_property(key, value)


@pytest.fixture
def store() -> GraphStore:
    """Empty NetworkX-backed graph store."""
    return GraphStore()


@pytest.fixture
def prefix_classmap() -> PrefixClassmap:
    return PrefixClassmap()


@pytest.fixture
def identity_classmap() -> IdentityClassmap:
    return IdentityClassmap()


@pytest.fixture
def vertex_props() -> RecordingProps:
    return RecordingProps()


@pytest.fixture
def edge_props() -> RecordingProps:
    return RecordingProps()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no graml config in reach."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GRAML_CONFIG", raising=False)


def write_doc(directory: Path, name: str, content: str) -> Path:
    """Write a graml document and return its path."""
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


def edge_triples(store: GraphStore) -> list[tuple[str, str, str]]:
    """Return ``(out, label, in)`` for every edge, in creation order."""
    ordered = sorted(store.edges(), key=lambda e: int(e.id))
    return [(e.out_vertex.id, e.label, e.in_vertex.id) for e in ordered]
