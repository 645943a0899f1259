"""Narrow interfaces consumed by the graph injector.

The injector talks to its collaborators and to the backing graph only
through these protocols, so any store whose handles expose ``add_edge``
and ``set_property`` can be a load target.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Edge(Protocol):
    """Handle to an edge owned by the backing graph."""

    @property
    def id(self) -> str: ...

    @property
    def label(self) -> str: ...

    def set_property(self, key: str, value: Any) -> None: ...


@runtime_checkable
class Vertex(Protocol):
    """Handle to a vertex owned by the backing graph."""

    @property
    def id(self) -> str: ...

    def set_property(self, key: str, value: Any) -> None: ...

    def add_edge(self, label: str, target: Vertex) -> Edge: ...


@runtime_checkable
class GraphTarget(Protocol):
    """Mutable graph the injector writes into."""

    def get_vertex(self, vertex_id: str) -> Vertex | None: ...

    def add_vertex(self, vertex_id: str) -> Vertex: ...


class ClassmapResolver(Protocol):
    """Maps raw vertex names and edge labels to their canonical form.

    Must be total: unknown names resolve to themselves.
    """

    def resolve_vertex(self, raw_name: str) -> str: ...

    def resolve_edge(self, raw_label: str) -> str: ...


class VertexPropertyApplier(Protocol):
    """Writes declared properties onto a vertex, keyed by raw vertex name."""

    def update_vertex_properties(self, raw_name: str, vertex: Vertex) -> None: ...


class EdgePropertyApplier(Protocol):
    """Writes declared properties onto an edge, keyed by raw edge label."""

    def update_edge_properties(self, raw_label: str, edge: Edge) -> None: ...
