"""GraphStore — mutable in-memory graph target backed by NetworkX.

Vertices are keyed by their resolved id. Edges live in a MultiDiGraph so
parallel edges between the same pair (even with the same label) are kept
as distinct edges, each with a sequential string id.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import networkx as nx

from graml.domain.errors import GramlDataError

type _Graph = nx.MultiDiGraph

# Attribute key holding the edge label inside the NetworkX edge dict.
LABEL_KEY = "_label"

# Keys owned by the GraphSON shape; properties may not shadow them.
RESERVED_KEYS = frozenset({"_id", "_type", "_outV", "_inV", LABEL_KEY})


def _check_key(key: str) -> None:
    if key in RESERVED_KEYS:
        msg = f'Property key "{key}" is reserved.'
        raise GramlDataError(msg)


class StoreVertex:
    """View of one vertex in a :class:`GraphStore`."""

    __slots__ = ("_id", "_store")

    def __init__(self, store: GraphStore, vertex_id: str) -> None:
        self._store = store
        self._id = vertex_id

    @property
    def id(self) -> str:
        return self._id

    @property
    def properties(self) -> dict[str, Any]:
        return dict(self._store.graph.nodes[self._id])

    def get_property(self, key: str) -> Any:
        return self._store.graph.nodes[self._id].get(key)

    def set_property(self, key: str, value: Any) -> None:
        _check_key(key)
        self._store.graph.nodes[self._id][key] = value

    def add_edge(self, label: str, target: StoreVertex) -> StoreEdge:
        return self._store.add_edge(self, target, label)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StoreVertex):
            return NotImplemented
        return self._store is other._store and self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"StoreVertex({self._id!r})"


class StoreEdge:
    """View of one edge in a :class:`GraphStore`."""

    __slots__ = ("_id", "_in_id", "_out_id", "_store")

    def __init__(self, store: GraphStore, out_id: str, in_id: str, edge_id: str) -> None:
        self._store = store
        self._out_id = out_id
        self._in_id = in_id
        self._id = edge_id

    @property
    def _attrs(self) -> dict[str, Any]:
        return self._store.graph.edges[self._out_id, self._in_id, self._id]

    @property
    def id(self) -> str:
        return self._id

    @property
    def label(self) -> str:
        return self._attrs[LABEL_KEY]

    @property
    def out_vertex(self) -> StoreVertex:
        return StoreVertex(self._store, self._out_id)

    @property
    def in_vertex(self) -> StoreVertex:
        return StoreVertex(self._store, self._in_id)

    @property
    def properties(self) -> dict[str, Any]:
        return {k: v for k, v in self._attrs.items() if k != LABEL_KEY}

    def get_property(self, key: str) -> Any:
        return self.properties.get(key)

    def set_property(self, key: str, value: Any) -> None:
        _check_key(key)
        self._attrs[key] = value

    def __repr__(self) -> str:
        return f"StoreEdge({self._id!r}, {self._out_id!r} -[{self.label}]-> {self._in_id!r})"


class GraphStore:
    """In-memory graph target for :class:`~graml.reader.GramlReader`."""

    def __init__(self, graph: _Graph | None = None) -> None:
        self.graph: _Graph = graph if graph is not None else nx.MultiDiGraph()
        self._next_edge_id = self.graph.number_of_edges()

    @property
    def vertex_count(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def get_vertex(self, vertex_id: str) -> StoreVertex | None:
        if vertex_id not in self.graph:
            return None
        return StoreVertex(self, vertex_id)

    def add_vertex(self, vertex_id: str) -> StoreVertex:
        if vertex_id in self.graph:
            msg = f'Vertex "{vertex_id}" already exists.'
            raise ValueError(msg)
        self.graph.add_node(vertex_id)
        return StoreVertex(self, vertex_id)

    def add_edge(self, source: StoreVertex, target: StoreVertex, label: str) -> StoreEdge:
        edge_id = str(self._next_edge_id)
        self._next_edge_id += 1
        self.graph.add_edge(source.id, target.id, key=edge_id, **{LABEL_KEY: label})
        return StoreEdge(self, source.id, target.id, edge_id)

    def vertices(self) -> Iterator[StoreVertex]:
        for vertex_id in self.graph.nodes:
            yield StoreVertex(self, vertex_id)

    def edges(self) -> Iterator[StoreEdge]:
        for out_id, in_id, edge_id in self.graph.edges(keys=True):
            yield StoreEdge(self, out_id, in_id, edge_id)
