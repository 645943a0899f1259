"""GraphSON-style JSON export of a :class:`GraphStore`.

Output shape::

    {"mode": "NORMAL",
     "vertices": [{"_id": "alice", "_type": "vertex", "age": 31}, ...],
     "edges": [{"_id": "0", "_type": "edge", "_outV": "alice",
                "_inV": "bob", "_label": "knows"}, ...]}

Edges are listed in creation order.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from graml.infrastructure.graph.store import GraphStore, StoreEdge


def _edge_order(edge: StoreEdge) -> tuple[int, int, str]:
    if edge.id.isdigit():
        return (0, int(edge.id), "")
    return (1, 0, edge.id)


def graph_to_dict(store: GraphStore) -> dict[str, Any]:
    """Build the GraphSON-style mapping for *store*."""
    vertices = [
        {"_id": v.id, "_type": "vertex", **v.properties} for v in store.vertices()
    ]
    edges = [
        {
            "_id": e.id,
            "_type": "edge",
            "_outV": e.out_vertex.id,
            "_inV": e.in_vertex.id,
            "_label": e.label,
            **e.properties,
        }
        for e in sorted(store.edges(), key=_edge_order)
    ]
    return {"mode": "NORMAL", "vertices": vertices, "edges": edges}


def dumps(store: GraphStore, *, indent: int | None = 2) -> str:
    """Serialize *store* to a GraphSON-style JSON string."""
    return json.dumps(graph_to_dict(store), indent=indent, default=str)
