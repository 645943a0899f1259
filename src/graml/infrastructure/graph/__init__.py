"""NetworkX-backed graph target for graml loads."""

from graml.infrastructure.graph.store import GraphStore, StoreEdge, StoreVertex

__all__ = ["GraphStore", "StoreEdge", "StoreVertex"]
