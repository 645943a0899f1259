"""GraphInjector — materialize a graph section into a target graph.

Walks ``{source: {label: target | [targets]}}`` and issues vertex
find-or-create and edge creation calls against a :class:`GraphTarget`.
Names are resolved through the classmap for graph identity; property
appliers always see the raw name the document author wrote.

Vertices are cached by resolved id for the lifetime of one injector. The
cache only saves graph lookups: a miss falls back to ``get_vertex`` and a
vertex is created only when the graph does not have it either. Edges are
never deduplicated.

Not safe for concurrent use against the same target; the
lookup-then-create sequence is not atomic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from graml.domain.cache import DEFAULT_CAPACITY, LRUCache
from graml.domain.errors import GramlConfigError, GramlDataError

if TYPE_CHECKING:
    from graml.domain.protocols import (
        ClassmapResolver,
        EdgePropertyApplier,
        GraphTarget,
        Vertex,
        VertexPropertyApplier,
    )

logger = logging.getLogger(__name__)


@dataclass
class InjectionStats:
    """Counts accumulated over one or more ``inject`` calls."""

    vertices_created: int = 0
    vertices_reused: int = 0
    edges_created: int = 0
    cache_hits: int = 0

    def merge(self, other: InjectionStats) -> None:
        self.vertices_created += other.vertices_created
        self.vertices_reused += other.vertices_reused
        self.edges_created += other.edges_created
        self.cache_hits += other.cache_hits

    def to_dict(self) -> dict[str, int]:
        return {
            "vertices_created": self.vertices_created,
            "vertices_reused": self.vertices_reused,
            "edges_created": self.edges_created,
            "cache_hits": self.cache_hits,
        }


class GraphInjector:
    """Injects one graph section into a target graph.

    Args:
        section: Parsed ``graph`` section. ``None`` is a configuration error.
        classmap: Resolves raw vertex names and edge labels.
        vertex_props: Applies declared vertex properties by raw name.
        edge_props: Applies declared edge properties by raw label.
        cache_size: Capacity of the resolved-id vertex cache.
    """

    def __init__(
        self,
        section: Mapping[str, Any] | None,
        classmap: ClassmapResolver,
        vertex_props: VertexPropertyApplier,
        edge_props: EdgePropertyApplier,
        *,
        cache_size: int = DEFAULT_CAPACITY,
    ) -> None:
        if section is None:
            raise GramlConfigError("Missing required graph section.")
        if not isinstance(section, Mapping):
            msg = f"Graph section must be a mapping, got {type(section).__name__}."
            raise GramlConfigError(msg)

        self._section = section
        self._classmap = classmap
        self._vertex_props = vertex_props
        self._edge_props = edge_props
        self._vertex_cache: LRUCache[str, Vertex] = LRUCache(cache_size)
        self._stats = InjectionStats()

    def inject(self, target: GraphTarget) -> InjectionStats:
        """Apply every source vertex and its edges to *target*.

        Returns the counts for this call. Raises :class:`GramlDataError` on
        the first invalid edge target; mutations made before it stay applied.
        """
        self._stats = InjectionStats()
        logger.debug("inject.start: %d source vertices", len(self._section))
        for src_name, edges in self._section.items():
            self._inject_source(target, str(src_name), edges)
        logger.debug("inject.complete: %s", self._stats.to_dict())
        return self._stats

    def _inject_source(self, g: GraphTarget, src_name: str, edges: Any) -> None:
        if edges is None:
            # A bare "source:" entry declares a vertex with no edges.
            self._find_or_create_vertex(g, src_name)
            return
        if not isinstance(edges, Mapping):
            msg = f'Source vertex "{src_name}" must map edge labels to targets.'
            raise GramlDataError(msg)

        src_vertex = self._find_or_create_vertex(g, src_name)
        for edge_name, target in edges.items():
            self._inject_edges(g, src_name, src_vertex, str(edge_name), target)

    def _inject_edges(
        self,
        g: GraphTarget,
        src_name: str,
        src_vertex: Vertex,
        edge_name: str,
        target: Any,
    ) -> None:
        match target:
            case Mapping():
                msg = (
                    f'Source vertex "{src_name}" may not use an arbitrary map '
                    "as an edge target."
                )
                raise GramlDataError(msg)
            case str():
                self._inject_edge(g, src_vertex, edge_name, target)
            case Sequence():
                for target_name in target:
                    if isinstance(target_name, (Mapping, list, tuple)) or target_name is None:
                        msg = (
                            f'Source vertex "{src_name}" edge "{edge_name}" '
                            "may only list vertex names."
                        )
                        raise GramlDataError(msg)
                    self._inject_edge(g, src_vertex, edge_name, str(target_name))
            case None:
                msg = f'Source vertex "{src_name}" edge "{edge_name}" has no target.'
                raise GramlDataError(msg)
            case _:
                self._inject_edge(g, src_vertex, edge_name, str(target))

    def _inject_edge(
        self, g: GraphTarget, src_vertex: Vertex, edge_name: str, target_name: str
    ) -> None:
        target_vertex = self._find_or_create_vertex(g, target_name)
        edge = src_vertex.add_edge(self._classmap.resolve_edge(edge_name), target_vertex)
        self._edge_props.update_edge_properties(edge_name, edge)
        self._stats.edges_created += 1

    def _find_or_create_vertex(self, g: GraphTarget, vertex_name: str) -> Vertex:
        resolved = self._classmap.resolve_vertex(vertex_name)
        vertex = self._vertex_cache.get(resolved)
        if vertex is not None:
            self._stats.cache_hits += 1
        else:
            vertex = g.get_vertex(resolved)
            if vertex is None:
                vertex = g.add_vertex(resolved)
                self._stats.vertices_created += 1
                logger.debug("vertex.created: %s (from %r)", resolved, vertex_name)
            else:
                self._stats.vertices_reused += 1

        self._vertex_props.update_vertex_properties(vertex_name, vertex)
        self._vertex_cache.put(resolved, vertex)
        return vertex
