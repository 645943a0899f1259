"""Tests for GraphInjector — vertex reuse, fan-out, duplicates, errors."""

from __future__ import annotations

from typing import Any

import pytest

from graml.domain.errors import GramlConfigError, GramlDataError
from graml.domain.injector import GraphInjector, InjectionStats
from graml.infrastructure.graph.store import GraphStore
from tests.conftest import IdentityClassmap, PrefixClassmap, RecordingProps, edge_triples


def _injector(
    section: Any,
    classmap: Any = None,
    vertex_props: Any = None,
    edge_props: Any = None,
    **kwargs: Any,
) -> GraphInjector:
    return GraphInjector(
        section,
        classmap or PrefixClassmap(),
        vertex_props or RecordingProps(),
        edge_props or RecordingProps(),
        **kwargs,
    )


class CountingStore(GraphStore):
    """GraphStore that counts backing-graph lookups."""

    def __init__(self) -> None:
        super().__init__()
        self.lookups: list[str] = []

    def get_vertex(self, vertex_id: str):  # type: ignore[no-untyped-def]
        self.lookups.append(vertex_id)
        return super().get_vertex(vertex_id)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_missing_section_raises_config_error(self, store: GraphStore) -> None:
        with pytest.raises(GramlConfigError, match="Missing required graph section"):
            _injector(None)
        assert store.vertex_count == 0

    def test_non_mapping_section_raises_config_error(self) -> None:
        with pytest.raises(GramlConfigError):
            _injector(["source"])

    def test_empty_section_injects_nothing(self, store: GraphStore) -> None:
        stats = _injector({}).inject(store)
        assert stats == InjectionStats()
        assert store.vertex_count == 0


# ---------------------------------------------------------------------------
# Tuples and polytargets
# ---------------------------------------------------------------------------


class TestCreatesGraph:
    def test_creates_graph_tuples(self, store: GraphStore) -> None:
        section = {"source": {"edge": "target1", "edge2": "target2"}}
        _injector(section).inject(store)

        assert set(store.graph.nodes) == {"v:source", "v:target1", "v:target2"}
        assert edge_triples(store) == [
            ("v:source", "e:edge", "v:target1"),
            ("v:source", "e:edge2", "v:target2"),
        ]
        assert [e.id for e in store.edges()] == ["0", "1"]

    def test_identity_resolution_example(self, store: GraphStore) -> None:
        section = {"source": {"edge": "target1", "edge2": "target2"}}
        _injector(section, classmap=IdentityClassmap()).inject(store)

        assert store.vertex_count == 3
        assert store.edge_count == 2
        assert edge_triples(store) == [
            ("source", "edge", "target1"),
            ("source", "edge2", "target2"),
        ]

    @pytest.mark.parametrize("n", [1, 3, 7])
    def test_one_source_n_targets(self, store: GraphStore, n: int) -> None:
        edges = {f"edge{i}": f"target{i}" for i in range(n)}
        _injector({"source": edges}).inject(store)
        assert store.vertex_count == 1 + n
        assert store.edge_count == n

    def test_polytargets(self, store: GraphStore) -> None:
        section = {"source": {"edge": ["target1", "target2"]}}
        _injector(section).inject(store)

        assert edge_triples(store) == [
            ("v:source", "e:edge", "v:target1"),
            ("v:source", "e:edge", "v:target2"),
        ]

    def test_duplicate_edges_are_kept(self, store: GraphStore) -> None:
        section = {"source": {"edge": ["target1", "target1"]}}
        stats = _injector(section).inject(store)

        assert store.vertex_count == 2
        assert edge_triples(store) == [
            ("v:source", "e:edge", "v:target1"),
            ("v:source", "e:edge", "v:target1"),
        ]
        assert stats.edges_created == 2

    def test_self_loop_accepted(self, store: GraphStore) -> None:
        _injector({"a": {"loops": "a"}}).inject(store)
        assert store.vertex_count == 1
        assert edge_triples(store) == [("v:a", "e:loops", "v:a")]

    def test_non_string_scalars_are_stringified(self, store: GraphStore) -> None:
        _injector({"answer": {"is": 42, "also": [True, 7]}}).inject(store)
        assert edge_triples(store) == [
            ("v:answer", "e:is", "v:42"),
            ("v:answer", "e:also", "v:True"),
            ("v:answer", "e:also", "v:7"),
        ]

    def test_bare_source_declares_vertex(self, store: GraphStore) -> None:
        _injector({"lonely": None}).inject(store)
        assert list(store.graph.nodes) == ["v:lonely"]
        assert store.edge_count == 0


# ---------------------------------------------------------------------------
# Vertex reuse
# ---------------------------------------------------------------------------


class TestVertexReuse:
    def test_resolves_existing_vertices_from_cache(self) -> None:
        store = CountingStore()
        section = {
            "source": {"edge": "target1", "edge2": "source2"},
            "source2": {"edge": "target1"},
        }
        stats = _injector(section).inject(store)

        assert store.vertex_count == 3
        assert edge_triples(store) == [
            ("v:source", "e:edge", "v:target1"),
            ("v:source", "e:edge2", "v:source2"),
            ("v:source2", "e:edge", "v:target1"),
        ]
        # source2 and target1 come back from the cache the second time.
        assert store.lookups == ["v:source", "v:target1", "v:source2"]
        assert stats.cache_hits == 2
        assert stats.vertices_created == 3

    def test_resolves_existing_vertices_from_graph(self, store: GraphStore) -> None:
        section1 = {"source": {"edge": "target1", "edge2": "source2"}}
        section2 = {"source2": {"edge": "target1"}}

        _injector(section1).inject(store)
        stats = _injector(section2).inject(store)

        assert store.vertex_count == 3
        assert edge_triples(store) == [
            ("v:source", "e:edge", "v:target1"),
            ("v:source", "e:edge2", "v:source2"),
            ("v:source2", "e:edge", "v:target1"),
        ]
        assert stats.vertices_created == 0
        assert stats.vertices_reused == 2

    def test_vertex_count_equals_distinct_resolved_ids(self, store: GraphStore) -> None:
        sections = [
            {"a": {"x": ["b", "c"]}, "b": {"y": "c"}},
            {"c": {"z": ["a", "d"]}, "d": {"x": "a"}},
        ]
        for section in sections:
            _injector(section).inject(store)
        assert store.vertex_count == len({"a", "b", "c", "d"})

    def test_aliases_resolving_to_same_id_share_vertex(self, store: GraphStore) -> None:
        class AliasClassmap(IdentityClassmap):
            def resolve_vertex(self, raw_name: str) -> str:
                return {"bob": "person:bob", "robert": "person:bob"}.get(raw_name, raw_name)

        _injector({"bob": {"is": "robert"}}, classmap=AliasClassmap()).inject(store)
        assert list(store.graph.nodes) == ["person:bob"]
        assert edge_triples(store) == [("person:bob", "is", "person:bob")]

    def test_eviction_falls_back_to_graph_lookup(self) -> None:
        store = CountingStore()
        section = {"a": {"x": "b"}, "c": {"x": "d"}, "e": {"x": "a"}}
        stats = _injector(section, cache_size=1).inject(store)

        assert store.vertex_count == 5
        assert stats.cache_hits == 0
        assert stats.vertices_reused == 1
        assert store.lookups.count("v:a") == 2

    def test_cache_survives_between_inject_calls(self, store: GraphStore) -> None:
        injector = _injector({"a": {"x": "b"}})
        injector.inject(store)
        stats = injector.inject(store)

        assert store.vertex_count == 2
        assert store.edge_count == 2
        assert stats.cache_hits == 2
        assert stats.vertices_created == 0


# ---------------------------------------------------------------------------
# Name handling
# ---------------------------------------------------------------------------


class TestRawNames:
    def test_property_appliers_receive_raw_names(self, store: GraphStore) -> None:
        vertex_props = RecordingProps()
        edge_props = RecordingProps()
        section = {"source": {"edge": ["t1", "t2"]}}
        _injector(section, vertex_props=vertex_props, edge_props=edge_props).inject(store)

        assert vertex_props.calls == [
            ("source", "v:source"),
            ("t1", "v:t1"),
            ("t2", "v:t2"),
        ]
        assert edge_props.calls == [("edge", "0"), ("edge", "1")]

    def test_vertex_properties_applied_on_every_touch(self, store: GraphStore) -> None:
        vertex_props = RecordingProps()
        _injector({"a": {"x": "b"}, "b": {"y": "a"}}, vertex_props=vertex_props).inject(store)
        assert [name for name, _ in vertex_props.calls] == ["a", "b", "b", "a"]

    def test_properties_written_to_store(self, store: GraphStore) -> None:
        vertex_props = RecordingProps({"alice": {"age": 31}})
        edge_props = RecordingProps({"knows": {"weight": 0.5}})
        _injector(
            {"alice": {"knows": "bob"}},
            classmap=IdentityClassmap(),
            vertex_props=vertex_props,
            edge_props=edge_props,
        ).inject(store)

        assert store.graph.nodes["alice"] == {"age": 31}
        assert store.graph.nodes["bob"] == {}
        (edge,) = store.edges()
        assert edge.properties == {"weight": 0.5}

    def test_classmap_resolves_labels_and_vertices(self, store: GraphStore) -> None:
        classmap = PrefixClassmap()
        _injector({"s": {"l": "t"}}, classmap=classmap).inject(store)
        assert classmap.vertex_calls == ["s", "t"]
        assert classmap.edge_calls == ["l"]


# ---------------------------------------------------------------------------
# Data errors
# ---------------------------------------------------------------------------


class TestDataErrors:
    def test_map_target_raises_naming_source(self, store: GraphStore) -> None:
        section = {"source": {"edge": {"nested": "target"}}}
        with pytest.raises(GramlDataError, match='Source vertex "source"'):
            _injector(section).inject(store)
        assert store.edge_count == 0

    def test_partial_mutation_is_kept(self, store: GraphStore) -> None:
        section = {
            "ok": {"edge": "fine"},
            "bad": {"first": "t", "edge": {"nested": "x"}},
        }
        with pytest.raises(GramlDataError, match='"bad"'):
            _injector(section).inject(store)
        assert edge_triples(store) == [
            ("v:ok", "e:edge", "v:fine"),
            ("v:bad", "e:first", "v:t"),
        ]

    def test_map_inside_list_raises(self, store: GraphStore) -> None:
        section = {"source": {"edge": ["t1", {"nested": "x"}]}}
        with pytest.raises(GramlDataError, match='"source"'):
            _injector(section).inject(store)
        assert edge_triples(store) == [("v:source", "e:edge", "v:t1")]

    def test_nested_list_raises(self, store: GraphStore) -> None:
        with pytest.raises(GramlDataError):
            _injector({"source": {"edge": [["t1"]]}}).inject(store)

    def test_empty_target_raises(self, store: GraphStore) -> None:
        with pytest.raises(GramlDataError, match='edge "edge" has no target'):
            _injector({"source": {"edge": None}}).inject(store)

    def test_scalar_edge_map_raises(self, store: GraphStore) -> None:
        with pytest.raises(GramlDataError, match='"source"'):
            _injector({"source": "target"}).inject(store)
