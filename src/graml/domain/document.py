"""Document parsing and decomposition into sections.

``parse_document`` turns YAML text into the generic key/value tree and
``GramlFactory`` splits that tree into the section objects the injector
consumes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from graml.domain.cache import DEFAULT_CAPACITY
from graml.domain.errors import GramlConfigError
from graml.domain.injector import GraphInjector
from graml.domain.sections import (
    CLASSMAP_SECTION,
    EDGES_SECTION,
    GRAML_HEADER_SECTION,
    GRAPH_SECTION,
    VERTICES_SECTION,
    ClassmapSection,
    EdgesSection,
    GramlHeaderSection,
    VerticesSection,
)


def parse_document(text: str) -> Mapping[str, Any]:
    """Parse a graml document with a safe YAML loader.

    An empty document yields an empty mapping, which later fails on the
    missing graph section rather than here.
    """
    try:
        data = YAML(typ="safe").load(text)
    except YAMLError as exc:
        msg = f"Invalid YAML in graml document: {exc}"
        raise GramlConfigError(msg) from exc

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        msg = f"A graml document must be a mapping, got {type(data).__name__}."
        raise GramlConfigError(msg)
    return data


class GramlFactory:
    """Builds section objects from a parsed document.

    Swap in a subclass to customise how a section is constructed.
    """

    def get_header_section(self, full_map: Mapping[str, Any]) -> GramlHeaderSection:
        return GramlHeaderSection(full_map.get(GRAML_HEADER_SECTION))

    def get_classmap_section(self, full_map: Mapping[str, Any]) -> ClassmapSection:
        return ClassmapSection(full_map.get(CLASSMAP_SECTION))

    def get_vertices_section(self, full_map: Mapping[str, Any]) -> VerticesSection:
        return VerticesSection(full_map.get(VERTICES_SECTION))

    def get_edges_section(self, full_map: Mapping[str, Any]) -> EdgesSection:
        return EdgesSection(full_map.get(EDGES_SECTION))

    def get_graph_section(
        self,
        full_map: Mapping[str, Any],
        classmap: ClassmapSection,
        vertex_props: VerticesSection,
        edge_props: EdgesSection,
        *,
        cache_size: int = DEFAULT_CAPACITY,
    ) -> GraphInjector:
        return GraphInjector(
            full_map.get(GRAPH_SECTION),
            classmap,
            vertex_props,
            edge_props,
            cache_size=cache_size,
        )
