"""Document sections — header, classmap, and element property tables.

Each section wraps one top-level key of a graml document and answers
named-value lookups with defaults. Only the ``graph`` section is required;
every other section degrades to a no-op (identity resolution, no
properties) when the document omits it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from graml.domain.errors import GramlConfigError

if TYPE_CHECKING:
    from graml.domain.protocols import Edge, Vertex

GRAML_HEADER_SECTION = "graml"
CLASSMAP_SECTION = "classmap"
VERTICES_SECTION = "vertices"
EDGES_SECTION = "edges"
GRAPH_SECTION = "graph"

SUPPORTED_MAJOR_VERSION = 1
DEFAULT_VERSION = "1.0"

# alias:rest — the alias prefix is looked up in the classmap.
_ALIAS_SEPARATOR = ":"


def _require_mapping(section_name: str, value: Any) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        msg = f'Section "{section_name}" must be a mapping, got {type(value).__name__}.'
        raise GramlConfigError(msg)
    return value


def _property_table(section_name: str, value: Any) -> dict[str, dict[str, Any]]:
    """Validate a ``name -> {key: value}`` table, coercing names to str."""
    table: dict[str, dict[str, Any]] = {}
    for name, props in _require_mapping(section_name, value).items():
        if props is None:
            continue
        if not isinstance(props, Mapping):
            msg = f'Properties for "{name}" in section "{section_name}" must be a mapping.'
            raise GramlConfigError(msg)
        table[str(name)] = {str(k): v for k, v in props.items()}
    return table


class GramlHeaderSection:
    """``graml:`` header — document format version."""

    def __init__(self, section: Any = None) -> None:
        data = _require_mapping(GRAML_HEADER_SECTION, section)
        self.version = str(data.get("version", DEFAULT_VERSION))
        major = self.version.split(".", 1)[0]
        if major != str(SUPPORTED_MAJOR_VERSION):
            msg = (
                f'Unsupported graml version "{self.version}"; '
                f"expected {SUPPORTED_MAJOR_VERSION}.x."
            )
            raise GramlConfigError(msg)


class ClassmapSection:
    """``classmap:`` — symbolic alias to canonical identifier table.

    A name resolves to its exact classmap entry when there is one. A name of
    the form ``alias:rest`` whose alias is mapped resolves to
    ``canonical:rest``. Anything else resolves to itself.
    """

    def __init__(self, section: Any = None) -> None:
        self._map: dict[str, str] = {}
        for alias, canonical in _require_mapping(CLASSMAP_SECTION, section).items():
            if canonical is None or isinstance(canonical, (Mapping, list)):
                msg = f'Classmap entry "{alias}" must map to a name.'
                raise GramlConfigError(msg)
            self._map[str(alias)] = str(canonical)

    def _resolve(self, name: str) -> str:
        exact = self._map.get(name)
        if exact is not None:
            return exact
        alias, sep, rest = name.partition(_ALIAS_SEPARATOR)
        if sep and alias in self._map:
            return f"{self._map[alias]}{_ALIAS_SEPARATOR}{rest}"
        return name

    def resolve_vertex(self, raw_name: str) -> str:
        return self._resolve(raw_name)

    def resolve_edge(self, raw_label: str) -> str:
        return self._resolve(raw_label)


class VerticesSection:
    """``vertices:`` — properties keyed by raw vertex name."""

    def __init__(self, section: Any = None) -> None:
        self._props = _property_table(VERTICES_SECTION, section)

    def update_vertex_properties(self, raw_name: str, vertex: Vertex) -> None:
        for key, value in self._props.get(raw_name, {}).items():
            vertex.set_property(key, value)


class EdgesSection:
    """``edges:`` — properties keyed by raw edge label."""

    def __init__(self, section: Any = None) -> None:
        self._props = _property_table(EDGES_SECTION, section)

    def update_edge_properties(self, raw_label: str, edge: Edge) -> None:
        for key, value in self._props.get(raw_label, {}).items():
            edge.set_property(key, value)
