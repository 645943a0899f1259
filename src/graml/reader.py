"""GramlReader — top-level API for loading graml documents into a graph.

Reads a graml YAML document from a string, file, stream, or URL and
injects its graph section into a target graph. Several documents can be
applied to the same target one after another; vertices that already exist
in the target are reused.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING
from urllib.error import URLError
from urllib.request import urlopen

from graml.domain.cache import DEFAULT_CAPACITY
from graml.domain.document import GramlFactory, parse_document

if TYPE_CHECKING:
    from graml.domain.injector import InjectionStats
    from graml.domain.protocols import GraphTarget

logger = logging.getLogger(__name__)

DEFAULT_URL_TIMEOUT = 30.0


class GramlReader:
    """Load graml documents into *target*.

    Args:
        target: Graph that receives vertices and edges.
        factory: Section factory; defaults to :class:`GramlFactory`.
        cache_size: Vertex cache capacity for each injected document.
        url_timeout: Seconds :meth:`load_url` waits on the connection.
    """

    def __init__(
        self,
        target: GraphTarget,
        *,
        factory: GramlFactory | None = None,
        cache_size: int = DEFAULT_CAPACITY,
        url_timeout: float = DEFAULT_URL_TIMEOUT,
    ) -> None:
        self.target = target
        self._factory = factory or GramlFactory()
        self._cache_size = cache_size
        self._url_timeout = url_timeout

    def load(self, yaml_text: str) -> InjectionStats:
        """Load a graml document from its YAML text."""
        full_map = parse_document(yaml_text)

        # Decompose the sections. The header is validated even though the
        # injector does not consume it.
        graml = self._factory
        graml.get_header_section(full_map)
        classmap = graml.get_classmap_section(full_map)
        edge_props = graml.get_edges_section(full_map)
        vertex_props = graml.get_vertices_section(full_map)
        graph = graml.get_graph_section(
            full_map, classmap, vertex_props, edge_props, cache_size=self._cache_size
        )

        stats = graph.inject(self.target)
        logger.debug("graml.load: %s", stats.to_dict())
        return stats

    def load_path(self, path: str | Path) -> InjectionStats:
        """Load a graml document from a UTF-8 file."""
        return self.load(Path(path).read_text(encoding="utf-8"))

    def load_stream(self, stream: IO[str] | IO[bytes]) -> InjectionStats:
        """Load a graml document from an open text or binary stream.

        The stream is read to the end but not closed.
        """
        content = stream.read()
        if isinstance(content, bytes):
            content = content.decode("utf-8")
        return self.load(content)

    def load_url(self, url: str) -> InjectionStats:
        """Fetch and load a graml document from *url*.

        A URL that :mod:`urllib` cannot open at all, such as one with an
        unknown scheme, raises :class:`urllib.error.URLError` like any other
        fetch failure.
        """
        try:
            response = urlopen(url, timeout=self._url_timeout)  # noqa: S310
        except ValueError as exc:
            raise URLError(str(exc)) from exc
        with response:
            return self.load_stream(response)
