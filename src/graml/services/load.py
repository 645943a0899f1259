"""LoadService — apply graml documents, in order, to one graph store.

Each source is injected with a fresh vertex cache; vertices declared by an
earlier source are found again through the store. Loading stops at the
first failing source and the store keeps whatever was applied before it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from graml.domain.errors import GramlConfigError, GramlDataError
from graml.domain.injector import InjectionStats
from graml.infrastructure.graph.store import GraphStore
from graml.reader import GramlReader
from graml.services.result import (
    CONFIG_ERROR,
    DATA_ERROR,
    IO_ERROR,
    ServiceError,
    ServiceResult,
)

if TYPE_CHECKING:
    from graml.config.settings import GramlSettings

logger = logging.getLogger(__name__)


class LoadService:
    """Loads graml sources into :attr:`store`.

    Usage::

        svc = LoadService(settings)
        result = svc.load_files(["people.yml", "projects.yml"])
        graphson.dumps(svc.store)
    """

    def __init__(self, settings: GramlSettings, store: GraphStore | None = None) -> None:
        self._settings = settings
        self.store = store if store is not None else GraphStore()
        self._reader = GramlReader(
            self.store,
            cache_size=settings.injection.vertex_cache_size,
            url_timeout=settings.injection.url_timeout,
        )

    def load_files(self, paths: Iterable[str | Path]) -> ServiceResult:
        """Load each file in *paths* in order."""
        return self._load_all("load", [str(p) for p in paths], self._reader.load_path)

    def load_urls(self, urls: Iterable[str]) -> ServiceResult:
        """Fetch and load each URL in *urls* in order."""
        return self._load_all("load", list(urls), self._reader.load_url)

    def _load_all(
        self,
        op: str,
        sources: list[str],
        load_one: Callable[[str], InjectionStats],
    ) -> ServiceResult:
        totals = InjectionStats()
        loaded: list[str] = []
        warnings: list[str] = []

        for source in sources:
            try:
                stats = load_one(source)
            except GramlConfigError as exc:
                return self._failure(op, CONFIG_ERROR, exc, source, loaded)
            except (OSError, UnicodeError) as exc:
                return self._failure(op, IO_ERROR, exc, source, loaded)
            except GramlDataError as exc:
                return self._failure(op, DATA_ERROR, exc, source, loaded)

            if stats.edges_created == 0:
                warnings.append(f"{source} declared no edges")
            totals.merge(stats)
            loaded.append(source)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "sources": loaded,
                "vertices": self.store.vertex_count,
                "edges": self.store.edge_count,
                **totals.to_dict(),
            },
            warnings=warnings,
        )

    @staticmethod
    def _failure(
        op: str, code: str, exc: Exception, source: str, loaded: list[str]
    ) -> ServiceResult:
        logger.debug("Load of %s failed", source, exc_info=True)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=code,
                message=str(exc),
                detail={"source": source, "loaded": list(loaded)},
            ),
        )
