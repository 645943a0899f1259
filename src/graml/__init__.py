"""graml — load declarative YAML graph documents into a graph store."""

from graml.domain.errors import GramlConfigError, GramlDataError, GramlError
from graml.domain.injector import GraphInjector, InjectionStats
from graml.reader import GramlReader

__version__ = "0.1.0"

__all__ = [
    "GramlConfigError",
    "GramlDataError",
    "GramlError",
    "GramlReader",
    "GraphInjector",
    "InjectionStats",
    "__version__",
]
