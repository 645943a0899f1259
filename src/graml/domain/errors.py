"""Exception hierarchy for graml loads.

Two kinds of failure abort a load:

- ``GramlConfigError``: the document is structurally unusable (missing
  graph section, bad header, malformed property section). Raised before
  any graph mutation.
- ``GramlDataError``: a graph section entry is invalid. Raised during
  injection, after zero or more mutations were already applied.
"""

from __future__ import annotations


class GramlError(Exception):
    """Base class for all graml load errors."""


class GramlConfigError(GramlError):
    """The document or one of its sections is missing or malformed."""


class GramlDataError(GramlError):
    """An edge target in the graph section cannot be injected."""
