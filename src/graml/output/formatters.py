"""Human/JSON rendering of ServiceResult.

Human mode prints an ``OK:``/``ERROR:`` headline followed by indented
``key: value`` lines; ``--json`` dumps the result model as-is.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from graml.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering switches derived from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    if result.ok:
        parts = [f"OK: {result.op}"]
        if result.data and not settings.quiet:
            parts.append(_format_data_human(result.data))
        return "\n".join(parts)

    if result.error is None:
        return f"ERROR: {result.op} - Unknown error"
    parts = [f"ERROR: {result.op} - [{result.error.code}] {result.error.message}"]
    if settings.verbose and result.error.detail:
        parts.append(_format_data_human(result.error.detail))
    return "\n".join(parts)
