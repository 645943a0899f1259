"""Command: load graml documents into a graph and report or export it."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from graml.commands._base import GramlCommand
from graml.infrastructure.graph import graphson
from graml.services.load import LoadService

if TYPE_CHECKING:
    from graml.commands._context import AppContext

_LOAD_EXAMPLES = """\
  graml load people.yml
  graml load people.yml projects.yml --export graph.json
  graml load people.yml --export -
  graml load --url https://example.com/graph.yml
  graml --json load people.yml"""


@click.command(cls=GramlCommand, examples=_LOAD_EXAMPLES)
@click.argument("sources", nargs=-1, required=True)
@click.option("--url", "as_url", is_flag=True, help="Treat SOURCES as URLs instead of files.")
@click.option(
    "--export",
    "export_to",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=None,
    help="Write the resulting graph as GraphSON JSON ('-' for stdout).",
)
@click.pass_obj
def load(app: AppContext, sources: tuple[str, ...], as_url: bool, export_to: str | None) -> None:
    """Load SOURCES, in order, into one graph.

    Vertices that an earlier source already created are reused; edges are
    always added.
    """
    svc = LoadService(app.settings)
    result = svc.load_urls(sources) if as_url else svc.load_files(sources)

    if result.ok and export_to is not None:
        payload = graphson.dumps(svc.store, indent=app.settings.export.indent)
        if export_to == "-":
            # stdout carries the export; keep it parseable.
            click.echo(payload)
            return
        Path(export_to).write_text(payload + "\n", encoding="utf-8")

    app.emit(result)
