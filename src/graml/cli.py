"""Root CLI group for graml with global flags and command registration."""

from __future__ import annotations

import click

from graml import __version__
from graml.commands import register_commands
from graml.commands._base import GramlGroup
from graml.commands._context import AppContext
from graml.config.settings import GramlSettings

_CLI_EXAMPLES = """\
  graml load people.yml
  graml -v load people.yml projects.yml
  graml --json load people.yml
  graml -c ./graml.toml load people.yml --export graph.json"""


@click.group(cls=GramlGroup, invoke_without_command=True, examples=_CLI_EXAMPLES)
@click.version_option(version=__version__, prog_name="graml")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """graml — load YAML graph documents into a graph store."""
    settings = GramlSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
