"""Subcommand modules for graml.

Provides register_commands() which uses deferred imports to keep
``graml --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from graml.commands.load import load

    cli.add_command(load)
