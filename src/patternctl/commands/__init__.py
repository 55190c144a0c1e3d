"""Subcommand modules for patternctl.

Provides register_commands() which uses deferred imports to keep
``patternctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from patternctl.commands.export import export

    cli.add_command(export)

    # --- Standalone commands ---
    from patternctl.commands.checkout import checkout, payment_methods

    cli.add_command(checkout)
    cli.add_command(payment_methods)
