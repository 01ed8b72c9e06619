"""Subcommand modules for artbuddy.

Provides register_commands() which uses deferred imports to keep
``artbuddy --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every entity command group on the root CLI group."""
    from artbuddy.commands.commission import commission
    from artbuddy.commands.customer import customer
    from artbuddy.commands.iteration import iteration

    cli.add_command(customer)
    cli.add_command(commission)
    cli.add_command(iteration)
