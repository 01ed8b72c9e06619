"""Command group: record progress on a commission."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from artbuddy.commands._base import ArtBuddyGroup
from artbuddy.services.iteration import IterationService

if TYPE_CHECKING:
    from artbuddy.commands._context import AppContext

_ITERATION_EXAMPLES = """\
  artbuddy iteration add "Alice Tan" Portrait --date 2026-10-01 \\
      --description "Line art" --image images/lineart.png --feedback "Looks great"
  artbuddy iteration list "Alice Tan" Portrait
  artbuddy iteration delete "Alice Tan" Portrait --date 2026-10-01 --description "Line art\""""


@click.group(cls=ArtBuddyGroup, examples=_ITERATION_EXAMPLES)
@click.pass_obj
def iteration(app: AppContext) -> None:
    """Add, delete, and list iterations of a commission."""


@iteration.command()
@click.argument("customer")
@click.argument("commission")
@click.option("--date", "date_", required=True, help="Iteration date as YYYY-MM-DD.")
@click.option("--description", required=True, help="What this iteration shows.")
@click.option("--image", "image_path", required=True, help="Path to the iteration image.")
@click.option("--feedback", required=True, help="Customer feedback.")
@click.pass_obj
def add(
    app: AppContext,
    customer: str,
    commission: str,
    date_: str,
    description: str,
    image_path: str,
    feedback: str,
) -> None:
    """Add an iteration to commission COMMISSION of CUSTOMER."""
    svc = IterationService(app.model)
    app.emit(svc.add_iteration(customer, commission, date_, description, image_path, feedback))


@iteration.command()
@click.argument("customer")
@click.argument("commission")
@click.option("--date", "date_", required=True, help="Iteration date as YYYY-MM-DD.")
@click.option("--description", required=True, help="Iteration description.")
@click.pass_obj
def delete(
    app: AppContext,
    customer: str,
    commission: str,
    date_: str,
    description: str,
) -> None:
    """Delete the iteration with the given date and description."""
    svc = IterationService(app.model)
    app.emit(svc.delete_iteration(customer, commission, date_, description))


@iteration.command("list")
@click.argument("customer")
@click.argument("commission")
@click.pass_obj
def list_cmd(app: AppContext, customer: str, commission: str) -> None:
    """List the iterations of commission COMMISSION of CUSTOMER."""
    app.emit(IterationService(app.model).list_iterations(customer, commission))
