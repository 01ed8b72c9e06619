"""Command group: manage a customer's commissions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from artbuddy.commands._base import ArtBuddyGroup
from artbuddy.services.commission import CommissionService

if TYPE_CHECKING:
    from artbuddy.commands._context import AppContext

_COMMISSION_EXAMPLES = """\
  artbuddy commission add "Alice Tan" Portrait --fee 50 --deadline 2026-12-01
  artbuddy commission edit "Alice Tan" Portrait --completed
  artbuddy commission show "Alice Tan" Portrait
  artbuddy commission list --customer "Alice Tan" --pending
  artbuddy commission delete "Alice Tan" Portrait"""


@click.group(cls=ArtBuddyGroup, examples=_COMMISSION_EXAMPLES)
@click.pass_obj
def commission(app: AppContext) -> None:
    """Add, edit, delete, and list commissions."""


@commission.command(
    examples="""\
  artbuddy commission add "Alice Tan" Portrait --fee 50 --deadline 2026-12-01
  artbuddy commission add Bob "Cat sketch" -f 12.5 -d 2026-11-20 --tag sketch --completed
  artbuddy commission add Bob Mural -f 300 -d 2027-01-15 --description "Bedroom wall\""""
)
@click.argument("customer")
@click.argument("title")
@click.option("-f", "--fee", required=True, help="Fee, a non-negative amount.")
@click.option("-d", "--deadline", required=True, help="Deadline as YYYY-MM-DD.")
@click.option("--completed/--pending", default=False, help="Completion status.")
@click.option("--description", default=None, help="Free-form description.")
@click.option("-t", "--tag", "tags", multiple=True, help="Tag (repeatable).")
@click.pass_obj
def add(
    app: AppContext,
    customer: str,
    title: str,
    fee: str,
    deadline: str,
    completed: bool,
    description: str | None,
    tags: tuple[str, ...],
) -> None:
    """Add commission TITLE to CUSTOMER."""
    svc = CommissionService(app.model)
    app.emit(
        svc.add_commission(
            customer,
            title,
            fee,
            deadline,
            completed=completed,
            description=description,
            tags=tags,
        )
    )


@commission.command(
    examples="""\
  artbuddy commission edit "Alice Tan" Portrait --completed
  artbuddy commission edit Bob "Cat sketch" --title "Cat portrait" --fee 20
  artbuddy commission edit Bob Mural --clear-tags"""
)
@click.argument("customer")
@click.argument("title")
@click.option("--title", "new_title", default=None, help="New title.")
@click.option("-f", "--fee", default=None, help="New fee.")
@click.option("-d", "--deadline", default=None, help="New deadline as YYYY-MM-DD.")
@click.option("--completed/--pending", default=None, help="New completion status.")
@click.option("--description", default=None, help="New description.")
@click.option("-t", "--tag", "tags", multiple=True, help="Replace tags (repeatable).")
@click.option("--clear-tags", is_flag=True, help="Remove all tags.")
@click.pass_obj
def edit(
    app: AppContext,
    customer: str,
    title: str,
    new_title: str | None,
    fee: str | None,
    deadline: str | None,
    completed: bool | None,
    description: str | None,
    tags: tuple[str, ...],
    clear_tags: bool,
) -> None:
    """Edit commission TITLE of CUSTOMER. Omitted fields keep their value."""
    new_tags: list[str] | None = None
    if tags:
        new_tags = list(tags)
    elif clear_tags:
        new_tags = []
    svc = CommissionService(app.model)
    app.emit(
        svc.edit_commission(
            customer,
            title,
            new_title=new_title,
            fee=fee,
            deadline=deadline,
            completed=completed,
            description=description,
            tags=new_tags,
        )
    )


@commission.command(
    examples="""\
  artbuddy commission delete "Alice Tan" Portrait"""
)
@click.argument("customer")
@click.argument("title")
@click.pass_obj
def delete(app: AppContext, customer: str, title: str) -> None:
    """Delete commission TITLE of CUSTOMER and all its iterations."""
    app.emit(CommissionService(app.model).delete_commission(customer, title))


@commission.command(
    examples="""\
  artbuddy commission show "Alice Tan" Portrait
  artbuddy --json commission show Bob Mural"""
)
@click.argument("customer")
@click.argument("title")
@click.pass_obj
def show(app: AppContext, customer: str, title: str) -> None:
    """Show a commission's details and iterations."""
    app.emit(CommissionService(app.model).open_commission(customer, title))


@commission.command(
    "list",
    examples="""\
  artbuddy commission list
  artbuddy commission list --customer "Alice Tan"
  artbuddy commission list --keyword portrait --pending
  artbuddy commission list --tag sketch""",
)
@click.option("-c", "--customer", default=None, help="Only this customer's commissions.")
@click.option("-k", "--keyword", "keywords", multiple=True, help="Title keyword (repeatable).")
@click.option("--completed/--pending", default=None, help="Filter by completion status.")
@click.option("-t", "--tag", "any_tags", multiple=True, help="Has any of these tags.")
@click.pass_obj
def list_cmd(
    app: AppContext,
    customer: str | None,
    keywords: tuple[str, ...],
    completed: bool | None,
    any_tags: tuple[str, ...],
) -> None:
    """List commissions of one customer, or of every customer."""
    svc = CommissionService(app.model)
    app.emit(
        svc.list_commissions(
            customer=customer,
            keywords=keywords,
            completed=completed,
            any_tags=any_tags,
        )
    )
