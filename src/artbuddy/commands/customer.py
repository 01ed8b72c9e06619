"""Command group: manage customers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from artbuddy.commands._base import ArtBuddyGroup
from artbuddy.services.customer import CustomerService

if TYPE_CHECKING:
    from artbuddy.commands._context import AppContext

_CUSTOMER_EXAMPLES = """\
  artbuddy customer add "Alice Tan" --phone 98765432 --email alice@example.com
  artbuddy customer edit "Alice Tan" --phone 91234567
  artbuddy customer show "Alice Tan"
  artbuddy customer list --keyword alice --tag regular
  artbuddy customer delete "Alice Tan\""""


@click.group(cls=ArtBuddyGroup, examples=_CUSTOMER_EXAMPLES)
@click.pass_obj
def customer(app: AppContext) -> None:
    """Add, edit, delete, and list customers."""


@customer.command(
    examples="""\
  artbuddy customer add "Alice Tan" --phone 98765432 --email alice@example.com
  artbuddy customer add Bob --phone 999 --email bob@example.com --tag regular --tag vip
  artbuddy --json customer add Carol --phone 123 --email c@example.com --address "1 Main St\""""
)
@click.argument("name")
@click.option("-p", "--phone", required=True, help="Phone number (at least 3 digits).")
@click.option("-e", "--email", required=True, help="Email address.")
@click.option("-a", "--address", default=None, help="Postal address.")
@click.option("-t", "--tag", "tags", multiple=True, help="Tag (repeatable).")
@click.pass_obj
def add(
    app: AppContext,
    name: str,
    phone: str,
    email: str,
    address: str | None,
    tags: tuple[str, ...],
) -> None:
    """Add a customer called NAME."""
    svc = CustomerService(app.model)
    app.emit(svc.add_customer(name, phone, email, address=address, tags=tags))


@customer.command(
    examples="""\
  artbuddy customer edit "Alice Tan" --name "Alice Lim"
  artbuddy customer edit Bob --tag vip
  artbuddy customer edit Bob --clear-tags"""
)
@click.argument("name")
@click.option("-n", "--name", "new_name", default=None, help="New name.")
@click.option("-p", "--phone", default=None, help="New phone number.")
@click.option("-e", "--email", default=None, help="New email address.")
@click.option("-a", "--address", default=None, help="New postal address.")
@click.option("-t", "--tag", "tags", multiple=True, help="Replace tags (repeatable).")
@click.option("--clear-tags", is_flag=True, help="Remove all tags.")
@click.pass_obj
def edit(
    app: AppContext,
    name: str,
    new_name: str | None,
    phone: str | None,
    email: str | None,
    address: str | None,
    tags: tuple[str, ...],
    clear_tags: bool,
) -> None:
    """Edit the customer called NAME. Omitted fields keep their value."""
    new_tags: list[str] | None = None
    if tags:
        new_tags = list(tags)
    elif clear_tags:
        new_tags = []
    svc = CustomerService(app.model)
    app.emit(
        svc.edit_customer(
            name,
            new_name=new_name,
            phone=phone,
            email=email,
            address=address,
            tags=new_tags,
        )
    )


@customer.command(
    examples="""\
  artbuddy customer delete "Alice Tan"
  artbuddy --json customer delete Bob"""
)
@click.argument("name")
@click.pass_obj
def delete(app: AppContext, name: str) -> None:
    """Delete the customer called NAME and all their commissions."""
    app.emit(CustomerService(app.model).delete_customer(name))


@customer.command(
    examples="""\
  artbuddy customer show "Alice Tan"
  artbuddy --json customer show Bob"""
)
@click.argument("name")
@click.pass_obj
def show(app: AppContext, name: str) -> None:
    """Show a customer's details and commissions."""
    app.emit(CustomerService(app.model).open_customer(name))


@customer.command(
    "list",
    examples="""\
  artbuddy customer list
  artbuddy customer list --keyword alice --keyword bob
  artbuddy customer list --tag regular --all-tags vip
  artbuddy -q customer list""",
)
@click.option("-k", "--keyword", "keywords", multiple=True, help="Name keyword (repeatable).")
@click.option("-t", "--tag", "any_tags", multiple=True, help="Has any of these tags.")
@click.option("--all-tags", "all_tags", multiple=True, help="Has all of these tags.")
@click.pass_obj
def list_cmd(
    app: AppContext,
    keywords: tuple[str, ...],
    any_tags: tuple[str, ...],
    all_tags: tuple[str, ...],
) -> None:
    """List customers, optionally filtered by name keyword or tags."""
    svc = CustomerService(app.model)
    app.emit(svc.list_customers(keywords=keywords, any_tags=any_tags, all_tags=all_tags))
