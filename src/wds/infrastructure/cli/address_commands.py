"""CLI commands for the customer's address book."""

from __future__ import annotations

import click

from wds.application.manage_addresses import (
    AddAddressHandler,
    DeleteAddressHandler,
    ListAddressesHandler,
    UpdateAddressHandler,
)
from wds.domain.exceptions import DomainException
from wds.infrastructure.bootstrap import address_repository


@click.command("list")
@click.option("--user", "user_id", required=True, help="User ID.")
def address_list(user_id: str) -> None:
    """List saved addresses."""
    addresses = ListAddressesHandler(address_repository()).handle(user_id)
    if not addresses:
        click.echo("No saved addresses.")
        return
    for a in addresses:
        click.echo(f"#{a.id:<4} {a.name:<12} {a.address}")


@click.command("add")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--name", required=True, help="Label, e.g. 'Rumah'.")
@click.option("--address", required=True, help="Full delivery address.")
def address_add(user_id: str, name: str, address: str) -> None:
    """Save a new address."""
    try:
        saved = AddAddressHandler(address_repository()).handle(user_id, name, address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address #{saved.id} ({saved.name}) saved.")


@click.command("update")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--id", "address_id", required=True, type=int, help="Address ID.")
@click.option("--name", default=None, help="New label.")
@click.option("--address", default=None, help="New delivery address.")
def address_update(user_id: str, address_id: int, name: str | None, address: str | None) -> None:
    """Edit a saved address."""
    handler = UpdateAddressHandler(address_repository())
    try:
        saved = handler.handle(user_id, address_id, name=name, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address #{saved.id} updated.")


@click.command("delete")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--id", "address_id", required=True, type=int, help="Address ID.")
def address_delete(user_id: str, address_id: int) -> None:
    """Remove a saved address."""
    try:
        DeleteAddressHandler(address_repository()).handle(user_id, address_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Address #{address_id} deleted.")
