"""CLI commands for the supplier dashboard and the driver app."""

from __future__ import annotations

import click

from wds.application.actors import resolve_actor
from wds.application.advance_order import AdvanceOrderHandler
from wds.application.claim_order import ClaimOrderHandler
from wds.application.list_orders import ListOrdersHandler
from wds.domain.exceptions import ClaimConflict, DomainException
from wds.domain.model.order_status import OrderStatus
from wds.infrastructure.bootstrap import order_feed, order_repository, profile_repository
from wds.infrastructure.cli.rendering import display_order, display_order_row


def _advance(order_id: int, user_id: str, target: OrderStatus) -> None:
    handler = AdvanceOrderHandler(order_repo=order_repository(), publisher=order_feed())
    try:
        actor = resolve_actor(profile_repository(), user_id)
        handler.handle(order_id, target, actor)
    except DomainException as exc:
        raise click.ClickException(str(exc))


# --- Supplier ---------------------------------------------------------------


@click.command("queue")
def supplier_queue() -> None:
    """Active orders, oldest first."""
    orders = ListOrdersHandler(order_repo=order_repository()).supplier_queue()
    if not orders:
        click.echo("No active orders.")
        return
    for dto in orders:
        display_order_row(dto)


@click.command("prepare")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--as", "user_id", required=True, help="Supplier user ID.")
def supplier_prepare(order_id: int, user_id: str) -> None:
    """Start preparing a confirmed order."""
    _advance(order_id, user_id, OrderStatus.PREPARING)
    click.echo(f"Order #{order_id} is being prepared.")


@click.command("ready")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--as", "user_id", required=True, help="Supplier user ID.")
def supplier_ready(order_id: int, user_id: str) -> None:
    """Mark an order as ready for pickup."""
    _advance(order_id, user_id, OrderStatus.READY_FOR_PICKUP)
    click.echo(f"Order #{order_id} is ready for pickup.")


# --- Driver -----------------------------------------------------------------


@click.command("jobs")
def driver_jobs() -> None:
    """Orders waiting for a driver, newest first."""
    orders = ListOrdersHandler(order_repo=order_repository()).available_jobs()
    if not orders:
        click.echo("No available jobs.")
        return
    for dto in orders:
        display_order_row(dto)


@click.command("current")
@click.option("--as", "user_id", required=True, help="Driver user ID.")
def driver_current(user_id: str) -> None:
    """Show the delivery a driver is working on."""
    dto = ListOrdersHandler(order_repo=order_repository()).current_delivery(user_id)
    if dto is None:
        click.echo("No delivery in progress.")
        return
    display_order(dto)


@click.command("claim")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--as", "user_id", required=True, help="Driver user ID.")
def driver_claim(order_id: int, user_id: str) -> None:
    """Accept a job; only the first driver to claim it gets it."""
    handler = ClaimOrderHandler(order_repo=order_repository(), publisher=order_feed())

    try:
        actor = resolve_actor(profile_repository(), user_id)
        handler.handle(order_id, actor)
    except ClaimConflict as exc:
        raise click.ClickException(f"{exc}. Run 'wds driver jobs' for the current list.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is yours. Drive safely!")


@click.command("arrive")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--as", "user_id", required=True, help="Driver user ID.")
def driver_arrive(order_id: int, user_id: str) -> None:
    """Mark the current delivery as arrived."""
    _advance(order_id, user_id, OrderStatus.ARRIVED)
    click.echo(f"Order #{order_id} marked as arrived.")
