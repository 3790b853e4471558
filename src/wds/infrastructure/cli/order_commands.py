"""CLI commands for customers: checkout, tracking and delivery confirmation."""

from __future__ import annotations

import click

from wds.application.actors import resolve_actor
from wds.application.advance_order import AdvanceOrderHandler
from wds.application.card_payment import CardPaymentHandler
from wds.application.dto import OrderItemSpec
from wds.application.list_orders import ListOrdersHandler
from wds.application.manage_addresses import ShowAddressHandler
from wds.application.place_order import PlaceOrderHandler
from wds.application.show_order import ShowOrderHandler
from wds.application.start_checkout import StartCheckoutHandler
from wds.domain.exceptions import DomainException
from wds.domain.gateway.payment_gateway import PaymentOutcome
from wds.domain.model.order import PaymentMethod
from wds.domain.model.order_status import OrderStatus
from wds.infrastructure.bootstrap import (
    address_repository,
    order_feed,
    order_repository,
    payment_gateway,
    pricing_policy,
    product_repository,
    profile_repository,
)
from wds.infrastructure.cli.rendering import display_order, display_order_row


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'Air Murni RO:3,Es Kristal 5kg:1' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        if qty <= 0:
            raise click.BadParameter(
                f"Quantity for product '{name}' must be positive, got {qty}."
            )
        specs.append(OrderItemSpec(product_name=name.strip(), quantity=qty))
    return specs


@click.command("place")
@click.option("--customer", required=True, help="Customer user ID.")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.option("--rent", "rent", default=0, type=int, help="Gallons to rent instead of exchange.")
@click.option(
    "--payment",
    type=click.Choice([m.value for m in PaymentMethod]),
    default=PaymentMethod.CASH.value,
    show_default=True,
    help="Payment method.",
)
@click.option("--address", default=None, help="Deliver here instead of the profile address.")
@click.option("--address-id", type=int, default=None, help="Deliver to a saved address.")
def order_place(
    customer: str,
    items: str,
    rent: int,
    payment: str,
    address: str | None,
    address_id: int | None,
) -> None:
    """Check out a cart and place the order."""
    if address is not None and address_id is not None:
        raise click.UsageError("Use either --address or --address-id, not both.")
    specs = _parse_items(items)
    place = PlaceOrderHandler(
        order_repo=order_repository(),
        profile_repo=profile_repository(),
        publisher=order_feed(),
    )

    try:
        if address_id is not None:
            address = ShowAddressHandler(address_repository()).handle(customer, address_id).address
        session = StartCheckoutHandler(product_repository(), pricing_policy()).handle(
            specs, PaymentMethod(payment), rent
        )
        if session.rental.rented_quantity != rent:
            click.echo(
                f"Rental adjusted to {session.rental.rented_quantity} "
                f"(cart has {session.rental.total_rentable_units} gallon(s))."
            )

        if session.payment_method == PaymentMethod.CASH:
            dto = place.handle(session, customer, shipping_address=address)
        else:
            card = CardPaymentHandler(payment_gateway(), place, profile_repository())
            transaction = card.begin(session, customer, shipping_address=address)
            click.echo(f"Payment token: {transaction.token}")
            if transaction.redirect_url:
                click.echo(f"Complete the payment at {transaction.redirect_url}")
            outcome = click.prompt(
                "Payment outcome",
                type=click.Choice([o.value for o in PaymentOutcome]),
            )
            dto = card.resolve(transaction.reference, PaymentOutcome(outcome))
            if dto is None:
                click.echo(f"Payment {outcome}; no order was placed.")
                return
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed.")
    display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details and progress of an order."""
    handler = ShowOrderHandler(order_repo=order_repository(), profile_repo=profile_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("history")
@click.option("--customer", required=True, help="Customer user ID.")
def order_history(customer: str) -> None:
    """List a customer's orders, newest first."""
    orders = ListOrdersHandler(order_repo=order_repository()).history(customer)
    if not orders:
        click.echo("No orders yet.")
        return
    for dto in orders:
        display_order_row(dto)


@click.command("confirm-delivery")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--as", "user_id", required=True, help="Customer user ID.")
def order_confirm_delivery(order_id: int, user_id: str) -> None:
    """Acknowledge the driver's arrival and complete the order."""
    handler = AdvanceOrderHandler(order_repo=order_repository(), publisher=order_feed())

    try:
        actor = resolve_actor(profile_repository(), user_id)
        handler.handle(order_id, OrderStatus.COMPLETED, actor)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} completed. Thank you!")
