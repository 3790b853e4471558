"""Shared click formatting for orders."""

from __future__ import annotations

import click

from wds.application.dto import OrderDTO
from wds.domain.model.order_status import STATUS_SEQUENCE


def progress_bar(dto: OrderDTO) -> str:
    if dto.progress is None:
        return f"[{dto.status}]"
    steps = len(STATUS_SEQUENCE)
    return "[" + "#" * (dto.progress + 1) + "." * (steps - dto.progress - 1) + "]"


def _driver_label(dto: OrderDTO) -> str:
    if not dto.driver_name:
        return dto.driver_id or "-"
    if dto.driver_vehicle:
        return f"{dto.driver_name} ({dto.driver_vehicle})"
    return dto.driver_name


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})  {progress_bar(dto)}")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Deliver:  {dto.shipping_address}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.driver_id:
        click.echo(f"Driver:   {_driver_label(dto)}")
    click.echo()

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>24}")
    click.echo(f"  {'Delivery fee':<27} {dto.delivery_fee:>24}")
    if dto.rented_gallons:
        label = f"Gallon rental ({dto.rented_gallons}x)"
        click.echo(f"  {label:<27} {dto.rental_fee:>24}")
    click.echo(f"  {'Order Total':<27} {dto.total:>24}")
    if dto.exchanged_gallons:
        click.echo(f"  Exchanging {dto.exchanged_gallons} of your own gallon(s).")
    click.echo(f"  Payment: {dto.payment_method}")


def display_order_row(dto: OrderDTO) -> None:
    click.echo(
        f"#{dto.id:<5} {dto.status:<17} {dto.total:>14}  {dto.shipping_address}"
    )
