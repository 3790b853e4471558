"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from wds.domain.model.order import Order
from wds.domain.model.profile import Profile


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer put in the cart (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "Rp 25.000"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_id: str
    status: str
    progress: int | None
    items: list[OrderLineItemDTO]
    subtotal: str
    delivery_fee: str
    rented_gallons: int
    exchanged_gallons: int
    rental_fee: str
    total: str
    shipping_address: str
    payment_method: str
    driver_id: str | None
    created_at: str
    driver_name: str | None = None
    driver_vehicle: str | None = None


def order_to_dto(order: Order, driver: Profile | None = None) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_id=order.customer_id,
        status=order.status.value,
        progress=order.progress_index,
        items=[
            OrderLineItemDTO(
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        subtotal=str(order.subtotal),
        delivery_fee=str(order.delivery_fee),
        rented_gallons=order.rented_gallons,
        exchanged_gallons=order.exchanged_gallons,
        rental_fee=str(order.rental_fee),
        total=str(order.total_amount),
        shipping_address=order.shipping_address,
        payment_method=order.payment_method.value,
        driver_id=order.driver_id,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        driver_name=driver.full_name if driver else None,
        driver_vehicle=driver.vehicle_number if driver else None,
    )
