"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items and its status
history.  All business invariants are enforced here; the application layer
is responsible for persisting a transition atomically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from wds.domain.exceptions import InvalidTransition, ValidationError
from wds.domain.model import order_status
from wds.domain.model.order_status import Actor, OrderStatus
from wds.domain.model.rental import HARD_CAP, clamp
from wds.domain.model.value_objects import Money, Quantity


class PaymentMethod(Enum):
    CASH = "cash"
    CARD = "card"


@dataclass
class OrderLineItem:
    """Captures the price snapshot of a product at order-creation time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    rentable: bool = False

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class StatusChange:
    """One entry of the append-only status history."""

    status: OrderStatus
    actor_id: str | None
    at: datetime


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
DELIVERY_FEE = Money(5000)
MAX_LINE_ITEMS = 50


@dataclass
class Order:
    """Aggregate root for delivery orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    customer_id: str
    items: list[OrderLineItem]
    shipping_address: str
    payment_method: PaymentMethod
    total_amount: Money
    delivery_fee: Money = DELIVERY_FEE
    rented_gallons: int = 0
    rental_fee: Money = field(default_factory=Money.zero)
    status: OrderStatus = OrderStatus.CONFIRMED
    driver_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    status_history: list[StatusChange] = field(default_factory=list)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: str,
        items: list[OrderLineItem],
        shipping_address: str,
        payment_method: PaymentMethod,
        delivery_fee: Money = DELIVERY_FEE,
        rented_gallons: int = 0,
        rental_fee: Money | None = None,
        rental_cap: int = HARD_CAP,
    ) -> Order:
        """Create a new order in ``confirmed`` status.

        The total is fixed here: subtotal + delivery fee + rental fee.
        """
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer is required")

        if not shipping_address or not shipping_address.strip():
            raise ValidationError("Shipping address is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")

        rentable_units = sum(i.quantity.value for i in items if i.rentable)
        if rented_gallons != clamp(rented_gallons, rentable_units, rental_cap):
            raise ValidationError(
                f"Cannot rent {rented_gallons} gallons "
                f"(order has {rentable_units} rentable units)"
            )

        rental_fee = rental_fee if rental_fee is not None else Money.zero()
        subtotal = Money.zero()
        for item in items:
            subtotal = subtotal + item.line_total

        order = Order(
            id=None,
            customer_id=customer_id.strip(),
            items=list(items),
            shipping_address=shipping_address.strip(),
            payment_method=payment_method,
            total_amount=subtotal + delivery_fee + rental_fee,
            delivery_fee=delivery_fee,
            rented_gallons=rented_gallons,
            rental_fee=rental_fee,
        )
        order.status_history.append(
            StatusChange(OrderStatus.CONFIRMED, order.customer_id, order.created_at)
        )
        return order

    # --- State transitions ----------------------------------------------------

    def transition_to(self, target: OrderStatus, actor: Actor) -> None:
        """Move to *target* if it is the next status and *actor* may do it.

        Raises InvalidTransition without touching the order otherwise.
        """
        self._check_transition(target, actor)
        if target == OrderStatus.OUT_FOR_DELIVERY:
            self.driver_id = actor.user_id
        self.status = target
        self.status_history.append(
            StatusChange(target, actor.user_id, datetime.now(timezone.utc))
        )

    def claim(self, driver: Actor) -> None:
        """Driver self-assignment: ready_for_pickup -> out_for_delivery."""
        self.transition_to(OrderStatus.OUT_FOR_DELIVERY, driver)

    def can_transition(self, target: OrderStatus, actor: Actor) -> bool:
        try:
            self._check_transition(target, actor)
        except InvalidTransition:
            return False
        return True

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def progress_index(self) -> int | None:
        return order_status.progress_index(self.status)

    @property
    def is_terminal(self) -> bool:
        return order_status.is_terminal(self.status)

    @property
    def rentable_units(self) -> int:
        return sum(i.quantity.value for i in self.items if i.rentable)

    @property
    def exchanged_gallons(self) -> int:
        return self.rentable_units - self.rented_gallons

    # --- Internal helpers -----------------------------------------------------

    def _check_transition(self, target: OrderStatus, actor: Actor) -> None:
        if self.is_terminal:
            raise InvalidTransition(
                f"Order #{self.id} is already {self.status.value}"
            )

        role = order_status.required_role(self.status, target)
        if role is None:
            raise InvalidTransition(
                f"Cannot move order #{self.id} from {self.status.value} "
                f"to {target.value}"
            )
        if actor.role != role:
            raise InvalidTransition(
                f"A {actor.role.value} cannot move order #{self.id} "
                f"to {target.value}"
            )

        if target == OrderStatus.OUT_FOR_DELIVERY and self.driver_id is not None:
            raise InvalidTransition(f"Order #{self.id} already has a driver")
        if target == OrderStatus.ARRIVED and actor.user_id != self.driver_id:
            raise InvalidTransition(
                f"Only the assigned driver can mark order #{self.id} as arrived"
            )
        if target == OrderStatus.COMPLETED and actor.user_id != self.customer_id:
            raise InvalidTransition(
                f"Only the ordering customer can complete order #{self.id}"
            )
