"""Order status state machine.

The lifecycle is a fixed forward-only sequence.  Each edge is gated by the
role of the actor requesting it:

    confirmed --supplier--> preparing --supplier--> ready_for_pickup
      --driver (claim)--> out_for_delivery --assigned driver--> arrived
      --customer--> completed

``cancelled`` is a terminal state that no transition produces yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OrderStatus(Enum):
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY_FOR_PICKUP = "ready_for_pickup"
    OUT_FOR_DELIVERY = "out_for_delivery"
    ARRIVED = "arrived"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ActorRole(Enum):
    CUSTOMER = "customer"
    DRIVER = "driver"
    SUPPLIER = "supplier"


@dataclass(frozen=True)
class Actor:
    """Who is asking for a transition (role plus authenticated user id)."""

    role: ActorRole
    user_id: str


STATUS_SEQUENCE: tuple[OrderStatus, ...] = (
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.READY_FOR_PICKUP,
    OrderStatus.OUT_FOR_DELIVERY,
    OrderStatus.ARRIVED,
    OrderStatus.COMPLETED,
)

TERMINAL_STATUSES = frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED})

# (from, to) -> role allowed to perform the edge
TRANSITIONS: dict[tuple[OrderStatus, OrderStatus], ActorRole] = {
    (OrderStatus.CONFIRMED, OrderStatus.PREPARING): ActorRole.SUPPLIER,
    (OrderStatus.PREPARING, OrderStatus.READY_FOR_PICKUP): ActorRole.SUPPLIER,
    (OrderStatus.READY_FOR_PICKUP, OrderStatus.OUT_FOR_DELIVERY): ActorRole.DRIVER,
    (OrderStatus.OUT_FOR_DELIVERY, OrderStatus.ARRIVED): ActorRole.DRIVER,
    (OrderStatus.ARRIVED, OrderStatus.COMPLETED): ActorRole.CUSTOMER,
}


def is_terminal(status: OrderStatus) -> bool:
    return status in TERMINAL_STATUSES


def progress_index(status: OrderStatus) -> int | None:
    """Ordinal position of *status* in the sequence, for progress bars.

    ``cancelled`` sits outside the sequence and returns None.
    """
    try:
        return STATUS_SEQUENCE.index(status)
    except ValueError:
        return None


def successor(status: OrderStatus) -> OrderStatus | None:
    """The single status that may follow *status*, or None when terminal."""
    if is_terminal(status):
        return None
    return STATUS_SEQUENCE[STATUS_SEQUENCE.index(status) + 1]


def required_role(current: OrderStatus, target: OrderStatus) -> ActorRole | None:
    """Role that may move an order from *current* to *target*, if any."""
    return TRANSITIONS.get((current, target))


def next_statuses(status: OrderStatus, role: ActorRole) -> frozenset[OrderStatus]:
    """Statuses an actor with *role* may move an order to from *status*."""
    return frozenset(
        target
        for (source, target), allowed in TRANSITIONS.items()
        if source == status and allowed == role
    )
