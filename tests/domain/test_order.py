"""Unit tests for the Order aggregate and its business rules."""

import pytest

from wds.domain.exceptions import InvalidTransition, ValidationError
from wds.domain.model.order import Order, OrderLineItem, PaymentMethod
from wds.domain.model.order_status import Actor, ActorRole, OrderStatus
from wds.domain.model.value_objects import Money, Quantity

SUPPLIER = Actor(ActorRole.SUPPLIER, "supplier-1")
DRIVER_A = Actor(ActorRole.DRIVER, "driver-a")
DRIVER_B = Actor(ActorRole.DRIVER, "driver-b")
CUSTOMER = Actor(ActorRole.CUSTOMER, "cust-1")


def _make_item(
    name: str = "Air Murni RO",
    qty: int = 1,
    price: int = 25000,
    rentable: bool = True,
) -> OrderLineItem:
    """Helper to build a valid line item."""
    return OrderLineItem(
        product_id="1",
        product_name=name,
        quantity=Quantity(qty),
        unit_price=Money(price),
        rentable=rentable,
    )


def _make_order(**kwargs) -> Order:
    params = dict(
        customer_id=CUSTOMER.user_id,
        items=[_make_item(qty=2)],
        shipping_address="Jl. Melati 5",
        payment_method=PaymentMethod.CASH,
    )
    params.update(kwargs)
    return Order.create(**params)


def _advance_to(order: Order, status: OrderStatus) -> Order:
    steps = [
        (OrderStatus.PREPARING, SUPPLIER),
        (OrderStatus.READY_FOR_PICKUP, SUPPLIER),
        (OrderStatus.OUT_FOR_DELIVERY, DRIVER_A),
        (OrderStatus.ARRIVED, DRIVER_A),
        (OrderStatus.COMPLETED, CUSTOMER),
    ]
    for target, actor in steps:
        if order.status == status:
            break
        order.transition_to(target, actor)
    return order


class TestOrderCreation:

    def test_happy_path(self):
        order = _make_order()
        assert order.status == OrderStatus.CONFIRMED
        assert order.driver_id is None
        assert order.subtotal == Money(50000)

    def test_id_is_none_for_new_orders(self):
        assert _make_order().id is None  # assigned by repository

    def test_total_includes_delivery_and_rental(self):
        order = _make_order(
            items=[_make_item(qty=3), _make_item("Es Kristal 5kg", qty=1, price=20000, rentable=False)],
            rented_gallons=2,
            rental_fee=Money(2000),
        )
        assert order.total_amount == Money(75000 + 20000 + 5000 + 2000)
        assert order.exchanged_gallons == 1

    def test_history_starts_with_confirmation(self):
        order = _make_order()
        assert [c.status for c in order.status_history] == [OrderStatus.CONFIRMED]

    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            _make_order(items=[])

    def test_blank_address_rejected(self):
        with pytest.raises(ValidationError, match="Shipping address"):
            _make_order(shipping_address="  ")

    def test_51_items_rejected(self):
        with pytest.raises(ValidationError, match="Maximum 50"):
            _make_order(items=[_make_item() for _ in range(51)])

    def test_renting_more_than_rentable_units_rejected(self):
        with pytest.raises(ValidationError, match="Cannot rent 3 gallons"):
            _make_order(rented_gallons=3)

    def test_renting_non_rentable_items_rejected(self):
        with pytest.raises(ValidationError, match="Cannot rent"):
            _make_order(items=[_make_item(rentable=False)], rented_gallons=1)


class TestOrderTransitions:

    def test_full_lifecycle(self):
        order = _advance_to(_make_order(), OrderStatus.COMPLETED)
        assert order.status == OrderStatus.COMPLETED
        assert order.is_terminal
        assert order.progress_index == 5
        assert len(order.status_history) == 6

    def test_claim_assigns_driver(self):
        order = _advance_to(_make_order(), OrderStatus.READY_FOR_PICKUP)
        order.claim(DRIVER_A)
        assert order.status == OrderStatus.OUT_FOR_DELIVERY
        assert order.driver_id == DRIVER_A.user_id

    def test_skipping_a_status_rejected(self):
        order = _make_order()
        with pytest.raises(InvalidTransition, match="Cannot move"):
            order.transition_to(OrderStatus.READY_FOR_PICKUP, SUPPLIER)

    def test_going_backwards_rejected(self):
        order = _advance_to(_make_order(), OrderStatus.PREPARING)
        with pytest.raises(InvalidTransition):
            order.transition_to(OrderStatus.CONFIRMED, SUPPLIER)

    def test_wrong_role_rejected(self):
        order = _make_order()
        with pytest.raises(InvalidTransition, match="A driver cannot"):
            order.transition_to(OrderStatus.PREPARING, DRIVER_A)
        assert order.status == OrderStatus.CONFIRMED

    def test_customer_cannot_claim(self):
        order = _advance_to(_make_order(), OrderStatus.READY_FOR_PICKUP)
        with pytest.raises(InvalidTransition):
            order.claim(CUSTOMER)

    def test_only_assigned_driver_marks_arrival(self):
        order = _advance_to(_make_order(), OrderStatus.OUT_FOR_DELIVERY)
        with pytest.raises(InvalidTransition, match="assigned driver"):
            order.transition_to(OrderStatus.ARRIVED, DRIVER_B)
        assert order.status == OrderStatus.OUT_FOR_DELIVERY

    def test_only_ordering_customer_completes(self):
        order = _advance_to(_make_order(), OrderStatus.ARRIVED)
        other = Actor(ActorRole.CUSTOMER, "cust-2")
        with pytest.raises(InvalidTransition, match="ordering customer"):
            order.transition_to(OrderStatus.COMPLETED, other)

    def test_completed_order_is_frozen(self):
        order = _advance_to(_make_order(), OrderStatus.COMPLETED)
        for target in OrderStatus:
            for actor in (SUPPLIER, DRIVER_A, CUSTOMER):
                assert not order.can_transition(target, actor)

    def test_cancelled_order_cannot_move(self):
        order = _make_order()
        order.status = OrderStatus.CANCELLED
        with pytest.raises(InvalidTransition, match="already cancelled"):
            order.transition_to(OrderStatus.PREPARING, SUPPLIER)
        assert order.progress_index is None

    def test_failed_transition_leaves_history_untouched(self):
        order = _make_order()
        with pytest.raises(InvalidTransition):
            order.transition_to(OrderStatus.ARRIVED, DRIVER_A)
        assert len(order.status_history) == 1
