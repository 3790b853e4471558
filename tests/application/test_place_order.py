"""Integration tests for checkout and the PlaceOrder use case."""

import pytest

from tests.fakes import (
    FakeOrderRepository,
    FakeProductRepository,
    FakeProfileRepository,
    RecordingPublisher,
)
from wds.application.dto import OrderItemSpec
from wds.application.place_order import PlaceOrderHandler
from wds.application.start_checkout import StartCheckoutHandler
from wds.application.update_product import UpdateProductHandler
from wds.domain.exceptions import EntityNotFoundError, ValidationError
from wds.domain.model.checkout import PricingPolicy
from wds.domain.model.order import PaymentMethod
from wds.domain.model.order_status import OrderStatus
from wds.domain.model.product import DEFAULT_CATALOG
from wds.domain.model.profile import Profile


def _setup():
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository(list(DEFAULT_CATALOG))
    profile_repo = FakeProfileRepository([
        Profile(id="cust-1", full_name="Siti", address="Jl. Melati 5"),
        Profile(id="cust-2", full_name="Budi"),
    ])
    publisher = RecordingPublisher()
    checkout = StartCheckoutHandler(product_repo, PricingPolicy())
    place = PlaceOrderHandler(order_repo, profile_repo, publisher)
    return order_repo, product_repo, publisher, checkout, place


class TestStartCheckout:

    def test_builds_cart_from_names(self):
        *_, checkout, _ = _setup()
        session = checkout.handle([OrderItemSpec("Air Murni RO", 2), OrderItemSpec("Es Kristal 5kg", 1)])
        assert session.cart.item_count == 3
        assert session.rental.total_rentable_units == 2

    def test_unknown_product(self):
        *_, checkout, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found: 'Teh Botol'"):
            checkout.handle([OrderItemSpec("Teh Botol", 1)])

    def test_requested_rental_is_clamped(self):
        *_, checkout, _ = _setup()
        session = checkout.handle([OrderItemSpec("Air Murni RO", 2)], rented_gallons=9)
        assert session.rental.rented_quantity == 2


class TestPlaceCashOrder:

    def test_happy_path(self):
        order_repo, _, publisher, checkout, place = _setup()
        session = checkout.handle([OrderItemSpec("Air Murni RO", 3)], rented_gallons=1)

        dto = place.handle(session, "cust-1")

        assert dto.status == "confirmed"
        assert dto.progress == 0
        assert dto.total == "Rp 81.000"  # 75.000 + 5.000 delivery + 1.000 rental
        assert dto.rented_gallons == 1
        assert dto.exchanged_gallons == 2
        assert dto.shipping_address == "Jl. Melati 5"
        assert order_repo.get_by_id(dto.id).status == OrderStatus.CONFIRMED
        assert [e.changes for e in publisher.events] == [{"status": "confirmed"}]

    def test_cart_is_cleared(self):
        *_, checkout, place = _setup()
        session = checkout.handle([OrderItemSpec("Air Murni RO", 3)], rented_gallons=2)
        place.handle(session, "cust-1")
        assert session.cart.is_empty
        assert session.rental.rented_quantity == 0

    def test_address_override(self):
        *_, checkout, place = _setup()
        session = checkout.handle([OrderItemSpec("Es Kristal 10kg", 1)])
        dto = place.handle(session, "cust-1", shipping_address="Jl. Kenanga 9")
        assert dto.shipping_address == "Jl. Kenanga 9"

    def test_missing_address_rejected(self):
        order_repo, _, publisher, checkout, place = _setup()
        session = checkout.handle([OrderItemSpec("Air Murni RO", 1)])
        with pytest.raises(ValidationError, match="delivery address"):
            place.handle(session, "cust-2")
        assert order_repo.list_by_customer("cust-2") == []
        assert publisher.events == []

    def test_unknown_customer(self):
        *_, checkout, place = _setup()
        session = checkout.handle([OrderItemSpec("Air Murni RO", 1)])
        with pytest.raises(EntityNotFoundError, match="Customer 'ghost'"):
            place.handle(session, "ghost")

    def test_empty_cart_rejected(self):
        *_, checkout, place = _setup()
        session = checkout.handle([])
        with pytest.raises(ValidationError, match="at least one item"):
            place.handle(session, "cust-1")

    def test_card_orders_need_payment_first(self):
        *_, checkout, place = _setup()
        session = checkout.handle([OrderItemSpec("Air Murni RO", 1)], PaymentMethod.CARD)
        with pytest.raises(ValidationError, match="after the payment succeeds"):
            place.handle(session, "cust-1")


class TestPriceSnapshot:

    def test_later_price_change_does_not_touch_placed_order(self):
        order_repo, product_repo, _, checkout, place = _setup()
        session = checkout.handle([OrderItemSpec("Air Murni RO", 2)])
        dto = place.handle(session, "cust-1")

        UpdateProductHandler(product_repo).handle("1", 27000)

        order = order_repo.get_by_id(dto.id)
        assert order.items[0].unit_price.amount == 25000
        assert product_repo.get_by_id("1").price.amount == 27000

    def test_non_positive_price_rejected(self):
        _, product_repo, *_ = _setup()
        with pytest.raises(ValidationError, match="greater than zero"):
            UpdateProductHandler(product_repo).handle("1", 0)

    def test_unknown_product(self):
        _, product_repo, *_ = _setup()
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(product_repo).handle("99", 1000)
