"""Unit tests for the cart and the checkout session built on it."""

import pytest

from wds.domain.exceptions import ValidationError
from wds.domain.model.cart import Cart
from wds.domain.model.checkout import CheckoutSession, PricingPolicy
from wds.domain.model.product import DEFAULT_CATALOG
from wds.domain.model.value_objects import Money

GALLON, ICE_5KG = DEFAULT_CATALOG[0], DEFAULT_CATALOG[1]


class TestCart:

    def test_add_merges_same_product(self):
        cart = Cart()
        cart.add(GALLON, 2)
        cart.add(GALLON, 3)
        assert len(cart.items) == 1
        assert cart.get(GALLON.id).quantity == 5

    @pytest.mark.parametrize("quantity", [0, -4])
    def test_non_positive_add_rejected(self, quantity):
        cart = Cart()
        cart.add(GALLON, 2)
        with pytest.raises(ValidationError, match="must be positive"):
            cart.add(GALLON, quantity)
        assert cart.get(GALLON.id).quantity == 2
        assert cart.rentable_units == 2
        assert cart.subtotal == Money(50000)

    def test_update_quantity_to_zero_removes_line(self):
        cart = Cart()
        cart.add(GALLON, 2)
        cart.update_quantity(GALLON, 0)
        assert cart.is_empty

    def test_subtotal(self):
        cart = Cart()
        cart.add(GALLON, 2)
        cart.add(ICE_5KG, 1)
        assert cart.subtotal == Money(70000)
        assert cart.item_count == 3

    def test_only_gallons_count_as_rentable(self):
        cart = Cart()
        cart.add(GALLON, 2)
        cart.add(ICE_5KG, 4)
        assert cart.rentable_units == 2

    def test_listeners_see_every_change(self):
        seen = []
        cart = Cart()
        cart.subscribe(lambda c: seen.append(c.item_count))

        cart.add(GALLON, 2)
        cart.update_quantity(GALLON, 1)
        cart.clear()

        assert seen == [2, 1, 0]


class TestCheckoutSession:

    def test_rental_follows_cart_reductions(self):
        session = CheckoutSession()
        session.cart.add(GALLON, 12)
        session.rental.set(12)

        session.cart.update_quantity(GALLON, 5)
        assert session.rental.rented_quantity == 5

        session.cart.update_quantity(GALLON, 3)
        assert session.rental.rented_quantity == 3

    def test_removing_all_gallons_resets_rental(self):
        session = CheckoutSession()
        session.cart.add(GALLON, 2)
        session.cart.add(ICE_5KG, 1)
        session.rental.set(2)

        session.cart.remove(GALLON.id)

        assert session.rental.rented_quantity == 0
        assert session.rental.max_allowed == 0

    def test_session_picks_up_prefilled_cart(self):
        cart = Cart()
        cart.add(GALLON, 4)
        session = CheckoutSession(cart)
        assert session.rental.total_rentable_units == 4

    def test_price_breakdown(self):
        pricing = PricingPolicy(delivery_fee=Money(5000), rental_fee_per_unit=Money(1000))
        session = CheckoutSession(pricing=pricing)
        session.cart.add(GALLON, 3)
        session.rental.set(2)

        breakdown = session.price_breakdown()

        assert breakdown.subtotal == Money(75000)
        assert breakdown.rental_fee == Money(2000)
        assert breakdown.total == Money(82000)
