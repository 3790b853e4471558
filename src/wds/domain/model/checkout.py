"""Checkout session: a cart plus the choices made on the checkout screen.

The session watches its cart so the gallon rental bound is re-derived on
every cart change instead of being cached.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from wds.domain.model.cart import Cart
from wds.domain.model.order import DELIVERY_FEE, PaymentMethod
from wds.domain.model.rental import HARD_CAP, RENTAL_FEE_PER_UNIT, RentalSelection
from wds.domain.model.value_objects import Money


@dataclass(frozen=True)
class PricingPolicy:
    delivery_fee: Money = DELIVERY_FEE
    rental_fee_per_unit: Money = RENTAL_FEE_PER_UNIT
    rental_cap: int = HARD_CAP


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Money
    delivery_fee: Money
    rental_fee: Money
    total: Money


class CheckoutSession:

    def __init__(
        self,
        cart: Cart | None = None,
        pricing: PricingPolicy | None = None,
        payment_method: PaymentMethod = PaymentMethod.CASH,
    ) -> None:
        self.cart = cart if cart is not None else Cart()
        self.pricing = pricing or PricingPolicy()
        self.payment_method = payment_method
        self.rental = RentalSelection(
            total_rentable_units=self.cart.rentable_units,
            fee_per_unit=self.pricing.rental_fee_per_unit,
            cap=self.pricing.rental_cap,
        )
        self.cart.subscribe(self._on_cart_changed)

    def price_breakdown(self) -> PriceBreakdown:
        subtotal = self.cart.subtotal
        rental_fee = self.rental.rental_fee
        return PriceBreakdown(
            subtotal=subtotal,
            delivery_fee=self.pricing.delivery_fee,
            rental_fee=rental_fee,
            total=subtotal + self.pricing.delivery_fee + rental_fee,
        )

    def snapshot(self) -> CheckoutSession:
        """Detached copy of the session; later cart edits do not reach it."""
        cart = Cart()
        for item in self.cart.items:
            cart.add(replace(item.product), item.quantity)
        copy = CheckoutSession(cart, self.pricing, self.payment_method)
        copy.rental.set(self.rental.rented_quantity)
        return copy

    def _on_cart_changed(self, cart: Cart) -> None:
        self.rental.sync(cart.rentable_units)
