"""Application service: Start Checkout use case.

Builds a checkout session from product names and quantities, the way a
client fills its cart before reaching the checkout screen.
"""

from __future__ import annotations

from wds.application.dto import OrderItemSpec
from wds.domain.exceptions import EntityNotFoundError
from wds.domain.model.cart import Cart
from wds.domain.model.checkout import CheckoutSession, PricingPolicy
from wds.domain.model.order import PaymentMethod
from wds.domain.repository.product_repository import ProductRepository


class StartCheckoutHandler:

    def __init__(self, product_repo: ProductRepository, pricing: PricingPolicy) -> None:
        self._product_repo = product_repo
        self._pricing = pricing

    def handle(
        self,
        item_specs: list[OrderItemSpec],
        payment_method: PaymentMethod = PaymentMethod.CASH,
        rented_gallons: int = 0,
    ) -> CheckoutSession:
        """Fill a cart and open a session on it.

        The requested rental count is clamped to what the cart allows.
        """
        cart = Cart()
        for spec in item_specs:
            product = self._product_repo.get_by_name(spec.product_name)
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{spec.product_name}'")
            cart.add(product, spec.quantity)

        session = CheckoutSession(cart, self._pricing, payment_method)
        session.rental.set(rented_gallons)
        return session
