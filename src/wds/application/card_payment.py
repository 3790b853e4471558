"""Application service: Card Payment use case.

``begin`` validates the checkout exactly as order placement will, takes a
detached snapshot of it and registers a transaction for the snapshot's
total with the payment gateway.  The gateway later reports an outcome
through its callback, which is fed to ``resolve``: only ``success`` creates
the order, and it is built from the snapshot, so the order total is the
amount charged.  A pending payment stays open; failed and cancelled ones
are forgotten.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from wds.application.dto import OrderDTO
from wds.application.place_order import PlaceOrderHandler
from wds.domain.exceptions import DomainException, EntityNotFoundError, ValidationError
from wds.domain.gateway.payment_gateway import (
    CustomerDetails,
    PaymentGateway,
    PaymentOutcome,
    PaymentTransaction,
)
from wds.domain.model.cart import Cart
from wds.domain.model.checkout import CheckoutSession
from wds.domain.model.order import PaymentMethod
from wds.domain.repository.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass
class _PendingCheckout:
    checkout: CheckoutSession  # snapshot taken when the payment started
    cart: Cart  # the customer's live cart, cleared once the order exists
    customer_id: str
    shipping_address: str


class CardPaymentHandler:

    def __init__(
        self,
        gateway: PaymentGateway,
        place_order: PlaceOrderHandler,
        profile_repo: ProfileRepository,
    ) -> None:
        self._gateway = gateway
        self._place_order = place_order
        self._profile_repo = profile_repo
        self._pending: dict[str, _PendingCheckout] = {}

    def begin(
        self,
        session: CheckoutSession,
        customer_id: str,
        shipping_address: str | None = None,
    ) -> PaymentTransaction:
        """Charge the current checkout.

        Everything order placement checks is checked here first, so a
        payment is never started for an order that could not be created.
        """
        if session.payment_method != PaymentMethod.CARD:
            raise ValidationError("Checkout is not set to card payment")
        if session.cart.is_empty:
            raise ValidationError("Cart is empty")

        profile = self._profile_repo.get_by_id(customer_id)
        if profile is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        checkout = session.snapshot()
        order = self._place_order.prepare(checkout, customer_id, shipping_address)

        reference = self._new_reference()
        transaction = self._gateway.create_transaction(
            reference=reference,
            amount=order.total_amount,
            customer=CustomerDetails(first_name=profile.full_name, email=profile.email),
        )
        self._pending[transaction.reference] = _PendingCheckout(
            checkout=checkout,
            cart=session.cart,
            customer_id=customer_id,
            shipping_address=order.shipping_address,
        )
        logger.info(
            "Card payment %s started for %s (%s)",
            transaction.reference, customer_id, order.total_amount,
        )
        return transaction

    def resolve(self, reference: str, outcome: PaymentOutcome) -> OrderDTO | None:
        """Apply the gateway's verdict; returns the order on success.

        If the order cannot be created the payment stays pending, so the
        same verdict can be replayed.
        """
        pending = self._pending.get(reference)
        if pending is None:
            raise EntityNotFoundError(f"No pending payment '{reference}'")

        if outcome == PaymentOutcome.PENDING:
            logger.info("Payment %s is pending", reference)
            return None

        if outcome != PaymentOutcome.SUCCESS:
            del self._pending[reference]
            logger.info("Payment %s ended with %s; no order created", reference, outcome.value)
            return None

        try:
            dto = self._place_order.place(
                pending.checkout, pending.customer_id, pending.shipping_address
            )
        except DomainException:
            logger.error("Payment %s succeeded but the order was not created", reference)
            raise
        else:
            del self._pending[reference]
            pending.cart.clear()
        return dto

    def _new_reference(self) -> str:
        reference = f"ORDER-{uuid.uuid4().hex[:16].upper()}"
        while reference in self._pending:
            reference = f"ORDER-{uuid.uuid4().hex[:16].upper()}"
        return reference
