"""Application service: Place Order use case.

Turns a checkout session into a persisted order.  Cash-on-delivery orders
are created straight away; card orders are created by CardPaymentHandler
once the gateway reports success.
"""

from __future__ import annotations

import logging

from wds.application.dto import OrderDTO, order_to_dto
from wds.domain.exceptions import EntityNotFoundError, ValidationError
from wds.domain.gateway.order_events import OrderChanged, OrderEventPublisher
from wds.domain.model.checkout import CheckoutSession
from wds.domain.model.order import Order, OrderLineItem, PaymentMethod
from wds.domain.model.value_objects import Quantity
from wds.domain.repository.order_repository import OrderRepository
from wds.domain.repository.profile_repository import ProfileRepository

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        profile_repo: ProfileRepository,
        publisher: OrderEventPublisher,
    ) -> None:
        self._order_repo = order_repo
        self._profile_repo = profile_repo
        self._publisher = publisher

    def handle(
        self,
        session: CheckoutSession,
        customer_id: str,
        shipping_address: str | None = None,
    ) -> OrderDTO:
        """Place a cash-on-delivery order."""
        if session.payment_method != PaymentMethod.CASH:
            raise ValidationError(
                "Card orders are placed only after the payment succeeds"
            )
        return self.place(session, customer_id, shipping_address)

    def prepare(
        self,
        session: CheckoutSession,
        customer_id: str,
        shipping_address: str | None = None,
    ) -> Order:
        """Build and validate the order for *session* without saving it.

        Steps:
        1. Resolve the customer and their delivery address.
        2. Snapshot cart lines with *current* prices.
        3. Let the Order aggregate validate and fix the total.
        """
        profile = self._profile_repo.get_by_id(customer_id)
        if profile is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")

        address = shipping_address if shipping_address is not None else profile.address
        if not address or not address.strip():
            raise ValidationError(
                "Please add a delivery address to your profile first"
            )

        line_items = [
            OrderLineItem(
                product_id=item.product.id,
                product_name=item.product.name,
                quantity=Quantity(item.quantity),
                unit_price=item.product.price,  # <-- price snapshot
                rentable=item.product.is_rentable,
            )
            for item in session.cart.items
        ]

        return Order.create(
            customer_id=customer_id,
            items=line_items,
            shipping_address=address,
            payment_method=session.payment_method,
            delivery_fee=session.pricing.delivery_fee,
            rented_gallons=session.rental.rented_quantity,
            rental_fee=session.rental.rental_fee,
            rental_cap=session.pricing.rental_cap,
        )

    def place(
        self,
        session: CheckoutSession,
        customer_id: str,
        shipping_address: str | None = None,
    ) -> OrderDTO:
        """Create the order for a session whose payment prerequisites are met.

        The order is persisted, the cart cleared and the new order announced.
        """
        order = self.prepare(session, customer_id, shipping_address)
        self._order_repo.add(order)
        session.cart.clear()

        logger.info(
            "Order #%s placed by %s (%s, total %s)",
            order.id, customer_id, order.payment_method.value, order.total_amount,
        )
        self._publisher.publish(
            OrderChanged(order.id, {"status": order.status.value})  # type: ignore[arg-type]
        )
        return order_to_dto(order)
