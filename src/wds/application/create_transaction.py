"""Application service: Create Transaction use case.

The thin proxy operation in front of the payment gateway: validate the
request and hand back the gateway's token.
"""

from __future__ import annotations

from wds.domain.exceptions import ValidationError
from wds.domain.gateway.payment_gateway import (
    CustomerDetails,
    PaymentGateway,
    PaymentTransaction,
)
from wds.domain.model.value_objects import Money


class CreateTransactionHandler:

    def __init__(self, gateway: PaymentGateway) -> None:
        self._gateway = gateway

    def handle(
        self,
        order_id: str,
        gross_amount: int,
        customer: CustomerDetails | None,
    ) -> PaymentTransaction:
        if not order_id or not gross_amount or customer is None:
            raise ValidationError(
                "order_id, gross_amount, and customer_details are required"
            )
        return self._gateway.create_transaction(order_id, Money(gross_amount), customer)
