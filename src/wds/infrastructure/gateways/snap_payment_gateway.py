"""PaymentGateway backed by a Snap-style hosted checkout API."""

from __future__ import annotations

import httpx

from wds.domain.exceptions import UpstreamUnavailable
from wds.domain.gateway.payment_gateway import (
    CustomerDetails,
    PaymentGateway,
    PaymentTransaction,
)
from wds.domain.model.value_objects import Money
from wds.infrastructure.gateways.http_client import post_json


class SnapPaymentGateway(PaymentGateway):

    def __init__(
        self,
        api_url: str,
        server_key: str,
        app_url: str,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._api_url = api_url
        self._app_url = app_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)
        # Snap authenticates with the server key as the basic-auth username.
        self._auth = httpx.BasicAuth(server_key, "")

    def create_transaction(
        self,
        reference: str,
        amount: Money,
        customer: CustomerDetails,
    ) -> PaymentTransaction:
        details = {"first_name": customer.first_name}
        if customer.email:
            details["email"] = customer.email
        if customer.phone:
            details["phone"] = customer.phone

        body = post_json(
            self._client,
            "Payment gateway",
            self._api_url,
            {
                "transaction_details": {
                    "order_id": reference,
                    "gross_amount": amount.amount,
                },
                "credit_card": {"secure": True},
                "customer_details": details,
                "callbacks": {"finish": f"{self._app_url}/orders"},
            },
            auth=self._auth,
        )
        token = body.get("token")
        if not token:
            raise UpstreamUnavailable("Payment gateway returned no transaction token")
        return PaymentTransaction(
            reference=reference, token=token, redirect_url=body.get("redirect_url")
        )
