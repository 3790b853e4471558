"""Abstract payment collaborator.

The gateway issues a token for a transaction; the customer completes the
payment in the gateway's own UI and the outcome comes back later through
a callback, reported here as a ``PaymentOutcome``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from wds.domain.model.value_objects import Money


class PaymentOutcome(Enum):
    SUCCESS = "success"
    PENDING = "pending"
    FAILURE = "failure"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class CustomerDetails:
    first_name: str
    email: str | None = None
    phone: str | None = None


@dataclass(frozen=True)
class PaymentTransaction:
    reference: str
    token: str
    redirect_url: str | None = None


class PaymentGateway(ABC):

    @abstractmethod
    def create_transaction(
        self,
        reference: str,
        amount: Money,
        customer: CustomerDetails,
    ) -> PaymentTransaction:
        """Register a transaction and return its opaque token.

        Raises UpstreamUnavailable when the gateway cannot be reached or
        refuses the request.
        """
