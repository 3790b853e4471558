"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from wds.domain.model.order import Order
from wds.domain.model.order_status import OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_status(self, statuses: list[OrderStatus]) -> list[Order]:
        """Return orders in any of *statuses*, oldest first."""

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Order]:
        """Return every order placed by a customer, newest first."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order, assigning its ID."""

    @abstractmethod
    def compare_and_save(
        self,
        order: Order,
        expected_status: OrderStatus,
        expected_driver_id: str | None,
    ) -> bool:
        """Persist *order* only if the stored copy is unchanged.

        The check and the write are one atomic step: the update applies
        only while the stored order still has *expected_status* and
        *expected_driver_id*.  Returns False (and writes nothing) when
        another writer got there first.
        """
