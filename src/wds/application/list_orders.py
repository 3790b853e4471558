"""Application service: order lists for each role (queries)."""

from __future__ import annotations

from wds.application.dto import OrderDTO, order_to_dto
from wds.domain.model.order_status import OrderStatus
from wds.domain.repository.order_repository import OrderRepository

SUPPLIER_QUEUE = [
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.READY_FOR_PICKUP,
    OrderStatus.OUT_FOR_DELIVERY,
]


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def supplier_queue(self) -> list[OrderDTO]:
        """Active orders the depot still has to deal with, oldest first."""
        orders = self._order_repo.list_by_status(SUPPLIER_QUEUE)
        return [order_to_dto(o) for o in orders]

    def available_jobs(self) -> list[OrderDTO]:
        """Unclaimed orders ready for pickup, newest first."""
        orders = self._order_repo.list_by_status([OrderStatus.READY_FOR_PICKUP])
        return [order_to_dto(o) for o in reversed(orders) if o.driver_id is None]

    def current_delivery(self, driver_id: str) -> OrderDTO | None:
        """The order a driver is currently delivering, if any."""
        orders = self._order_repo.list_by_status([OrderStatus.OUT_FOR_DELIVERY])
        for order in reversed(orders):
            if order.driver_id == driver_id:
                return order_to_dto(order)
        return None

    def history(self, customer_id: str) -> list[OrderDTO]:
        return [order_to_dto(o) for o in self._order_repo.list_by_customer(customer_id)]
