"""Application service: Claim Order use case.

A driver takes a ready order for delivery.  Only one driver can win; the
others get ClaimConflict and should reload the list of available jobs.
"""

from __future__ import annotations

from wds.application.dto import OrderDTO, order_to_dto
from wds.domain.gateway.order_events import OrderChanged, OrderEventPublisher
from wds.domain.model.order_status import Actor
from wds.domain.repository.order_repository import OrderRepository
from wds.domain.service.order_lifecycle_service import OrderLifecycleService


class ClaimOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        publisher: OrderEventPublisher,
    ) -> None:
        self._order_repo = order_repo
        self._publisher = publisher

    def handle(self, order_id: int, driver: Actor) -> OrderDTO:
        svc = OrderLifecycleService(self._order_repo)
        order = svc.claim(order_id, driver)

        self._publisher.publish(
            OrderChanged(
                order_id,
                {"status": order.status.value, "driver_id": order.driver_id},
            )
        )
        return order_to_dto(order)
