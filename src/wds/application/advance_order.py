"""Application service: Advance Order use case.

Covers every single-step status change that is not a driver claim:
supplier preparation steps, driver arrival and customer confirmation.
"""

from __future__ import annotations

from wds.application.dto import OrderDTO, order_to_dto
from wds.domain.gateway.order_events import OrderChanged, OrderEventPublisher
from wds.domain.model.order_status import Actor, OrderStatus
from wds.domain.repository.order_repository import OrderRepository
from wds.domain.service.order_lifecycle_service import OrderLifecycleService


class AdvanceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        publisher: OrderEventPublisher,
    ) -> None:
        self._order_repo = order_repo
        self._publisher = publisher

    def handle(self, order_id: int, target: OrderStatus, actor: Actor) -> OrderDTO:
        svc = OrderLifecycleService(self._order_repo)
        order = svc.transition(order_id, target, actor)

        self._publisher.publish(
            OrderChanged(order_id, {"status": order.status.value})
        )
        return order_to_dto(order)
