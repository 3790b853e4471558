"""Domain service: Order Lifecycle.

Applies one status transition and persists it as a single conditional
update.  The order is loaded, the transition is validated on the aggregate,
and the write only lands if the stored order still has the status and
driver it had when loaded.  There is no read-then-write window in which a
second writer could slip in: whoever loses the race gets an error and no
state changes.
"""

from __future__ import annotations

import logging

from wds.domain.exceptions import ClaimConflict, EntityNotFoundError, InvalidTransition
from wds.domain.model.order import Order
from wds.domain.model.order_status import Actor, OrderStatus
from wds.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderLifecycleService:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def transition(self, order_id: int, target: OrderStatus, actor: Actor) -> Order:
        """Move an order to *target* on behalf of *actor*.

        Raises InvalidTransition when the edge is not allowed, and also when
        a concurrent writer changed the order first.
        """
        order = self._load(order_id)
        expected_status, expected_driver = order.status, order.driver_id

        order.transition_to(target, actor)

        if not self._order_repo.compare_and_save(order, expected_status, expected_driver):
            logger.warning(
                "Order #%s changed concurrently; %s -> %s by %s rejected",
                order_id, expected_status.value, target.value, actor.user_id,
            )
            raise InvalidTransition(
                f"Order #{order_id} was updated by someone else; refresh and retry"
            )

        logger.info(
            "Order #%s: %s -> %s by %s %s",
            order_id, expected_status.value, target.value,
            actor.role.value, actor.user_id,
        )
        return order

    def claim(self, order_id: int, driver: Actor) -> Order:
        """Assign *driver* to a ready order; first claim wins.

        Raises ClaimConflict when another driver holds the order, whether it
        was taken before or during this call, and InvalidTransition when the
        order is not ready for pickup.
        """
        order = self._load(order_id)
        if order.driver_id is not None:
            raise ClaimConflict(
                f"Order #{order_id} is no longer available "
                f"(status={order.status.value})"
            )

        order.claim(driver)

        if not self._order_repo.compare_and_save(order, OrderStatus.READY_FOR_PICKUP, None):
            logger.warning("Driver %s lost the claim race for order #%s", driver.user_id, order_id)
            raise ClaimConflict(f"Order #{order_id} was just taken by another driver")

        logger.info("Order #%s claimed by driver %s", order_id, driver.user_id)
        return order

    def _load(self, order_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order
