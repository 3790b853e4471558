"""Application service: Show Order use case (query).

When a profile repository is given, the assigned driver's name and vehicle
are included so the customer can recognise who is coming.
"""

from __future__ import annotations

from wds.application.dto import OrderDTO, order_to_dto
from wds.domain.exceptions import EntityNotFoundError
from wds.domain.repository.order_repository import OrderRepository
from wds.domain.repository.profile_repository import ProfileRepository


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        profile_repo: ProfileRepository | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._profile_repo = profile_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        driver = None
        if order.driver_id is not None and self._profile_repo is not None:
            driver = self._profile_repo.get_by_id(order.driver_id)
        return order_to_dto(order, driver)
