"""Live order view: one observer's locally held copy of some orders.

Every screen (customer tracking, driver jobs, supplier queue) owns its own
view.  Incoming ``OrderChanged`` events are merged field by field into the
local record so data the event does not mention (line items, customer
details, ...) survives.  Orders whose new status falls outside the view's
filter are dropped.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

from wds.application.dto import OrderDTO
from wds.domain.gateway.order_events import OrderChanged
from wds.domain.model.order_status import OrderStatus


class LiveOrderView:

    def __init__(self, statuses: Iterable[OrderStatus] | None = None) -> None:
        self._statuses = (
            frozenset(s.value for s in statuses) if statuses is not None else None
        )
        self._orders: dict[int, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def load(self, orders: Iterable[OrderDTO]) -> None:
        """Seed the view from an initial query."""
        with self._lock:
            for dto in orders:
                if self._accepts(dto.status):
                    self._orders[dto.id] = dict(vars(dto))

    def apply(self, event: OrderChanged) -> None:
        with self._lock:
            status = event.changes.get("status")
            if status is not None and not self._accepts(status):
                self._orders.pop(event.order_id, None)
                return
            record = self._orders.setdefault(event.order_id, {"id": event.order_id})
            record.update(event.changes)

    __call__ = apply

    def get(self, order_id: int) -> dict[str, Any] | None:
        with self._lock:
            record = self._orders.get(order_id)
            return dict(record) if record is not None else None

    def order_ids(self) -> list[int]:
        with self._lock:
            return sorted(self._orders)

    def _accepts(self, status: str) -> bool:
        return self._statuses is None or status in self._statuses
