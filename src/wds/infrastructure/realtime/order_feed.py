"""In-process publish/subscribe feed of order changes.

Subscribers choose what they hear about: one order (customer tracking
screen), a set of statuses (driver job board), or everything (supplier
dashboard).  Handlers run synchronously in publish order; one failing
handler is logged and does not stop delivery to the others.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from wds.domain.gateway.order_events import OrderChanged, OrderEventPublisher
from wds.domain.model.order_status import OrderStatus

logger = logging.getLogger(__name__)

OrderChangeHandler = Callable[[OrderChanged], None]


@dataclass(frozen=True, eq=False)
class _Route:
    handler: OrderChangeHandler
    order_id: int | None
    statuses: frozenset[str] | None

    def matches(self, event: OrderChanged) -> bool:
        if self.order_id is not None and event.order_id != self.order_id:
            return False
        if self.statuses is not None and event.status not in self.statuses:
            return False
        return True


class Subscription:

    def __init__(self, feed: InMemoryOrderFeed, route: _Route) -> None:
        self._feed = feed
        self._route = route

    def cancel(self) -> None:
        self._feed._remove(self._route)


class InMemoryOrderFeed(OrderEventPublisher):

    def __init__(self) -> None:
        self._routes: list[_Route] = []
        self._lock = threading.Lock()

    def subscribe(
        self,
        handler: OrderChangeHandler,
        order_id: int | None = None,
        statuses: Iterable[OrderStatus] | None = None,
    ) -> Subscription:
        route = _Route(
            handler=handler,
            order_id=order_id,
            statuses=frozenset(s.value for s in statuses) if statuses is not None else None,
        )
        with self._lock:
            self._routes.append(route)
        return Subscription(self, route)

    def publish(self, event: OrderChanged) -> None:
        with self._lock:
            routes = [r for r in self._routes if r.matches(event)]

        logger.debug(
            "Order #%s changed %s; %d subscriber(s)", event.order_id, event.changes, len(routes)
        )
        for route in routes:
            try:
                route.handler(event)
            except Exception:
                logger.error(
                    "Subscriber %r failed on order #%s", route.handler, event.order_id,
                    exc_info=True,
                )

    def _remove(self, route: _Route) -> None:
        with self._lock:
            if route in self._routes:
                self._routes.remove(route)
