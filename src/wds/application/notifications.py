"""Application services: notification inbox use cases.

``DeliveryNotifier`` is an order-feed subscriber: each status change it
sees becomes a ``delivery`` notification in the customer's inbox.
"""

from __future__ import annotations

from wds.domain.gateway.order_events import OrderChanged
from wds.domain.model.notification import Notification, NotificationType
from wds.domain.repository.notification_repository import NotificationRepository
from wds.domain.repository.order_repository import OrderRepository

STATUS_MESSAGES = {
    "confirmed": ("Order confirmed", "We have received order #{id}."),
    "preparing": ("Preparing your order", "The depot is preparing order #{id}."),
    "ready_for_pickup": ("Ready for pickup", "Order #{id} is waiting for a driver."),
    "out_for_delivery": ("Out for delivery", "A driver is on the way with order #{id}."),
    "arrived": ("Driver has arrived", "Your driver has arrived with order #{id}."),
    "completed": ("Order completed", "Order #{id} is complete. Thank you!"),
}


class ListNotificationsHandler:

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    def handle(self, user_id: str) -> list[Notification]:
        return self._notification_repo.list_for_user(user_id)


class MarkNotificationsReadHandler:

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    def handle(self, user_id: str) -> int:
        """Mark every unread notification as read; returns how many changed."""
        unread = [n for n in self._notification_repo.list_for_user(user_id) if not n.read]
        for notification in unread:
            notification.mark_read()
            self._notification_repo.save(notification)
        return len(unread)


class DeliveryNotifier:

    def __init__(
        self,
        order_repo: OrderRepository,
        notification_repo: NotificationRepository,
    ) -> None:
        self._order_repo = order_repo
        self._notification_repo = notification_repo

    def __call__(self, event: OrderChanged) -> None:
        text = STATUS_MESSAGES.get(event.status or "")
        if text is None:
            return
        order = self._order_repo.get_by_id(event.order_id)
        if order is None:
            return
        title, message = text
        self._notification_repo.save(
            Notification(
                id=None,
                user_id=order.customer_id,
                type=NotificationType.DELIVERY,
                title=title,
                message=message.format(id=event.order_id),
            )
        )
