"""Integration tests for the notification inbox."""

from tests.fakes import FakeNotificationRepository, FakeOrderRepository
from wds.application.notifications import (
    DeliveryNotifier,
    ListNotificationsHandler,
    MarkNotificationsReadHandler,
)
from wds.domain.gateway.order_events import OrderChanged
from wds.domain.model.notification import Notification, NotificationType
from wds.domain.model.order import Order, OrderLineItem, PaymentMethod
from wds.domain.model.value_objects import Money, Quantity


def _setup():
    order_repo = FakeOrderRepository()
    order_repo.add(
        Order.create(
            customer_id="cust-1",
            items=[OrderLineItem("2", "Es Kristal 5kg", Quantity(1), Money(20000))],
            shipping_address="Jl. Melati 5",
            payment_method=PaymentMethod.CASH,
        )
    )
    notification_repo = FakeNotificationRepository()
    return order_repo, notification_repo


class TestDeliveryNotifier:

    def test_status_change_lands_in_customer_inbox(self):
        order_repo, notification_repo = _setup()
        notifier = DeliveryNotifier(order_repo, notification_repo)

        notifier(OrderChanged(1, {"status": "out_for_delivery", "driver_id": "driver-a"}))

        [notification] = ListNotificationsHandler(notification_repo).handle("cust-1")
        assert notification.type == NotificationType.DELIVERY
        assert notification.title == "Out for delivery"
        assert "#1" in notification.message
        assert not notification.read

    def test_changes_without_status_are_ignored(self):
        order_repo, notification_repo = _setup()
        DeliveryNotifier(order_repo, notification_repo)(OrderChanged(1, {"driver_id": "driver-a"}))
        assert notification_repo.list_for_user("cust-1") == []

    def test_unknown_order_is_ignored(self):
        order_repo, notification_repo = _setup()
        DeliveryNotifier(order_repo, notification_repo)(OrderChanged(7, {"status": "arrived"}))
        assert notification_repo.list_for_user("cust-1") == []


class TestMarkRead:

    def test_marks_only_unread(self):
        _, notification_repo = _setup()
        for title in ("Promo", "Welcome"):
            notification_repo.save(
                Notification(None, "cust-1", NotificationType.PROMO, title, "...")
            )
        notification_repo.list_for_user("cust-1")[0].mark_read()

        changed = MarkNotificationsReadHandler(notification_repo).handle("cust-1")

        assert changed == 1
        assert all(n.read for n in notification_repo.list_for_user("cust-1"))
        assert MarkNotificationsReadHandler(notification_repo).handle("cust-1") == 0
