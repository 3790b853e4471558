"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from wds.domain.model.order import (
    Order,
    OrderLineItem,
    PaymentMethod,
    StatusChange,
)
from wds.domain.model.order_status import OrderStatus
from wds.domain.model.value_objects import Money, Quantity
from wds.domain.repository.order_repository import OrderRepository
from wds.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._file.load()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_by_status(self, statuses: list[OrderStatus]) -> list[Order]:
        wanted = {s.value for s in statuses}
        orders = [self._to_domain(r) for r in self._file.load() if r["status"] in wanted]
        return sorted(orders, key=lambda o: (o.created_at, o.id))

    def list_by_customer(self, customer_id: str) -> list[Order]:
        orders = [
            self._to_domain(r) for r in self._file.load() if r["customer_id"] == customer_id
        ]
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)

    def add(self, order: Order) -> None:
        with self._file.locked():
            orders = self._file.load()
            order.id = max((o["id"] for o in orders), default=0) + 1
            orders.append(self._to_raw(order))
            self._file.persist(orders)

    def compare_and_save(
        self,
        order: Order,
        expected_status: OrderStatus,
        expected_driver_id: str | None,
    ) -> bool:
        with self._file.locked():
            orders = self._file.load()
            for i, raw in enumerate(orders):
                if raw["id"] != order.id:
                    continue
                if (
                    raw["status"] != expected_status.value
                    or raw.get("driver_id") != expected_driver_id
                ):
                    return False
                orders[i] = self._to_raw(order)
                self._file.persist(orders)
                return True
            return False

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "status": order.status.value,
            "driver_id": order.driver_id,
            "shipping_address": order.shipping_address,
            "payment_method": order.payment_method.value,
            "currency": order.total_amount.currency,
            "total_amount": order.total_amount.amount,
            "delivery_fee": order.delivery_fee.amount,
            "rented_gallons": order.rented_gallons,
            "rental_fee": order.rental_fee.amount,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": item.unit_price.amount,
                    "rentable": item.rentable,
                }
                for item in order.items
            ],
            "status_history": [
                {
                    "status": change.status.value,
                    "actor_id": change.actor_id,
                    "at": change.at.isoformat(),
                }
                for change in order.status_history
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "IDR")
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(i["unit_price"], currency),
                rentable=i.get("rentable", False),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            items=items,
            shipping_address=raw["shipping_address"],
            payment_method=PaymentMethod(raw["payment_method"]),
            total_amount=Money(raw["total_amount"], currency),
            delivery_fee=Money(raw.get("delivery_fee", 0), currency),
            rented_gallons=raw.get("rented_gallons", 0),
            rental_fee=Money(raw.get("rental_fee", 0), currency),
            status=OrderStatus(raw["status"]),
            driver_id=raw.get("driver_id"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            status_history=[
                StatusChange(
                    status=OrderStatus(h["status"]),
                    actor_id=h.get("actor_id"),
                    at=datetime.fromisoformat(h["at"]),
                )
                for h in raw.get("status_history", [])
            ],
        )
