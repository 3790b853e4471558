"""Order change events and the publisher abstraction.

An ``OrderChanged`` carries only the fields that changed.  Observers merge
it into whatever they already hold for that order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class OrderChanged:
    order_id: int
    changes: dict[str, Any]
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def status(self) -> str | None:
        return self.changes.get("status")


class OrderEventPublisher(ABC):

    @abstractmethod
    def publish(self, event: OrderChanged) -> None:
        """Deliver *event* to every interested subscriber."""
