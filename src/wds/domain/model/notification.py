"""In-app notification shown in a user's notification inbox."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class NotificationType(Enum):
    ORDER = "order"
    DELIVERY = "delivery"
    PROMO = "promo"
    SYSTEM = "system"


@dataclass
class Notification:
    id: int | None
    user_id: str
    type: NotificationType
    title: str
    message: str
    time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    read: bool = False

    def mark_read(self) -> None:
        self.read = True
