"""JSON-file-backed implementation of NotificationRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from wds.domain.model.notification import Notification, NotificationType
from wds.domain.repository.notification_repository import NotificationRepository
from wds.infrastructure.persistence.json_file import JsonFile


class JsonNotificationRepository(NotificationRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def list_for_user(self, user_id: str) -> list[Notification]:
        items = [self._to_domain(r) for r in self._file.load() if r["user_id"] == user_id]
        return sorted(items, key=lambda n: (n.time, n.id), reverse=True)

    def save(self, notification: Notification) -> None:
        with self._file.locked():
            records = self._file.load()
            if notification.id is None:
                notification.id = max((r["id"] for r in records), default=0) + 1
                records.append(self._to_raw(notification))
            else:
                records = [
                    self._to_raw(notification) if r["id"] == notification.id else r
                    for r in records
                ]
            self._file.persist(records)

    @staticmethod
    def _to_raw(n: Notification) -> dict:
        return {
            "id": n.id,
            "user_id": n.user_id,
            "type": n.type.value,
            "title": n.title,
            "message": n.message,
            "time": n.time.isoformat(),
            "read": n.read,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Notification:
        return Notification(
            id=raw["id"],
            user_id=raw["user_id"],
            type=NotificationType(raw["type"]),
            title=raw["title"],
            message=raw["message"],
            time=datetime.fromisoformat(raw["time"]),
            read=raw.get("read", False),
        )
