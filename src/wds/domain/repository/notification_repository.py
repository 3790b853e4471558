"""Abstract repository for in-app notifications."""

from __future__ import annotations

from abc import ABC, abstractmethod

from wds.domain.model.notification import Notification


class NotificationRepository(ABC):

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Notification]:
        """Return a user's notifications, newest first."""

    @abstractmethod
    def save(self, notification: Notification) -> None:
        """Persist a new or updated notification, assigning an ID if needed."""
