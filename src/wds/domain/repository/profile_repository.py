"""Abstract repository for user profiles."""

from __future__ import annotations

from abc import ABC, abstractmethod

from wds.domain.model.order_status import ActorRole
from wds.domain.model.profile import Profile


class ProfileRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> Profile | None:
        """Return a profile by user ID, or None if not found."""

    @abstractmethod
    def list_by_role(self, role: ActorRole) -> list[Profile]:
        """Return every profile with the given role."""

    @abstractmethod
    def save(self, profile: Profile) -> None:
        """Persist a new or updated profile."""
