"""Abstract repository for saved addresses."""

from __future__ import annotations

from abc import ABC, abstractmethod

from wds.domain.model.address import Address


class AddressRepository(ABC):

    @abstractmethod
    def get_by_id(self, address_id: int) -> Address | None:
        """Return an address by its ID, or None if not found."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Address]:
        """Return a user's saved addresses in the order they were added."""

    @abstractmethod
    def save(self, address: Address) -> None:
        """Insert or update; a new address gets its ID assigned."""

    @abstractmethod
    def delete(self, address_id: int) -> None:
        """Remove an address; unknown IDs are ignored."""
