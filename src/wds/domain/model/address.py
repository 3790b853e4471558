"""Saved delivery address in a user's address book."""

from __future__ import annotations

from dataclasses import dataclass

from wds.domain.exceptions import ValidationError


@dataclass
class Address:
    id: int | None
    user_id: str
    name: str  # label shown in the picker, e.g. "Rumah" or "Kantor"
    address: str

    def __post_init__(self) -> None:
        self._validate(self.name, self.address)

    def update(self, name: str | None = None, address: str | None = None) -> None:
        new_name = name.strip() if name is not None else self.name
        new_address = address.strip() if address is not None else self.address
        self._validate(new_name, new_address)
        self.name, self.address = new_name, new_address

    @staticmethod
    def _validate(name: str, address: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Address name is required")
        if not address or not address.strip():
            raise ValidationError("Address is required")
