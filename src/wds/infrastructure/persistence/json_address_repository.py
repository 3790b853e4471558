"""JSON-file-backed implementation of AddressRepository."""

from __future__ import annotations

from pathlib import Path

from wds.domain.model.address import Address
from wds.domain.repository.address_repository import AddressRepository
from wds.infrastructure.persistence.json_file import JsonFile


class JsonAddressRepository(AddressRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, address_id: int) -> Address | None:
        for raw in self._file.load():
            if raw["id"] == address_id:
                return self._to_domain(raw)
        return None

    def list_for_user(self, user_id: str) -> list[Address]:
        return [self._to_domain(r) for r in self._file.load() if r["user_id"] == user_id]

    def save(self, address: Address) -> None:
        with self._file.locked():
            records = self._file.load()
            if address.id is None:
                address.id = max((r["id"] for r in records), default=0) + 1
                records.append(self._to_raw(address))
            else:
                records = [
                    self._to_raw(address) if r["id"] == address.id else r for r in records
                ]
            self._file.persist(records)

    def delete(self, address_id: int) -> None:
        with self._file.locked():
            records = [r for r in self._file.load() if r["id"] != address_id]
            self._file.persist(records)

    @staticmethod
    def _to_raw(address: Address) -> dict:
        return {
            "id": address.id,
            "user_id": address.user_id,
            "name": address.name,
            "address": address.address,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Address:
        return Address(
            id=raw["id"],
            user_id=raw["user_id"],
            name=raw["name"],
            address=raw["address"],
        )
