"""JSON-file-backed implementation of ProfileRepository."""

from __future__ import annotations

from pathlib import Path

from wds.domain.model.order_status import ActorRole
from wds.domain.model.profile import Profile
from wds.domain.repository.profile_repository import ProfileRepository
from wds.infrastructure.persistence.json_file import JsonFile


class JsonProfileRepository(ProfileRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, user_id: str) -> Profile | None:
        for raw in self._file.load():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def list_by_role(self, role: ActorRole) -> list[Profile]:
        return [
            self._to_domain(raw) for raw in self._file.load() if raw["role"] == role.value
        ]

    def save(self, profile: Profile) -> None:
        with self._file.locked():
            records = [r for r in self._file.load() if r["id"] != profile.id]
            records.append(self._to_raw(profile))
            self._file.persist(records)

    @staticmethod
    def _to_raw(profile: Profile) -> dict:
        return {
            "id": profile.id,
            "full_name": profile.full_name,
            "role": profile.role.value,
            "email": profile.email,
            "address": profile.address,
            "phone": profile.phone,
            "avatar_url": profile.avatar_url,
            "vehicle_number": profile.vehicle_number,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Profile:
        return Profile(
            id=raw["id"],
            full_name=raw["full_name"],
            role=ActorRole(raw["role"]),
            email=raw.get("email"),
            address=raw.get("address", ""),
            phone=raw.get("phone", ""),
            avatar_url=raw.get("avatar_url"),
            vehicle_number=raw.get("vehicle_number"),
        )
