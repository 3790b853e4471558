"""Application services: Show / Save Profile use cases."""

from __future__ import annotations

from wds.domain.exceptions import EntityNotFoundError, ValidationError
from wds.domain.model.order_status import ActorRole
from wds.domain.model.profile import Profile
from wds.domain.repository.profile_repository import ProfileRepository


class ShowProfileHandler:

    def __init__(self, profile_repo: ProfileRepository) -> None:
        self._profile_repo = profile_repo

    def handle(self, user_id: str) -> Profile:
        profile = self._profile_repo.get_by_id(user_id)
        if profile is None:
            raise EntityNotFoundError(f"User '{user_id}' not found")
        return profile


class SaveProfileHandler:

    def __init__(self, profile_repo: ProfileRepository) -> None:
        self._profile_repo = profile_repo

    def handle(
        self,
        user_id: str,
        full_name: str | None = None,
        address: str | None = None,
        phone: str | None = None,
        role: ActorRole | None = None,
        email: str | None = None,
        vehicle_number: str | None = None,
        avatar_url: str | None = None,
    ) -> Profile:
        """Create the profile on first save, update contact details after."""
        profile = self._profile_repo.get_by_id(user_id)
        if profile is None:
            if not full_name or not full_name.strip():
                raise ValidationError("Full name is required for a new profile")
            profile = Profile(
                id=user_id,
                full_name=full_name.strip(),
                role=role or ActorRole.CUSTOMER,
                email=email,
            )
        elif role is not None and role != profile.role:
            raise ValidationError("A profile's role cannot be changed")

        profile.update_contact(full_name=full_name, address=address, phone=phone)
        if email is not None:
            profile.email = email
        if avatar_url is not None:
            profile.avatar_url = avatar_url or None
        if vehicle_number is not None:
            profile.assign_vehicle(vehicle_number)
        self._profile_repo.save(profile)
        return profile
