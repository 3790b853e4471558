"""User profile: identity, contact details and role of an app user."""

from __future__ import annotations

from dataclasses import dataclass

from wds.domain.exceptions import ValidationError
from wds.domain.model.order_status import Actor, ActorRole


@dataclass
class Profile:
    id: str
    full_name: str
    role: ActorRole = ActorRole.CUSTOMER
    email: str | None = None
    address: str = ""
    phone: str = ""
    avatar_url: str | None = None
    vehicle_number: str | None = None

    def as_actor(self) -> Actor:
        return Actor(role=self.role, user_id=self.id)

    def update_contact(
        self,
        full_name: str | None = None,
        address: str | None = None,
        phone: str | None = None,
    ) -> None:
        if full_name is not None:
            if not full_name.strip():
                raise ValidationError("Full name cannot be empty")
            self.full_name = full_name.strip()
        if address is not None:
            self.address = address.strip()
        if phone is not None:
            self.phone = phone.strip()

    def assign_vehicle(self, vehicle_number: str) -> None:
        if self.role != ActorRole.DRIVER:
            raise ValidationError("Only drivers have a vehicle number")
        self.vehicle_number = vehicle_number.strip() or None
