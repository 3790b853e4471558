"""Resolve an authenticated user id into an actor with a role."""

from __future__ import annotations

from wds.domain.exceptions import EntityNotFoundError
from wds.domain.model.order_status import Actor
from wds.domain.repository.profile_repository import ProfileRepository


def resolve_actor(profile_repo: ProfileRepository, user_id: str) -> Actor:
    profile = profile_repo.get_by_id(user_id)
    if profile is None:
        raise EntityNotFoundError(f"User '{user_id}' not found")
    return profile.as_actor()
