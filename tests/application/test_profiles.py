"""Integration tests for profile management."""

import pytest

from tests.fakes import FakeProfileRepository
from wds.application.actors import resolve_actor
from wds.application.manage_profile import SaveProfileHandler, ShowProfileHandler
from wds.domain.exceptions import EntityNotFoundError, ValidationError
from wds.domain.model.order_status import Actor, ActorRole
from wds.domain.model.profile import Profile


def _setup():
    return FakeProfileRepository([
        Profile(id="driver-a", full_name="Agus", role=ActorRole.DRIVER, vehicle_number="B 1234 XY"),
    ])


class TestSaveProfile:

    def test_first_save_creates_customer(self):
        repo = _setup()
        profile = SaveProfileHandler(repo).handle(
            "cust-1", full_name=" Siti ", address="Jl. Melati 5", phone="0812"
        )
        assert profile.role == ActorRole.CUSTOMER
        assert profile.full_name == "Siti"
        assert repo.get_by_id("cust-1").address == "Jl. Melati 5"

    def test_new_profile_needs_name(self):
        with pytest.raises(ValidationError, match="Full name is required"):
            SaveProfileHandler(_setup()).handle("cust-1", address="Jl. Melati 5")

    def test_update_keeps_untouched_fields(self):
        repo = _setup()
        SaveProfileHandler(repo).handle("driver-a", phone="0813")
        profile = repo.get_by_id("driver-a")
        assert profile.full_name == "Agus"
        assert profile.phone == "0813"
        assert profile.vehicle_number == "B 1234 XY"

    def test_blank_name_rejected_on_update(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            SaveProfileHandler(_setup()).handle("driver-a", full_name="  ")

    def test_role_cannot_change(self):
        with pytest.raises(ValidationError, match="role cannot be changed"):
            SaveProfileHandler(_setup()).handle("driver-a", role=ActorRole.SUPPLIER)


class TestShowProfile:

    def test_unknown_user(self):
        with pytest.raises(EntityNotFoundError, match="'nobody'"):
            ShowProfileHandler(_setup()).handle("nobody")

    def test_resolve_actor_uses_profile_role(self):
        assert resolve_actor(_setup(), "driver-a") == Actor(ActorRole.DRIVER, "driver-a")


class TestDriverDetails:

    def test_driver_sets_vehicle_and_avatar(self):
        repo = _setup()
        SaveProfileHandler(repo).handle(
            "driver-a", vehicle_number=" B 9876 ZZ ", avatar_url="https://cdn.example/agus.png"
        )
        profile = repo.get_by_id("driver-a")
        assert profile.vehicle_number == "B 9876 ZZ"
        assert profile.avatar_url == "https://cdn.example/agus.png"

    def test_customer_cannot_have_vehicle(self):
        repo = _setup()
        with pytest.raises(ValidationError, match="Only drivers"):
            SaveProfileHandler(repo).handle("cust-1", full_name="Siti", vehicle_number="B 1 A")
        assert repo.get_by_id("cust-1") is None
