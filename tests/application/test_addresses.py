"""Integration tests for the address book."""

import pytest

from tests.fakes import FakeAddressRepository
from wds.application.manage_addresses import (
    AddAddressHandler,
    DeleteAddressHandler,
    ListAddressesHandler,
    ShowAddressHandler,
    UpdateAddressHandler,
)
from wds.domain.exceptions import EntityNotFoundError, ValidationError


def _setup():
    repo = FakeAddressRepository()
    add = AddAddressHandler(repo)
    home = add.handle("cust-1", "Rumah", "Jl. Melati 5")
    office = add.handle("cust-1", "Kantor", "Jl. Sudirman 1")
    add.handle("cust-2", "Rumah", "Jl. Kenanga 9")
    return repo, home, office


class TestAddressBook:

    def test_list_only_own_addresses(self):
        repo, home, office = _setup()
        names = [a.name for a in ListAddressesHandler(repo).handle("cust-1")]
        assert names == ["Rumah", "Kantor"]

    def test_add_requires_name_and_address(self):
        repo = FakeAddressRepository()
        with pytest.raises(ValidationError, match="name is required"):
            AddAddressHandler(repo).handle("cust-1", " ", "Jl. Melati 5")
        with pytest.raises(ValidationError, match="Address is required"):
            AddAddressHandler(repo).handle("cust-1", "Rumah", "")
        assert repo.list_for_user("cust-1") == []

    def test_update(self):
        repo, home, _ = _setup()
        UpdateAddressHandler(repo).handle("cust-1", home.id, address="Jl. Melati 7")
        saved = ShowAddressHandler(repo).handle("cust-1", home.id)
        assert saved.name == "Rumah"
        assert saved.address == "Jl. Melati 7"

    def test_update_with_blank_address_keeps_old_value(self):
        repo, home, _ = _setup()
        with pytest.raises(ValidationError):
            UpdateAddressHandler(repo).handle("cust-1", home.id, address="  ")
        assert repo.get_by_id(home.id).address == "Jl. Melati 5"

    def test_delete(self):
        repo, home, office = _setup()
        DeleteAddressHandler(repo).handle("cust-1", home.id)
        assert [a.id for a in repo.list_for_user("cust-1")] == [office.id]

    def test_other_users_address_is_hidden(self):
        repo, home, _ = _setup()
        with pytest.raises(EntityNotFoundError, match=f"#{home.id}"):
            ShowAddressHandler(repo).handle("cust-2", home.id)
        with pytest.raises(EntityNotFoundError):
            UpdateAddressHandler(repo).handle("cust-2", home.id, name="Mine")
        with pytest.raises(EntityNotFoundError):
            DeleteAddressHandler(repo).handle("cust-2", home.id)
        assert repo.get_by_id(home.id).name == "Rumah"
