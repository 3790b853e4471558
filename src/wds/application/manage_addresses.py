"""Application services: the address book.

A customer keeps named delivery addresses ("Rumah", "Kantor", ...) and
picks one at checkout.  Every operation is scoped to the owner: another
user's address behaves as if it did not exist.
"""

from __future__ import annotations

from wds.domain.exceptions import EntityNotFoundError
from wds.domain.model.address import Address
from wds.domain.repository.address_repository import AddressRepository


def _owned(repo: AddressRepository, user_id: str, address_id: int) -> Address:
    address = repo.get_by_id(address_id)
    if address is None or address.user_id != user_id:
        raise EntityNotFoundError(f"Address #{address_id} not found")
    return address


class ListAddressesHandler:

    def __init__(self, address_repo: AddressRepository) -> None:
        self._address_repo = address_repo

    def handle(self, user_id: str) -> list[Address]:
        return self._address_repo.list_for_user(user_id)


class ShowAddressHandler:

    def __init__(self, address_repo: AddressRepository) -> None:
        self._address_repo = address_repo

    def handle(self, user_id: str, address_id: int) -> Address:
        return _owned(self._address_repo, user_id, address_id)


class AddAddressHandler:

    def __init__(self, address_repo: AddressRepository) -> None:
        self._address_repo = address_repo

    def handle(self, user_id: str, name: str, address: str) -> Address:
        saved = Address(id=None, user_id=user_id, name=name.strip(), address=address.strip())
        self._address_repo.save(saved)
        return saved


class UpdateAddressHandler:

    def __init__(self, address_repo: AddressRepository) -> None:
        self._address_repo = address_repo

    def handle(
        self,
        user_id: str,
        address_id: int,
        name: str | None = None,
        address: str | None = None,
    ) -> Address:
        saved = _owned(self._address_repo, user_id, address_id)
        saved.update(name=name, address=address)
        self._address_repo.save(saved)
        return saved


class DeleteAddressHandler:

    def __init__(self, address_repo: AddressRepository) -> None:
        self._address_repo = address_repo

    def handle(self, user_id: str, address_id: int) -> None:
        _owned(self._address_repo, user_id, address_id)
        self._address_repo.delete(address_id)
