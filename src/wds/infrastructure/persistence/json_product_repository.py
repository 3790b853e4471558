"""JSON-file-backed implementation of ProductRepository.

An empty file is seeded with the default catalog.
"""

from __future__ import annotations

from pathlib import Path

from wds.domain.model.product import DEFAULT_CATALOG, Product
from wds.domain.model.value_objects import Money
from wds.domain.repository.product_repository import ProductRepository
from wds.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, seed: bool = True) -> None:
        self._file = JsonFile(file_path)
        if seed:
            with self._file.locked():
                if not self._file.load():
                    self._persist({p.id: p for p in DEFAULT_CATALOG})

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        products = self._load()
        return products.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        with self._file.locked():
            products = self._load()
            products[product.id] = product
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(item["price"], item.get("currency", "IDR")),
                type=item.get("type", ""),
                unit=item.get("unit"),
                description=item.get("description", ""),
            )
            for item in self._file.load()
        }

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist(
            [
                {
                    "id": p.id,
                    "name": p.name,
                    "price": p.price.amount,
                    "currency": p.price.currency,
                    "type": p.type,
                    "unit": p.unit,
                    "description": p.description,
                }
                for p in products.values()
            ]
        )
