"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from wds.domain.exceptions import ValidationError
from wds.domain.model.value_objects import Money

# Products sold in this unit come in a returnable container that the
# customer either exchanges or rents at checkout.
RENTABLE_UNIT = "galon"


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money
    type: str = ""
    unit: str | None = None
    description: str = ""

    @property
    def is_rentable(self) -> bool:
        return self.unit == RENTABLE_UNIT

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price


DEFAULT_CATALOG: tuple[Product, ...] = (
    Product(
        id="1",
        name="Air Murni RO",
        price=Money(25000),
        type="Natural Mineral",
        unit=RENTABLE_UNIT,
        description="Air mineral alami murni dari mata air pegunungan",
    ),
    Product(
        id="2",
        name="Es Kristal 5kg",
        price=Money(20000),
        type="Reverse Osmosis",
        unit="bungkus",
        description="Air murni canggih melalui proses RO",
    ),
    Product(
        id="3",
        name="Es Kristal 10kg",
        price=Money(30000),
        type="pH 8.5+",
        unit="bungkus",
        description="Air alkali pH tinggi untuk hidrasi yang lebih baik",
    ),
    Product(
        id="4",
        name="Es Kristal 20kg",
        price=Money(28000),
        type="O2 Enhanced",
        unit="bungkus",
        description="Air yang diperkaya oksigen untuk vitalitas yang lebih baik",
    ),
)
