"""Shopping cart. Ephemeral; it lives only for one shopping session.

Nothing here is persisted; the cart is turned into order line items when
checkout succeeds.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from wds.domain.exceptions import ValidationError
from wds.domain.model.product import Product
from wds.domain.model.value_objects import Money

CartListener = Callable[["Cart"], None]


@dataclass
class CartItem:
    product: Product
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


class Cart:
    """Ordered collection of cart lines, one per product.

    Listeners are called synchronously after every change so values derived
    from the cart never go stale.
    """

    def __init__(self) -> None:
        self._items: list[CartItem] = []
        self._listeners: list[CartListener] = []

    def subscribe(self, listener: CartListener) -> None:
        self._listeners.append(listener)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> None:
        if quantity <= 0:
            raise ValidationError(f"Quantity must be positive, got {quantity}")
        existing = self.get(product.id)
        if existing is not None:
            existing.quantity += quantity
        else:
            self._items.append(CartItem(product=product, quantity=quantity))
        self._changed()

    def remove(self, product_id: str) -> None:
        self._items = [i for i in self._items if i.product.id != product_id]
        self._changed()

    def update_quantity(self, product: Product, quantity: int) -> None:
        """Set the quantity of a line; zero or less removes it."""
        if quantity <= 0:
            self.remove(product.id)
            return
        existing = self.get(product.id)
        if existing is not None:
            existing.quantity = quantity
        else:
            self._items.append(CartItem(product=product, quantity=quantity))
        self._changed()

    def clear(self) -> None:
        self._items = []
        self._changed()

    # --- Queries --------------------------------------------------------------

    def get(self, product_id: str) -> CartItem | None:
        for item in self._items:
            if item.product.id == product_id:
                return item
        return None

    @property
    def items(self) -> list[CartItem]:
        return list(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def rentable_units(self) -> int:
        return sum(item.quantity for item in self._items if item.product.is_rentable)

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.line_total
        return result

    def _changed(self) -> None:
        for listener in self._listeners:
            listener(self)
