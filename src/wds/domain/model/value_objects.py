"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from wds.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount in the smallest unit of its currency.

    Rupiah has no minor unit in practice, so amounts are plain integers:
    ``Money(25000)`` is Rp 25.000.
    """

    amount: int
    currency: str = "IDR"

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError(
                f"Money amount must be an integer, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        grouped = f"{self.amount:,}".replace(",", ".")
        if self.currency == "IDR":
            return f"Rp {grouped}"
        return f"{self.currency} {grouped}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "IDR") -> Money:
        return Money(0, currency)

    @staticmethod
    def of(amount: str | int) -> Money:
        """Convenient factory that accepts ``25000``, ``"25000"`` or ``"25.000"``."""
        if isinstance(amount, int) and not isinstance(amount, bool):
            return Money(amount)
        try:
            return Money(int(str(amount).strip().replace(".", "")))
        except ValueError as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
