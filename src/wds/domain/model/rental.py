"""Gallon rental selection made at checkout.

A customer ordering gallons either brings empty containers to exchange or
rents new ones for a small fee.  How many they rent is a bounded counter:

    0 <= rented_quantity <= min(total_rentable_units, cap)

The bound depends on the cart, which can change after the customer picked
a number, so the counter is re-clamped on every change to either input.
"""

from __future__ import annotations

from wds.domain.model.value_objects import Money

HARD_CAP = 100
RENTAL_FEE_PER_UNIT = Money(1000)


def clamp(quantity: int, total_rentable_units: int, cap: int = HARD_CAP) -> int:
    """Force *quantity* into ``[0, min(total_rentable_units, cap)]``."""
    upper = max(0, min(total_rentable_units, cap))
    return max(0, min(quantity, upper))


class RentalSelection:
    """How many of the cart's rentable units the customer rents."""

    def __init__(
        self,
        total_rentable_units: int = 0,
        fee_per_unit: Money = RENTAL_FEE_PER_UNIT,
        cap: int = HARD_CAP,
    ) -> None:
        self._total = max(0, total_rentable_units)
        self._cap = cap
        self._fee_per_unit = fee_per_unit
        self._rented = 0

    @property
    def rented_quantity(self) -> int:
        return self._rented

    @property
    def total_rentable_units(self) -> int:
        return self._total

    @property
    def max_allowed(self) -> int:
        return clamp(self._cap, self._total, self._cap)

    @property
    def exchanged_units(self) -> int:
        """Units the customer swaps with their own empty containers."""
        return self._total - self._rented

    @property
    def rental_fee(self) -> Money:
        return self._fee_per_unit * self._rented

    # --- Mutations ------------------------------------------------------------

    def change(self, delta: int) -> int:
        self._rented = clamp(self._rented + delta, self._total, self._cap)
        return self._rented

    def increment(self) -> int:
        return self.change(1)

    def decrement(self) -> int:
        return self.change(-1)

    def set(self, quantity: int) -> int:
        self._rented = clamp(quantity, self._total, self._cap)
        return self._rented

    def sync(self, total_rentable_units: int) -> int:
        """Adopt a new cart total and re-clamp the rented quantity."""
        self._total = max(0, total_rentable_units)
        self._rented = clamp(self._rented, self._total, self._cap)
        return self._rented
