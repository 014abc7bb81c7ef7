"""Vending machine with an identity and a stock level."""

from __future__ import annotations

from vendbus.kernel.errors import ValidationError

#: Stock level below which a machine is considered low on stock.
LOW_STOCK_THRESHOLD = 3


class Machine:
    """A vending machine with a mutable stock level.

    Stock is changed only through :meth:`withdraw` and :meth:`restock`,
    which the sale and refill handlers call. The level is not clamped at
    zero: an oversized sale leaves it negative.
    """

    def __init__(self, id: str, stock_level: int = 5) -> None:  # noqa: A002
        if not id:
            raise ValidationError("Machine id must not be empty")
        if stock_level < 0:
            raise ValidationError(
                f"Initial stock for machine '{id}' must be non-negative",
                errors=[{"field": "stock_level", "value": stock_level}],
            )
        self._id = id
        self._stock_level = stock_level

    @property
    def id(self) -> str:
        return self._id

    @property
    def stock_level(self) -> int:
        return self._stock_level

    def is_low(self, threshold: int = LOW_STOCK_THRESHOLD) -> bool:
        return self._stock_level < threshold

    def withdraw(self, quantity: int) -> int:
        """Remove *quantity* items and return the new stock level."""
        self._stock_level -= quantity
        return self._stock_level

    def restock(self, quantity: int) -> int:
        """Add *quantity* items and return the new stock level."""
        self._stock_level += quantity
        return self._stock_level

    def __repr__(self) -> str:  # pragma: no cover
        return f"Machine(id={self.id!r}, stock_level={self._stock_level})"


__all__ = ["LOW_STOCK_THRESHOLD", "Machine"]
