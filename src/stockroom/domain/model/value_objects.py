"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from stockroom.domain.exceptions import ValidationError

_WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Money:
    """Unit price of a product lot.

    Uses Decimal to avoid floating-point rounding errors. Zero is allowed
    (giveaways, samples); negative, NaN and infinite amounts are not.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce user input to Money, rejecting anything non-numeric."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Used for restock amounts: adding zero or negative units is rejected.
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

    @staticmethod
    def of(raw: str | int) -> Quantity:
        """Parse a whole number from user input ("5", 5); "5.5" or "five" fail."""
        if isinstance(raw, int) and not isinstance(raw, bool):
            return Quantity(raw)
        text = str(raw).strip()
        if not _WHOLE_NUMBER.fullmatch(text):
            raise ValidationError(f"Invalid quantity: {raw!r}")
        return Quantity(int(text))
