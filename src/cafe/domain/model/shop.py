"""Shop aggregate — opening state and tax policy."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from cafe.domain.exceptions import ShopClosedError, ValidationError
from cafe.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

DEFAULT_TAX_RATE = Decimal("0.08")


@dataclass
class Shop:
    name: str
    tax_rate: Decimal = DEFAULT_TAX_RATE
    is_open: bool = True

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Shop name is required")
        if not isinstance(self.tax_rate, Decimal):
            raise ValidationError(
                f"Tax rate must be a Decimal, got {type(self.tax_rate).__name__}"
            )
        if not Decimal("0") <= self.tax_rate < Decimal("1"):
            raise ValidationError(f"Tax rate must be between 0 and 1, got {self.tax_rate}")

    def open(self) -> None:
        self.is_open = True
        logger.info("%s is now OPEN", self.name)

    def close(self) -> None:
        self.is_open = False
        logger.info("%s is now CLOSED", self.name)

    def ensure_open(self) -> None:
        if not self.is_open:
            raise ShopClosedError(f"Sorry, {self.name} is currently closed.")

    def tax_on(self, subtotal: Money) -> Money:
        """Tax due on *subtotal*, rounded to cents."""
        return (subtotal * self.tax_rate).rounded()
