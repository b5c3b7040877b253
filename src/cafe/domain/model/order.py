"""Order aggregate — one customer, one finished drink.

The drink is held by reference exactly as it was built; the order
reads its price and preparation time through the beverage interface
and never looks inside the wrap chain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from cafe.domain.exceptions import ValidationError
from cafe.domain.model.beverage import Beverage


@dataclass
class Order:
    """Aggregate root for café orders.

    Use ``Order.create()`` for new orders.  ``number`` stays ``None``
    until the repository assigns one.
    """

    number: int | None
    customer_name: str
    beverage: Beverage
    placed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed: bool = False

    @staticmethod
    def create(
        customer_name: str,
        beverage: Beverage,
        placed_at: datetime | None = None,
    ) -> Order:
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        if beverage is None:
            raise ValidationError("Order must contain a beverage")
        if not beverage.is_available:
            raise ValidationError(f"{beverage.description} is not available")

        order = Order(number=None, customer_name=customer_name.strip(), beverage=beverage)
        if placed_at is not None:
            order.placed_at = placed_at
        return order

    def complete(self) -> None:
        if self.completed:
            raise ValidationError(f"Order #{self.number} is already completed")
        self.completed = True

    @property
    def status(self) -> str:
        return "Ready" if self.completed else "In preparation"
