"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from decimal import Decimal

from cafe.domain.model.shop import Shop
from cafe.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)

SHOP_NAME = "Bean There Coffee"
TAX_RATE = Decimal("0.08")


def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


def coffee_shop(name: str = SHOP_NAME, tax_rate: Decimal = TAX_RATE) -> Shop:
    return Shop(name=name, tax_rate=tax_rate)
