"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cafe.domain.model.order import Order


@dataclass(frozen=True)
class AddOnSpec:
    """Input: one add-on as requested (kind, option, quantity or intensity)."""

    kind: str
    variant: str | None = None
    amount: float | None = None


@dataclass(frozen=True)
class DrinkSpec:
    """Input: a base drink, its size and the add-ons in the order applied."""

    base: str
    size: str | None = None
    add_ons: list[AddOnSpec] = field(default_factory=list)


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed to the user."""

    number: int
    customer_name: str
    description: str
    size: str
    cost: str  # formatted, e.g. "$5.15"
    preparation_time: int
    status: str
    placed_at: str


@dataclass(frozen=True)
class ReceiptDTO:
    shop_name: str
    order_number: int
    customer_name: str
    placed_at: str
    item: str
    size: str
    ingredients: list[str]
    subtotal: str
    tax_rate_percent: str  # e.g. "8"
    tax: str
    total: str
    calories: int
    preparation_time: int
    status: str


@dataclass(frozen=True)
class MenuOptionDTO:
    name: str
    price: str
    unit: str  # "", "per packet", "per pump", ...


@dataclass(frozen=True)
class MenuSectionDTO:
    title: str
    options: list[MenuOptionDTO]


@dataclass(frozen=True)
class MenuDTO:
    shop_name: str
    sections: list[MenuSectionDTO]


@dataclass(frozen=True)
class DailyStatsDTO:
    total_orders: int
    completed_orders: int
    pending_orders: int
    total_revenue: str
    average_order_value: str | None  # None when there are no orders
    most_popular_size: str


def order_to_dto(order: Order) -> OrderDTO:
    beverage = order.beverage
    return OrderDTO(
        number=order.number,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        description=beverage.description,
        size=str(beverage.size),
        cost=str(beverage.cost),
        preparation_time=beverage.preparation_time,
        status=order.status,
        placed_at=format_timestamp(order),
    )


def format_timestamp(order: Order) -> str:
    return order.placed_at.strftime("%Y-%m-%d %H:%M:%S")
