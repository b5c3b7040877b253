"""Application service: Show Receipt use case (query).

Subtotal is the drink's cost rounded to cents; tax is the shop's flat
rate on that subtotal, also rounded, so subtotal + tax == total as
printed.
"""

from __future__ import annotations

from cafe.application.dto import ReceiptDTO, format_timestamp
from cafe.domain.exceptions import EntityNotFoundError
from cafe.domain.model.shop import Shop
from cafe.domain.repository.order_repository import OrderRepository


class ShowReceiptHandler:

    def __init__(self, order_repo: OrderRepository, shop: Shop) -> None:
        self._order_repo = order_repo
        self._shop = shop

    def handle(self, order_number: int) -> ReceiptDTO:
        self._shop.ensure_open()

        order = self._order_repo.get_by_number(order_number)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_number} not found")

        beverage = order.beverage
        subtotal = beverage.cost.rounded()
        tax = self._shop.tax_on(subtotal)

        return ReceiptDTO(
            shop_name=self._shop.name,
            order_number=order.number,  # type: ignore[arg-type]
            customer_name=order.customer_name,
            placed_at=format_timestamp(order),
            item=beverage.description,
            size=str(beverage.size),
            ingredients=beverage.ingredients,
            subtotal=str(subtotal),
            tax_rate_percent=f"{self._shop.tax_rate * 100:.0f}",
            tax=str(tax),
            total=str(subtotal + tax),
            calories=beverage.calories,
            preparation_time=beverage.preparation_time,
            status=order.status,
        )
