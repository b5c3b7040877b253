"""Application service: Place Order use case.

The shop must be open.  The drink is stored as built; its price is
read from the wrap chain whenever a receipt or report asks for it.
"""

from __future__ import annotations

import logging
from datetime import datetime

from cafe.application.dto import OrderDTO, order_to_dto
from cafe.domain.model.beverage import Beverage
from cafe.domain.model.order import Order
from cafe.domain.model.shop import Shop
from cafe.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, order_repo: OrderRepository, shop: Shop) -> None:
        self._order_repo = order_repo
        self._shop = shop

    def handle(
        self,
        customer_name: str,
        beverage: Beverage,
        placed_at: datetime | None = None,
    ) -> OrderDTO:
        self._shop.ensure_open()

        order = Order.create(customer_name, beverage, placed_at=placed_at)
        self._order_repo.save(order)

        logger.info("Order #%d placed for %s", order.number, order.customer_name)
        logger.info(
            "Estimated preparation time: %d minutes", beverage.preparation_time
        )
        return order_to_dto(order)
