"""Application service: Complete Order use case."""

from __future__ import annotations

import logging

from cafe.domain.exceptions import EntityNotFoundError
from cafe.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CompleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_number: int) -> None:
        order = self._order_repo.get_by_number(order_number)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_number} not found")

        order.complete()
        self._order_repo.save(order)
        logger.info("Order #%d completed for %s", order.number, order.customer_name)
