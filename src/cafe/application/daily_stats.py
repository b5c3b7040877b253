"""Application service: Daily Statistics use case (query)."""

from __future__ import annotations

from collections import Counter
from decimal import Decimal

from cafe.application.dto import DailyStatsDTO
from cafe.domain.model.value_objects import Money
from cafe.domain.repository.order_repository import OrderRepository


class DailyStatsHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> DailyStatsDTO:
        orders = self._order_repo.list_all()

        total = len(orders)
        completed = sum(1 for o in orders if o.completed)

        revenue = Money.zero()
        for order in orders:
            revenue = revenue + order.beverage.cost

        average = None
        if total:
            average = str(Money(revenue.amount / Decimal(total)).rounded())

        # Counter keeps first-seen order, so ties go to the earliest size.
        sizes = Counter(str(o.beverage.size) for o in orders)
        popular = sizes.most_common(1)[0][0] if sizes else "N/A"

        return DailyStatsDTO(
            total_orders=total,
            completed_orders=completed,
            pending_orders=total - completed,
            total_revenue=str(revenue),
            average_order_value=average,
            most_popular_size=popular,
        )
