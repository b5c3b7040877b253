"""In-memory implementation of OrderRepository.

Orders live for the lifetime of the process; the wrapped beverage is
kept by reference, not copied.
"""

from __future__ import annotations

from cafe.domain.model.order import Order
from cafe.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_number = 1

    # --- OrderRepository interface --------------------------------------------

    def get_by_number(self, number: int) -> Order | None:
        return self._store.get(number)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> None:
        if order.number is None:
            order.number = self._next_number
            self._next_number += 1
        self._store[order.number] = order
