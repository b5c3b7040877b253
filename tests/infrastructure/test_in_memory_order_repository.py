"""Tests for the in-memory order repository."""

from cafe.domain.model.beverage import PlainCoffee
from cafe.domain.model.order import Order
from cafe.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)


class TestOrderNumbering:

    def test_save_assigns_sequential_numbers(self):
        repo = InMemoryOrderRepository()
        first = Order.create("Alice", PlainCoffee())
        second = Order.create("Bob", PlainCoffee())
        repo.save(first)
        repo.save(second)
        assert (first.number, second.number) == (1, 2)

    def test_resave_keeps_number(self):
        repo = InMemoryOrderRepository()
        order = Order.create("Alice", PlainCoffee())
        repo.save(order)
        order.complete()
        repo.save(order)
        assert order.number == 1
        assert repo.list_all() == [order]
        assert repo.get_by_number(1).completed

    def test_unknown_number(self):
        assert InMemoryOrderRepository().get_by_number(3) is None
