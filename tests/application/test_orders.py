"""Integration tests for the order use cases.

Uses the in-memory repository — no I/O.
"""

import logging

import pytest

from cafe.application.complete_order import CompleteOrderHandler
from cafe.application.place_order import PlaceOrderHandler
from cafe.application.show_receipt import ShowReceiptHandler
from cafe.domain.exceptions import EntityNotFoundError, ShopClosedError, ValidationError
from cafe.domain.model.attachments import FlavorAttachment, MilkAttachment, SugarAttachment
from cafe.domain.model.beverage import Espresso, PlainCoffee
from cafe.domain.model.catalog import FlavorType, MilkType, SugarType
from cafe.domain.model.shop import Shop
from cafe.domain.model.value_objects import Money, Size
from cafe.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from tests.fakes import FIXED_TIME


def _setup() -> tuple[InMemoryOrderRepository, Shop]:
    return InMemoryOrderRepository(), Shop("Bean There Coffee")


def _bobs_coffee():
    drink = MilkAttachment(PlainCoffee(Size.MEDIUM), MilkType.ALMOND)
    drink = SugarAttachment(drink, 2, SugarType.HONEY)
    return FlavorAttachment(drink, FlavorType.VANILLA, 1.5)


class TestPlaceOrder:

    def test_returns_dto(self):
        repo, shop = _setup()
        dto = PlaceOrderHandler(repo, shop).handle("Bob Smith", _bobs_coffee(), placed_at=FIXED_TIME)
        assert dto.number == 1
        assert dto.customer_name == "Bob Smith"
        assert dto.cost == "$5.15"
        assert dto.size == "Medium"
        assert dto.preparation_time == 6
        assert dto.status == "In preparation"
        assert dto.placed_at == "2024-03-01 08:30:00"

    def test_sequential_numbers(self):
        repo, shop = _setup()
        handler = PlaceOrderHandler(repo, shop)
        first = handler.handle("Alice", PlainCoffee())
        second = handler.handle("Bob", PlainCoffee())
        assert second.number == first.number + 1

    def test_persists_order(self):
        repo, shop = _setup()
        coffee = PlainCoffee()
        dto = PlaceOrderHandler(repo, shop).handle("Alice", coffee)
        assert repo.get_by_number(dto.number).beverage is coffee

    def test_closed_shop_rejects(self):
        repo, shop = _setup()
        shop.close()
        with pytest.raises(ShopClosedError):
            PlaceOrderHandler(repo, shop).handle("Alice", PlainCoffee())
        assert repo.list_all() == []

    def test_logs_placement(self, caplog):
        repo, shop = _setup()
        with caplog.at_level(logging.INFO, logger="cafe.application.place_order"):
            PlaceOrderHandler(repo, shop).handle("Alice", _bobs_coffee())
        assert "Order #1 placed for Alice" in caplog.text
        assert "Estimated preparation time: 6 minutes" in caplog.text


class TestCompleteOrder:

    def test_marks_ready(self):
        repo, shop = _setup()
        dto = PlaceOrderHandler(repo, shop).handle("Alice", PlainCoffee())
        CompleteOrderHandler(repo).handle(dto.number)
        assert repo.get_by_number(dto.number).completed

    def test_unknown_order(self):
        repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order #42 not found"):
            CompleteOrderHandler(repo).handle(42)

    def test_twice_rejected(self):
        repo, shop = _setup()
        dto = PlaceOrderHandler(repo, shop).handle("Alice", PlainCoffee())
        CompleteOrderHandler(repo).handle(dto.number)
        with pytest.raises(ValidationError, match="already completed"):
            CompleteOrderHandler(repo).handle(dto.number)


class TestShowReceipt:

    def test_totals_and_details(self):
        repo, shop = _setup()
        dto = PlaceOrderHandler(repo, shop).handle("Bob Smith", _bobs_coffee(), placed_at=FIXED_TIME)
        receipt = ShowReceiptHandler(repo, shop).handle(dto.number)

        assert receipt.shop_name == "Bean There Coffee"
        assert receipt.item == (
            "Medium Simple Coffee, Almond Milk, 2 packets of Honey, Strong Vanilla flavor"
        )
        assert receipt.ingredients[-1] == "Vanilla flavor (1.5x)"
        assert receipt.subtotal == "$5.15"
        assert receipt.tax_rate_percent == "8"
        assert receipt.tax == "$0.41"
        assert receipt.total == "$5.56"
        assert receipt.calories == 84
        assert receipt.preparation_time == 6
        assert receipt.status == "In preparation"

    def test_half_cent_subtotal_adds_up(self):
        repo, shop = _setup()
        drink = FlavorAttachment(Espresso(Size.SMALL), FlavorType.HAZELNUT, 0.5)
        assert drink.cost == Money.of("2.325")
        dto = PlaceOrderHandler(repo, shop).handle("Alice", drink)
        receipt = ShowReceiptHandler(repo, shop).handle(dto.number)

        assert receipt.subtotal == "$2.33"
        assert receipt.tax == "$0.19"
        assert receipt.total == "$2.52"

    def test_reflects_completion(self):
        repo, shop = _setup()
        dto = PlaceOrderHandler(repo, shop).handle("Alice", PlainCoffee())
        CompleteOrderHandler(repo).handle(dto.number)
        assert ShowReceiptHandler(repo, shop).handle(dto.number).status == "Ready"

    def test_reflects_later_size_change(self):
        repo, shop = _setup()
        coffee = _bobs_coffee()
        dto = PlaceOrderHandler(repo, shop).handle("Bob", coffee)
        coffee.size = Size.LARGE
        assert ShowReceiptHandler(repo, shop).handle(dto.number).subtotal == "$5.65"

    def test_closed_shop_prints_nothing(self):
        repo, shop = _setup()
        dto = PlaceOrderHandler(repo, shop).handle("Alice", PlainCoffee())
        shop.close()
        with pytest.raises(ShopClosedError):
            ShowReceiptHandler(repo, shop).handle(dto.number)

    def test_unknown_order(self):
        repo, shop = _setup()
        with pytest.raises(EntityNotFoundError):
            ShowReceiptHandler(repo, shop).handle(7)
