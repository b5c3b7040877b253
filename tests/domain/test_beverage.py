"""Unit tests for the base drinks."""

import pytest

from cafe.domain.model.beverage import Cappuccino, Espresso, PlainCoffee
from cafe.domain.model.value_objects import Money, Size


class TestPlainCoffee:

    def test_defaults_to_medium(self):
        coffee = PlainCoffee()
        assert coffee.size is Size.MEDIUM
        assert coffee.cost == Money.of("3.00")
        assert coffee.calories == 5
        assert coffee.preparation_time == 3
        assert coffee.is_available

    def test_description_includes_size(self):
        assert PlainCoffee(Size.LARGE).description == "Large Simple Coffee"

    @pytest.mark.parametrize(
        "size, price",
        [
            ("small", "2.50"),
            ("medium", "3.00"),
            ("large", "3.50"),
            ("extra large", "4.00"),
        ],
    )
    def test_price_table(self, size, price):
        assert PlainCoffee(size).cost == Money.of(price)

    def test_unknown_size_falls_back_to_default_price(self):
        coffee = PlainCoffee("venti")
        assert coffee.cost == Money.of("3.00")
        assert coffee.size == "venti"
        assert coffee.description == "venti Simple Coffee"

    def test_size_change_is_reflected_on_next_read(self):
        coffee = PlainCoffee()
        coffee.size = Size.SMALL
        assert coffee.cost == Money.of("2.50")

    def test_can_be_marked_unavailable(self):
        coffee = PlainCoffee(available=False)
        assert not coffee.is_available
        coffee.is_available = True
        assert coffee.is_available


class TestEspresso:

    def test_defaults_to_small(self):
        espresso = Espresso()
        assert espresso.size is Size.SMALL
        assert espresso.cost == Money.of("2.00")
        assert espresso.calories == 3
        assert espresso.preparation_time == 2

    def test_no_extra_large_price(self):
        assert Espresso(Size.EXTRA_LARGE).cost == Money.of("2.00")

    def test_large_is_triple_shot_price(self):
        assert Espresso("LARGE").cost == Money.of("2.50")


class TestCappuccino:

    def test_medium(self):
        cappuccino = Cappuccino()
        assert cappuccino.cost == Money.of("4.25")
        assert cappuccino.calories == 80
        assert cappuccino.preparation_time == 4

    def test_extra_large(self):
        assert Cappuccino("extra-large").cost == Money.of("5.25")

    def test_ingredients(self):
        assert Cappuccino().ingredients == ["Espresso", "Steamed milk", "Milk foam"]


class TestIngredientsAreCopies:

    def test_mutating_returned_list_does_not_leak(self):
        coffee = PlainCoffee()
        ingredients = coffee.ingredients
        ingredients.append("Whisky")
        assert coffee.ingredients == ["Coffee beans", "Water"]
