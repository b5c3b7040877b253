"""Tests for the BuildDrink use case."""

import pytest

from cafe.application.build_drink import BuildDrinkHandler
from cafe.application.dto import AddOnSpec, DrinkSpec
from cafe.domain.exceptions import ValidationError
from cafe.domain.model.attachments import (
    ExtraShotAttachment,
    MilkAttachment,
    SugarAttachment,
    SyrupAttachment,
    WhippedCreamAttachment,
)
from cafe.domain.model.beverage import Cappuccino, Espresso
from cafe.domain.model.catalog import MilkType, ShotType, SugarType
from cafe.domain.model.value_objects import Money, Size


class TestBuildDrink:

    def test_plain_base(self):
        drink = BuildDrinkHandler().handle(DrinkSpec("Espresso", "small"))
        assert isinstance(drink, Espresso)
        assert drink.cost == Money.of("2.00")

    def test_default_size_per_base(self):
        assert BuildDrinkHandler().handle(DrinkSpec("cappuccino")).size is Size.MEDIUM
        assert BuildDrinkHandler().handle(DrinkSpec("espresso")).size is Size.SMALL

    def test_add_ons_applied_in_order(self):
        drink = BuildDrinkHandler().handle(DrinkSpec("coffee", "medium", [
            AddOnSpec("milk", "almond"),
            AddOnSpec("sugar", "honey", 2),
            AddOnSpec("flavor", "vanilla", 1.5),
        ]))
        assert drink.description == (
            "Medium Simple Coffee, Almond Milk, 2 packets of Honey, Strong Vanilla flavor"
        )
        assert drink.cost == Money.of("5.15")
        assert drink.calories == 84

    def test_outermost_is_last_add_on(self):
        drink = BuildDrinkHandler().handle(DrinkSpec("espresso", "small", [
            AddOnSpec("shot", "ristretto", 2),
            AddOnSpec("milk"),
        ]))
        assert isinstance(drink, MilkAttachment)
        assert drink.milk_type is MilkType.WHOLE
        assert isinstance(drink.inner, ExtraShotAttachment)
        assert drink.inner.shot_type is ShotType.RISTRETTO

    def test_defaults_for_optional_parts(self):
        builder = BuildDrinkHandler()
        sugar = builder.handle(DrinkSpec("coffee", add_ons=[AddOnSpec("sugar")]))
        assert isinstance(sugar, SugarAttachment)
        assert (sugar.packets, sugar.sugar_type) == (1, SugarType.WHITE)

        syrup = builder.handle(DrinkSpec("coffee", add_ons=[AddOnSpec("syrup", "caramel")]))
        assert isinstance(syrup, SyrupAttachment)
        assert syrup.pumps == 2

        cream = builder.handle(DrinkSpec("coffee", add_ons=[AddOnSpec("cream")]))
        assert isinstance(cream, WhippedCreamAttachment)
        assert cream.amount == 1.0

    def test_amounts_are_clamped_not_rejected(self):
        drink = BuildDrinkHandler().handle(DrinkSpec("cappuccino", "large", [
            AddOnSpec("syrup", "vanilla", 10),
        ]))
        assert drink.pumps == 6
        assert isinstance(drink.inner, Cappuccino)


class TestBuildDrinkErrors:

    def test_unknown_base(self):
        with pytest.raises(ValidationError, match="Unknown drink 'latte'"):
            BuildDrinkHandler().handle(DrinkSpec("latte"))

    def test_unknown_add_on(self):
        with pytest.raises(ValidationError, match="Unknown add-on 'sprinkles'"):
            BuildDrinkHandler().handle(DrinkSpec("coffee", add_ons=[AddOnSpec("sprinkles")]))

    def test_unknown_variant(self):
        with pytest.raises(ValidationError, match="Unknown MilkType 'goat'"):
            BuildDrinkHandler().handle(DrinkSpec("coffee", add_ons=[AddOnSpec("milk", "goat")]))

    @pytest.mark.parametrize("kind", ["flavor", "syrup"])
    def test_flavor_and_syrup_need_a_name(self, kind):
        with pytest.raises(ValidationError, match="requires"):
            BuildDrinkHandler().handle(DrinkSpec("coffee", add_ons=[AddOnSpec(kind)]))

    @pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(ValidationError, match="Invalid amount"):
            BuildDrinkHandler().handle(
                DrinkSpec("coffee", add_ons=[AddOnSpec("sugar", "white", amount)])
            )
