"""Variant catalogs for every attachment kind.

Each kind has an enum of selectable options and an immutable table
mapping each option to its unit constants.  Attachments look their
constants up through ``option.variant``; nothing else is stored on the
enum members.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from cafe.domain.exceptions import ValidationError
from cafe.domain.model.value_objects import Money


@dataclass(frozen=True)
class Variant:
    """Unit constants for one catalog option.

    For quantity-bearing kinds (sugar, syrup, shots) cost and calories
    are per unit; for intensity-bearing kinds (flavor, whipped cream)
    they are the base values scaled by intensity.
    """

    name: str
    cost: Money
    calories: int
    prep_time: int


def _variant(name: str, cost: str, calories: int, prep_time: int) -> Variant:
    return Variant(name=name, cost=Money.of(cost), calories=calories, prep_time=prep_time)


class CatalogOption(Enum):
    """Base for the per-kind option enums."""

    @property
    def variant(self) -> Variant:
        return CATALOGS[type(self)][self]

    @classmethod
    def parse(cls, name: str) -> CatalogOption:
        """Look an option up by name, case-insensitively.

        ``irish cream``, ``irish-cream`` and ``IRISH_CREAM`` all match.
        """
        key = "_".join(name.replace("-", " ").split()).upper()
        try:
            return cls[key]
        except KeyError:
            choices = ", ".join(option.name.lower() for option in cls)
            raise ValidationError(
                f"Unknown {cls.__name__} '{name}' (choose from: {choices})"
            ) from None


class MilkType(CatalogOption):
    WHOLE = "whole"
    SKIM = "skim"
    ALMOND = "almond"
    SOY = "soy"
    OAT = "oat"
    COCONUT = "coconut"


class SugarType(CatalogOption):
    WHITE = "white"
    BROWN = "brown"
    HONEY = "honey"
    STEVIA = "stevia"
    ARTIFICIAL = "artificial"
    RAW = "raw"


class FlavorType(CatalogOption):
    VANILLA = "vanilla"
    CARAMEL = "caramel"
    HAZELNUT = "hazelnut"
    CINNAMON = "cinnamon"
    CHOCOLATE = "chocolate"
    PEPPERMINT = "peppermint"
    COCONUT = "coconut"
    IRISH_CREAM = "irish_cream"
    AMARETTO = "amaretto"


class SyrupType(CatalogOption):
    SIMPLE = "simple"
    VANILLA = "vanilla"
    CARAMEL = "caramel"
    HAZELNUT = "hazelnut"
    CHOCOLATE = "chocolate"
    RASPBERRY = "raspberry"
    LAVENDER = "lavender"


class ShotType(CatalogOption):
    ESPRESSO = "espresso"
    DECAF = "decaf"
    RISTRETTO = "ristretto"
    LUNGO = "lungo"


class CreamType(CatalogOption):
    REGULAR = "regular"
    LIGHT = "light"
    COCONUT = "coconut"
    SUGAR_FREE = "sugar_free"


# ---------------------------------------------------------------------------
# Tables: name, unit cost, unit calories, unit prep time (minutes)
# ---------------------------------------------------------------------------
MILK_VARIANTS: Mapping[MilkType, Variant] = MappingProxyType({
    MilkType.WHOLE: _variant("Whole Milk", "0.50", 20, 1),
    MilkType.SKIM: _variant("Skim Milk", "0.50", 10, 1),
    MilkType.ALMOND: _variant("Almond Milk", "0.75", 15, 1),
    MilkType.SOY: _variant("Soy Milk", "0.75", 18, 1),
    MilkType.OAT: _variant("Oat Milk", "0.80", 25, 1),
    MilkType.COCONUT: _variant("Coconut Milk", "0.70", 22, 1),
})

SUGAR_VARIANTS: Mapping[SugarType, Variant] = MappingProxyType({
    SugarType.WHITE: _variant("White Sugar", "0.00", 16, 0),
    SugarType.BROWN: _variant("Brown Sugar", "0.10", 17, 0),
    SugarType.HONEY: _variant("Honey", "0.25", 21, 1),
    SugarType.STEVIA: _variant("Stevia", "0.15", 0, 0),
    SugarType.ARTIFICIAL: _variant("Artificial Sweetener", "0.05", 0, 0),
    SugarType.RAW: _variant("Raw Sugar", "0.05", 15, 0),
})

FLAVOR_VARIANTS: Mapping[FlavorType, Variant] = MappingProxyType({
    FlavorType.VANILLA: _variant("Vanilla", "0.60", 15, 1),
    FlavorType.CARAMEL: _variant("Caramel", "0.70", 25, 1),
    FlavorType.HAZELNUT: _variant("Hazelnut", "0.65", 20, 1),
    FlavorType.CINNAMON: _variant("Cinnamon", "0.50", 5, 1),
    FlavorType.CHOCOLATE: _variant("Chocolate", "0.75", 30, 2),
    FlavorType.PEPPERMINT: _variant("Peppermint", "0.60", 10, 1),
    FlavorType.COCONUT: _variant("Coconut", "0.65", 18, 1),
    FlavorType.IRISH_CREAM: _variant("Irish Cream", "0.80", 28, 1),
    FlavorType.AMARETTO: _variant("Amaretto", "0.75", 22, 1),
})

SYRUP_VARIANTS: Mapping[SyrupType, Variant] = MappingProxyType({
    SyrupType.SIMPLE: _variant("Simple Syrup", "0.30", 20, 0),
    SyrupType.VANILLA: _variant("Vanilla Syrup", "0.40", 25, 0),
    SyrupType.CARAMEL: _variant("Caramel Syrup", "0.45", 30, 0),
    SyrupType.HAZELNUT: _variant("Hazelnut Syrup", "0.40", 25, 0),
    SyrupType.CHOCOLATE: _variant("Chocolate Syrup", "0.45", 35, 1),
    SyrupType.RASPBERRY: _variant("Raspberry Syrup", "0.50", 28, 0),
    SyrupType.LAVENDER: _variant("Lavender Syrup", "0.60", 22, 0),
})

SHOT_VARIANTS: Mapping[ShotType, Variant] = MappingProxyType({
    ShotType.ESPRESSO: _variant("Espresso", "0.75", 3, 2),
    ShotType.DECAF: _variant("Decaf Espresso", "0.75", 3, 2),
    ShotType.RISTRETTO: _variant("Ristretto", "0.85", 2, 3),
    ShotType.LUNGO: _variant("Lungo", "0.80", 4, 2),
})

CREAM_VARIANTS: Mapping[CreamType, Variant] = MappingProxyType({
    CreamType.REGULAR: _variant("Regular Whipped Cream", "0.80", 50, 2),
    CreamType.LIGHT: _variant("Light Whipped Cream", "0.85", 25, 2),
    CreamType.COCONUT: _variant("Coconut Whipped Cream", "1.00", 45, 2),
    CreamType.SUGAR_FREE: _variant("Sugar-Free Whipped Cream", "0.90", 20, 2),
})

CATALOGS: Mapping[type[CatalogOption], Mapping] = MappingProxyType({
    MilkType: MILK_VARIANTS,
    SugarType: SUGAR_VARIANTS,
    FlavorType: FLAVOR_VARIANTS,
    SyrupType: SYRUP_VARIANTS,
    ShotType: SHOT_VARIANTS,
    CreamType: CREAM_VARIANTS,
})
