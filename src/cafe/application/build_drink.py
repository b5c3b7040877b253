"""Application service: Build Drink use case.

Turns a ``DrinkSpec`` (names as typed by a person) into a base beverage
wrapped by its attachments, in the order they were listed.
"""

from __future__ import annotations

import math
from typing import Callable

from cafe.application.dto import AddOnSpec, DrinkSpec
from cafe.domain.exceptions import ValidationError
from cafe.domain.model.attachments import (
    ExtraShotAttachment,
    FlavorAttachment,
    MilkAttachment,
    SugarAttachment,
    SyrupAttachment,
    WhippedCreamAttachment,
)
from cafe.domain.model.beverage import BaseBeverage, Beverage, Cappuccino, Espresso, PlainCoffee
from cafe.domain.model.catalog import (
    CreamType,
    FlavorType,
    MilkType,
    ShotType,
    SugarType,
    SyrupType,
)

BASE_BEVERAGES: dict[str, type[BaseBeverage]] = {
    "coffee": PlainCoffee,
    "espresso": Espresso,
    "cappuccino": Cappuccino,
}


def _milk(inner: Beverage, spec: AddOnSpec) -> Beverage:
    milk_type = MilkType.parse(spec.variant) if spec.variant else MilkType.WHOLE
    return MilkAttachment(inner, milk_type)


def _sugar(inner: Beverage, spec: AddOnSpec) -> Beverage:
    sugar_type = SugarType.parse(spec.variant) if spec.variant else SugarType.WHITE
    packets = 1 if spec.amount is None else int(spec.amount)
    return SugarAttachment(inner, packets, sugar_type)


def _flavor(inner: Beverage, spec: AddOnSpec) -> Beverage:
    if not spec.variant:
        raise ValidationError("Flavor add-on requires a flavor name")
    intensity = 1.0 if spec.amount is None else spec.amount
    return FlavorAttachment(inner, FlavorType.parse(spec.variant), intensity)


def _syrup(inner: Beverage, spec: AddOnSpec) -> Beverage:
    if not spec.variant:
        raise ValidationError("Syrup add-on requires a syrup name")
    pumps = 2 if spec.amount is None else int(spec.amount)
    return SyrupAttachment(inner, SyrupType.parse(spec.variant), pumps)


def _shot(inner: Beverage, spec: AddOnSpec) -> Beverage:
    shot_type = ShotType.parse(spec.variant) if spec.variant else ShotType.ESPRESSO
    shots = 1 if spec.amount is None else int(spec.amount)
    return ExtraShotAttachment(inner, shots, shot_type)


def _cream(inner: Beverage, spec: AddOnSpec) -> Beverage:
    cream_type = CreamType.parse(spec.variant) if spec.variant else CreamType.REGULAR
    amount = 1.0 if spec.amount is None else spec.amount
    return WhippedCreamAttachment(inner, cream_type, amount)


ADD_ONS: dict[str, Callable[[Beverage, AddOnSpec], Beverage]] = {
    "milk": _milk,
    "sugar": _sugar,
    "flavor": _flavor,
    "syrup": _syrup,
    "shot": _shot,
    "cream": _cream,
}


class BuildDrinkHandler:

    def handle(self, spec: DrinkSpec) -> Beverage:
        """Build the base drink, then wrap it with each add-on in turn."""
        base_cls = BASE_BEVERAGES.get(spec.base.strip().lower())
        if base_cls is None:
            raise ValidationError(
                f"Unknown drink '{spec.base}' (choose from: {', '.join(BASE_BEVERAGES)})"
            )

        drink: Beverage = base_cls(size=spec.size)

        for add_on in spec.add_ons:
            wrap = ADD_ONS.get(add_on.kind.strip().lower())
            if wrap is None:
                raise ValidationError(
                    f"Unknown add-on '{add_on.kind}' (choose from: {', '.join(ADD_ONS)})"
                )
            if add_on.amount is not None and not math.isfinite(add_on.amount):
                raise ValidationError(
                    f"Invalid amount {add_on.amount!r} for add-on '{add_on.kind}'"
                )
            drink = wrap(drink, add_on)

        return drink
