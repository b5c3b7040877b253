"""Attachments — add-ons that wrap a beverage.

An attachment owns exactly one inner beverage (which may itself be an
attachment) and reports every attribute as the inner value plus its own
contribution.  Size and availability pass straight through.

Numeric contributions are plain sums, so cost, calories and
preparation time do not depend on the order attachments are applied.
Description and ingredient text do.

Out-of-range quantities are clamped into bounds, never rejected.
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal

from cafe.domain.exceptions import ValidationError
from cafe.domain.model.beverage import Beverage
from cafe.domain.model.catalog import (
    CreamType,
    FlavorType,
    MilkType,
    ShotType,
    SugarType,
    SyrupType,
    Variant,
)
from cafe.domain.model.value_objects import Money, Size

# ---------------------------------------------------------------------------
# Bounds for quantities and intensities
# ---------------------------------------------------------------------------
MIN_SYRUP_PUMPS, MAX_SYRUP_PUMPS = 1, 6
MIN_EXTRA_SHOTS, MAX_EXTRA_SHOTS = 1, 4
MIN_INTENSITY, MAX_INTENSITY = 0.5, 2.0


def _clamp(value, low, high):
    return max(low, min(high, value))


def _scaled_calories(calories: int, factor: float) -> int:
    # floor; both operands are non-negative
    return int(Decimal(calories) * Decimal(str(factor)))


def _plural(count: int, word: str) -> str:
    return word if count == 1 else f"{word}s"


def _multiplier_suffix(factor: float) -> str:
    return "" if factor == 1.0 else f" ({factor:.1f}x)"


class Attachment(Beverage):
    """Base for all add-ons.

    Subclasses expose ``variant`` and implement the contribution hooks;
    the delegation itself lives here.
    """

    def __init__(self, inner: Beverage) -> None:
        if inner is None:
            raise ValidationError("An attachment must wrap a beverage")
        if not isinstance(inner, Beverage):
            raise ValidationError(
                f"An attachment must wrap a beverage, got {type(inner).__name__}"
            )
        self._inner = inner

    @property
    def inner(self) -> Beverage:
        return self._inner

    @property
    @abstractmethod
    def variant(self) -> Variant: ...

    # --- Contribution hooks ---------------------------------------------------

    @abstractmethod
    def _description_fragment(self) -> str | None:
        """Text appended to the description, or None to append nothing."""

    @abstractmethod
    def _ingredient(self) -> str | None:
        """Ingredient entry appended to the list, or None."""

    @abstractmethod
    def _extra_cost(self) -> Money: ...

    @abstractmethod
    def _extra_calories(self) -> int: ...

    @abstractmethod
    def _extra_preparation_time(self) -> int: ...

    # --- Beverage interface ---------------------------------------------------

    @property
    def description(self) -> str:
        fragment = self._description_fragment()
        if fragment is None:
            return self._inner.description
        return f"{self._inner.description}, {fragment}"

    @property
    def cost(self) -> Money:
        return self._inner.cost + self._extra_cost()

    @property
    def size(self) -> Size | str:
        return self._inner.size

    @size.setter
    def size(self, value: Size | str) -> None:
        self._inner.size = value

    @property
    def ingredients(self) -> list[str]:
        ingredients = self._inner.ingredients
        entry = self._ingredient()
        if entry is not None:
            ingredients.append(entry)
        return ingredients

    @property
    def preparation_time(self) -> int:
        return self._inner.preparation_time + self._extra_preparation_time()

    @property
    def calories(self) -> int:
        return self._inner.calories + self._extra_calories()

    @property
    def is_available(self) -> bool:
        return self._inner.is_available

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


# ---------------------------------------------------------------------------
# Concrete attachments
# ---------------------------------------------------------------------------


class MilkAttachment(Attachment):

    def __init__(self, inner: Beverage, milk_type: MilkType = MilkType.WHOLE) -> None:
        super().__init__(inner)
        self.milk_type = milk_type

    @property
    def variant(self) -> Variant:
        return self.milk_type.variant

    def _description_fragment(self) -> str:
        return self.variant.name

    def _ingredient(self) -> str:
        return self.variant.name

    def _extra_cost(self) -> Money:
        return self.variant.cost

    def _extra_calories(self) -> int:
        return self.variant.calories

    def _extra_preparation_time(self) -> int:
        return self.variant.prep_time


class SugarAttachment(Attachment):
    """Sweetener by the packet.  Zero packets leaves the drink untouched."""

    def __init__(
        self,
        inner: Beverage,
        packets: int = 1,
        sugar_type: SugarType = SugarType.WHITE,
    ) -> None:
        super().__init__(inner)
        self.packets = max(0, packets)
        self.sugar_type = sugar_type

    @property
    def variant(self) -> Variant:
        return self.sugar_type.variant

    def _description_fragment(self) -> str | None:
        if self.packets == 0:
            return None
        return f"{self.packets} {_plural(self.packets, 'packet')} of {self.variant.name}"

    def _ingredient(self) -> str | None:
        if self.packets == 0:
            return None
        return f"{self.packets} packet(s) of {self.variant.name}"

    def _extra_cost(self) -> Money:
        return self.variant.cost * self.packets

    def _extra_calories(self) -> int:
        return self.variant.calories * self.packets

    def _extra_preparation_time(self) -> int:
        return self.variant.prep_time if self.packets > 0 else 0


class FlavorAttachment(Attachment):

    _QUALIFIERS = {0.5: "Light ", 1.5: "Strong ", 2.0: "Extra Strong "}

    def __init__(
        self,
        inner: Beverage,
        flavor_type: FlavorType,
        intensity: float = 1.0,
    ) -> None:
        super().__init__(inner)
        self.flavor_type = flavor_type
        self.intensity = _clamp(float(intensity), MIN_INTENSITY, MAX_INTENSITY)

    @property
    def variant(self) -> Variant:
        return self.flavor_type.variant

    def _description_fragment(self) -> str:
        qualifier = self._QUALIFIERS.get(self.intensity, "")
        return f"{qualifier}{self.variant.name} flavor"

    def _ingredient(self) -> str:
        return f"{self.variant.name} flavor{_multiplier_suffix(self.intensity)}"

    def _extra_cost(self) -> Money:
        return self.variant.cost * Decimal(str(self.intensity))

    def _extra_calories(self) -> int:
        return _scaled_calories(self.variant.calories, self.intensity)

    def _extra_preparation_time(self) -> int:
        return self.variant.prep_time


class SyrupAttachment(Attachment):

    def __init__(self, inner: Beverage, syrup_type: SyrupType, pumps: int = 2) -> None:
        super().__init__(inner)
        self.syrup_type = syrup_type
        self.pumps = _clamp(pumps, MIN_SYRUP_PUMPS, MAX_SYRUP_PUMPS)

    @property
    def variant(self) -> Variant:
        return self.syrup_type.variant

    def _description_fragment(self) -> str:
        return f"{self.pumps} {_plural(self.pumps, 'pump')} of {self.variant.name}"

    def _ingredient(self) -> str:
        return f"{self.pumps} pump(s) of {self.variant.name}"

    def _extra_cost(self) -> Money:
        return self.variant.cost * self.pumps

    def _extra_calories(self) -> int:
        return self.variant.calories * self.pumps

    def _extra_preparation_time(self) -> int:
        return self.variant.prep_time


class ExtraShotAttachment(Attachment):
    """Extra espresso shots; unlike other add-ons prep time scales per shot."""

    def __init__(
        self,
        inner: Beverage,
        shots: int = 1,
        shot_type: ShotType = ShotType.ESPRESSO,
    ) -> None:
        super().__init__(inner)
        self.shots = _clamp(shots, MIN_EXTRA_SHOTS, MAX_EXTRA_SHOTS)
        self.shot_type = shot_type

    @property
    def variant(self) -> Variant:
        return self.shot_type.variant

    def _description_fragment(self) -> str:
        return f"{self.shots} extra {self.variant.name} {_plural(self.shots, 'shot')}"

    def _ingredient(self) -> str:
        return f"{self.shots} extra {self.variant.name} shot(s)"

    def _extra_cost(self) -> Money:
        return self.variant.cost * self.shots

    def _extra_calories(self) -> int:
        return self.variant.calories * self.shots

    def _extra_preparation_time(self) -> int:
        return self.variant.prep_time * self.shots


class WhippedCreamAttachment(Attachment):

    _QUALIFIERS = {0.5: "Light ", 1.5: "Extra ", 2.0: "Double "}

    def __init__(
        self,
        inner: Beverage,
        cream_type: CreamType = CreamType.REGULAR,
        amount: float = 1.0,
    ) -> None:
        super().__init__(inner)
        self.cream_type = cream_type
        self.amount = _clamp(float(amount), MIN_INTENSITY, MAX_INTENSITY)

    @property
    def variant(self) -> Variant:
        return self.cream_type.variant

    def _description_fragment(self) -> str:
        return f"{self._QUALIFIERS.get(self.amount, '')}{self.variant.name}"

    def _ingredient(self) -> str:
        return f"{self.variant.name}{_multiplier_suffix(self.amount)}"

    def _extra_cost(self) -> Money:
        return self.variant.cost * Decimal(str(self.amount))

    def _extra_calories(self) -> int:
        return _scaled_calories(self.variant.calories, self.amount)

    def _extra_preparation_time(self) -> int:
        return self.variant.prep_time
