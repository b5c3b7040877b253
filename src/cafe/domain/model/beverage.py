"""Beverage contract and the base drinks of the menu.

Every drink, plain or dressed up with attachments, answers the same
set of questions: description, cost, size, ingredients, preparation
time, calories and availability.  Base drinks derive cost from a fixed
size -> price table; attachments (see ``attachments.py``) wrap a drink
and add to whatever it reports.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from cafe.domain.model.value_objects import Money, Size


class Beverage(ABC):
    """Interface shared by base drinks and attachments."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable name of the drink as ordered."""

    @property
    @abstractmethod
    def cost(self) -> Money:
        """Price before tax."""

    @property
    @abstractmethod
    def size(self) -> Size | str:
        """Size tier, or the raw label if it was not recognised."""

    @size.setter
    @abstractmethod
    def size(self, value: Size | str) -> None: ...

    @property
    @abstractmethod
    def ingredients(self) -> list[str]:
        """Ordered ingredient list; a fresh list on every call."""

    @property
    @abstractmethod
    def preparation_time(self) -> int:
        """Minutes to prepare."""

    @property
    @abstractmethod
    def calories(self) -> int: ...

    @property
    @abstractmethod
    def is_available(self) -> bool: ...


class BaseBeverage(Beverage):
    """A drink with no attachments.

    Subclasses only declare their constants.  ``size`` is the one
    mutable attribute; cost is looked up on every read so a size change
    is reflected immediately.
    """

    NAME: ClassVar[str]
    DEFAULT_SIZE: ClassVar[Size] = Size.MEDIUM
    PRICES: ClassVar[dict[Size, Money]]
    DEFAULT_PRICE: ClassVar[Money]
    BASE_INGREDIENTS: ClassVar[tuple[str, ...]]
    PREPARATION_TIME: ClassVar[int]
    CALORIES: ClassVar[int]

    def __init__(self, size: Size | str | None = None, available: bool = True) -> None:
        self._size: Size | str = self.DEFAULT_SIZE
        if size is not None:
            self.size = size
        self._available = available

    @property
    def description(self) -> str:
        return f"{self.size} {self.NAME}"

    @property
    def cost(self) -> Money:
        size = Size.parse(self._size)
        return self.PRICES.get(size, self.DEFAULT_PRICE)

    @property
    def size(self) -> Size | str:
        return self._size

    @size.setter
    def size(self, value: Size | str) -> None:
        # Unknown labels are kept for display and priced at DEFAULT_PRICE.
        self._size = Size.parse(value) or value

    @property
    def ingredients(self) -> list[str]:
        return list(self.BASE_INGREDIENTS)

    @property
    def preparation_time(self) -> int:
        return self.PREPARATION_TIME

    @property
    def calories(self) -> int:
        return self.CALORIES

    @property
    def is_available(self) -> bool:
        return self._available

    @is_available.setter
    def is_available(self, value: bool) -> None:
        self._available = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size!r})"


class PlainCoffee(BaseBeverage):
    NAME = "Simple Coffee"
    PRICES = {
        Size.SMALL: Money.of("2.50"),
        Size.MEDIUM: Money.of("3.00"),
        Size.LARGE: Money.of("3.50"),
        Size.EXTRA_LARGE: Money.of("4.00"),
    }
    DEFAULT_PRICE = Money.of("3.00")
    BASE_INGREDIENTS = ("Coffee beans", "Water")
    PREPARATION_TIME = 3
    CALORIES = 5


class Espresso(BaseBeverage):
    """Single, double or triple shot; there is no extra-large espresso."""

    NAME = "Espresso"
    DEFAULT_SIZE = Size.SMALL
    PRICES = {
        Size.SMALL: Money.of("2.00"),
        Size.MEDIUM: Money.of("2.25"),
        Size.LARGE: Money.of("2.50"),
    }
    DEFAULT_PRICE = Money.of("2.00")
    BASE_INGREDIENTS = ("Espresso beans", "Water")
    PREPARATION_TIME = 2
    CALORIES = 3


class Cappuccino(BaseBeverage):
    NAME = "Cappuccino"
    PRICES = {
        Size.SMALL: Money.of("3.75"),
        Size.MEDIUM: Money.of("4.25"),
        Size.LARGE: Money.of("4.75"),
        Size.EXTRA_LARGE: Money.of("5.25"),
    }
    DEFAULT_PRICE = Money.of("4.25")
    BASE_INGREDIENTS = ("Espresso", "Steamed milk", "Milk foam")
    PREPARATION_TIME = 4
    CALORIES = 80
