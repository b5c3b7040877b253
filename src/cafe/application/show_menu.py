"""Application service: Show Menu use case (query)."""

from __future__ import annotations

from cafe.application.build_drink import BASE_BEVERAGES
from cafe.application.dto import MenuDTO, MenuOptionDTO, MenuSectionDTO
from cafe.domain.model.catalog import (
    CREAM_VARIANTS,
    FLAVOR_VARIANTS,
    MILK_VARIANTS,
    SHOT_VARIANTS,
    SUGAR_VARIANTS,
    SYRUP_VARIANTS,
    Variant,
)
from cafe.domain.model.value_objects import Size

# (section title, catalog, unit label)
_ADD_ON_SECTIONS = [
    ("Milk options", MILK_VARIANTS, ""),
    ("Sweetener options", SUGAR_VARIANTS, "per packet"),
    ("Flavor options", FLAVOR_VARIANTS, ""),
    ("Syrup options", SYRUP_VARIANTS, "per pump"),
    ("Extra shots", SHOT_VARIANTS, "per shot"),
    ("Whipped cream", CREAM_VARIANTS, ""),
]


class ShowMenuHandler:

    def __init__(self, shop_name: str) -> None:
        self._shop_name = shop_name

    def handle(self) -> MenuDTO:
        sections = [self._base_section(), self._size_section()]
        for title, catalog, unit in _ADD_ON_SECTIONS:
            sections.append(
                MenuSectionDTO(
                    title=title,
                    options=[self._option(v, unit) for v in catalog.values()],
                )
            )
        return MenuDTO(shop_name=self._shop_name, sections=sections)

    @staticmethod
    def _base_section() -> MenuSectionDTO:
        options = []
        for cls in BASE_BEVERAGES.values():
            starting_at = min(cls.PRICES.values())
            options.append(
                MenuOptionDTO(name=cls.NAME, price=str(starting_at), unit="starting at")
            )
        return MenuSectionDTO(title="Base coffee options", options=options)

    @staticmethod
    def _size_section() -> MenuSectionDTO:
        return MenuSectionDTO(
            title="Available sizes",
            options=[MenuOptionDTO(name=size.value, price="", unit="") for size in Size],
        )

    @staticmethod
    def _option(variant: Variant, unit: str) -> MenuOptionDTO:
        return MenuOptionDTO(name=variant.name, price=str(variant.cost), unit=unit)


def is_valid_size(label: str) -> bool:
    return Size.parse(label) is not None
