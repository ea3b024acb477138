from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class ItemCategory(str, Enum):
    WEAPON = "weapon"
    ARMOR = "armor"
    POTION = "potion"

    @property
    def is_equipment(self) -> bool:
        return self in {ItemCategory.WEAPON, ItemCategory.ARMOR}


@dataclass(frozen=True)
class Item:
    """An item template or an owned copy of one.

    ``effect`` is damage for weapons, damage reduction for armor and the heal
    amount for potions.
    """

    item_id: str
    name: str
    category: ItemCategory
    cost: int
    effect: int
    description: str = ""

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"Item cost must be non-negative: {self.item_id}")

    def copy(self) -> "Item":
        return replace(self)
