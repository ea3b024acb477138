from __future__ import annotations

from enum import Enum
from typing import Iterable, List

from dragons_quest.domain.models.item import Item, ItemCategory
from dragons_quest.domain.services.inventory_selector import BestItems, select_best_by_category


DRAGON_WEAPON_ID = "steel_sword"


class GateShortfall(str, Enum):
    NO_WEAPON = "no_weapon"
    WRONG_WEAPON = "wrong_weapon"
    NO_ARMOR = "no_armor"


def gate_shortfalls(inventory: Iterable[Item]) -> List[GateShortfall]:
    """One entry per unmet requirement for facing the Dragon."""

    items = list(inventory)
    shortfalls: List[GateShortfall] = []
    weapon = select_best_by_category(items, ItemCategory.WEAPON)
    if not isinstance(weapon, BestItems):
        shortfalls.append(GateShortfall.NO_WEAPON)
    elif weapon.top.item_id != DRAGON_WEAPON_ID:
        shortfalls.append(GateShortfall.WRONG_WEAPON)
    armor = select_best_by_category(items, ItemCategory.ARMOR)
    if not isinstance(armor, BestItems):
        shortfalls.append(GateShortfall.NO_ARMOR)
    return shortfalls


def is_dragon_ready(inventory: Iterable[Item]) -> bool:
    return not gate_shortfalls(inventory)
