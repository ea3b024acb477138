from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from dragons_quest.domain.models.item import Item, ItemCategory


@dataclass(frozen=True)
class EmptySelection:
    """No item of the requested category is held."""

    category: ItemCategory

    @property
    def found(self) -> bool:
        return False


@dataclass(frozen=True)
class BestItems:
    """Every held item tied at the highest effect, in inventory order."""

    category: ItemCategory
    items: Tuple[Item, ...]

    def __post_init__(self) -> None:
        if not self.items:
            raise ValueError("BestItems requires at least one item; use EmptySelection")

    @property
    def found(self) -> bool:
        return True

    @property
    def top(self) -> Item:
        return self.items[0]

    @property
    def effect(self) -> int:
        return self.items[0].effect


Selection = Union[EmptySelection, BestItems]


def select_best_by_category(inventory: Iterable[Item], category: ItemCategory) -> Selection:
    category = ItemCategory(category)
    best: list[Item] = []
    best_effect = 0
    for item in inventory:
        if item.category != category:
            continue
        if not best or item.effect > best_effect:
            best = [item]
            best_effect = item.effect
        elif item.effect == best_effect:
            best.append(item)
    if not best:
        return EmptySelection(category=category)
    return BestItems(category=category, items=tuple(best))
