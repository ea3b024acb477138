from typing import Dict, List, Optional, Tuple

from dragons_quest.domain.models.item import Item, ItemCategory


HEALTH_POTION = Item(
    item_id="health_potion",
    name="Health Potion",
    category=ItemCategory.POTION,
    cost=5,
    effect=30,
    description="Restores 30 health points",
)

BASIC_SWORD = Item(
    item_id="basic_sword",
    name="Basic Sword",
    category=ItemCategory.WEAPON,
    cost=10,
    effect=10,
    description="A sturdy blade for combat",
)

STEEL_SWORD = Item(
    item_id="steel_sword",
    name="Steel Sword",
    category=ItemCategory.WEAPON,
    cost=20,
    effect=20,
    description="A stronger steel blade",
)

WOODEN_SHIELD = Item(
    item_id="wooden_shield",
    name="Wooden Shield",
    category=ItemCategory.ARMOR,
    cost=8,
    effect=5,
    description="Reduces damage taken in combat",
)

IRON_SHIELD = Item(
    item_id="iron_shield",
    name="Iron Shield",
    category=ItemCategory.ARMOR,
    cost=16,
    effect=10,
    description="A stronger iron shield",
)

_CATALOG: Tuple[Item, ...] = (HEALTH_POTION, BASIC_SWORD, STEEL_SWORD, WOODEN_SHIELD, IRON_SHIELD)
_BY_ID: Dict[str, Item] = {item.item_id: item for item in _CATALOG}

_BLACKSMITH_STOCK: Tuple[str, ...] = ("basic_sword", "steel_sword", "wooden_shield", "iron_shield")
_MARKET_STOCK: Tuple[str, ...] = ("health_potion",)


def all_items() -> List[Item]:
    return list(_CATALOG)


def get_item(item_id: str) -> Item:
    try:
        return _BY_ID[item_id]
    except KeyError:
        raise KeyError(f"Unknown item id: {item_id!r}") from None


def find_by_name(name: str) -> Optional[Item]:
    return next((item for item in _CATALOG if item.name == name), None)


def items_in_category(category: ItemCategory) -> List[Item]:
    return [item for item in _CATALOG if item.category == ItemCategory(category)]


def blacksmith_stock() -> List[Item]:
    return [_BY_ID[item_id] for item_id in _BLACKSMITH_STOCK]


def market_stock() -> List[Item]:
    return [_BY_ID[item_id] for item_id in _MARKET_STOCK]
