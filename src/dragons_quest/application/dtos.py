from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ActionResult:
    messages: List[str] = field(default_factory=list)
    game_over: bool = False


@dataclass
class MenuOptionView:
    number: int
    label: str
    action: str


@dataclass
class LocationMenuView:
    location: str
    title: str
    description: str
    options: List[MenuOptionView] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.options)


@dataclass
class InventoryItemView:
    index: int
    item_id: str
    name: str
    category: str
    effect: int
    description: str


@dataclass
class StatusView:
    name: str
    health: int
    gold: int
    location: str
    session_status: str
    inventory: List[InventoryItemView] = field(default_factory=list)
    last_messages: List[str] = field(default_factory=list)


@dataclass
class ShopItemView:
    item_id: str
    name: str
    description: str
    price: int
    can_buy: bool
    availability_note: str = ""


@dataclass
class ShopView:
    location: str
    gold: int
    items: List[ShopItemView] = field(default_factory=list)
    empty_state_hint: str = ""


@dataclass
class SessionSummaryView:
    name: str
    status: str
    gold: int
    health: int
    monsters_slain: int
    retreats: int
    gold_earned: int
    gold_spent: int
    potions_used: int
    places_visited: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class InventoryPick:
    """A 1-based inventory index chosen by the player, or a cancellation."""

    index: Optional[int] = None
    cancelled: bool = False

    @classmethod
    def choose(cls, index: int) -> "InventoryPick":
        return cls(index=int(index), cancelled=False)

    @classmethod
    def cancel(cls) -> "InventoryPick":
        return cls(index=None, cancelled=True)
