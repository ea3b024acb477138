from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from dragons_quest.domain.models.item import Item, ItemCategory
from dragons_quest.domain.models.location import Location


HEALTH_MIN = 0
HEALTH_MAX = 100
DEFAULT_STARTING_GOLD = 20


@dataclass(frozen=True)
class HealthChange:
    before: int
    after: int
    reached_full: bool = False
    gravely_wounded: bool = False

    @property
    def delta(self) -> int:
        return self.after - self.before


@dataclass
class PlayerState:
    name: str
    health: int = HEALTH_MAX
    gold: int = DEFAULT_STARTING_GOLD
    location: Location = Location.VILLAGE
    inventory: List[Item] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = str(self.name or "").strip() or "Adventurer"
        self.health = min(HEALTH_MAX, max(HEALTH_MIN, int(self.health)))
        self.gold = max(0, int(self.gold))
        self.location = Location(self.location)
        self.inventory = list(self.inventory or [])

    @property
    def alive(self) -> bool:
        return self.health > HEALTH_MIN

    def adjust_health(self, amount: int) -> HealthChange:
        """Apply a heal (positive) or a hit (negative), clamped to [0, 100]."""

        before = self.health
        raw = before + int(amount)
        self.health = min(HEALTH_MAX, max(HEALTH_MIN, raw))
        return HealthChange(
            before=before,
            after=self.health,
            reached_full=amount > 0 and raw >= HEALTH_MAX,
            gravely_wounded=amount < 0 and raw <= HEALTH_MIN,
        )

    def owns(self, item_id: str) -> bool:
        return any(item.item_id == item_id for item in self.inventory)

    def items_in_category(self, category: ItemCategory) -> List[Item]:
        return [item for item in self.inventory if item.category == category]

    def remove_item_at(self, index: int) -> Optional[Item]:
        if index < 0 or index >= len(self.inventory):
            return None
        return self.inventory.pop(index)
