from dataclasses import dataclass, field
from typing import List

from dragons_quest.application.services.event_bus import EventBus
from dragons_quest.domain.events import (
    ItemPurchased,
    ItemUsed,
    LocationChanged,
    MonsterSlain,
    PlayerRetreated,
)


@dataclass
class SessionStats:
    monsters_slain: int = 0
    retreats: int = 0
    gold_earned: int = 0
    gold_spent: int = 0
    potions_used: int = 0
    places_visited: List[str] = field(default_factory=lambda: ["village"])


def register_session_stats_handlers(event_bus: EventBus, stats: SessionStats) -> SessionStats:
    def _on_slain(event: MonsterSlain) -> None:
        stats.monsters_slain += 1
        stats.gold_earned += int(event.treasure)

    def _on_retreat(_event: PlayerRetreated) -> None:
        stats.retreats += 1

    def _on_purchase(event: ItemPurchased) -> None:
        stats.gold_spent += int(event.price)

    def _on_use(event: ItemUsed) -> None:
        if event.consumed:
            stats.potions_used += 1

    def _on_travel(event: LocationChanged) -> None:
        if event.to_location not in stats.places_visited:
            stats.places_visited.append(event.to_location)

    event_bus.subscribe(MonsterSlain, _on_slain)
    event_bus.subscribe(PlayerRetreated, _on_retreat)
    event_bus.subscribe(ItemPurchased, _on_purchase)
    event_bus.subscribe(ItemUsed, _on_use)
    event_bus.subscribe(LocationChanged, _on_travel)
    return stats
