from __future__ import annotations

from enum import Enum


class Location(str, Enum):
    VILLAGE = "village"
    BLACKSMITH = "blacksmith"
    MARKET = "market"
    FOREST = "forest"

    @property
    def is_hub(self) -> bool:
        return self is Location.VILLAGE

    @property
    def display_name(self) -> str:
        return self.value.upper()


LOCATION_DESCRIPTIONS = {
    Location.VILLAGE: "You're in a bustling village. The blacksmith and market are nearby.",
    Location.BLACKSMITH: "The heat from the forge fills the air. Weapons and armor line the walls.",
    Location.MARKET: "Merchants sell their wares from colorful stalls. A potion seller catches your eye.",
    Location.FOREST: "The forest is dark and foreboding. You hear strange noises all around you.",
}
