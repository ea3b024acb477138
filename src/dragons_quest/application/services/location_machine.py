from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from dragons_quest.domain.models.location import Location


class ActionKind(str, Enum):
    TRAVEL = "travel"
    BUY_EQUIPMENT = "buy_equipment"
    BUY_POTION = "buy_potion"
    STATUS = "status"
    USE_ITEM = "use_item"
    HELP = "help"
    HUNT = "hunt"
    FACE_DRAGON = "face_dragon"
    QUIT = "quit"


@dataclass(frozen=True)
class MenuAction:
    kind: ActionKind
    label: str
    destination: Optional[Location] = None


_STATUS = MenuAction(ActionKind.STATUS, "Check status")
_USE_ITEM = MenuAction(ActionKind.USE_ITEM, "Use item")
_HELP = MenuAction(ActionKind.HELP, "Help")
_QUIT = MenuAction(ActionKind.QUIT, "Quit game")
_RETURN = MenuAction(ActionKind.TRAVEL, "Return to village", Location.VILLAGE)

_MENUS: Dict[Location, Tuple[MenuAction, ...]] = {
    Location.VILLAGE: (
        MenuAction(ActionKind.TRAVEL, "Go to blacksmith", Location.BLACKSMITH),
        MenuAction(ActionKind.TRAVEL, "Go to market", Location.MARKET),
        MenuAction(ActionKind.TRAVEL, "Enter forest", Location.FOREST),
        _STATUS,
        _USE_ITEM,
        _HELP,
        _QUIT,
    ),
    Location.BLACKSMITH: (
        MenuAction(ActionKind.BUY_EQUIPMENT, "Buy weapons or armor"),
        _RETURN,
        _STATUS,
        _USE_ITEM,
        _HELP,
        _QUIT,
    ),
    Location.MARKET: (
        MenuAction(ActionKind.BUY_POTION, "Buy potion"),
        _RETURN,
        _STATUS,
        _USE_ITEM,
        _HELP,
        _QUIT,
    ),
    Location.FOREST: (
        _RETURN,
        _STATUS,
        _USE_ITEM,
        _HELP,
        MenuAction(ActionKind.HUNT, "Hunt the Dragon's minions!"),
        MenuAction(ActionKind.FACE_DRAGON, "Face the Dragon!"),
        _QUIT,
    ),
}

_ARRIVAL_LINES: Dict[Tuple[Location, Location], str] = {
    (Location.VILLAGE, Location.BLACKSMITH): "You enter the blacksmith's shop.",
    (Location.VILLAGE, Location.MARKET): "You enter the market.",
    (Location.VILLAGE, Location.FOREST): "You venture into the forest...",
    (Location.BLACKSMITH, Location.VILLAGE): "You return to the village center.",
    (Location.MARKET, Location.VILLAGE): "You return to the village center.",
    (Location.FOREST, Location.VILLAGE): "You hurry back to the safety of the village.",
}


class LocationStateMachine:
    """Fixed hub-and-spoke graph: every location other than the village exits only to it."""

    def menu_for(self, location: Location) -> Tuple[MenuAction, ...]:
        return _MENUS[Location(location)]

    def menu_size(self, location: Location) -> int:
        return len(self.menu_for(location))

    def action_for(self, location: Location, choice: int) -> MenuAction:
        menu = self.menu_for(location)
        if choice < 1 or choice > len(menu):
            raise ValueError(f"Choice {choice} is outside the {Location(location).value} menu (1-{len(menu)})")
        return menu[choice - 1]

    def apply_transition(self, location: Location, choice: int) -> Location:
        location = Location(location)
        menu = self.menu_for(location)
        if choice < 1 or choice > len(menu):
            return location
        action = menu[choice - 1]
        if action.kind is ActionKind.TRAVEL and action.destination is not None:
            return action.destination
        return location

    def destinations(self, location: Location) -> Tuple[Location, ...]:
        return tuple(
            action.destination
            for action in self.menu_for(location)
            if action.kind is ActionKind.TRAVEL and action.destination is not None
        )

    @staticmethod
    def arrival_line(origin: Location, destination: Location) -> str:
        return _ARRIVAL_LINES.get((Location(origin), Location(destination)), f"You travel to the {Location(destination).value}.")
