from dataclasses import dataclass


@dataclass
class ItemPurchased:
    item_id: str
    price: int
    gold_after: int
    location: str


@dataclass
class ItemUsed:
    item_id: str
    category: str
    consumed: bool


@dataclass
class LocationChanged:
    from_location: str
    to_location: str


@dataclass
class MonsterSlain:
    monster_name: str
    is_boss: bool
    treasure: int
    rounds: int


@dataclass
class PlayerRetreated:
    monster_name: str
    is_boss: bool
    damage_taken: int
    forced: bool


@dataclass
class SessionEnded:
    status: str
    gold: int
    health: int
