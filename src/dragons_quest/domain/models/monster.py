from dataclasses import dataclass


@dataclass
class Monster:
    name: str
    attack_damage: int
    health: int
    treasure_reward: int
    defense: int

    @property
    def alive(self) -> bool:
        return self.health > 0


_MINION = ("Minion", 10, 20, 10, 5)
_DRAGON = ("Dragon", 20, 50, 50, 10)


def spawn_monster(is_boss: bool) -> Monster:
    """Build a fresh encounter; monsters are never reused between fights."""

    name, attack_damage, health, treasure_reward, defense = _DRAGON if is_boss else _MINION
    return Monster(
        name=name,
        attack_damage=attack_damage,
        health=health,
        treasure_reward=treasure_reward,
        defense=defense,
    )
