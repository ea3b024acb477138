import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from dragons_quest.domain.events import MonsterSlain, PlayerRetreated
from dragons_quest.domain.models.item import ItemCategory
from dragons_quest.domain.models.monster import Monster, spawn_monster
from dragons_quest.domain.models.player import HealthChange, PlayerState
from dragons_quest.domain.services.equipment_gate import GateShortfall, gate_shortfalls
from dragons_quest.domain.services.inventory_selector import BestItems, select_best_by_category


logger = logging.getLogger(__name__)


class CombatOutcome(str, Enum):
    VICTORY = "victory"
    RETREAT = "retreat"


@dataclass
class CombatLogEntry:
    text: str


@dataclass
class CombatResult:
    player: PlayerState
    monster: Monster
    outcome: CombatOutcome
    log: List[CombatLogEntry] = field(default_factory=list)
    rounds: int = 0
    damage_taken: int = 0
    gold_awarded: int = 0
    forced_retreat: bool = False

    @property
    def player_won(self) -> bool:
        return self.outcome is CombatOutcome.VICTORY

    @property
    def player_defeated(self) -> bool:
        return not self.player.alive

    @property
    def messages(self) -> List[str]:
        return [entry.text for entry in self.log]


def net_damage(raw: int, reduction: int) -> int:
    """Damage after reduction; a hit always lands for at least 1."""

    if reduction >= raw:
        return 1
    return raw - reduction


def health_change_lines(change: HealthChange) -> List[str]:
    lines: List[str] = []
    if change.reached_full:
        lines.append("You're at full health!")
    if change.gravely_wounded:
        lines.append("You're gravely wounded!")
    lines.append(f"Health is now: {change.after}")
    return lines


_SHORTFALL_LINES = {
    GateShortfall.NO_WEAPON: "You have no weapon that could pierce the {monster}'s hide!",
    GateShortfall.WRONG_WEAPON: "Your {weapon} is no match for the {monster}; only a Steel Sword will do!",
    GateShortfall.NO_ARMOR: "Without armor, the {monster}'s fire would consume you!",
}


class CombatService:
    def __init__(
        self,
        verbosity: str = "compact",
        event_publisher: Optional[Callable[[object], None]] = None,
    ) -> None:
        self.verbosity = verbosity  # compact | debug
        self.event_publisher = event_publisher

    def _publish(self, event: object) -> None:
        if self.event_publisher is not None:
            self.event_publisher(event)

    def _math_note(self, log: List[CombatLogEntry], raw: int, reduction: int, dealt: int) -> None:
        if self.verbosity == "debug":
            log.append(CombatLogEntry(f"  (raw {raw} - reduction {reduction} = {dealt})"))

    def _monster_hits(self, player: PlayerState, monster: Monster, reduction: int, log: List[CombatLogEntry]) -> int:
        dealt = net_damage(monster.attack_damage, reduction)
        self._math_note(log, monster.attack_damage, reduction, dealt)
        change = player.adjust_health(-dealt)
        log.extend(CombatLogEntry(line) for line in health_change_lines(change))
        return -change.delta

    def resolve_combat(self, player: PlayerState, is_boss: bool = False) -> CombatResult:
        monster = spawn_monster(is_boss)
        log: List[CombatLogEntry] = []
        weapon = select_best_by_category(player.inventory, ItemCategory.WEAPON)
        armor = select_best_by_category(player.inventory, ItemCategory.ARMOR)
        reduction = armor.effect if isinstance(armor, BestItems) else 0

        if is_boss:
            shortfalls = gate_shortfalls(player.inventory)
            if shortfalls:
                log.append(CombatLogEntry("You are not prepared to face the dragon!"))
            else:
                log.append(CombatLogEntry("You are prepared to fight the dragon!"))
            log.append(CombatLogEntry(f"The {monster.name}'s breath, claws, and teeth are terrible!"))
            log.append(CombatLogEntry("Its thick hide will shrug off ordinary weapons."))
            if shortfalls:
                weapon_name = weapon.top.name if isinstance(weapon, BestItems) else ""
                for shortfall in shortfalls:
                    log.append(
                        CombatLogEntry(_SHORTFALL_LINES[shortfall].format(monster=monster.name, weapon=weapon_name))
                    )
                return self._forced_retreat(player, monster, reduction, log, is_boss=True)
        elif not isinstance(weapon, BestItems):
            log.append(CombatLogEntry(f"The {monster.name}'s claws rake at you. Ouch!"))
            log.append(CombatLogEntry("Without a weapon, you must retreat!"))
            return self._forced_retreat(player, monster, reduction, log, is_boss=False)

        blade = weapon.top
        if isinstance(armor, BestItems):
            log.append(
                CombatLogEntry(f"You brandish your {blade.name} and heft your {armor.top.name} and advance to battle!")
            )
        else:
            log.append(CombatLogEntry(f"You brandish your {blade.name} and advance to battle!"))

        rounds = 0
        damage_taken = 0
        while monster.health > 0 and player.health > 0:
            rounds += 1
            dealt = net_damage(blade.effect, monster.defense)
            monster.health -= dealt
            log.append(CombatLogEntry(f"You attack! The {monster.name} loses {dealt} health!"))
            self._math_note(log, blade.effect, monster.defense, dealt)
            logger.debug(
                "Player exchange",
                extra={"monster": monster.name, "round": rounds, "dealt": dealt, "monster_health": monster.health},
            )
            if monster.health <= 0:
                break

            log.append(
                CombatLogEntry(f"The {monster.name} strikes back, doing {monster.attack_damage} damage to your health!")
            )
            if isinstance(armor, BestItems):
                if reduction >= monster.attack_damage:
                    log.append(CombatLogEntry(f"Your {armor.top.name} blocks most of the blow!"))
                else:
                    log.append(CombatLogEntry(f"However, your {armor.top.name} blocks some of the damage!"))
            damage_taken += self._monster_hits(player, monster, reduction, log)
            if not player.alive:
                log.append(CombatLogEntry(f"The {monster.name} has overwhelmed you!"))
                logger.info(
                    "Player fell in combat",
                    extra={"monster": monster.name, "rounds": rounds, "is_boss": is_boss},
                )
                self._publish(
                    PlayerRetreated(monster_name=monster.name, is_boss=is_boss, damage_taken=damage_taken, forced=False)
                )
                return CombatResult(
                    player=player,
                    monster=monster,
                    outcome=CombatOutcome.RETREAT,
                    log=log,
                    rounds=rounds,
                    damage_taken=damage_taken,
                )

        player.gold += monster.treasure_reward
        log.append(CombatLogEntry(f"Congratulations! You have defeated the {monster.name}!"))
        log.append(CombatLogEntry(f"You gained {monster.treasure_reward} gold from its hoard!"))
        logger.info(
            "Monster slain",
            extra={"monster": monster.name, "rounds": rounds, "damage_taken": damage_taken, "gold": player.gold},
        )
        self._publish(
            MonsterSlain(monster_name=monster.name, is_boss=is_boss, treasure=monster.treasure_reward, rounds=rounds)
        )
        return CombatResult(
            player=player,
            monster=monster,
            outcome=CombatOutcome.VICTORY,
            log=log,
            rounds=rounds,
            damage_taken=damage_taken,
            gold_awarded=monster.treasure_reward,
        )

    def _forced_retreat(
        self,
        player: PlayerState,
        monster: Monster,
        reduction: int,
        log: List[CombatLogEntry],
        *,
        is_boss: bool,
    ) -> CombatResult:
        if is_boss:
            log.append(CombatLogEntry("You must retreat!"))
        if reduction > 0:
            log.append(CombatLogEntry("Luckily your shield reduced the damage!"))
        damage_taken = self._monster_hits(player, monster, reduction, log)
        logger.info(
            "Forced retreat",
            extra={"monster": monster.name, "damage_taken": damage_taken, "health": player.health},
        )
        self._publish(PlayerRetreated(monster_name=monster.name, is_boss=is_boss, damage_taken=damage_taken, forced=True))
        return CombatResult(
            player=player,
            monster=monster,
            outcome=CombatOutcome.RETREAT,
            log=log,
            damage_taken=damage_taken,
            forced_retreat=True,
        )
