import logging
import os

from dragons_quest.application.services.combat_service import CombatService
from dragons_quest.application.services.event_bus import EventBus
from dragons_quest.application.services.game_service import GameService
from dragons_quest.application.services.location_machine import LocationStateMachine
from dragons_quest.domain.models.player import DEFAULT_STARTING_GOLD, PlayerState


logger = logging.getLogger(__name__)

_VERBOSITY_LEVELS = {"compact", "debug"}


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric setting", extra={"setting": key, "raw_value": raw})
        return default
    if value < 0:
        logger.warning("Ignoring negative setting", extra={"setting": key, "raw_value": raw})
        return default
    return value


def _verbosity() -> str:
    verbosity = os.getenv("DRAGONS_QUEST_VERBOSITY", "compact").strip().lower()
    if verbosity not in _VERBOSITY_LEVELS:
        logger.warning("Unknown verbosity, using compact", extra={"setting": "DRAGONS_QUEST_VERBOSITY", "raw_value": verbosity})
        return "compact"
    return verbosity


def create_game_service(player_name: str) -> GameService:
    player = PlayerState(
        name=player_name,
        gold=_env_int("DRAGONS_QUEST_STARTING_GOLD", DEFAULT_STARTING_GOLD),
    )
    event_bus = EventBus()
    combat_service = CombatService(verbosity=_verbosity(), event_publisher=event_bus.publish)
    return GameService(
        player,
        location_machine=LocationStateMachine(),
        combat_service=combat_service,
        event_bus=event_bus,
    )
