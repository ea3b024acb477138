import os
import sys
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from dragons_quest.bootstrap import create_game_service
from dragons_quest.domain.models.location import Location


class BootstrapTests(unittest.TestCase):
    def test_defaults_build_fresh_session(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            service = create_game_service("Asha")

        self.assertEqual("Asha", service.player.name)
        self.assertEqual(20, service.player.gold)
        self.assertEqual(100, service.player.health)
        self.assertEqual(Location.VILLAGE, service.player.location)
        self.assertEqual("compact", service.combat_service.verbosity)

    def test_environment_overrides(self) -> None:
        env = {"DRAGONS_QUEST_STARTING_GOLD": "45", "DRAGONS_QUEST_VERBOSITY": "DEBUG"}
        with mock.patch.dict(os.environ, env, clear=True):
            service = create_game_service("Asha")

        self.assertEqual(45, service.player.gold)
        self.assertEqual("debug", service.combat_service.verbosity)

    def test_invalid_settings_fall_back_with_warning(self) -> None:
        env = {"DRAGONS_QUEST_STARTING_GOLD": "lots", "DRAGONS_QUEST_VERBOSITY": "chatty"}
        with mock.patch.dict(os.environ, env, clear=True), self.assertLogs("dragons_quest.bootstrap", level="WARNING"):
            service = create_game_service("Asha")

        self.assertEqual(20, service.player.gold)
        self.assertEqual("compact", service.combat_service.verbosity)

    def test_combat_events_reach_session_stats(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            service = create_game_service("Asha")
        service.travel_intent(3)

        service.hunt_intent()

        self.assertEqual(1, service.get_session_summary().retreats)


if __name__ == "__main__":
    unittest.main()
