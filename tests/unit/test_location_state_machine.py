import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from dragons_quest.application.services.location_machine import ActionKind, LocationStateMachine
from dragons_quest.domain.models.location import Location


class LocationStateMachineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.machine = LocationStateMachine()

    def test_village_travel_options(self) -> None:
        self.assertEqual(Location.BLACKSMITH, self.machine.apply_transition(Location.VILLAGE, 1))
        self.assertEqual(Location.MARKET, self.machine.apply_transition(Location.VILLAGE, 2))
        self.assertEqual(Location.FOREST, self.machine.apply_transition(Location.VILLAGE, 3))

    def test_leaf_locations_only_return_to_village(self) -> None:
        self.assertEqual(Location.VILLAGE, self.machine.apply_transition(Location.BLACKSMITH, 2))
        self.assertEqual(Location.VILLAGE, self.machine.apply_transition(Location.MARKET, 2))
        self.assertEqual(Location.VILLAGE, self.machine.apply_transition(Location.FOREST, 1))
        for leaf in (Location.BLACKSMITH, Location.MARKET, Location.FOREST):
            self.assertEqual((Location.VILLAGE,), self.machine.destinations(leaf))

    def test_non_travel_choices_leave_location_unchanged(self) -> None:
        self.assertEqual(Location.VILLAGE, self.machine.apply_transition(Location.VILLAGE, 4))
        self.assertEqual(Location.BLACKSMITH, self.machine.apply_transition(Location.BLACKSMITH, 1))
        self.assertEqual(Location.FOREST, self.machine.apply_transition(Location.FOREST, 5))
        self.assertEqual(Location.MARKET, self.machine.apply_transition(Location.MARKET, 99))

    def test_graph_is_symmetric(self) -> None:
        for leaf in self.machine.destinations(Location.VILLAGE):
            self.assertIn(Location.VILLAGE, self.machine.destinations(leaf))

    def test_menu_sizes_and_order(self) -> None:
        self.assertEqual(7, self.machine.menu_size(Location.VILLAGE))
        self.assertEqual(6, self.machine.menu_size(Location.BLACKSMITH))
        self.assertEqual(6, self.machine.menu_size(Location.MARKET))
        self.assertEqual(7, self.machine.menu_size(Location.FOREST))
        forest = [action.kind for action in self.machine.menu_for(Location.FOREST)]
        self.assertEqual(
            [
                ActionKind.TRAVEL,
                ActionKind.STATUS,
                ActionKind.USE_ITEM,
                ActionKind.HELP,
                ActionKind.HUNT,
                ActionKind.FACE_DRAGON,
                ActionKind.QUIT,
            ],
            forest,
        )

    def test_common_actions_available_everywhere(self) -> None:
        for location in Location:
            kinds = {action.kind for action in self.machine.menu_for(location)}
            self.assertTrue({ActionKind.STATUS, ActionKind.USE_ITEM, ActionKind.HELP, ActionKind.QUIT} <= kinds)

    def test_buy_and_fight_actions_are_location_specific(self) -> None:
        self.assertEqual(ActionKind.BUY_EQUIPMENT, self.machine.action_for(Location.BLACKSMITH, 1).kind)
        self.assertEqual(ActionKind.BUY_POTION, self.machine.action_for(Location.MARKET, 1).kind)
        village_kinds = {action.kind for action in self.machine.menu_for(Location.VILLAGE)}
        self.assertNotIn(ActionKind.HUNT, village_kinds)
        self.assertNotIn(ActionKind.BUY_EQUIPMENT, village_kinds)

    def test_action_for_rejects_out_of_range_numbers(self) -> None:
        with self.assertRaises(ValueError):
            self.machine.action_for(Location.MARKET, 7)
        with self.assertRaises(ValueError):
            self.machine.action_for(Location.MARKET, 0)

    def test_arrival_lines(self) -> None:
        self.assertEqual(
            "You venture into the forest...",
            self.machine.arrival_line(Location.VILLAGE, Location.FOREST),
        )
        self.assertEqual(
            "You hurry back to the safety of the village.",
            self.machine.arrival_line(Location.FOREST, Location.VILLAGE),
        )


if __name__ == "__main__":
    unittest.main()
