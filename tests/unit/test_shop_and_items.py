import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from dragons_quest.application.dtos import InventoryPick
from dragons_quest.application.services.game_service import GameService
from dragons_quest.domain.events import ItemPurchased
from dragons_quest.domain.models.location import Location
from dragons_quest.domain.models.player import PlayerState
from dragons_quest.domain.services import item_catalog


class ShopFlowTests(unittest.TestCase):
    def _service(self, location: Location = Location.BLACKSMITH, gold: int = 20, items=()) -> GameService:
        player = PlayerState(name="Rook", gold=gold, location=location, inventory=[item.copy() for item in items])
        return GameService(player)

    def test_buying_copies_item_and_deducts_gold(self) -> None:
        service = self._service()

        result = service.buy_item_intent("basic_sword")

        self.assertEqual(10, service.player.gold)
        self.assertEqual(["Basic Sword"], [item.name for item in service.player.inventory])
        self.assertIsNot(item_catalog.BASIC_SWORD, service.player.inventory[0])
        self.assertIn("You have 10 gold remaining!", result.messages)
        self.assertFalse(result.game_over)

    def test_duplicate_equipment_is_refused(self) -> None:
        service = self._service(items=[item_catalog.BASIC_SWORD])

        result = service.buy_item_intent("basic_sword")

        self.assertEqual(20, service.player.gold)
        self.assertEqual(1, len(service.player.inventory))
        self.assertIn("You already have a Basic Sword!", result.messages)

    def test_owning_basic_sword_does_not_block_steel_sword(self) -> None:
        service = self._service(gold=30, items=[item_catalog.BASIC_SWORD])

        service.buy_item_intent("steel_sword")

        self.assertEqual(["basic_sword", "steel_sword"], [item.item_id for item in service.player.inventory])
        self.assertEqual(10, service.player.gold)

    def test_insufficient_gold_is_refused(self) -> None:
        service = self._service(gold=15)

        result = service.buy_item_intent("iron_shield")

        self.assertEqual(15, service.player.gold)
        self.assertEqual([], service.player.inventory)
        self.assertIn("Blacksmith: 'You don't have enough gold for that Iron Shield!'", result.messages)

    def test_item_not_in_local_stock_is_refused(self) -> None:
        service = self._service(location=Location.MARKET)

        result = service.buy_item_intent("steel_sword")

        self.assertEqual(["That item is not sold here."], result.messages)
        self.assertEqual(20, service.player.gold)

    def test_potions_can_be_bought_repeatedly(self) -> None:
        service = self._service(location=Location.MARKET, gold=12)

        service.buy_potion_intent()
        service.buy_potion_intent()
        refused = service.buy_potion_intent()

        self.assertEqual(2, len(service.player.inventory))
        self.assertEqual(2, service.player.gold)
        self.assertIn("Merchant: 'No gold, no potion!'", refused.messages)

    def test_shop_view_marks_availability(self) -> None:
        service = self._service(gold=12, items=[item_catalog.WOODEN_SHIELD])

        shop = service.get_shop_view()
        by_id = {row.item_id: row for row in shop.items}

        self.assertTrue(by_id["basic_sword"].can_buy)
        self.assertEqual("Not enough gold", by_id["steel_sword"].availability_note)
        self.assertEqual("Already owned", by_id["wooden_shield"].availability_note)
        self.assertEqual(12, shop.gold)

    def test_shop_view_is_empty_outside_shops(self) -> None:
        shop = self._service(location=Location.FOREST).get_shop_view()

        self.assertEqual([], shop.items)
        self.assertTrue(shop.empty_state_hint)

    def test_browsing_changes_nothing(self) -> None:
        service = self._service()

        result = service.browse_intent()

        self.assertEqual(["Looking is free!"], result.messages)
        self.assertEqual(20, service.player.gold)

    def test_purchase_publishes_event(self) -> None:
        service = self._service()
        seen: list[ItemPurchased] = []
        service.event_bus.subscribe(ItemPurchased, seen.append)

        service.buy_item_intent("wooden_shield")

        self.assertEqual(1, len(seen))
        self.assertEqual(8, seen[0].price)
        self.assertEqual(12, seen[0].gold_after)
        self.assertEqual(8, service.get_session_summary().gold_spent)


class ItemUseTests(unittest.TestCase):
    def _service(self, *items, health: int = 100) -> GameService:
        return GameService(PlayerState(name="Rook", health=health, inventory=[item.copy() for item in items]))

    def test_empty_inventory(self) -> None:
        result = self._service().use_item_intent(InventoryPick.choose(1))

        self.assertEqual(["You have no items!"], result.messages)

    def test_potion_heals_and_is_consumed(self) -> None:
        service = self._service(item_catalog.BASIC_SWORD, item_catalog.HEALTH_POTION, health=50)

        result = service.use_item_intent(InventoryPick.choose(2))

        self.assertEqual(80, service.player.health)
        self.assertEqual(["Basic Sword"], [item.name for item in service.player.inventory])
        self.assertIn("You drink the Health Potion.", result.messages)
        self.assertIn("Health is now: 80", result.messages)
        self.assertEqual(1, service.get_session_summary().potions_used)

    def test_potion_at_full_health_signals_full(self) -> None:
        service = self._service(item_catalog.HEALTH_POTION, health=90)

        result = service.use_item_intent(InventoryPick.choose(1))

        self.assertEqual(100, service.player.health)
        self.assertIn("You're at full health!", result.messages)

    def test_readying_equipment_keeps_it(self) -> None:
        service = self._service(item_catalog.STEEL_SWORD)

        result = service.use_item_intent(InventoryPick.choose(1))

        self.assertEqual(["You ready your Steel Sword for battle."], result.messages)
        self.assertEqual(1, len(service.player.inventory))

    def test_cancel_and_bad_index_leave_state_unchanged(self) -> None:
        service = self._service(item_catalog.HEALTH_POTION, health=40)

        cancelled = service.use_item_intent(InventoryPick.cancel())
        invalid = service.use_item_intent(InventoryPick.choose(3))

        self.assertEqual(["You put your pack away."], cancelled.messages)
        self.assertEqual(["Invalid item number!"], invalid.messages)
        self.assertEqual(40, service.player.health)
        self.assertEqual(1, len(service.player.inventory))


if __name__ == "__main__":
    unittest.main()
