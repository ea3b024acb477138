import logging
from typing import List, Optional

from dragons_quest.application.dtos import (
    ActionResult,
    InventoryItemView,
    InventoryPick,
    LocationMenuView,
    SessionSummaryView,
    ShopView,
    StatusView,
)
from dragons_quest.application.mappers import (
    to_inventory_views,
    to_menu_option_view,
    to_shop_item_view,
    to_status_view,
)
from dragons_quest.application.services.combat_service import (
    CombatResult,
    CombatService,
    health_change_lines,
)
from dragons_quest.application.services.event_bus import EventBus
from dragons_quest.application.services.location_machine import (
    ActionKind,
    LocationStateMachine,
    MenuAction,
)
from dragons_quest.application.services.session_stats import SessionStats, register_session_stats_handlers
from dragons_quest.domain.events import ItemPurchased, ItemUsed, LocationChanged, SessionEnded
from dragons_quest.domain.models.item import Item, ItemCategory
from dragons_quest.domain.models.location import LOCATION_DESCRIPTIONS, Location
from dragons_quest.domain.models.player import PlayerState
from dragons_quest.domain.models.session import SessionStatus
from dragons_quest.domain.services import item_catalog


logger = logging.getLogger(__name__)


class GameService:
    """Command and query intents for one play session.

    The player state is owned by whoever builds the service and is only
    mutated here (purchases, item use) and in the combat service.
    """

    def __init__(
        self,
        player: PlayerState,
        *,
        location_machine: Optional[LocationStateMachine] = None,
        combat_service: Optional[CombatService] = None,
        event_bus: Optional[EventBus] = None,
        stats: Optional[SessionStats] = None,
    ) -> None:
        self.player = player
        self.location_machine = location_machine or LocationStateMachine()
        self.event_bus = event_bus or EventBus()
        self.combat_service = combat_service or CombatService(event_publisher=self.event_bus.publish)
        if self.combat_service.event_publisher is None:
            self.combat_service.event_publisher = self.event_bus.publish
        self.stats = register_session_stats_handlers(self.event_bus, stats or SessionStats())
        self.status = SessionStatus.RUNNING
        self._last_messages: List[str] = []

    # -- session bookkeeping -------------------------------------------------

    @property
    def game_over(self) -> bool:
        return self.status.terminal

    def _require_running(self) -> None:
        if self.status.terminal:
            raise ValueError(f"The session has already ended ({self.status.value})")

    def _end_session(self, status: SessionStatus) -> None:
        self.status = status
        logger.info(
            "Session ended",
            extra={"status": status.value, "gold": self.player.gold, "health": self.player.health},
        )
        self.event_bus.publish(SessionEnded(status=status.value, gold=self.player.gold, health=self.player.health))

    def _finish(self, messages: List[str]) -> ActionResult:
        if not self.status.terminal and not self.player.alive:
            messages = list(messages) + ["Game Over! Your health reached 0!"]
            self._end_session(SessionStatus.LOST)
        self._last_messages = list(messages)
        return ActionResult(messages=list(messages), game_over=self.status.terminal)

    # -- queries -------------------------------------------------------------

    def get_menu_view(self) -> LocationMenuView:
        location = self.player.location
        options = []
        for number, action in enumerate(self.location_machine.menu_for(location), start=1):
            label = action.label
            if action.kind is ActionKind.BUY_POTION:
                label = f"{label} ({item_catalog.HEALTH_POTION.cost} gold)"
            options.append(to_menu_option_view(number=number, label=label, action=action.kind.value))
        return LocationMenuView(
            location=location.value,
            title=location.display_name,
            description=LOCATION_DESCRIPTIONS[location],
            options=options,
        )

    def action_for_choice(self, choice: int) -> MenuAction:
        return self.location_machine.action_for(self.player.location, choice)

    def get_status_view(self) -> StatusView:
        return to_status_view(
            player=self.player,
            session_status=self.status.value,
            last_messages=self._last_messages,
        )

    def get_inventory_view(self) -> List[InventoryItemView]:
        return to_inventory_views(self.player.inventory)

    def get_shop_view(self) -> ShopView:
        location = self.player.location
        rows = []
        for item in self._stock_for(location):
            if item.category.is_equipment and self.player.owns(item.item_id):
                rows.append(to_shop_item_view(item=item, can_buy=False, availability_note="Already owned"))
            elif self.player.gold < item.cost:
                rows.append(to_shop_item_view(item=item, can_buy=False, availability_note="Not enough gold"))
            else:
                rows.append(to_shop_item_view(item=item, can_buy=True))
        return ShopView(
            location=location.value,
            gold=self.player.gold,
            items=rows,
            empty_state_hint="" if rows else "Nothing is for sale here.",
        )

    def get_session_summary(self) -> SessionSummaryView:
        return SessionSummaryView(
            name=self.player.name,
            status=self.status.value,
            gold=self.player.gold,
            health=self.player.health,
            monsters_slain=self.stats.monsters_slain,
            retreats=self.stats.retreats,
            gold_earned=self.stats.gold_earned,
            gold_spent=self.stats.gold_spent,
            potions_used=self.stats.potions_used,
            places_visited=list(self.stats.places_visited),
        )

    def status_lines(self) -> List[str]:
        lines = [
            f"=== {self.player.name}'s Status ===",
            f"Health: {self.player.health}",
            f"Gold: {self.player.gold}",
            f"Location: {self.player.location.value}",
            "Inventory:",
        ]
        if not self.player.inventory:
            lines.append("   Nothing in inventory")
        for row in self.get_inventory_view():
            lines.append(f"   {row.index}. {row.name} - {row.description}")
        return lines

    def status_intent(self) -> ActionResult:
        return self._finish(self.status_lines())

    def help_intent(self) -> ActionResult:
        potion = item_catalog.HEALTH_POTION
        sword = item_catalog.BASIC_SWORD
        return self._finish(
            [
                "Movement Commands:",
                "- In the village, choose 1-3 to travel to different locations",
                "- In other locations, choose the return option to go back to the village",
                "Battle Information:",
                "- You need a weapon to win battles",
                "- Weapons have different damage values",
                "- You can buy weapons and armor from the Blacksmith",
                "- Monsters appear in the forest",
                "- Without a weapon, you'll lose health when retreating",
                "- The Dragon can only be beaten with a Steel Sword and some armor",
                "Item Usage:",
                "- Health potions restore health based on their effect value",
                f"- You can buy potions at the market for {potion.cost} gold",
                f"- You can buy a sword at the blacksmith for {sword.cost} gold",
                "Other Commands:",
                "- Choose the status option to see your health and gold",
                "- Choose the help option to see this message again",
                "- Choose the quit option to end the game",
                "Tips:",
                "- Keep healing potions for dangerous areas",
                "- Defeat monsters to earn gold",
                "- Health can't go above 100",
            ]
        )

    # -- commands ------------------------------------------------------------

    def travel_intent(self, choice: int) -> ActionResult:
        self._require_running()
        origin = self.player.location
        destination = self.location_machine.apply_transition(origin, choice)
        if destination == origin:
            return self._finish([])
        self.player.location = destination
        logger.info("Location changed", extra={"from_location": origin.value, "to_location": destination.value})
        self.event_bus.publish(LocationChanged(from_location=origin.value, to_location=destination.value))
        return self._finish([self.location_machine.arrival_line(origin, destination)])

    def buy_item_intent(self, item_id: str) -> ActionResult:
        self._require_running()
        stock = self._stock_for(self.player.location)
        selected = next((item for item in stock if item.item_id == item_id), None)
        if selected is None:
            return self._finish(["That item is not sold here."])
        if self.player.gold < selected.cost:
            if selected.category is ItemCategory.POTION:
                return self._finish(["Merchant: 'No gold, no potion!'"])
            return self._finish([f"Blacksmith: 'You don't have enough gold for that {selected.name}!'"])
        if selected.category.is_equipment and self.player.owns(selected.item_id):
            return self._finish([f"You already have a {selected.name}!"])

        self.player.gold -= selected.cost
        self.player.inventory.append(selected.copy())
        logger.info(
            "Item purchased",
            extra={"item_id": selected.item_id, "price": selected.cost, "gold": self.player.gold},
        )
        self.event_bus.publish(
            ItemPurchased(
                item_id=selected.item_id,
                price=selected.cost,
                gold_after=self.player.gold,
                location=self.player.location.value,
            )
        )
        messages = []
        if selected.category is ItemCategory.POTION:
            messages.append("Merchant: 'This potion will heal your wounds!'")
        messages.extend(
            [
                f"You have bought a {selected.name} for {selected.cost} gold.",
                f"You have {self.player.gold} gold remaining!",
            ]
        )
        return self._finish(messages)

    def buy_potion_intent(self) -> ActionResult:
        return self.buy_item_intent(item_catalog.HEALTH_POTION.item_id)

    def browse_intent(self) -> ActionResult:
        self._require_running()
        return self._finish(["Looking is free!"])

    def use_item_intent(self, pick: InventoryPick) -> ActionResult:
        self._require_running()
        if not self.player.inventory:
            return self._finish(["You have no items!"])
        if pick.cancelled or pick.index is None:
            return self._finish(["You put your pack away."])

        position = pick.index - 1
        if position < 0 or position >= len(self.player.inventory):
            return self._finish(["Invalid item number!"])

        item = self.player.inventory[position]
        if item.category is not ItemCategory.POTION:
            self.event_bus.publish(ItemUsed(item_id=item.item_id, category=item.category.value, consumed=False))
            return self._finish([f"You ready your {item.name} for battle."])

        self.player.remove_item_at(position)
        change = self.player.adjust_health(item.effect)
        self.event_bus.publish(ItemUsed(item_id=item.item_id, category=item.category.value, consumed=True))
        messages = [f"You drink the {item.name}."]
        messages.extend(health_change_lines(change))
        return self._finish(messages)

    def hunt_intent(self) -> ActionResult:
        return self._fight(is_boss=False)

    def face_dragon_intent(self) -> ActionResult:
        return self._fight(is_boss=True)

    def quit_intent(self) -> ActionResult:
        self._require_running()
        self._end_session(SessionStatus.QUIT)
        return self._finish(["Thanks for playing!"])

    # -- helpers -------------------------------------------------------------

    def _fight(self, *, is_boss: bool) -> ActionResult:
        self._require_running()
        if self.player.location is not Location.FOREST:
            return self._finish(["There is nothing to fight here. Monsters lurk in the forest."])
        result: CombatResult = self.combat_service.resolve_combat(self.player, is_boss=is_boss)
        messages = result.messages
        if result.player_won and is_boss:
            self._end_session(SessionStatus.WON)
            messages = messages + [f"You have won the game with {self.player.gold} gold!"] + self.status_lines()
        return self._finish(messages)

    @staticmethod
    def _stock_for(location: Location) -> List[Item]:
        if location is Location.BLACKSMITH:
            return item_catalog.blacksmith_stock()
        if location is Location.MARKET:
            return item_catalog.market_stock()
        return []
