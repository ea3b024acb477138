from __future__ import annotations

from typing import Sequence

from dragons_quest.application.dtos import (
    InventoryItemView,
    MenuOptionView,
    ShopItemView,
    StatusView,
)
from dragons_quest.domain.models.item import Item
from dragons_quest.domain.models.player import PlayerState


def to_inventory_item_view(*, index: int, item: Item) -> InventoryItemView:
    return InventoryItemView(
        index=index,
        item_id=item.item_id,
        name=item.name,
        category=item.category.value,
        effect=item.effect,
        description=item.description,
    )


def to_inventory_views(items: Sequence[Item]) -> list[InventoryItemView]:
    return [to_inventory_item_view(index=idx, item=item) for idx, item in enumerate(items, start=1)]


def to_shop_item_view(*, item: Item, can_buy: bool, availability_note: str = "") -> ShopItemView:
    return ShopItemView(
        item_id=item.item_id,
        name=item.name,
        description=item.description,
        price=item.cost,
        can_buy=can_buy,
        availability_note=availability_note,
    )


def to_menu_option_view(*, number: int, label: str, action: str) -> MenuOptionView:
    return MenuOptionView(number=number, label=label, action=action)


def to_status_view(*, player: PlayerState, session_status: str, last_messages: Sequence[str]) -> StatusView:
    return StatusView(
        name=player.name,
        health=player.health,
        gold=player.gold,
        location=player.location.value,
        session_status=session_status,
        inventory=to_inventory_views(player.inventory),
        last_messages=list(last_messages),
    )
