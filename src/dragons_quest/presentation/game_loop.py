from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dragons_quest.application.dtos import ActionResult, InventoryPick
from dragons_quest.application.services.location_machine import ActionKind
from dragons_quest.presentation.prompts import prompt_choice, prompt_inventory_pick


_CONSOLE = Console()
_BORDER_LOOP = "yellow"
_BORDER_TOWN = "green"
_BORDER_SHOP = "bright_yellow"
_BORDER_COMBAT = "red"
_BORDER_CHARACTER = "cyan"
_BORDER_HELP = "magenta"

_LOCATION_BORDERS = {
    "village": _BORDER_TOWN,
    "blacksmith": _BORDER_SHOP,
    "market": _BORDER_SHOP,
    "forest": _BORDER_COMBAT,
}

_RESULT_PANELS = {
    ActionKind.TRAVEL: ("Travel", _BORDER_LOOP, "loop"),
    ActionKind.BUY_EQUIPMENT: ("Blacksmith", _BORDER_SHOP, "shop"),
    ActionKind.BUY_POTION: ("Market", _BORDER_SHOP, "shop"),
    ActionKind.USE_ITEM: ("Inventory", _BORDER_CHARACTER, "inventory"),
    ActionKind.HELP: ("Available Commands", _BORDER_HELP, "help"),
    ActionKind.HUNT: ("Battle", _BORDER_COMBAT, "combat"),
    ActionKind.FACE_DRAGON: ("The Dragon", _BORDER_COMBAT, "combat"),
    ActionKind.QUIT: ("Farewell", _BORDER_LOOP, "loop"),
}


def _ornate_title(title: str) -> str:
    core = str(title or "").strip() or "Panel"
    return f"[bold yellow]{core}[/bold yellow]"


def _panel_subtitle(panel_key: str) -> str:
    lookup = {
        "loop": "[dim]The road to the Dragon[/dim]",
        "shop": "[dim]Wares and weighted coin[/dim]",
        "inventory": "[dim]Pack and provisions[/dim]",
        "help": "[dim]Know before you go[/dim]",
        "combat": "[dim]Steel against scale[/dim]",
        "character": "[dim]Record of your legend[/dim]",
    }
    return lookup.get(str(panel_key), "[dim]Adventurer's ledger[/dim]")


def _render_message_panel(
    title: str,
    lines: list[str],
    *,
    border_style: str = _BORDER_LOOP,
    panel_key: str = "loop",
) -> None:
    rows = [str(line) for line in lines if str(line).strip()]
    if not rows:
        return
    _CONSOLE.print(
        Panel.fit(
            "\n".join(escape(row) for row in rows),
            title=_ornate_title(title),
            subtitle=_panel_subtitle(panel_key),
            subtitle_align="left",
            border_style=border_style,
        )
    )


def _render_location_menu(menu) -> None:
    body = Table.grid(padding=(0, 1))
    body.add_column(style="bold yellow", justify="right")
    body.add_column(style="white")
    for option in menu.options:
        body.add_row(f"{option.number}:", option.label)
    _CONSOLE.print(f"\n[italic]{menu.description}[/italic]")
    _CONSOLE.print(
        Panel.fit(
            body,
            title=_ornate_title(f"=== {menu.title} ==="),
            subtitle="[dim]What would you like to do?[/dim]",
            subtitle_align="left",
            border_style=_LOCATION_BORDERS.get(menu.location, _BORDER_LOOP),
        )
    )


def _render_status(view) -> None:
    header = Table.grid(padding=(0, 1))
    header.add_column(style="bold yellow", justify="right")
    header.add_column(style="white")
    header.add_row("Health", str(view.health))
    header.add_row("Gold", str(view.gold))
    header.add_row("Location", view.location)
    if view.inventory:
        header.add_row("Inventory", "\n".join(f"{row.index}. {row.name} - {row.description}" for row in view.inventory))
    else:
        header.add_row("Inventory", "Nothing in inventory")
    _CONSOLE.print(
        Panel.fit(
            header,
            title=_ornate_title(f"{escape(view.name)}'s Status"),
            subtitle=_panel_subtitle("character"),
            subtitle_align="left",
            border_style=_BORDER_CHARACTER,
        )
    )


def _render_inventory(rows) -> None:
    table = Table(title="Inventory", show_lines=False, border_style=_BORDER_CHARACTER)
    table.add_column("#", justify="right", style="bold yellow")
    table.add_column("Item")
    table.add_column("Kind", style="dim")
    table.add_column("Effect", justify="right")
    for row in rows:
        table.add_row(str(row.index), row.name, row.category, str(row.effect))
    _CONSOLE.print(table)


def _render_shop(shop) -> None:
    table = Table(title=f"Wares - {shop.gold} gold in your purse", border_style=_BORDER_SHOP)
    table.add_column("#", justify="right", style="bold yellow")
    table.add_column("Item")
    table.add_column("Price", justify="right")
    table.add_column("Notes", style="dim")
    for number, item in enumerate(shop.items, start=1):
        table.add_row(str(number), item.name, f"{item.price} gold", item.availability_note or item.description)
    table.add_row(str(len(shop.items) + 1), "Don't buy anything at this time", "0 gold", "")
    _CONSOLE.print("We have a variety of weapons and armor to choose from:")
    _CONSOLE.print(table)


def _run_blacksmith(game_service) -> ActionResult:
    shop = game_service.get_shop_view()
    _render_shop(shop)
    choice = prompt_choice(len(shop.items) + 1, "What would you like to buy, brave adventurer? ")
    if choice == len(shop.items) + 1:
        return game_service.browse_intent()
    return game_service.buy_item_intent(shop.items[choice - 1].item_id)


def _run_use_item(game_service) -> ActionResult:
    rows = game_service.get_inventory_view()
    if not rows:
        return game_service.use_item_intent(InventoryPick.cancel())
    _render_inventory(rows)
    return game_service.use_item_intent(prompt_inventory_pick(len(rows)))


def run_turn(game_service) -> ActionResult:
    """Play one turn: show the location menu, read a choice and dispatch it."""

    menu = game_service.get_menu_view()
    _render_location_menu(menu)
    choice = prompt_choice(menu.size)
    action = game_service.action_for_choice(choice)

    if action.kind is ActionKind.STATUS:
        result = game_service.status_intent()
        _render_status(game_service.get_status_view())
        return result
    if action.kind is ActionKind.TRAVEL:
        result = game_service.travel_intent(choice)
    elif action.kind is ActionKind.BUY_EQUIPMENT:
        result = _run_blacksmith(game_service)
    elif action.kind is ActionKind.BUY_POTION:
        result = game_service.buy_potion_intent()
    elif action.kind is ActionKind.USE_ITEM:
        result = _run_use_item(game_service)
    elif action.kind is ActionKind.HELP:
        result = game_service.help_intent()
    elif action.kind is ActionKind.HUNT:
        result = game_service.hunt_intent()
    elif action.kind is ActionKind.FACE_DRAGON:
        result = game_service.face_dragon_intent()
    else:
        result = game_service.quit_intent()

    title, border, panel_key = _RESULT_PANELS[action.kind]
    _render_message_panel(title, list(result.messages or []), border_style=border, panel_key=panel_key)
    return result


def run_game_loop(game_service) -> None:
    while not game_service.game_over:
        run_turn(game_service)
