from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from dragons_quest.application.services.game_service import GameService
from dragons_quest.presentation.game_loop import run_game_loop


_CONSOLE = Console()
_SPLASH_BORDER = "yellow"
_WIN_BORDER = "green"
_LOSS_BORDER = "red"
_EXIT_BORDER = "magenta"


def _ornate_title(title: str) -> str:
    return f"[bold yellow]{title}[/bold yellow]"


def show_title() -> None:
    _CONSOLE.print(
        Panel.fit(
            "[bold yellow]The Dragon's Quest[/bold yellow]\n\nYour quest: Defeat the dragon in the mountains!",
            border_style=_SPLASH_BORDER,
            title=_ornate_title("Welcome"),
        )
    )


def _show_farewell(game_service: GameService) -> None:
    summary = game_service.get_session_summary()
    headline = {
        "won": ("[bold green]The Dragon is slain. The village is saved![/bold green]", _WIN_BORDER),
        "lost": ("[bold red]Your quest ends in the dark of the forest.[/bold red]", _LOSS_BORDER),
    }.get(summary.status, ("[bold magenta]Until next time, adventurer.[/bold magenta]", _EXIT_BORDER))
    text, border = headline
    lines = [
        text,
        "",
        f"Gold: {summary.gold}   Health: {summary.health}",
        f"Monsters slain: {summary.monsters_slain}   Retreats: {summary.retreats}",
        f"Gold earned: {summary.gold_earned}   Gold spent: {summary.gold_spent}",
        f"Potions used: {summary.potions_used}",
        f"Places visited: {', '.join(summary.places_visited)}",
    ]
    _CONSOLE.print(Panel.fit("\n".join(lines), title=_ornate_title("Farewell"), border_style=border))


def main_menu(game_service: GameService) -> None:
    player = game_service.get_status_view()
    _CONSOLE.print(f"\nWelcome, [bold]{escape(player.name)}[/bold]!")
    _CONSOLE.print(f"You start with {player.gold} gold.")
    run_game_loop(game_service)
    _show_farewell(game_service)
