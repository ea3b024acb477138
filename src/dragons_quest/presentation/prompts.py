from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from dragons_quest.application.dtos import InventoryPick


_CONSOLE = Console()
_CANCEL_WORDS = {"cancel", "c", "back", "q"}


@dataclass(frozen=True)
class ChoiceValidation:
    valid: bool
    value: Optional[int] = None
    reason: str = ""


def validate_choice(raw: Optional[str], maximum: int) -> ChoiceValidation:
    """Check a typed menu choice against ``[1, maximum]``."""

    text = str(raw or "").strip()
    if not text:
        return ChoiceValidation(valid=False, reason="Please enter a number!")
    try:
        value = int(text)
    except ValueError:
        return ChoiceValidation(valid=False, reason="That's not a number! Please enter a number.")
    if value < 1 or value > maximum:
        return ChoiceValidation(valid=False, value=value, reason=f"Please enter a number between 1 and {maximum}.")
    return ChoiceValidation(valid=True, value=value)


def _read_line(message: str) -> str:
    return _CONSOLE.input(f"[bold yellow]{message}[/bold yellow]")


def _report_invalid(reason: str) -> None:
    _CONSOLE.print(f"[red]Error: {reason}[/red]")


def prompt_choice(maximum: int, message: str = "Enter choice (number): ") -> int:
    if maximum < 1:
        raise ValueError("prompt_choice requires at least one option")
    while True:
        check = validate_choice(_read_line(message), maximum)
        if check.valid and check.value is not None:
            return check.value
        _report_invalid(check.reason)


def prompt_inventory_pick(count: int, message: str = "Use which item? (number or 'cancel'): ") -> InventoryPick:
    while True:
        raw = _read_line(message)
        if str(raw or "").strip().lower() in _CANCEL_WORDS:
            return InventoryPick.cancel()
        check = validate_choice(raw, count)
        if check.valid and check.value is not None:
            return InventoryPick.choose(check.value)
        _report_invalid(check.reason)


def prompt_player_name(message: str = "What is your name, brave adventurer? ") -> str:
    return str(_read_line(message) or "").strip()
