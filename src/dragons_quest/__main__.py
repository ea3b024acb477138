from pathlib import Path
import logging
import os
import sys

from dotenv import load_dotenv

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from dragons_quest.bootstrap import create_game_service
from dragons_quest.presentation.main_menu import main_menu, show_title
from dragons_quest.presentation.prompts import prompt_player_name

load_dotenv()


def _print_help_surface() -> None:
    print("\nHelp:")
    print("- Type the number of a menu option and press ENTER.")
    print("- Buy a sword at the blacksmith before hunting in the forest.")
    print("- Startup issues: check DRAGONS_QUEST_STARTING_GOLD and DRAGONS_QUEST_VERBOSITY.")


def _configure_logging() -> None:
    level_name = os.getenv("DRAGONS_QUEST_LOG_LEVEL", "WARNING").strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main():
    _configure_logging()
    try:
        show_title()
        game_service = create_game_service(prompt_player_name())
        main_menu(game_service)
    except (KeyboardInterrupt, EOFError):
        print("\nSession ended.")
    except Exception as exc:
        logging.getLogger(__name__).debug("Session crashed", exc_info=True)
        print("An unexpected error occurred. The game closed safely.")
        print(f"Reason: {exc}")
        _print_help_surface()


if __name__ == "__main__":
    main()
