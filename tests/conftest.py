import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_game_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("DRAGONS_QUEST_STARTING_GOLD", "DRAGONS_QUEST_VERBOSITY", "DRAGONS_QUEST_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
