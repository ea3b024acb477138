from enum import Enum


class SessionStatus(str, Enum):
    RUNNING = "running"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"

    @property
    def terminal(self) -> bool:
        return self is not SessionStatus.RUNNING
