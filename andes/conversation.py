import threading
from typing import Tuple

from .models import USER, Turn


class ConversationStore:
    """
    Session-scoped chat state: the ordered turn log, the live system
    context and the unsent draft.

    Turns are only ever appended at the tail. `clear` is the single
    destructive operation and leaves the context alone.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._turns = []
        self._context = ""
        self._pending_input = ""

    @property
    def turns(self) -> Tuple[Turn, ...]:
        with self._lock:
            return tuple(self._turns)

    @property
    def context(self) -> str:
        return self._context

    @property
    def pending_input(self) -> str:
        return self._pending_input

    @property
    def is_empty(self) -> bool:
        return not self._turns

    def __len__(self):
        return len(self._turns)

    def append_user_turn(self, text: str) -> Turn:
        turn = Turn(role=USER, content=text)
        self.append_reply_turn(turn)
        return turn

    def append_reply_turn(self, turn: Turn) -> Turn:
        with self._lock:
            self._turns.append(turn)
        return turn

    def clear(self):
        with self._lock:
            self._turns.clear()
            self._pending_input = ""

    def set_context(self, text: str):
        self._context = text

    def set_pending_input(self, text: str):
        self._pending_input = text
