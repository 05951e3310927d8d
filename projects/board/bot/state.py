"""Estado por usuário do bot.

Dois stores independentes, injetados no handler:
  - SessionStateStore: modo da conversa (idle, aguardando ideia, ...)
  - LastAnalysisStore: última análise produzida, ainda não necessariamente salva

Nenhum dos dois valida transições; a máquina de estados vive no handler.
"""
import enum
import threading
from collections import OrderedDict
from typing import Optional

from projects.board.models import Analysis


class SessionState(str, enum.Enum):
    """Modo de conversa de um usuário."""
    IDLE = "idle"
    WAITING_FOR_IDEA = "waiting_for_idea"
    PROCESSING = "processing"
    HAS_LAST_RESULT = "has_last_result"


class SessionStateStore:
    """Mapa user_id -> SessionState, IDLE para usuários desconhecidos."""

    def __init__(self):
        self._lock = threading.Lock()
        self._states: dict[int, SessionState] = {}

    def get(self, user_id: int) -> SessionState:
        with self._lock:
            return self._states.get(user_id, SessionState.IDLE)

    def set(self, user_id: int, state: SessionState) -> None:
        with self._lock:
            self._states[user_id] = state


class LastAnalysisStore:
    """Última análise por usuário, com despejo LRU.

    Ao passar de max_entries usuários, o menos usado recentemente é
    descartado; a análise dele só pode ser recuperada se tiver sido salva.
    """

    def __init__(self, max_entries: int = 1000):
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self.max_entries = max_entries
        self._lock = threading.Lock()
        self._items: OrderedDict[int, Analysis] = OrderedDict()

    def get(self, user_id: int) -> Optional[Analysis]:
        with self._lock:
            analysis = self._items.get(user_id)
            if analysis is not None:
                self._items.move_to_end(user_id)
            return analysis

    def put(self, user_id: int, analysis: Analysis) -> None:
        with self._lock:
            self._items[user_id] = analysis
            self._items.move_to_end(user_id)
            while len(self._items) > self.max_entries:
                self._items.popitem(last=False)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
