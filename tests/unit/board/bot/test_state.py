"""Testes dos stores de estado por usuario."""

import pytest

from projects.board.bot.state import LastAnalysisStore, SessionState, SessionStateStore
from projects.board.models import Analysis


def _analysis(user_id: int, idea: str = "ideia") -> Analysis:
    return Analysis(user_id=user_id, idea_text=idea, moderator="veredito")


class TestSessionStateStore:
    """Testes do SessionStateStore."""

    def test_unknown_user_is_idle(self):
        """Usuario nunca visto esta em IDLE."""
        assert SessionStateStore().get(123) == SessionState.IDLE

    def test_set_and_get(self):
        store = SessionStateStore()
        store.set(1, SessionState.WAITING_FOR_IDEA)
        store.set(2, SessionState.PROCESSING)

        assert store.get(1) == SessionState.WAITING_FOR_IDEA
        assert store.get(2) == SessionState.PROCESSING

    def test_set_overwrites(self):
        store = SessionStateStore()
        store.set(1, SessionState.PROCESSING)
        store.set(1, SessionState.HAS_LAST_RESULT)

        assert store.get(1) == SessionState.HAS_LAST_RESULT


class TestLastAnalysisStore:
    """Testes do LastAnalysisStore (LRU)."""

    def test_get_missing_returns_none(self):
        assert LastAnalysisStore().get(1) is None

    def test_put_replaces_previous(self):
        """Cada usuario guarda apenas a ultima analise."""
        store = LastAnalysisStore()
        store.put(1, _analysis(1, "primeira"))
        store.put(1, _analysis(1, "segunda"))

        assert store.get(1).idea_text == "segunda"
        assert len(store) == 1

    def test_evicts_least_recently_used(self):
        """Acima do limite, o usuario menos recente e descartado."""
        store = LastAnalysisStore(max_entries=2)
        store.put(1, _analysis(1))
        store.put(2, _analysis(2))
        store.get(1)  # 1 passa a ser o mais recente
        store.put(3, _analysis(3))

        assert store.get(2) is None
        assert store.get(1) is not None
        assert store.get(3) is not None
        assert len(store) == 2

    def test_invalid_max_entries(self):
        with pytest.raises(ValueError):
            LastAnalysisStore(max_entries=0)
