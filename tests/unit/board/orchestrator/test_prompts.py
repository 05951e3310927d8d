"""Testes do prompt composto do moderador."""

from projects.board.orchestrator import TRUNCATION_MARKER, build_moderator_prompt, limit_text
from projects.board.roles import Role


class TestLimitText:
    """Testes de limit_text."""

    def test_short_text_unchanged(self):
        assert limit_text("curto", 200) == "curto"

    def test_text_at_limit_unchanged(self):
        """Exatamente max_chars nao recebe marcador."""
        text = "a" * 200
        assert limit_text(text, 200) == text

    def test_long_text_cut_with_marker(self):
        """Texto acima do limite e cortado e recebe o marcador."""
        text = "a" * 201
        result = limit_text(text, 200)

        assert result == "a" * 200 + TRUNCATION_MARKER
        assert result.startswith(text[:200])

    def test_empty_text(self):
        assert limit_text("", 200) == ""


class TestBuildModeratorPrompt:
    """Testes de build_moderator_prompt."""

    def _texts(self, **overrides):
        texts = {
            Role.STRATEGIST: "estrategia",
            Role.FINANCIER: "financas",
            Role.AUDITOR: "riscos",
            Role.ANALYST: "mercado",
        }
        texts.update(overrides)
        return texts

    def test_contains_idea_and_all_experts(self):
        """Prompt traz a ideia completa e os quatro especialistas em ordem."""
        prompt = build_moderator_prompt("App de cafe", self._texts())

        assert "IDEIA: App de cafe" in prompt
        positions = [prompt.index(t) for t in ("estrategia", "financas", "riscos", "mercado")]
        assert positions == sorted(positions)

    def test_expert_text_truncated_to_max_chars(self):
        """Cada especialista contribui no maximo max_chars caracteres."""
        long_text = "x" * 1000
        prompt = build_moderator_prompt(
            "ideia", self._texts(**{Role.FINANCIER: long_text}), max_chars=200
        )

        assert "x" * 200 + TRUNCATION_MARKER in prompt
        assert "x" * 201 not in prompt

    def test_idea_is_not_truncated(self):
        """A ideia vai inteira para o moderador."""
        idea = "y" * 1000
        prompt = build_moderator_prompt(idea, self._texts())

        assert idea in prompt

    def test_missing_expert_text_is_empty(self):
        """Papel sem texto aparece com conteudo vazio."""
        texts = self._texts()
        del texts[Role.AUDITOR]

        prompt = build_moderator_prompt("ideia", texts)

        assert "- Auditor: " in prompt
