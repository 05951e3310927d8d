"""Testes de renderizacao de relatorios e historico."""

import pytest

from projects.board.bot import messages
from projects.board.models import Analysis


def _analysis(**overrides) -> Analysis:
    data = dict(
        user_id=1,
        idea_text="App de assinatura de cafe",
        strategist="Estrategia X",
        financier="Financas Y",
        auditor="Riscos Z",
        analyst="Mercado W",
        moderator="VEREDITO: SEGUIR",
    )
    data.update(overrides)
    return Analysis(**data)


class TestRenderAnalysis:
    """Testes de render_analysis."""

    def test_contains_idea_and_five_sections(self):
        """Relatorio traz a ideia, o veredito e as quatro opinioes."""
        report = messages.render_analysis(_analysis())

        assert report.startswith("📊 RESULTADO DA ANÁLISE")
        assert "💡 IDEIA: App de assinatura de cafe" in report
        for text in ("VEREDITO: SEGUIR", "Estrategia X", "Financas Y", "Riscos Z", "Mercado W"):
            assert text in report

    def test_moderator_section_comes_first(self):
        report = messages.render_analysis(_analysis())

        assert report.index("VEREDITO: SEGUIR") < report.index("Estrategia X")
        assert report.index("Riscos Z") < report.index("Mercado W")


class TestSplitText:
    """Testes de split_text."""

    def test_short_text_single_chunk(self):
        assert messages.split_text("abc", 10) == ["abc"]

    def test_chunks_respect_size_and_order(self):
        """Partes tem no maximo chunk_size e reconstroem o texto."""
        text = "".join(str(i % 10) for i in range(9000))
        chunks = messages.split_text(text, 3900)

        assert len(chunks) == 3
        assert all(len(chunk) <= 3900 for chunk in chunks)
        assert "".join(chunks) == text

    def test_empty_text(self):
        assert messages.split_text("", 100) == []

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            messages.split_text("abc", 0)

    def test_emoji_counted_as_two_units(self):
        """Emoji contam 2 unidades UTF-16 e nao sao partidos ao meio."""
        text = "😀" * 2000  # 4000 unidades UTF-16
        chunks = messages.split_text(text, 3900)

        assert len(chunks) == 2
        assert all(messages.utf16_len(chunk) <= 3900 for chunk in chunks)
        assert messages.utf16_len(chunks[0]) == 3900
        assert "".join(chunks) == text

    def test_mixed_text_never_exceeds_limit(self):
        text = ("a😀" * 3000)
        chunks = messages.split_text(text, 101)

        assert all(messages.utf16_len(chunk) <= 101 for chunk in chunks)
        assert "".join(chunks) == text


def test_utf16_len():
    assert messages.utf16_len("abc") == 3
    assert messages.utf16_len("😀") == 2
    assert messages.utf16_len("é") == 1


class TestRenderHistory:
    """Testes de render_history."""

    def test_one_line_per_analysis(self):
        analyses = [_analysis(id=i, idea_text=f"ideia {i}") for i in (5, 4, 3)]

        rendered = messages.render_history(analyses)
        lines = rendered.splitlines()

        assert lines[0] == messages.HISTORY_HEADER
        assert lines[2:] == ["• #5 ideia 5", "• #4 ideia 4", "• #3 ideia 3"]

    def test_long_idea_is_previewed(self):
        """Ideias longas sao cortadas com reticencias."""
        rendered = messages.render_history([_analysis(id=1, idea_text="a" * 200)], preview_chars=80)

        assert "a" * 80 + "..." in rendered
        assert "a" * 81 not in rendered

    def test_idea_whitespace_is_collapsed(self):
        rendered = messages.render_history([_analysis(id=1, idea_text="linha 1\n\nlinha 2")])

        assert "• #1 linha 1 linha 2" in rendered


def test_preview_keeps_short_text():
    assert messages.preview("curto", 80) == "curto"
