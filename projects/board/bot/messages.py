"""
Textos do bot e renderização de relatórios.

Todas as mensagens são enviadas como texto puro (sem parse_mode), então
nenhum conteúdo de LLM precisa de escape.
"""

from typing import Sequence

from projects.board.models import Analysis
from projects.board.roles import Role

GREETING = (
    "👋 Olá! Eu sou o Board AI, um conselho de diretores multi-agente para ideias de negócio. "
    "Toque em «Nova análise» ou envie /new para começar."
)
ASK_FOR_IDEA = (
    "Descreva a ideia de negócio em detalhes. Vou convocar o conselho de especialistas "
    "(leva de 3 a 5 minutos)."
)
PRESS_NEW_ANALYSIS = "Toque em «Nova análise» para começar."
SEND_TEXT_IDEA = "Envie a ideia como texto."
ANALYSIS_STARTED = "⏳ Análise iniciada. Envio o resultado assim que os especialistas terminarem..."
ANALYSIS_IN_PROGRESS = "A análise já está em andamento, aguarde, por favor."
ANALYSIS_FAILED = "⚠️ Erro na análise. Tente novamente mais tarde."
CANCELLED = "Ação cancelada."
UNKNOWN_COMMAND = "Comando desconhecido. /new - nova análise."
NOTHING_TO_SAVE = "Não há análise recente para salvar. Faça uma análise primeiro."
ALREADY_SAVED = "Esta análise já foi salva (#{id})."
SAVE_OK = "Análise salva no banco de dados ✅ (#{id})"
SAVE_FAILED = "Não foi possível salvar a análise no banco de dados."
HISTORY_FAILED = "Não foi possível obter o histórico de análises."
HISTORY_EMPTY = "O histórico está vazio. Faça a análise de uma nova ideia primeiro."
HISTORY_HEADER = "Últimas análises:"
SHOW_USAGE = "Uso: /show <número da análise>"
ANALYSIS_NOT_FOUND = "Análise #{id} não encontrada."

ELLIPSIS = "..."

REPORT_SECTIONS: tuple[tuple[Role, str], ...] = (
    (Role.MODERATOR, "👨‍💼 VEREDITO DO MODERADOR"),
    (Role.STRATEGIST, "📈 ESTRATÉGIA"),
    (Role.FINANCIER, "💰 FINANÇAS"),
    (Role.AUDITOR, "🔍 AUDITORIA"),
    (Role.ANALYST, "🌍 MERCADO"),
)


def render_analysis(analysis: Analysis) -> str:
    """Relatório completo: ideia, veredito e as quatro opiniões."""
    parts = ["📊 RESULTADO DA ANÁLISE", f"💡 IDEIA: {analysis.idea_text}"]
    for role, title in REPORT_SECTIONS:
        parts.append(f"{title}:\n{analysis.text_for(role)}")
    return "\n\n".join(parts) + "\n"


def preview(text: str, max_chars: int) -> str:
    """Prefixo de max_chars caracteres com reticências quando corta."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + ELLIPSIS


def render_history(analyses: Sequence[Analysis], preview_chars: int = 80) -> str:
    """Lista resumida, uma linha por análise, na ordem recebida."""
    lines = [HISTORY_HEADER, ""]
    for analysis in analyses:
        idea = preview(" ".join(analysis.idea_text.split()), preview_chars)
        lines.append(f"• #{analysis.id} {idea}")
    return "\n".join(lines)


def utf16_len(text: str) -> int:
    """Tamanho em unidades UTF-16, como o Telegram conta o limite de 4096."""
    return len(text.encode("utf-16-le")) // 2


def split_text(text: str, chunk_size: int) -> list[str]:
    """Divide o texto em partes consecutivas de no máximo chunk_size unidades UTF-16.

    Caracteres fora do BMP (emoji) contam 2 e nunca são partidos ao meio.
    """
    if chunk_size < 2:
        raise ValueError("chunk_size must be >= 2")

    chunks: list[str] = []
    current: list[str] = []
    units = 0
    for char in text:
        width = 2 if ord(char) > 0xFFFF else 1
        if current and units + width > chunk_size:
            chunks.append("".join(current))
            current, units = [], 0
        current.append(char)
        units += width
    if current:
        chunks.append("".join(current))
    return chunks

