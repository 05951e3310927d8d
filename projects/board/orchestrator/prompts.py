"""Prompt composto do moderador e placeholders de falha dos especialistas."""
from projects.board.roles import Role, EXPERT_ROLES

TRUNCATION_MARKER = "... [texto resumido]"

# Texto usado no lugar da resposta de um especialista que falhou
EXPERT_PLACEHOLDERS: dict[Role, str] = {
    Role.STRATEGIST: "Erro na analise do estrategista",
    Role.FINANCIER: "Erro na analise financeira",
    Role.AUDITOR: "Erro na auditoria",
    Role.ANALYST: "Erro na analise de mercado",
}

EXPERT_LABELS: dict[Role, str] = {
    Role.STRATEGIST: "Estrategista",
    Role.FINANCIER: "Financista",
    Role.AUDITOR: "Auditor",
    Role.ANALYST: "Analista de mercado",
}


def limit_text(text: str, max_chars: int) -> str:
    """Corta o texto em max_chars caracteres, anexando o marcador quando corta."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_MARKER


def build_moderator_prompt(
    idea: str,
    expert_texts: dict[Role, str],
    max_chars: int = 200,
) -> str:
    """Monta o prompt do moderador com a ideia e os resumos dos especialistas.

    Cada texto de especialista é limitado a max_chars para que o prompt
    do moderador tenha tamanho previsível, independente da verbosidade
    dos modelos.
    """
    lines = [
        "VEREDITO FINAL",
        "",
        f"IDEIA: {idea}",
        "",
        "RELATORIOS RESUMIDOS DOS ESPECIALISTAS:",
    ]
    for role in EXPERT_ROLES:
        excerpt = limit_text(expert_texts.get(role, ""), max_chars)
        lines.append(f"- {EXPERT_LABELS[role]}: {excerpt}")
    return "\n".join(lines)
