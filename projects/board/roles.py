"""Papeis fixos do conselho de agentes."""
import enum


class Role(str, enum.Enum):
    """Papel de um agente no conselho. Conjunto fechado."""
    STRATEGIST = "strategist"
    FINANCIER = "financier"
    AUDITOR = "auditor"
    ANALYST = "analyst"
    MODERATOR = "moderator"


# Ordem de execucao dos especialistas; o moderador roda por ultimo
EXPERT_ROLES: tuple[Role, ...] = (
    Role.STRATEGIST,
    Role.FINANCIER,
    Role.AUDITOR,
    Role.ANALYST,
)
