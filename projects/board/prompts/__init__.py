"""
System prompts do conselho, um por papel.
"""

from projects.board.roles import Role
from projects.board.prompts import analyst, auditor, financier, moderator, strategist

SYSTEM_PROMPTS: dict[Role, str] = {
    Role.STRATEGIST: strategist.SYSTEM_PROMPT,
    Role.FINANCIER: financier.SYSTEM_PROMPT,
    Role.AUDITOR: auditor.SYSTEM_PROMPT,
    Role.ANALYST: analyst.SYSTEM_PROMPT,
    Role.MODERATOR: moderator.SYSTEM_PROMPT,
}


def get_system_prompt(role: Role) -> str:
    """Retorna o system prompt do papel."""
    return SYSTEM_PROMPTS[role]


__all__ = ["SYSTEM_PROMPTS", "get_system_prompt"]
