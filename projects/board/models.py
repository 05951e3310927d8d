"""
Entidades de domínio do Board AI.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from projects.board.roles import Role


@dataclass(frozen=True)
class RoleContent:
    """Contribuição de um papel: unidade mínima {role, content}."""
    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass
class Analysis:
    """Relatório agregado do conselho para uma ideia.

    id e created_at ficam None até a análise ser persistida.
    """
    user_id: int
    idea_text: str
    strategist: str = ""
    financier: str = ""
    auditor: str = ""
    analyst: str = ""
    moderator: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = field(default=None)

    def text_for(self, role: Role) -> str:
        """Texto produzido pelo papel."""
        return getattr(self, role.value)

    def contributions(self) -> list[RoleContent]:
        """As cinco contribuições na ordem dos papéis."""
        return [RoleContent(role=role, content=self.text_for(role)) for role in Role]

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def copy(self) -> "Analysis":
        return replace(self)
