"""
Modelos SQLAlchemy do Board AI.
Tabela de análises salvas pelos usuários.
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Index, Integer, JSON, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from shared.db.session import Base

# JSONB no PostgreSQL, JSON genérico nos demais dialetos (SQLite nos testes)
RoleContentJSON = JSON().with_variant(JSONB(), "postgresql")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AnalysisRecord(Base):
    """
    Análise persistida.
    Cada coluna de papel guarda {"role": ..., "content": ...}.
    """
    __tablename__ = "analyses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    idea_text: Mapped[str] = mapped_column(Text, nullable=False)
    strategist: Mapped[dict] = mapped_column(RoleContentJSON, nullable=False)
    financier: Mapped[dict] = mapped_column(RoleContentJSON, nullable=False)
    auditor: Mapped[dict] = mapped_column(RoleContentJSON, nullable=False)
    analyst: Mapped[dict] = mapped_column(RoleContentJSON, nullable=False)
    moderator: Mapped[dict] = mapped_column(RoleContentJSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    __table_args__ = (
        Index("idx_analyses_created", "created_at"),
        Index("idx_analyses_user", "user_id"),
    )
