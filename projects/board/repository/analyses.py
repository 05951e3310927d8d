"""
Repositório de análises do conselho.
"""

from typing import Optional, Sequence

from sqlalchemy import select, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from projects.board.db.models import AnalysisRecord
from projects.board.models import Analysis
from projects.board.roles import Role
from shared.core.exceptions import StorageException
from shared.core.logging import get_logger
from shared.domain.interfaces.repository import Repository
from shared.domain.value_objects.pagination import PageRequest

logger = get_logger(__name__)

DEFAULT_LIST_LIMIT = 10

# Falhas de conexao do driver chegam como OSError antes de virar SQLAlchemyError
_STORAGE_ERRORS = (SQLAlchemyError, OSError)


class AnalysisRepository(Repository[Analysis, int]):
    """
    Persistência de análises no PostgreSQL.

    Cada operação abre a própria sessão e commita ao final; as entidades
    retornadas são objetos de domínio novos, desacoplados da sessão.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self.session_maker = session_maker

    async def create(self, entity: Analysis) -> Analysis:
        """Insere a análise e preenche id e created_at na própria entidade."""
        record = AnalysisRecord(
            user_id=entity.user_id,
            idea_text=entity.idea_text,
            **{c.role.value: c.to_dict() for c in entity.contributions()},
        )
        try:
            async with self.session_maker() as session:
                session.add(record)
                await session.commit()
        except _STORAGE_ERRORS as e:
            logger.error("Erro ao inserir analise", error=str(e), user_id=entity.user_id)
            raise StorageException("create", str(e)) from e

        entity.id = record.id
        entity.created_at = record.created_at
        logger.info("Analise salva", analysis_id=record.id, user_id=entity.user_id)
        return entity

    async def get(self, id: int) -> Optional[Analysis]:
        """Busca análise pelo ID. None se não existir."""
        try:
            async with self.session_maker() as session:
                result = await session.execute(
                    select(AnalysisRecord).where(AnalysisRecord.id == id)
                )
                record = result.scalar_one_or_none()
        except _STORAGE_ERRORS as e:
            logger.error("Erro ao buscar analise", error=str(e), analysis_id=id)
            raise StorageException("get", str(e)) from e

        return _to_domain(record) if record is not None else None

    async def list(
        self,
        limit: int = DEFAULT_LIST_LIMIT,
        offset: int = 0,
        user_id: Optional[int] = None,
    ) -> Sequence[Analysis]:
        """Lista análises da mais recente para a mais antiga.

        limit <= 0 usa o tamanho padrão; offset negativo vira 0.
        """
        page = PageRequest.clamped(limit, offset, default_limit=DEFAULT_LIST_LIMIT)

        query = select(AnalysisRecord)
        if user_id is not None:
            query = query.where(AnalysisRecord.user_id == user_id)
        query = (
            query.order_by(desc(AnalysisRecord.created_at), desc(AnalysisRecord.id))
            .limit(page.limit)
            .offset(page.offset)
        )

        try:
            async with self.session_maker() as session:
                result = await session.execute(query)
                records = list(result.scalars().all())
        except _STORAGE_ERRORS as e:
            logger.error("Erro ao listar analises", error=str(e))
            raise StorageException("list", str(e)) from e

        return [_to_domain(record) for record in records]


def _content_of(value) -> str:
    """Extrai o texto de uma coluna {role, content}."""
    if isinstance(value, dict):
        return str(value.get("content", ""))
    if value is None:
        return ""
    return str(value)


def _to_domain(record: AnalysisRecord) -> Analysis:
    return Analysis(
        id=record.id,
        user_id=record.user_id,
        idea_text=record.idea_text,
        created_at=record.created_at,
        **{role.value: _content_of(getattr(record, role.value)) for role in Role},
    )

