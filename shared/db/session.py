"""
Configuração do SQLAlchemy e gerenciamento de sessões.
Suporta operações assíncronas com asyncpg.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import text

from shared.config import get_settings
from shared.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class para todos os modelos SQLAlchemy."""
    pass


def get_async_database_url(url: str) -> str:
    """
    Converte DB_URL para formato async (asyncpg).
    postgresql:// -> postgresql+asyncpg://
    Remove parametros incompativeis com asyncpg (sslmode).
    """
    if "?" in url:
        base, params = url.split("?", 1)
        filtered_params = [p for p in params.split("&") if not p.startswith("sslmode=")]
        if filtered_params:
            url = f"{base}?{'&'.join(filtered_params)}"
        else:
            url = base

    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


def create_engine_and_session_maker(
    database_url: str,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """
    Cria engine assíncrona e session factory para a URL informada.

    Pool só é configurado para PostgreSQL; SQLite (testes) usa o pool padrão.

    Returns:
        tuple: (engine, async_session_maker) - a engine deve ser fechada no shutdown
    """
    settings = get_settings()
    url = get_async_database_url(database_url)

    engine_kwargs = {"echo": settings.debug, "pool_pre_ping": True}
    if url.startswith("postgresql"):
        engine_kwargs.update(
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_recycle=settings.database_pool_recycle,
            pool_timeout=settings.database_pool_timeout,
        )

    engine = create_async_engine(url, **engine_kwargs)

    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    return engine, session_maker


async def check_database_connection(session_maker: async_sessionmaker[AsyncSession]) -> bool:
    """
    Verifica se a conexão com o banco de dados está funcionando.

    Returns:
        bool: True se conectado, False caso contrário
    """
    try:
        async with session_maker() as session:
            await session.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.error("Erro ao conectar ao banco de dados", error=str(e))
        return False


async def create_schema(engine: AsyncEngine) -> None:
    """Cria as tabelas declaradas em Base (sem migrações)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
