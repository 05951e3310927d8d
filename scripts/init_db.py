#!/usr/bin/env python
"""
Script para inicializar a tabela de análises no banco de dados.
Alternativa ao `alembic upgrade head` para ambientes de desenvolvimento.
"""

import asyncio
import sys
import os

# Adicionar path do app
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from projects.board.config import get_board_settings
from projects.board.db.models import AnalysisRecord  # noqa: F401 (registra a tabela)
from shared.core.exceptions import ConfigurationException
from shared.core.logging import setup_logging, get_logger
from shared.db.session import (
    check_database_connection,
    create_engine_and_session_maker,
    create_schema,
)

setup_logging("INFO")
logger = get_logger(__name__)


async def init_db(db_url: str) -> bool:
    """Verifica a conexão e cria a tabela analyses se não existir."""
    engine, session_maker = create_engine_and_session_maker(db_url)
    try:
        if not await check_database_connection(session_maker):
            logger.error("Falha na conexão. Verifique DB_URL no .env")
            return False

        await create_schema(engine)
        logger.info("Tabela criada/verificada", table=AnalysisRecord.__tablename__)
        return True
    finally:
        await engine.dispose()


def main():
    """Função principal."""
    logger.info("Board AI - Inicialização do Banco de Dados")

    settings = get_board_settings()
    if not settings.db_url.strip():
        logger.error(ConfigurationException(["DB_URL"]).message)
        sys.exit(1)

    if not asyncio.run(init_db(settings.db_url)):
        sys.exit(1)

    logger.info("Inicialização concluída com sucesso!")


if __name__ == "__main__":
    main()
