"""
Board AI Bot - Entry point do bot de Telegram.

Processo único: long polling do Telegram, conselho de agentes via
Ollama (API compatível com OpenAI) e análises salvas no PostgreSQL.
"""

import asyncio
import signal
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog

from shared.config import get_settings
from shared.core.exceptions import BoardServiceException, ConfigurationException, StorageException
from shared.core.logging import setup_logging
from shared.db.session import (
    check_database_connection,
    create_engine_and_session_maker,
    create_schema,
)
from projects.board.bot.handler import BoardHandler
from projects.board.bot.state import LastAnalysisStore, SessionStateStore
from projects.board.bot.telegram import TelegramClient
from projects.board.config import BoardSettings, get_board_settings
from projects.board.llm.client import create_llm_client
from projects.board.observability.metrics import start_metrics_server
from projects.board.orchestrator.orchestrator import Orchestrator
from projects.board.repository.analyses import AnalysisRepository

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(board_settings: BoardSettings) -> AsyncIterator[BoardHandler]:
    """Gerencia o ciclo de vida do bot.

    Startup:
      - Conecta no PostgreSQL (falha = fatal) e cria o schema se configurado
      - Cria client LLM, agentes e orchestrator
      - Autentica o bot no Telegram
    Shutdown:
      - Espera análises em andamento pelo período de graça e cancela o resto
      - Fecha client HTTP e pool do banco
    """
    engine, session_maker = create_engine_and_session_maker(board_settings.db_url)
    transport = None
    handler = None
    try:
        if not await check_database_connection(session_maker):
            raise StorageException("connect", "banco de dados inacessivel")
        if board_settings.db_create_schema:
            await create_schema(engine)

        orchestrator = Orchestrator.from_settings(
            create_llm_client(board_settings), board_settings
        )

        transport = TelegramClient(
            token=board_settings.telegram_bot_token,
            api_url=board_settings.telegram_api_url,
            poll_timeout=board_settings.telegram_poll_timeout,
        )
        me = await transport.get_me()
        logger.info("Bot autorizado", username=me.username)

        handler = BoardHandler(
            transport=transport,
            repository=AnalysisRepository(session_maker),
            orchestrator=orchestrator,
            states=SessionStateStore(),
            last_analyses=LastAnalysisStore(board_settings.last_analysis_max_entries),
            settings=board_settings,
        )

        yield handler

    finally:
        logger.info("Encerrando Board AI Bot")
        if handler is not None:
            await handler.shutdown(board_settings.shutdown_grace_seconds)
        if transport is not None:
            await transport.close()
        await engine.dispose()


async def run_bot(board_settings: BoardSettings) -> None:
    """Executa o polling até SIGINT/SIGTERM ou erro fatal do loop."""
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop.set)

    async with lifespan(board_settings) as handler:
        polling = asyncio.create_task(handler.run(), name="board-polling")
        stopping = asyncio.create_task(stop.wait(), name="board-stop")

        done, _ = await asyncio.wait(
            {polling, stopping}, return_when=asyncio.FIRST_COMPLETED
        )
        if stopping in done:
            logger.info("Sinal recebido, encerrando")

        for task in (polling, stopping):
            task.cancel()
        await asyncio.gather(polling, stopping, return_exceptions=True)

        if polling in done and not polling.cancelled() and polling.exception():
            raise polling.exception()


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        board_settings = get_board_settings().require()
    except ConfigurationException as e:
        logger.error("Configuracao invalida", error=e.message, details=e.details)
        sys.exit(1)

    start_metrics_server(board_settings.metrics_port)

    logger.info(
        "Iniciando Board AI Bot",
        version=settings.app_version,
        environment=settings.environment,
        llm_base_url=board_settings.ollama_base_url,
        parallel_experts=board_settings.parallel_experts,
    )

    try:
        asyncio.run(run_bot(board_settings))
    except BoardServiceException as e:
        logger.error("Bot encerrado com erro", error=e.message, details=e.details)
        sys.exit(1)


if __name__ == "__main__":
    main()
