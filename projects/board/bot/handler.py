"""
Handler de updates do Telegram: máquina de estados por usuário.

Transições:
  qualquer estado --"nova análise"--> WAITING_FOR_IDEA
  WAITING_FOR_IDEA --texto--> PROCESSING (task de análise em background)
  PROCESSING --texto--> PROCESSING (rejeitado, "aguarde")
  PROCESSING --sucesso--> HAS_LAST_RESULT
  PROCESSING --falha--> IDLE
  qualquer estado --/cancel--> IDLE

O loop de polling processa um update por vez; cada análise roda em uma
asyncio.Task própria, com prazo independente do update que a disparou.
"""
import asyncio
from typing import Optional, Protocol

import httpx

from projects.board.bot import keyboards
from projects.board.bot import messages as texts
from projects.board.bot.schemas import CallbackQuery, Message, Update
from projects.board.bot.state import LastAnalysisStore, SessionState, SessionStateStore
from projects.board.config import BoardSettings
from projects.board.observability.metrics import (
    board_analyses_in_flight,
    board_saves_total,
    board_updates_total,
)
from projects.board.orchestrator.orchestrator import Orchestrator
from projects.board.repository.analyses import AnalysisRepository
from shared.core.exceptions import StorageException, TelegramAPIError
from shared.core.logging import get_logger
from shared.infrastructure.tracing.context import start_trace

logger = get_logger("bot.handler")

# Erros de entrega: logados, sem retry
DELIVERY_ERRORS = (httpx.HTTPError, TelegramAPIError)

POLL_ERROR_DELAY_SECONDS = 3.0


class ChatTransport(Protocol):
    """Operações de saída/entrada do chat usadas pelo handler."""

    async def get_updates(self, offset: Optional[int] = None) -> list[Update]: ...

    async def send_message(
        self, chat_id: int, text: str, reply_markup: Optional[dict] = None
    ) -> Message: ...

    async def edit_message_text(
        self, chat_id: int, message_id: int, text: str, reply_markup: Optional[dict] = None
    ) -> None: ...

    async def delete_message(self, chat_id: int, message_id: int) -> None: ...

    async def answer_callback_query(
        self, callback_query_id: str, text: Optional[str] = None
    ) -> None: ...


class BoardHandler:
    """Controlador do bot.

    Attributes:
        transport: Client do Telegram
        repository: Persistência de análises
        orchestrator: Conselho de agentes
        states: Store de SessionState por usuário
        last_analyses: Store da última análise por usuário
        settings: Configurações do bot
    """

    def __init__(
        self,
        transport: ChatTransport,
        repository: AnalysisRepository,
        orchestrator: Orchestrator,
        states: SessionStateStore,
        last_analyses: LastAnalysisStore,
        settings: BoardSettings,
    ):
        self.transport = transport
        self.repository = repository
        self.orchestrator = orchestrator
        self.states = states
        self.last_analyses = last_analyses
        self.settings = settings
        self._tasks: dict[int, asyncio.Task] = {}

    # ==================== LOOP ====================

    async def run(self) -> None:
        """Long polling até ser cancelado."""
        offset: Optional[int] = None
        logger.info("Loop de updates iniciado")

        while True:
            try:
                updates = await self.transport.get_updates(offset=offset)
            except DELIVERY_ERRORS as e:
                logger.warning("Falha no getUpdates", error=str(e))
                await asyncio.sleep(POLL_ERROR_DELAY_SECONDS)
                continue

            for update in updates:
                offset = update.update_id + 1
                await self.handle_update(update)

    async def handle_update(self, update: Update) -> None:
        """Processa um update. Erros inesperados são logados e o loop segue."""
        try:
            if update.message is not None:
                user = update.message.from_user
                start_trace(update_id=update.update_id, user_id=user.id if user else None)
                board_updates_total.labels(kind="message").inc()
                await self.handle_message(update.message)
            elif update.callback_query is not None:
                start_trace(
                    update_id=update.update_id,
                    user_id=update.callback_query.from_user.id,
                )
                board_updates_total.labels(kind="callback_query").inc()
                await self.handle_callback_query(update.callback_query)
        except Exception:
            logger.exception("Erro ao processar update", update_id=update.update_id)

    # ==================== ENTRADAS ====================

    async def handle_message(self, message: Message) -> None:
        if message.from_user is None:
            return

        user_id = message.from_user.id
        chat_id = message.chat.id
        text = (message.text or "").strip()
        logger.info("Mensagem recebida", chat_id=chat_id, text_chars=len(text))

        if text in keyboards.NEW_ANALYSIS_TEXTS:
            await self.ask_for_idea(chat_id, user_id)
            return
        if text in keyboards.LIST_HISTORY_TEXTS:
            await self.show_history(chat_id, user_id)
            return

        if message.is_command():
            await self.handle_command(message.command(), message.command_args(), chat_id, user_id)
            return

        state = self.states.get(user_id)
        if state == SessionState.PROCESSING or self.has_analysis_in_flight(user_id):
            await self._send(chat_id, texts.ANALYSIS_IN_PROGRESS)
        elif state == SessionState.WAITING_FOR_IDEA:
            if not text:
                await self._send(chat_id, texts.SEND_TEXT_IDEA)
                return
            await self.submit_idea(chat_id, user_id, text)
        else:
            await self._send(chat_id, texts.PRESS_NEW_ANALYSIS, reply_markup=keyboards.main_menu())

    async def handle_command(
        self, command: Optional[str], args: str, chat_id: int, user_id: int
    ) -> None:
        if command == "start":
            await self._send(chat_id, texts.GREETING, reply_markup=keyboards.main_menu())
        elif command == "new":
            await self.ask_for_idea(chat_id, user_id)
        elif command == "list":
            await self.show_history(chat_id, user_id)
        elif command == "save":
            await self.save_last_analysis(chat_id, user_id)
        elif command == "show":
            await self.show_analysis(chat_id, args)
        elif command == "cancel":
            self.states.set(user_id, SessionState.IDLE)
            await self._send(chat_id, texts.CANCELLED)
        else:
            await self._send(chat_id, texts.UNKNOWN_COMMAND)

    async def handle_callback_query(self, query: CallbackQuery) -> None:
        user_id = query.from_user.id
        chat_id = query.message.chat.id if query.message else user_id

        try:
            if query.data == keyboards.CALLBACK_NEW_ANALYSIS:
                await self.ask_for_idea(chat_id, user_id)
            elif query.data == keyboards.CALLBACK_SAVE_ANALYSIS:
                await self.save_last_analysis(chat_id, user_id)
            elif query.data == keyboards.CALLBACK_LIST_HISTORY:
                await self.show_history(chat_id, user_id)
            else:
                logger.debug("Callback desconhecido", data=query.data)
        finally:
            try:
                await self.transport.answer_callback_query(query.id)
            except DELIVERY_ERRORS as e:
                logger.warning("Falha ao responder callback", error=str(e))

    # ==================== AÇÕES ====================

    async def ask_for_idea(self, chat_id: int, user_id: int) -> None:
        self.states.set(user_id, SessionState.WAITING_FOR_IDEA)
        await self._send(chat_id, texts.ASK_FOR_IDEA, reply_markup=keyboards.remove_keyboard())

    def has_analysis_in_flight(self, user_id: int) -> bool:
        task = self._tasks.get(user_id)
        return task is not None and not task.done()

    async def submit_idea(self, chat_id: int, user_id: int, idea: str) -> Optional[asyncio.Task]:
        """Passa para PROCESSING e dispara a análise em background.

        Returns:
            A task criada, ou None se já havia análise em andamento
        """
        if self.states.get(user_id) == SessionState.PROCESSING or self.has_analysis_in_flight(user_id):
            await self._send(chat_id, texts.ANALYSIS_IN_PROGRESS)
            return None

        self.states.set(user_id, SessionState.PROCESSING)
        placeholder = await self._send(chat_id, texts.ANALYSIS_STARTED)
        placeholder_id = placeholder.message_id if placeholder else None

        task = asyncio.create_task(
            self._run_analysis(chat_id, user_id, idea, placeholder_id),
            name=f"board-analysis-{user_id}",
        )
        self._tasks[user_id] = task
        task.add_done_callback(lambda t: self._forget_task(user_id, t))
        board_analyses_in_flight.inc()
        logger.info("Analise disparada", user_id=user_id, idea_chars=len(idea))
        return task

    def _forget_task(self, user_id: int, task: asyncio.Task) -> None:
        board_analyses_in_flight.dec()
        if self._tasks.get(user_id) is task:
            del self._tasks[user_id]

    async def _run_analysis(
        self, chat_id: int, user_id: int, idea: str, placeholder_id: Optional[int]
    ) -> None:
        try:
            analysis = await asyncio.wait_for(
                self.orchestrator.run_analysis(idea=idea, user_id=user_id),
                timeout=self.settings.analysis_timeout,
            )
        except asyncio.CancelledError:
            logger.warning("Analise cancelada", user_id=user_id)
            self.states.set(user_id, SessionState.IDLE)
            raise
        except Exception as e:
            logger.error(
                "Erro na analise",
                user_id=user_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            self.states.set(user_id, SessionState.IDLE)
            if placeholder_id is not None:
                await self._edit(chat_id, placeholder_id, texts.ANALYSIS_FAILED)
            else:
                await self._send(chat_id, texts.ANALYSIS_FAILED)
            return

        self.last_analyses.put(user_id, analysis)
        self.states.set(user_id, SessionState.HAS_LAST_RESULT)
        await self.deliver_report(chat_id, placeholder_id, texts.render_analysis(analysis))

    async def deliver_report(
        self, chat_id: int, placeholder_id: Optional[int], report: str
    ) -> None:
        """Entrega o relatório com o menu de ações.

        Relatório curto substitui a mensagem de espera; relatório longo
        apaga a espera e é enviado em partes, com menu só na última.
        """
        logger.info("Entregando relatorio", report_chars=len(report))

        # Limites da Bot API contam unidades UTF-16
        if (
            placeholder_id is not None
            and texts.utf16_len(report) < self.settings.report_single_message_limit
        ):
            await self._edit(chat_id, placeholder_id, report, reply_markup=keyboards.main_menu())
            return

        if placeholder_id is not None:
            await self._delete(chat_id, placeholder_id)

        chunks = texts.split_text(report, self.settings.report_chunk_size)
        for index, chunk in enumerate(chunks):
            is_last = index == len(chunks) - 1
            await self._send(
                chat_id,
                chunk,
                reply_markup=keyboards.main_menu() if is_last else None,
            )

    async def save_last_analysis(self, chat_id: int, user_id: int) -> None:
        analysis = self.last_analyses.get(user_id)
        if analysis is None:
            await self._send(chat_id, texts.NOTHING_TO_SAVE)
            return

        if analysis.is_persisted:
            await self._send(chat_id, texts.ALREADY_SAVED.format(id=analysis.id))
            return

        try:
            await self.repository.create(analysis)
        except StorageException as e:
            logger.error("Erro ao salvar analise", error=e.message)
            board_saves_total.labels(status="error").inc()
            await self._send(chat_id, texts.SAVE_FAILED)
            return

        board_saves_total.labels(status="success").inc()
        await self._send(chat_id, texts.SAVE_OK.format(id=analysis.id))

    async def show_history(self, chat_id: int, user_id: int) -> None:
        owner = user_id if self.settings.history_per_user else None
        try:
            analyses = await self.repository.list(
                limit=self.settings.history_page_size, offset=0, user_id=owner
            )
        except StorageException as e:
            logger.error("Erro ao listar analises", error=e.message)
            await self._send(chat_id, texts.HISTORY_FAILED)
            return

        if not analyses:
            await self._send(chat_id, texts.HISTORY_EMPTY)
            return

        await self._send(
            chat_id,
            texts.render_history(analyses, self.settings.history_idea_preview_chars),
        )

    async def show_analysis(self, chat_id: int, args: str) -> None:
        """Reenvia uma análise salva: /show <id>."""
        try:
            analysis_id = int(args.lstrip("#"))
        except ValueError:
            await self._send(chat_id, texts.SHOW_USAGE)
            return

        try:
            analysis = await self.repository.get(analysis_id)
        except StorageException as e:
            logger.error("Erro ao buscar analise", error=e.message, analysis_id=analysis_id)
            await self._send(chat_id, texts.HISTORY_FAILED)
            return

        if analysis is None:
            await self._send(chat_id, texts.ANALYSIS_NOT_FOUND.format(id=analysis_id))
            return

        await self.deliver_report(chat_id, None, texts.render_analysis(analysis))

    # ==================== SHUTDOWN ====================

    async def shutdown(self, grace_seconds: float) -> None:
        """Espera análises em andamento por grace_seconds e cancela o resto."""
        pending = [task for task in self._tasks.values() if not task.done()]
        if not pending:
            return

        logger.info("Aguardando analises em andamento", count=len(pending), grace_seconds=grace_seconds)
        _, still_running = await asyncio.wait(pending, timeout=grace_seconds)

        for task in still_running:
            task.cancel()
        if still_running:
            logger.warning("Analises canceladas no shutdown", count=len(still_running))
            await asyncio.gather(*still_running, return_exceptions=True)

    # ==================== ENTREGA ====================

    async def _send(
        self, chat_id: int, text: str, reply_markup: Optional[dict] = None
    ) -> Optional[Message]:
        try:
            return await self.transport.send_message(chat_id, text, reply_markup=reply_markup)
        except DELIVERY_ERRORS as e:
            logger.warning("Falha ao enviar mensagem", chat_id=chat_id, error=str(e))
            return None

    async def _edit(
        self, chat_id: int, message_id: int, text: str, reply_markup: Optional[dict] = None
    ) -> None:
        try:
            await self.transport.edit_message_text(
                chat_id, message_id, text, reply_markup=reply_markup
            )
        except DELIVERY_ERRORS as e:
            logger.warning("Falha ao editar mensagem", chat_id=chat_id, error=str(e))

    async def _delete(self, chat_id: int, message_id: int) -> None:
        try:
            await self.transport.delete_message(chat_id, message_id)
        except DELIVERY_ERRORS as e:
            logger.warning("Falha ao apagar mensagem", chat_id=chat_id, error=str(e))
