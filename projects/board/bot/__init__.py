"""Camada Telegram do Board AI."""
from projects.board.bot.handler import BoardHandler, ChatTransport
from projects.board.bot.state import LastAnalysisStore, SessionState, SessionStateStore
from projects.board.bot.telegram import TelegramClient

__all__ = [
    "BoardHandler",
    "ChatTransport",
    "LastAnalysisStore",
    "SessionState",
    "SessionStateStore",
    "TelegramClient",
]
