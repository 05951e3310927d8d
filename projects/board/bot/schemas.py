"""
Schemas Pydantic dos objetos da Telegram Bot API usados pelo bot.

Somente os campos necessários são declarados; o resto é ignorado.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TelegramModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class User(TelegramModel):
    """Usuário (ou bot) do Telegram."""
    id: int
    is_bot: bool = False
    first_name: str = ""
    username: Optional[str] = None


class Chat(TelegramModel):
    id: int
    type: str = "private"


class MessageEntity(TelegramModel):
    type: str
    offset: int
    length: int


class Message(TelegramModel):
    """Mensagem recebida ou enviada."""
    message_id: int
    chat: Chat
    from_user: Optional[User] = Field(default=None, alias="from")
    text: Optional[str] = None
    entities: list[MessageEntity] = Field(default_factory=list)

    def is_command(self) -> bool:
        """True se a mensagem começa com um bot_command."""
        if any(e.type == "bot_command" and e.offset == 0 for e in self.entities):
            return True
        return bool(self.text and self.text.startswith("/"))

    def command(self) -> Optional[str]:
        """Nome do comando sem barra e sem @bot (ex: "/new@BoardBot x" -> "new")."""
        if not self.is_command() or not self.text:
            return None
        head = self.text.split(maxsplit=1)[0]
        return head[1:].split("@", 1)[0].lower()

    def command_args(self) -> str:
        """Texto após o comando."""
        if not self.is_command() or not self.text:
            return ""
        parts = self.text.split(maxsplit=1)
        return parts[1].strip() if len(parts) > 1 else ""


class CallbackQuery(TelegramModel):
    """Clique em botão de teclado inline."""
    id: str
    from_user: User = Field(alias="from")
    message: Optional[Message] = None
    data: Optional[str] = None


class Update(TelegramModel):
    update_id: int
    message: Optional[Message] = None
    callback_query: Optional[CallbackQuery] = None
