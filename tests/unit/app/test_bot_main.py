"""
Testes do entry point do bot.

Testa:
  - Erro de servico durante o startup encerra com exit code 1 e e logado
  - Configuracao obrigatoria ausente encerra com exit code 1
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from app import bot_main
from projects.board.config import BoardSettings
from shared.core.exceptions import ConfigurationException, StorageException, TelegramAPIError


def _settings():
    return BoardSettings(_env_file=None, telegram_bot_token="t", db_url="postgresql://x")


class TestMainExitCodes:
    """Testes dos caminhos de erro de main()."""

    @pytest.mark.parametrize(
        "error",
        [
            StorageException("connect", "banco de dados inacessivel"),
            TelegramAPIError("getMe", "Unauthorized", 401),
        ],
    )
    def test_service_error_exits_with_code_1(self, error):
        """Falha no startup (banco ou Telegram) e logada e encerra com 1."""
        board_settings = _settings()

        with patch("app.bot_main.setup_logging"), \
             patch("app.bot_main.start_metrics_server"), \
             patch("app.bot_main.get_board_settings", return_value=board_settings), \
             patch("app.bot_main.run_bot", new=AsyncMock(side_effect=error)), \
             patch("app.bot_main.logger") as mock_logger:
            with pytest.raises(SystemExit) as exc_info:
                bot_main.main()

        assert exc_info.value.code == 1
        error_call = mock_logger.error.call_args
        assert error_call.args[0] == "Bot encerrado com erro"
        assert error_call.kwargs["error"] == error.message
        assert error_call.kwargs["details"] == error.details

    def test_missing_configuration_exits_with_code_1(self):
        """TELEGRAM_BOT_TOKEN/DB_URL ausentes encerram antes de iniciar o bot."""
        board_settings = MagicMock()
        board_settings.require.side_effect = ConfigurationException(["TELEGRAM_BOT_TOKEN"])
        run_bot = AsyncMock()

        with patch("app.bot_main.setup_logging"), \
             patch("app.bot_main.start_metrics_server") as mock_metrics, \
             patch("app.bot_main.get_board_settings", return_value=board_settings), \
             patch("app.bot_main.run_bot", new=run_bot), \
             patch("app.bot_main.logger") as mock_logger:
            with pytest.raises(SystemExit) as exc_info:
                bot_main.main()

        assert exc_info.value.code == 1
        assert mock_logger.error.call_args.kwargs["details"] == {"missing": ["TELEGRAM_BOT_TOKEN"]}
        run_bot.assert_not_called()
        mock_metrics.assert_not_called()
