"""Teclados do bot no formato JSON da Bot API."""

CALLBACK_NEW_ANALYSIS = "new_analysis"
CALLBACK_SAVE_ANALYSIS = "save_analysis"
CALLBACK_LIST_HISTORY = "list_history"

BUTTON_NEW_ANALYSIS = "🆕 Nova análise"
BUTTON_SAVE_ANALYSIS = "💾 Salvar análise"
BUTTON_LIST_HISTORY = "📜 Minhas análises"

# Textos digitados (ou de teclados antigos) equivalentes aos botões
NEW_ANALYSIS_TEXTS = frozenset({"Nova análise", "🔄 Nova análise", BUTTON_NEW_ANALYSIS})
LIST_HISTORY_TEXTS = frozenset({"Minhas análises", "📋 Minhas análises", BUTTON_LIST_HISTORY})


def main_menu() -> dict:
    """Menu de ações anexado às respostas finais."""
    return {
        "inline_keyboard": [
            [{"text": BUTTON_NEW_ANALYSIS, "callback_data": CALLBACK_NEW_ANALYSIS}],
            [
                {"text": BUTTON_SAVE_ANALYSIS, "callback_data": CALLBACK_SAVE_ANALYSIS},
                {"text": BUTTON_LIST_HISTORY, "callback_data": CALLBACK_LIST_HISTORY},
            ],
        ]
    }


def remove_keyboard() -> dict:
    """Remove teclado de resposta enquanto o usuário digita a ideia."""
    return {"remove_keyboard": True}
