"""
Configuração de logging estruturado com structlog.
"""

import logging
import sys
from typing import Optional

import structlog

# Bibliotecas que logam cada conexão HTTP (polling do Telegram, chamadas ao LLM)
_NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "httpcore.http11",
    "httpcore.connection",
    "openai",
    "openai._base_client",
    "langchain",
)


def setup_logging(log_level: str = "INFO", json_logs: Optional[bool] = None) -> None:
    """
    Configura logging estruturado para o bot.

    Args:
        log_level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Força renderização JSON. Se None, usa console em DEBUG
            e JSON nos demais níveis.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )

    for noisy_logger in _NOISY_LOGGERS:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    if json_logs is None:
        json_logs = log_level.upper() != "DEBUG"

    renderer = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Obtém um logger configurado.

    Args:
        name: Nome do logger (geralmente __name__)

    Returns:
        Logger estruturado
    """
    return structlog.get_logger(name)
