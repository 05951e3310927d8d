"""
Atalho para o logging estruturado (structlog).
Implementação em shared.infrastructure.logging.structlog_config.
"""
from shared.infrastructure.logging.structlog_config import setup_logging, get_logger

__all__ = ["setup_logging", "get_logger"]
