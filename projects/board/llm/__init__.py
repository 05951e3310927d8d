"""
Módulo de integração com LLMs.
"""

from projects.board.llm.client import LLMClient, create_llm_client

__all__ = [
    "LLMClient",
    "create_llm_client",
]
