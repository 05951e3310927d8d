"""Orchestrator do conselho Board AI."""
from projects.board.orchestrator.orchestrator import Orchestrator
from projects.board.orchestrator.prompts import (
    EXPERT_PLACEHOLDERS,
    TRUNCATION_MARKER,
    build_moderator_prompt,
    limit_text,
)

__all__ = [
    "Orchestrator",
    "EXPERT_PLACEHOLDERS",
    "TRUNCATION_MARKER",
    "build_moderator_prompt",
    "limit_text",
]
