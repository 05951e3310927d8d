"""Repositórios do Board AI."""
from projects.board.repository.analyses import AnalysisRepository

__all__ = ["AnalysisRepository"]
