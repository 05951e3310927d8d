"""Pagination value objects."""
from dataclasses import dataclass

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    """Requisição de paginação por limit/offset."""
    limit: int = DEFAULT_PAGE_SIZE
    offset: int = 0

    def __post_init__(self):
        if self.limit < 1 or self.limit > MAX_PAGE_SIZE:
            raise ValueError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")
        if self.offset < 0:
            raise ValueError("Offset must be >= 0")

    @classmethod
    def clamped(
        cls,
        limit: int,
        offset: int,
        default_limit: int = DEFAULT_PAGE_SIZE,
    ) -> "PageRequest":
        """Normaliza valores vindos de chamadores sem validar.

        limit <= 0 vira default_limit, limit acima do máximo é cortado
        e offset negativo vira 0.
        """
        if limit <= 0:
            limit = default_limit
        return cls(limit=min(limit, MAX_PAGE_SIZE), offset=max(offset, 0))
