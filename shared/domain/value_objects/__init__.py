"""Shared value objects."""
from .pagination import PageRequest, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

__all__ = [
    "PageRequest",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
]
