"""Domain interfaces for Clean Architecture."""
from .repository import Repository

__all__ = [
    "Repository",
]
