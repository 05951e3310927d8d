"""Base repository interface for Clean Architecture."""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, Sequence

T = TypeVar('T')
ID = TypeVar('ID')


class Repository(ABC, Generic[T, ID]):
    """Interface base para repositories append-only.

    Entidades retornadas por get/list são cópias independentes do que
    está persistido: alterá-las não afeta o armazenamento.
    """

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persiste uma nova entidade, preenchendo os campos gerados."""
        pass

    @abstractmethod
    async def get(self, id: ID) -> Optional[T]:
        """Busca uma entidade pelo ID. None se não existir."""
        pass

    @abstractmethod
    async def list(self, limit: int = 10, offset: int = 0) -> Sequence[T]:
        """Lista entidades da mais recente para a mais antiga."""
        pass
