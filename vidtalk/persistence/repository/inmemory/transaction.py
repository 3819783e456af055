"""In-memory unit-of-work scopes for testing."""

from typing import AsyncContextManager

from vidtalk.domain.repository import TransactionManager
from vidtalk.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryTransactionManager(TransactionManager):
    """In-memory implementation of TransactionManager for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    def atomic(self) -> AsyncContextManager[None]:
        return self.database.unit()
