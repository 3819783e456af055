"""Unit-of-work interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager


class TransactionManager(ABC):
    """Scopes a group of repository calls into one atomic unit.

    Units may nest. If the body raises, everything written inside the unit
    is discarded while the enclosing request transaction stays usable.
    Lost write races surface as ConcurrencyConflictError.
    """

    @abstractmethod
    def atomic(self) -> AsyncContextManager[None]:
        """Open an atomic unit.

        Usage:
            async with transactions.atomic():
                ...
        """
        pass
