"""Unit of Work Interface"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Transaction boundary for a use case

    Everything flushed by repositories since the last commit is either
    committed together or rolled back together.
    """

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
