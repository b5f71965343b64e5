from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class TransactionManager(ABC):
    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Run the enclosed block as one unit: commit on success, roll back and re-raise on error."""
        pass
