"""Abstract repository interface (port) for whole-collection record persistence."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class RecordRepository(ABC, Generic[T]):
    """Port for persisting one entity kind's full collection.

    Collections are always read and written as a whole; there are no
    per-record operations at this level.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location of the backing storage, used in log messages."""
        ...

    @abstractmethod
    def load_all(self) -> list[T]:
        """Read the persisted collection in stored order.

        Raises RecordLoadError when the backing storage is missing,
        unreadable or cannot be decoded.
        """
        ...

    @abstractmethod
    def save_all(self, records: Sequence[T]) -> None:
        """Overwrite the persisted collection with ``records``.

        Raises RecordSaveError when the write fails.
        """
        ...
