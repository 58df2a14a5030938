from abc import ABC, abstractmethod
from typing import NamedTuple, Optional


class StoredRow(NamedTuple):
    identifier: int
    name: str
    album: Optional[str]


class Storage(ABC):
    """
    Backend a ``RecordMapper`` reads from and writes to.

    Implementations raise ``StorageError`` for any failure of the backend.
    """

    @abstractmethod
    def insert(self, name: str, album: Optional[str]) -> int:
        """Insert a row and return the identifier generated for it."""

    @abstractmethod
    def update_by_id(self, identifier: int, name: str, album: Optional[str]) -> int:
        """Overwrite both columns of the row keyed by ``identifier``. Returns rows affected."""

    @abstractmethod
    def select_by_name(self, name: str) -> Optional[StoredRow]:
        """Return the row with the lowest identifier matching ``name``, or ``None``."""

    @abstractmethod
    def select_by_id(self, identifier: int) -> Optional[StoredRow]:
        ...

    @abstractmethod
    def count(self) -> int:
        ...
