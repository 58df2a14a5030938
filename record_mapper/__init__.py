from .base.entity import Song
from .base.mapper import RecordMapper
from .base.storage import Storage, StoredRow
from .base.memory_storage import MemoryStorage
from .base.sql_storage import SqlStorage
from .config import create_mapper, create_storage
from .exceptions import (
    RecordMapperError,
    StorageError,
    IdentifierAlreadySetError,
    UnsavedEntityError,
    RecordNotFoundError,
)

__all__ = [
    "Song",
    "RecordMapper",
    "Storage",
    "StoredRow",
    "MemoryStorage",
    "SqlStorage",
    "create_mapper",
    "create_storage",
    "RecordMapperError",
    "StorageError",
    "IdentifierAlreadySetError",
    "UnsavedEntityError",
    "RecordNotFoundError",
]

__version__ = '0.1.0'
