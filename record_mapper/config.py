import os

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool

from .logger import logger
from .base.mapper import RecordMapper
from .base.memory_storage import MemoryStorage
from .base.sql_storage import SqlStorage

DEFAULT_URL = "memory://"
DATABASE_URL_ENV = "RECORD_MAPPER_DATABASE_URL"


def get_database_url():
    return os.environ.get(DATABASE_URL_ENV, DEFAULT_URL)


def _is_sqlite_memory(url):
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_storage(url=None, create_schema=False):
    """
    Build the storage for a database URL.

    ``memory://`` selects ``MemoryStorage``, any other URL is handed to
    ``sqlalchemy.create_engine`` and wrapped in a ``SqlStorage``. When no URL
    is given, ``RECORD_MAPPER_DATABASE_URL`` is used, then ``memory://``.
    """
    url = make_url(url or get_database_url())

    if url.get_backend_name() == "memory":
        logger.debug("Using in-memory storage")
        return MemoryStorage()

    kwargs = {}
    if _is_sqlite_memory(url):
        # A single shared connection, otherwise each checkout gets an empty database
        kwargs = dict(poolclass=StaticPool, connect_args={"check_same_thread": False})

    logger.debug(f"Using SQL storage on {url.render_as_string(hide_password=True)}")
    storage = SqlStorage(create_engine(url, **kwargs))

    if create_schema:
        storage.create_schema()

    return storage


def create_mapper(url=None, create_schema=False):
    return RecordMapper(create_storage(url, create_schema=create_schema))
