import contextlib

from sqlalchemy import insert, update, select, func
from sqlalchemy.exc import SQLAlchemyError

from ..logger import logger
from ..exceptions import StorageError
from .storage import Storage, StoredRow
from .schema import songs


class SqlStorage(Storage):
    """
    Storage backed by a SQLAlchemy engine.

    Every operation runs in its own transaction: committed when it succeeds,
    rolled back when it raises.
    """

    def __init__(self, engine, table=songs):
        self.engine = engine
        self.table = table

    def create_schema(self):
        with self._begin() as conn:
            self.table.metadata.create_all(conn, tables=[self.table])

    @contextlib.contextmanager
    def _begin(self):
        try:
            with self.engine.begin() as conn:
                yield conn
        except SQLAlchemyError as e:
            logger.debug(f"Operation on table '{self.table.name}' failed: {e}")
            raise StorageError(f"Storage operation on table '{self.table.name}' failed: {e}") from e

    @staticmethod
    def _to_row(row):
        if row is None:
            return None
        return StoredRow(row.id, row.name, row.album)

    def insert(self, name, album):
        logger.debug(f"Inserting name={name!r} album={album!r} into table '{self.table.name}'")
        with self._begin() as conn:
            result = conn.execute(insert(self.table).values(name=name, album=album))
            return result.inserted_primary_key[0]

    def update_by_id(self, identifier, name, album):
        logger.debug(f"Updating table '{self.table.name}' where PK value={identifier}: name={name!r} album={album!r}")
        stmt = (
            update(self.table)
            .where(self.table.c.id == identifier)
            .values(name=name, album=album)
        )
        with self._begin() as conn:
            return conn.execute(stmt).rowcount

    def select_by_name(self, name):
        stmt = (
            select(self.table)
            .where(self.table.c.name == name)
            .order_by(self.table.c.id)
            .limit(1)
        )
        with self._begin() as conn:
            return self._to_row(conn.execute(stmt).first())

    def select_by_id(self, identifier):
        stmt = select(self.table).where(self.table.c.id == identifier)
        with self._begin() as conn:
            return self._to_row(conn.execute(stmt).first())

    def count(self):
        with self._begin() as conn:
            return conn.execute(select(func.count()).select_from(self.table)).scalar_one()
