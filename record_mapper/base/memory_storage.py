from ..logger import logger
from ..exceptions import StorageError
from .storage import Storage, StoredRow


class MemoryStorage(Storage):
    def __init__(self, tablename="songs"):
        self.tablename = tablename
        self.clear()

    def clear(self):
        # Rows keyed by PK value, in insertion order
        self.data_by_pk = {}

        # Auto increment counter
        self._pk_counter = 0

    def _assign_primary_key_if_needed(self, pk_value=None):
        """
        Handle auto-increment primary keys.
        If a PK value is given, use it and update the counter if necessary.
        Otherwise, assign the next available one.
        """
        if pk_value is None:
            self._pk_counter += 1
            return self._pk_counter

        self._pk_counter = max(self._pk_counter, pk_value)
        return pk_value

    def _add_row(self, name, album, pk_value=None):
        if name is None:
            raise StorageError(f"Column 'name' of table '{self.tablename}' cannot be NULL")

        if pk_value is not None and pk_value in self.data_by_pk:
            raise StorageError(f"Cannot have duplicate PK value {pk_value} for table '{self.tablename}'")

        pk_value = self._assign_primary_key_if_needed(pk_value)
        row = StoredRow(pk_value, name, album)

        logger.debug(f"Adding {row} to table '{self.tablename}'")
        self.data_by_pk[pk_value] = row
        return row

    def load_rows(self, rows):
        """
        Seed the storage with existing rows, given as ``StoredRow`` or
        ``(identifier, name, album)`` tuples.
        """
        for identifier, name, album in rows:
            self._add_row(name, album, pk_value=identifier)

    def insert(self, name, album):
        return self._add_row(name, album).identifier

    def update_by_id(self, identifier, name, album):
        if identifier not in self.data_by_pk:
            return 0

        if name is None:
            raise StorageError(f"Column 'name' of table '{self.tablename}' cannot be NULL")

        logger.debug(f"Updating table '{self.tablename}' where PK value={identifier}: name={name!r} album={album!r}")
        self.data_by_pk[identifier] = StoredRow(identifier, name, album)
        return 1

    def select_by_name(self, name):
        matches = [row for row in self.data_by_pk.values() if row.name == name]
        if not matches:
            return None
        return min(matches, key=lambda row: row.identifier)

    def select_by_id(self, identifier):
        return self.data_by_pk.get(identifier)

    def count(self):
        return len(self.data_by_pk)
