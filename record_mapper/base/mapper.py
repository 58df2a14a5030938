from ..logger import logger
from ..exceptions import UnsavedEntityError, RecordNotFoundError
from .entity import Song


class RecordMapper:
    """
    Keeps ``Song`` entities in sync with rows of a ``Storage``.

    Rows are always matched by the identifier the storage assigned on insert,
    never by ``name``: a name may have changed in memory since the last save,
    or be shared by several rows.
    """

    def __init__(self, storage):
        self.storage = storage

    def create(self, name, album):
        """
        Build a new song and persist it immediately.
        """
        return self.save(Song(name, album))

    def find_by_name(self, name):
        """
        Return the song stored under ``name``, or ``None`` if there is no such row.
        """
        return self._to_entity(self.storage.select_by_name(name))

    def find_by_id(self, identifier):
        return self._to_entity(self.storage.select_by_id(identifier))

    def save(self, entity):
        if entity.is_persisted:
            return self.update(entity)

        entity.identifier = self.storage.insert(entity.name, entity.album)
        logger.debug(f"Inserted {entity}")
        return entity

    def update(self, entity):
        """
        Write every mutable attribute of ``entity`` to the row keyed by its identifier.
        """
        if not entity.is_persisted:
            raise UnsavedEntityError(f"Cannot update {entity!r}: it has never been saved")

        rowcount = self.storage.update_by_id(entity.identifier, entity.name, entity.album)
        if rowcount == 0:
            raise RecordNotFoundError(f"Could not find row with PK value {entity.identifier} for {entity!r}")

        logger.debug(f"Updated {entity}")
        return entity

    @staticmethod
    def _to_entity(row):
        if row is None:
            return None
        return Song(row.name, row.album, identifier=row.identifier)
