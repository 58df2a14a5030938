from ..exceptions import IdentifierAlreadySetError


class Song:
    """
    In-memory representation of one row of the ``songs`` table.

    ``identifier`` stays ``None`` until the storage assigns a key on insert.
    Once assigned, it cannot be changed.
    """

    def __init__(self, name, album, identifier=None):
        self._identifier = identifier
        self.name = name
        self.album = album

    @property
    def identifier(self):
        return self._identifier

    @identifier.setter
    def identifier(self, value):
        if self._identifier is not None and value != self._identifier:
            raise IdentifierAlreadySetError(
                f"Cannot change identifier of {self!r} to {value!r}"
            )
        self._identifier = value

    @property
    def is_persisted(self):
        return self._identifier is not None

    def __repr__(self):
        return f"Song(id={self.identifier} name={self.name} album={self.album})"
