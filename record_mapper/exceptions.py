class RecordMapperError(Exception):
    pass


class StorageError(RecordMapperError):
    """
    A storage operation failed. The underlying exception is chained as ``__cause__``.
    """


class IdentifierAlreadySetError(RecordMapperError):
    pass


class UnsavedEntityError(RecordMapperError):
    pass


class RecordNotFoundError(RecordMapperError):
    pass
