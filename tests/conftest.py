import pytest

from record_mapper import RecordMapper, MemoryStorage, create_storage


@pytest.fixture(params=["memory", "sqlite"])
def storage(request):
    if request.param == "memory":
        yield MemoryStorage()
    else:
        storage = create_storage("sqlite://", create_schema=True)
        yield storage
        storage.engine.dispose()


@pytest.fixture
def mapper(storage):
    return RecordMapper(storage)
