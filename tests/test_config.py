from record_mapper import MemoryStorage, SqlStorage, RecordMapper
from record_mapper.config import (
    DATABASE_URL_ENV,
    DEFAULT_URL,
    get_database_url,
    create_storage,
    create_mapper,
)


class TestConfig:
    def test_default_url(self, monkeypatch):
        monkeypatch.delenv(DATABASE_URL_ENV, raising=False)
        assert get_database_url() == DEFAULT_URL
        assert isinstance(create_storage(), MemoryStorage)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(DATABASE_URL_ENV, "sqlite://")

        storage = create_storage(create_schema=True)
        assert isinstance(storage, SqlStorage)
        assert storage.insert("99 Problems", "The Blueprint") == 1
        storage.engine.dispose()

    def test_explicit_url_wins(self, monkeypatch):
        monkeypatch.setenv(DATABASE_URL_ENV, "sqlite://")
        assert isinstance(create_storage("memory://"), MemoryStorage)

    def test_sqlite_memory_shares_one_database(self):
        storage = create_storage("sqlite://", create_schema=True)

        storage.insert("99 Problems", "The Blueprint")
        assert storage.select_by_name("99 Problems") is not None
        storage.engine.dispose()

    def test_sqlite_file(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'songs.db'}"
        mapper = create_mapper(url, create_schema=True)
        mapper.create(name="99 Problems", album="The Blueprint")
        mapper.storage.engine.dispose()

        # Data survives a new engine on the same file
        mapper = create_mapper(url)
        assert mapper.find_by_name("99 Problems").identifier == 1
        mapper.storage.engine.dispose()

    def test_create_mapper(self):
        mapper = create_mapper("memory://")
        assert isinstance(mapper, RecordMapper)
        assert isinstance(mapper.storage, MemoryStorage)
