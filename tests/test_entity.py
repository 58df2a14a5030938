import pytest

from record_mapper import Song, IdentifierAlreadySetError


class TestSong:
    def test_new_song_is_not_persisted(self):
        song = Song("99 Problems", "The Blueprint")
        assert song.identifier is None
        assert not song.is_persisted

    def test_identifier_can_be_assigned_once(self):
        song = Song("99 Problems", "The Blueprint")
        song.identifier = 1
        assert song.identifier == 1
        assert song.is_persisted

        # Same value: no-op
        song.identifier = 1
        assert song.identifier == 1

        with pytest.raises(IdentifierAlreadySetError):
            song.identifier = 2

        assert song.identifier == 1

    def test_attributes_are_mutable(self):
        song = Song("99 Problems", "The Blueprint", identifier=3)
        song.name = "Encore"
        song.album = "The Black Album"
        assert song.name == "Encore"
        assert song.album == "The Black Album"
        assert song.identifier == 3

    def test_repr(self):
        song = Song("99 Problems", "The Blueprint", identifier=1)
        assert repr(song) == "Song(id=1 name=99 Problems album=The Blueprint)"

    def test_equality_is_identity(self):
        a = Song("Encore", "The Black Album")
        b = Song("Encore", "The Black Album")
        assert a != b
        assert a == a
