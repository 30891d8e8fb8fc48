"""Tests for SqlAlchemyCatalogStore on in-memory SQLite."""

from __future__ import annotations

from uuid import uuid4

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from application.dtos.song_dtos import SongFields
from domain.exceptions import ConflictError, InfrastructureError, RecordNotFoundError
from infrastructure.catalog_stores.sqlalchemy_catalog_store import SqlAlchemyCatalogStore


@pytest.fixture
def store() -> SqlAlchemyCatalogStore:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    catalog_store = SqlAlchemyCatalogStore(engine)
    catalog_store.create_schema()
    yield catalog_store
    engine.dispose()


class TestSongs:
    def test_insert_and_get_with_genre_name(self, store) -> None:
        genre = store.insert_genre("Rock")

        song = store.insert_song(
            SongFields(
                title="Song",
                artist="Band",
                genre_id=genre.genre_id,
                release_year=1999,
                audio_file_path="https://x/public/media/song_audio/a.mp3",
            ),
        )

        fetched = store.get_song(song.song_id)
        assert fetched == song
        assert fetched.genre_name == "Rock"
        assert fetched.image_path is None

    def test_song_with_missing_genre_has_no_name(self, store) -> None:
        song = store.insert_song(SongFields(title="Song", artist="Band", genre_id=uuid4()))

        assert song.genre_name is None

    def test_list_songs(self, store) -> None:
        store.insert_song(SongFields(title="B side", artist="Band"))
        store.insert_song(SongFields(title="A side", artist="Band"))

        assert [song.title for song in store.list_songs()] == ["A side", "B side"]

    def test_update_replaces_every_column(self, store) -> None:
        song = store.insert_song(
            SongFields(title="Song", artist="Band", release_year=2000, image_path="img"),
        )

        updated = store.update_song(
            song.song_id,
            SongFields(title="New", artist="Band", release_year=None, image_path="img2"),
        )

        assert updated.title == "New"
        assert updated.release_year is None
        assert updated.image_path == "img2"

    def test_update_missing_song(self, store) -> None:
        with pytest.raises(RecordNotFoundError):
            store.update_song(uuid4(), SongFields(title="X", artist="Y"))

    def test_get_missing_song(self, store) -> None:
        with pytest.raises(RecordNotFoundError):
            store.get_song(uuid4())

    def test_delete_reports_rows_affected(self, store) -> None:
        song = store.insert_song(SongFields(title="Song", artist="Band"))

        assert store.delete_song(song.song_id) == 1
        assert store.delete_song(song.song_id) == 0


class TestGenres:
    def test_duplicate_name_is_conflict(self, store) -> None:
        store.insert_genre("Rock")

        with pytest.raises(ConflictError):
            store.insert_genre("Rock")

    def test_rename_to_existing_name_is_conflict(self, store) -> None:
        store.insert_genre("Rock")
        jazz = store.insert_genre("Jazz")

        with pytest.raises(ConflictError):
            store.update_genre(jazz.genre_id, "Rock")

    def test_update_missing_genre(self, store) -> None:
        with pytest.raises(RecordNotFoundError):
            store.update_genre(uuid4(), "Rock")

    def test_count_and_delete(self, store) -> None:
        genre = store.insert_genre("Rock")
        store.insert_song(SongFields(title="A", artist="Band", genre_id=genre.genre_id))

        assert store.exists_genre(genre.genre_id) is True
        assert store.count_songs_by_genre(genre.genre_id) == 1
        assert store.delete_genre(genre.genre_id) == 1
        assert store.exists_genre(genre.genre_id) is False
        assert store.delete_genre(genre.genre_id) == 0

    def test_list_genres_sorted(self, store) -> None:
        store.insert_genre("Rock")
        store.insert_genre("Blues")

        assert [genre.genre_name for genre in store.list_genres()] == ["Blues", "Rock"]
        assert store.get_genre(store.list_genres()[0].genre_id).genre_name == "Blues"


class TestErrors:
    def test_database_error_becomes_infrastructure_error(self) -> None:
        engine = create_engine("sqlite://", poolclass=StaticPool)
        # Schema never created
        store = SqlAlchemyCatalogStore(engine)

        with pytest.raises(InfrastructureError):
            store.list_songs()
