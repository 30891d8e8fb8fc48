"""Mock implementations for testing."""

from __future__ import annotations

from uuid import UUID, uuid4

from returns.result import Failure, Result, Success

from application.dtos.song_dtos import SongFields
from application.ports.blob_store import (
    BlobDeleteFailure,
    BlobStore,
    BlobUploadFailure,
    DeleteFailureKind,
)
from application.ports.catalog_store import CatalogStore
from domain.entities.genre import Genre
from domain.entities.song import Song
from domain.exceptions import ConflictError, InfrastructureError, RecordNotFoundError
from domain.value_objects.media_folder import MediaFolder


# ---------------------------------------------------------------------------
# Catalog store mock
# ---------------------------------------------------------------------------


class MockCatalogStore(CatalogStore):
    """In-memory CatalogStore with switchable write failures.

    ``journal`` is shared with MockBlobStore so tests can assert the order
    of row and blob operations.
    """

    def __init__(self, journal: list[tuple[str, str]] | None = None) -> None:
        self.songs: dict[UUID, SongFields] = {}
        self.genres: dict[UUID, str] = {}
        self.journal = journal if journal is not None else []
        self.fail_insert: Exception | None = None
        self.fail_update: Exception | None = None
        self.fail_delete: Exception | None = None
        self.delete_returns_zero = False
        self.insert_called = False
        self.update_called = False

    def add_song(self, **fields: object) -> Song:
        song_id = uuid4()
        self.songs[song_id] = SongFields(**fields)
        return self._to_song(song_id)

    def add_genre(self, genre_name: str) -> Genre:
        genre_id = uuid4()
        self.genres[genre_id] = genre_name
        return Genre(genre_id=genre_id, genre_name=genre_name)

    def _to_song(self, song_id: UUID) -> Song:
        fields = self.songs[song_id]
        genre_name = self.genres.get(fields.genre_id) if fields.genre_id else None
        return Song(song_id=song_id, genre_name=genre_name, **fields.model_dump())

    def list_songs(self) -> list[Song]:
        return [self._to_song(song_id) for song_id in self.songs]

    def get_song(self, song_id: UUID) -> Song:
        if song_id not in self.songs:
            msg = f"Song with id {song_id} not found"
            raise RecordNotFoundError(msg)
        return self._to_song(song_id)

    def insert_song(self, fields: SongFields) -> Song:
        self.insert_called = True
        if self.fail_insert is not None:
            raise self.fail_insert
        song_id = uuid4()
        self.songs[song_id] = fields.model_copy()
        self.journal.append(("insert_song", str(song_id)))
        return self._to_song(song_id)

    def update_song(self, song_id: UUID, fields: SongFields) -> Song:
        self.update_called = True
        if self.fail_update is not None:
            raise self.fail_update
        if song_id not in self.songs:
            msg = f"Song with id {song_id} not found"
            raise RecordNotFoundError(msg)
        self.songs[song_id] = fields.model_copy()
        self.journal.append(("update_song", str(song_id)))
        return self._to_song(song_id)

    def delete_song(self, song_id: UUID) -> int:
        if self.fail_delete is not None:
            raise self.fail_delete
        if self.delete_returns_zero or song_id not in self.songs:
            return 0
        del self.songs[song_id]
        self.journal.append(("delete_song", str(song_id)))
        return 1

    def list_genres(self) -> list[Genre]:
        return sorted(
            (Genre(genre_id=gid, genre_name=name) for gid, name in self.genres.items()),
            key=lambda genre: genre.genre_name,
        )

    def get_genre(self, genre_id: UUID) -> Genre:
        if genre_id not in self.genres:
            msg = f"Genre with id {genre_id} not found"
            raise RecordNotFoundError(msg)
        return Genre(genre_id=genre_id, genre_name=self.genres[genre_id])

    def exists_genre(self, genre_id: UUID) -> bool:
        return genre_id in self.genres

    def insert_genre(self, genre_name: str) -> Genre:
        if genre_name in self.genres.values():
            msg = f"duplicate genre name {genre_name!r}"
            raise ConflictError(msg)
        return self.add_genre(genre_name)

    def update_genre(self, genre_id: UUID, genre_name: str) -> Genre:
        if genre_id not in self.genres:
            msg = f"Genre with id {genre_id} not found"
            raise RecordNotFoundError(msg)
        if any(name == genre_name and gid != genre_id for gid, name in self.genres.items()):
            msg = f"duplicate genre name {genre_name!r}"
            raise ConflictError(msg)
        self.genres[genre_id] = genre_name
        return Genre(genre_id=genre_id, genre_name=genre_name)

    def delete_genre(self, genre_id: UUID) -> int:
        if self.fail_delete is not None:
            raise self.fail_delete
        return 1 if self.genres.pop(genre_id, None) is not None else 0

    def count_songs_by_genre(self, genre_id: UUID) -> int:
        return sum(1 for fields in self.songs.values() if fields.genre_id == genre_id)


class UnavailableCatalogStore(MockCatalogStore):
    """Catalog store whose connection is down for every call."""

    def _down(self) -> InfrastructureError:
        return InfrastructureError("connection refused")

    def get_song(self, song_id: UUID) -> Song:
        raise self._down()

    def list_songs(self) -> list[Song]:
        raise self._down()

    def list_genres(self) -> list[Genre]:
        raise self._down()

    def exists_genre(self, genre_id: UUID) -> bool:
        raise self._down()


# ---------------------------------------------------------------------------
# Blob store mock
# ---------------------------------------------------------------------------


class MockBlobStore(BlobStore):
    """In-memory BlobStore that records uploads and deletes.

    References look like ``mem://public/media/{folder}/{n}{ext}``.
    """

    def __init__(self, journal: list[tuple[str, str]] | None = None) -> None:
        self.objects: dict[str, bytes] = {}
        self.journal = journal if journal is not None else []
        self.uploads: list[str] = []
        self.deletes: list[str] = []
        self.fail_upload_folders: set[MediaFolder] = set()
        self.fail_delete_references: set[str] = set()
        self._counter = 0

    def upload(
        self,
        content: bytes,
        original_name: str | None,
        folder: MediaFolder,
        *,
        content_type: str | None = None,  # noqa: ARG002
    ) -> Result[str, BlobUploadFailure]:
        if folder in self.fail_upload_folders:
            return Failure(BlobUploadFailure(folder=folder.value, detail="upload failed with status 500"))

        self._counter += 1
        extension = "." + original_name.rsplit(".", 1)[-1] if original_name and "." in original_name else ""
        reference = f"mem://public/media/{folder.value}/{self._counter}{extension}"
        self.objects[reference] = content
        self.uploads.append(reference)
        self.journal.append(("upload", reference))
        return Success(reference)

    def delete(self, reference: str) -> Result[None, BlobDeleteFailure]:
        self.deletes.append(reference)
        self.journal.append(("delete", reference))
        if reference in self.fail_delete_references:
            return Failure(
                BlobDeleteFailure(
                    reference=reference,
                    kind=DeleteFailureKind.OTHER,
                    detail="delete failed with status 500",
                ),
            )
        if self.objects.pop(reference, None) is None:
            return Failure(BlobDeleteFailure(reference=reference, kind=DeleteFailureKind.NOT_FOUND))
        return Success(None)

    def seed(self, reference: str, content: bytes = b"stored") -> str:
        """Pretend a blob was uploaded by an earlier request."""
        self.objects[reference] = content
        return reference
