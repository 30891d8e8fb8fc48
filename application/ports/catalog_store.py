"""Catalog store interface (port) for the application layer."""

from abc import ABC, abstractmethod
from uuid import UUID

from application.dtos.song_dtos import SongFields
from domain.entities.genre import Genre
from domain.entities.song import Song


class CatalogStore(ABC):
    """Interface for song and genre persistence.

    The store raises domain exceptions to allow proper error handling
    at the application and interface layers:
    - RecordNotFoundError: When a record is not found
    - ConflictError: When a unique constraint would be violated
    - InfrastructureError: When infrastructure operations fail (DB, network, etc.)
    """

    # Songs

    @abstractmethod
    def list_songs(self) -> list[Song]:
        """Return every song, with the joined genre name."""

    @abstractmethod
    def get_song(self, song_id: UUID) -> Song:
        """Retrieve a song by its ID.

        Raises:
            RecordNotFoundError: If the song does not exist.
            InfrastructureError: If the retrieval operation fails.

        """

    @abstractmethod
    def insert_song(self, fields: SongFields) -> Song:
        """Insert a song and return the row as stored."""

    @abstractmethod
    def update_song(self, song_id: UUID, fields: SongFields) -> Song:
        """Overwrite every writable column of a song in one statement.

        Raises:
            RecordNotFoundError: If no row matched (e.g. a concurrent delete).
            InfrastructureError: If the update fails.

        """

    @abstractmethod
    def delete_song(self, song_id: UUID) -> int:
        """Delete a song and return the number of rows affected."""

    # Genres

    @abstractmethod
    def list_genres(self) -> list[Genre]:
        """Return every genre ordered by name."""

    @abstractmethod
    def get_genre(self, genre_id: UUID) -> Genre:
        """Retrieve a genre by its ID.

        Raises:
            RecordNotFoundError: If the genre does not exist.
            InfrastructureError: If the retrieval operation fails.

        """

    @abstractmethod
    def exists_genre(self, genre_id: UUID) -> bool:
        """Return whether a genre with this ID exists."""

    @abstractmethod
    def insert_genre(self, genre_name: str) -> Genre:
        """Insert a genre.

        Raises:
            ConflictError: If another genre already has this name.

        """

    @abstractmethod
    def update_genre(self, genre_id: UUID, genre_name: str) -> Genre:
        """Rename a genre.

        Raises:
            RecordNotFoundError: If the genre does not exist.
            ConflictError: If another genre already has this name.

        """

    @abstractmethod
    def delete_genre(self, genre_id: UUID) -> int:
        """Delete a genre and return the number of rows affected."""

    @abstractmethod
    def count_songs_by_genre(self, genre_id: UUID) -> int:
        """Count songs referencing a genre."""
