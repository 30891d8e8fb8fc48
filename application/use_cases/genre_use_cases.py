import asyncio
from uuid import UUID

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.genre_dtos import CreateGenreRequest, UpdateGenreRequest
from application.ports.catalog_store import CatalogStore
from domain.entities.genre import Genre
from domain.exceptions import (
    ConflictError,
    InfrastructureError,
    RecordNotFoundError,
    ValidationError,
)
from domain.services.song_validation import require_text

logger = structlog.get_logger()


class ListGenresUseCase:
    """List every genre."""

    def __init__(self, catalog_store: CatalogStore) -> None:
        self.catalog_store = catalog_store

    async def execute(self) -> Result[list[Genre], AppError]:
        try:
            return Success(await asyncio.to_thread(self.catalog_store.list_genres))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Catalog unavailable: {e!s}"))


class GetGenreUseCase:
    """Retrieve a single genre."""

    def __init__(self, catalog_store: CatalogStore) -> None:
        self.catalog_store = catalog_store

    async def execute(self, genre_id: UUID) -> Result[Genre, AppError]:
        try:
            return Success(await asyncio.to_thread(self.catalog_store.get_genre, genre_id))
        except RecordNotFoundError as e:
            return Failure(AppError("not_found", f"Genre not found: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Catalog unavailable: {e!s}"))


class CreateGenreUseCase:
    """Create a new genre."""

    def __init__(self, catalog_store: CatalogStore) -> None:
        self.catalog_store = catalog_store

    async def execute(self, request: CreateGenreRequest) -> Result[Genre, AppError]:
        try:
            genre_name = require_text("genre_name", request.genre_name)
            genre = await asyncio.to_thread(self.catalog_store.insert_genre, genre_name)
        except ValidationError as e:
            # Domain validation errors - client's fault (400 Bad Request)
            return Failure(AppError("validation", f"Validation error: {e!s}"))
        except ConflictError as e:
            return Failure(AppError("conflict", f"Genre already exists: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("persist", f"Failed to save genre: {e!s}"))

        logger.info("genre_created", genre_id=str(genre.genre_id), genre_name=genre.genre_name)
        return Success(genre)


class UpdateGenreUseCase:
    """Rename an existing genre."""

    def __init__(self, catalog_store: CatalogStore) -> None:
        self.catalog_store = catalog_store

    async def execute(
        self,
        genre_id: UUID,
        request: UpdateGenreRequest,
    ) -> Result[Genre, AppError]:
        try:
            genre_name = require_text("genre_name", request.genre_name)
            genre = await asyncio.to_thread(self.catalog_store.update_genre, genre_id, genre_name)
        except ValidationError as e:
            return Failure(AppError("validation", f"Validation error: {e!s}"))
        except RecordNotFoundError as e:
            return Failure(AppError("not_found", f"Genre not found: {e!s}"))
        except ConflictError as e:
            return Failure(AppError("conflict", f"Genre already exists: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("persist", f"Failed to update genre: {e!s}"))

        logger.info("genre_updated", genre_id=str(genre_id), genre_name=genre.genre_name)
        return Success(genre)


class DeleteGenreUseCase:
    """Delete a genre that no song references.

    The catalog has no foreign key from songs to genres, so the reference
    check happens here before the delete.
    """

    def __init__(self, catalog_store: CatalogStore) -> None:
        self.catalog_store = catalog_store

    async def execute(self, genre_id: UUID) -> Result[None, AppError]:
        try:
            if not await asyncio.to_thread(self.catalog_store.exists_genre, genre_id):
                return Failure(AppError("not_found", f"Genre {genre_id} not found"))

            song_count = await asyncio.to_thread(self.catalog_store.count_songs_by_genre, genre_id)
            if song_count > 0:
                logger.info(
                    "genre_delete_refused",
                    genre_id=str(genre_id),
                    song_count=song_count,
                )
                return Failure(
                    AppError(
                        "conflict",
                        f"Genre {genre_id} is in use by {song_count} song(s)",
                    ),
                )

            rows_affected = await asyncio.to_thread(self.catalog_store.delete_genre, genre_id)
        except InfrastructureError as e:
            return Failure(AppError("persist", f"Failed to delete genre: {e!s}"))

        if rows_affected == 0:
            return Failure(AppError("not_found", f"Genre {genre_id} was already deleted"))

        logger.info("genre_deleted", genre_id=str(genre_id))
        return Success(None)
