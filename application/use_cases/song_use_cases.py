import asyncio
from uuid import UUID

from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.ports.catalog_store import CatalogStore
from domain.entities.song import Song
from domain.exceptions import InfrastructureError, RecordNotFoundError


class ListSongsUseCase:
    """List every song with its genre name."""

    def __init__(self, catalog_store: CatalogStore) -> None:
        self.catalog_store = catalog_store

    async def execute(self) -> Result[list[Song], AppError]:
        try:
            return Success(await asyncio.to_thread(self.catalog_store.list_songs))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Catalog unavailable: {e!s}"))


class GetSongUseCase:
    """Retrieve a single song."""

    def __init__(self, catalog_store: CatalogStore) -> None:
        self.catalog_store = catalog_store

    async def execute(self, song_id: UUID) -> Result[Song, AppError]:
        try:
            return Success(await asyncio.to_thread(self.catalog_store.get_song, song_id))
        except RecordNotFoundError as e:
            return Failure(AppError("not_found", f"Song not found: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Catalog unavailable: {e!s}"))
