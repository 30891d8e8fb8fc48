from __future__ import annotations

from lagom import Container

from application.ports.blob_store import BlobStore
from application.ports.catalog_store import CatalogStore
from application.sagas.media_coordinator import MediaCoordinator
from application.use_cases.genre_use_cases import (
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GetGenreUseCase,
    ListGenresUseCase,
    UpdateGenreUseCase,
)
from application.use_cases.song_use_cases import GetSongUseCase, ListSongsUseCase
from infrastructure.blob_stores.fsspec_blob_store import FsspecBlobStore
from infrastructure.blob_stores.supabase_blob_store import SupabaseBlobStore
from infrastructure.catalog_stores.sqlalchemy_catalog_store import (
    SqlAlchemyCatalogStore,
    create_catalog_engine,
)
from infrastructure.config import Settings, settings


def create_blob_store(config: Settings) -> BlobStore:
    """Build the blob store selected by ``BLOB_BACKEND``."""
    if config.blob_backend == "supabase":
        return SupabaseBlobStore(
            base_url=config.supabase_url,
            api_key=config.supabase_key,
            bucket=config.storage_bucket,
            upload_timeout=config.blob_upload_timeout,
            delete_timeout=config.blob_delete_timeout,
        )
    return FsspecBlobStore(
        base_url=config.blob_base_url,
        public_base_url=config.blob_public_base_url,
        bucket=config.storage_bucket,
        storage_options=config.blob_storage_options,
    )


def create_container(config: Settings = settings) -> Container:
    container = Container()

    # Catalog store (one engine, one pool per process)
    engine = create_catalog_engine(
        config.database_url,
        pool_size=config.database_pool_size,
        pool_recycle=config.database_pool_recycle,
    )
    container[CatalogStore] = SqlAlchemyCatalogStore(engine)

    # Blob storage
    container[BlobStore] = create_blob_store(config)

    # Register Sagas
    container[MediaCoordinator] = lambda c: MediaCoordinator(
        catalog_store=c[CatalogStore],
        blob_store=c[BlobStore],
    )

    # Song Use Cases
    container[ListSongsUseCase] = lambda c: ListSongsUseCase(c[CatalogStore])
    container[GetSongUseCase] = lambda c: GetSongUseCase(c[CatalogStore])

    # Genre Use Cases
    container[ListGenresUseCase] = lambda c: ListGenresUseCase(c[CatalogStore])
    container[GetGenreUseCase] = lambda c: GetGenreUseCase(c[CatalogStore])
    container[CreateGenreUseCase] = lambda c: CreateGenreUseCase(c[CatalogStore])
    container[UpdateGenreUseCase] = lambda c: UpdateGenreUseCase(c[CatalogStore])
    container[DeleteGenreUseCase] = lambda c: DeleteGenreUseCase(c[CatalogStore])

    return container
