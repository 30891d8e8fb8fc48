"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from application.sagas.media_coordinator import MediaCoordinator
from domain.entities.genre import Genre
from domain.value_objects.media_file import MediaFile
from tests.mocks import MockBlobStore, MockCatalogStore


@pytest.fixture
def journal() -> list[tuple[str, str]]:
    """Operation log shared by the catalog and blob store mocks."""
    return []


@pytest.fixture
def catalog_store(journal: list[tuple[str, str]]) -> MockCatalogStore:
    return MockCatalogStore(journal)


@pytest.fixture
def blob_store(journal: list[tuple[str, str]]) -> MockBlobStore:
    return MockBlobStore(journal)


@pytest.fixture
def coordinator(catalog_store: MockCatalogStore, blob_store: MockBlobStore) -> MediaCoordinator:
    return MediaCoordinator(catalog_store, blob_store)


@pytest.fixture
def rock_genre(catalog_store: MockCatalogStore) -> Genre:
    """Create a sample genre stored in the mock catalog."""
    return catalog_store.add_genre("Rock")


@pytest.fixture
def audio_file() -> MediaFile:
    """Create a sample audio upload."""
    return MediaFile(content=b"ID3fake-mp3", filename="track.mp3", content_type="audio/mpeg")


@pytest.fixture
def image_file() -> MediaFile:
    """Create a sample cover image upload."""
    return MediaFile(content=b"\x89PNGfake", filename="cover.png", content_type="image/png")
