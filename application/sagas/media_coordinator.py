from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.song_dtos import SongFields
from domain.exceptions import InfrastructureError, RecordNotFoundError, ValidationError
from domain.services.song_validation import check_release_year, require_text
from domain.value_objects.media_folder import MediaFolder

if TYPE_CHECKING:
    from uuid import UUID

    from application.dtos.song_dtos import CreateSongRequest, UpdateSongRequest
    from application.ports.blob_store import BlobStore
    from application.ports.catalog_store import CatalogStore
    from domain.entities.song import Song
    from domain.value_objects.media_file import MediaFile

logger = structlog.get_logger()


class MediaCoordinator:
    """Orchestrates song row mutations together with their media blobs.

    Blobs are uploaded before the row is written and removed only after the
    row stops referencing them. Every failure after an upload deletes the
    blobs uploaded by that same call before the error is returned. Cleanup
    failures are logged and never replace the original error.

    Both stores are blocking; every call to them runs in a worker thread so
    a slow upload never holds the event loop.
    """

    def __init__(self, catalog_store: CatalogStore, blob_store: BlobStore) -> None:
        """Initialize coordinator with its two stores.

        Args:
            catalog_store: Persistence of song and genre rows
            blob_store: Remote object storage for audio and cover images

        """
        self.catalog_store = catalog_store
        self.blob_store = blob_store

    async def create_song_with_files(
        self,
        request: CreateSongRequest,
        audio_file: MediaFile | None = None,
        image_file: MediaFile | None = None,
    ) -> Result[Song, AppError]:
        # Step 1: Validate before touching the blob store
        try:
            title = require_text("title", request.title)
            artist = require_text("artist", request.artist)
            release_year = check_release_year(request.release_year)
            if request.genre_id is not None:
                await asyncio.to_thread(self._check_genre_exists, request.genre_id)
        except ValidationError as e:
            return Failure(AppError("validation", f"Validation error: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Catalog unavailable: {e!s}"))

        fields = SongFields(
            title=title,
            artist=artist,
            genre_id=request.genre_id,
            release_year=release_year,
        )
        uploaded: list[str] = []

        # Step 2: Upload audio
        if audio_file is not None:
            audio_result = await self._upload(audio_file, MediaFolder.AUDIO)
            if isinstance(audio_result, Failure):
                return audio_result
            fields.audio_file_path = audio_result.unwrap()
            uploaded.append(fields.audio_file_path)

        # Step 3: Upload image, dropping the audio blob if it fails
        if image_file is not None:
            image_result = await self._upload(image_file, MediaFolder.IMAGE)
            if isinstance(image_result, Failure):
                await self._discard(uploaded, reason="image_upload_failed")
                return image_result
            fields.image_path = image_result.unwrap()
            uploaded.append(fields.image_path)

        # Step 4: Insert the row
        try:
            song = await asyncio.to_thread(self.catalog_store.insert_song, fields)
        except Exception as e:  # noqa: BLE001
            # Any persist failure must still release the uploaded blobs
            await self._discard(uploaded, reason="song_insert_failed")
            return Failure(AppError("persist", f"Failed to save song: {e!s}"))

        logger.info(
            "song_created",
            song_id=str(song.song_id),
            has_audio=song.audio_file_path is not None,
            has_image=song.image_path is not None,
        )
        return Success(song)

    async def update_song_with_files(
        self,
        song_id: UUID,
        changes: UpdateSongRequest,
        audio_file: MediaFile | None = None,
        image_file: MediaFile | None = None,
    ) -> Result[Song, AppError]:
        # Step 1: Fetch the current row
        try:
            current = await asyncio.to_thread(self.catalog_store.get_song, song_id)
        except RecordNotFoundError as e:
            return Failure(AppError("not_found", f"Song not found: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Catalog unavailable: {e!s}"))

        # Step 2: Effective values
        try:
            fields = await asyncio.to_thread(self._merge, current, changes)
        except ValidationError as e:
            return Failure(AppError("validation", f"Validation error: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Catalog unavailable: {e!s}"))

        uploaded: list[str] = []

        # Steps 3-4: Upload replacements; old blobs stay until the row commits
        if audio_file is not None:
            audio_result = await self._upload(audio_file, MediaFolder.AUDIO)
            if isinstance(audio_result, Failure):
                return audio_result
            fields.audio_file_path = audio_result.unwrap()
            uploaded.append(fields.audio_file_path)

        if image_file is not None:
            image_result = await self._upload(image_file, MediaFolder.IMAGE)
            if isinstance(image_result, Failure):
                await self._discard(uploaded, reason="image_upload_failed")
                return image_result
            fields.image_path = image_result.unwrap()
            uploaded.append(fields.image_path)

        # Step 5: One atomic row update
        try:
            song = await asyncio.to_thread(self.catalog_store.update_song, song_id, fields)
        except RecordNotFoundError as e:
            await self._discard(uploaded, reason="song_update_failed")
            return Failure(AppError("not_found", f"Song not found: {e!s}"))
        except Exception as e:  # noqa: BLE001
            await self._discard(uploaded, reason="song_update_failed")
            return Failure(AppError("persist", f"Failed to update song: {e!s}"))

        # Step 6: The row no longer references the replaced blobs
        replaced = [
            old
            for old, new in (
                (current.audio_file_path, song.audio_file_path),
                (current.image_path, song.image_path),
            )
            if old and old != new
        ]
        await self._discard(replaced, reason="blob_replaced")

        logger.info(
            "song_updated",
            song_id=str(song_id),
            fields=sorted(changes.supplied()),
            replaced_blobs=len(replaced),
        )
        return Success(song)

    async def delete_song(self, song_id: UUID) -> Result[None, AppError]:
        # Step 1: Read the blob references before the row disappears
        try:
            song = await asyncio.to_thread(self.catalog_store.get_song, song_id)
        except RecordNotFoundError as e:
            return Failure(AppError("not_found", f"Song not found: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Catalog unavailable: {e!s}"))

        # Step 2: Delete the row
        try:
            rows_affected = await asyncio.to_thread(self.catalog_store.delete_song, song_id)
        except InfrastructureError as e:
            return Failure(AppError("persist", f"Failed to delete song: {e!s}"))

        if rows_affected == 0:
            return Failure(AppError("not_found", f"Song {song_id} was already deleted"))

        # Step 3: The row is the source of truth; blob cleanup never fails the call
        await self._discard(song.blob_references(), reason="song_deleted")

        logger.info("song_deleted", song_id=str(song_id))
        return Success(None)

    def _merge(self, current: Song, changes: UpdateSongRequest) -> SongFields:
        """Apply the supplied fields of ``changes`` over the current row.

        Raises:
            ValidationError: If a required field is cleared or a value is invalid
            InfrastructureError: If the genre lookup fails

        """
        supplied = changes.supplied()
        fields = SongFields(
            title=current.title,
            artist=current.artist,
            genre_id=current.genre_id,
            release_year=current.release_year,
            audio_file_path=current.audio_file_path,
            image_path=current.image_path,
        )
        if "title" in supplied:
            fields.title = require_text("title", changes.title)
        if "artist" in supplied:
            fields.artist = require_text("artist", changes.artist)
        if "release_year" in supplied:
            fields.release_year = check_release_year(changes.release_year)
        if "genre_id" in supplied:
            if changes.genre_id is not None and changes.genre_id != current.genre_id:
                self._check_genre_exists(changes.genre_id)
            fields.genre_id = changes.genre_id
        return fields

    def _check_genre_exists(self, genre_id: UUID) -> None:
        if not self.catalog_store.exists_genre(genre_id):
            msg = f"Genre {genre_id} does not exist"
            raise ValidationError(msg)

    async def _upload(self, media: MediaFile, folder: MediaFolder) -> Result[str, AppError]:
        result = await asyncio.to_thread(
            self.blob_store.upload,
            media.content,
            media.filename,
            folder,
            content_type=media.content_type,
        )
        if isinstance(result, Failure):
            failure = result.failure()
            logger.warning(
                "blob_upload_failed",
                folder=folder.value,
                filename=media.filename,
                detail=failure.detail,
            )
            return Failure(AppError("upload", f"Failed to upload {folder.value} file: {failure.detail}"))
        return result

    async def _discard(self, references: list[str], *, reason: str) -> None:
        """Best-effort delete of blobs nothing references any more."""
        for reference in references:
            result = await asyncio.to_thread(self.blob_store.delete, reference)
            if isinstance(result, Success):
                logger.info("blob_deleted", reference=reference, reason=reason)
                continue

            failure = result.failure()
            if failure.is_not_found:
                logger.info("blob_already_absent", reference=reference, reason=reason)
            else:
                logger.error(
                    "blob_delete_failed",
                    reference=reference,
                    reason=reason,
                    detail=failure.detail,
                )
