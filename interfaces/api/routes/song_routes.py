from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from lagom import Container

from application.dtos.song_dtos import CreateSongRequest, UpdateSongRequest
from application.sagas.media_coordinator import MediaCoordinator
from application.use_cases.song_use_cases import GetSongUseCase, ListSongsUseCase
from domain.entities.song import Song
from interfaces.api.auth import require_admin
from interfaces.api.middleware import handle_use_case_errors
from interfaces.api.routes.helpers import parse_form_int, parse_form_uuid, to_media_file
from interfaces.dependencies import get_container

router = APIRouter(prefix="/songs", tags=["songs"])

content_router = APIRouter(
    prefix="/api/content/songs",
    tags=["content"],
    dependencies=[Depends(require_admin)],
)


@router.get("", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def list_songs(
    container: Annotated[Container, Depends(get_container)],
) -> list[Song]:
    """List all songs with their genre names."""
    use_case = container[ListSongsUseCase]
    return await use_case.execute()


@router.get("/{song_id}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def get_song(
    song_id: UUID,
    container: Annotated[Container, Depends(get_container)],
) -> Song:
    """Retrieve a song by ID."""
    use_case = container[GetSongUseCase]
    return await use_case.execute(song_id)


@content_router.post("", status_code=status.HTTP_201_CREATED)
@handle_use_case_errors
async def create_song(
    request: CreateSongRequest,
    container: Annotated[Container, Depends(get_container)],
) -> Song:
    """Create a song without media files."""
    coordinator = container[MediaCoordinator]
    return await coordinator.create_song_with_files(request)


@content_router.post("/upload", status_code=status.HTTP_201_CREATED)
@handle_use_case_errors
async def create_song_with_files(  # noqa: PLR0913
    container: Annotated[Container, Depends(get_container)],
    title: Annotated[str, Form()],
    artist: Annotated[str, Form()],
    genre_id: Annotated[str | None, Form()] = None,
    release_year: Annotated[str | None, Form()] = None,
    audio_file: Annotated[UploadFile | None, File()] = None,
    image_file: Annotated[UploadFile | None, File()] = None,
) -> Song:
    """Create a song and upload its audio and cover image.

    Returns:
        201 Created: Song stored with references to the uploaded files
        400 Bad Request: Missing or malformed fields
        502 Bad Gateway: The object store rejected an upload

    """
    request = CreateSongRequest(
        title=title,
        artist=artist,
        genre_id=parse_form_uuid("genre ID", genre_id),
        release_year=parse_form_int("release year", release_year),
    )
    coordinator = container[MediaCoordinator]
    return await coordinator.create_song_with_files(
        request,
        audio_file=await to_media_file(audio_file),
        image_file=await to_media_file(image_file),
    )


@content_router.put("/{song_id}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def update_song(
    song_id: UUID,
    request: UpdateSongRequest,
    container: Annotated[Container, Depends(get_container)],
) -> Song:
    """Partially update a song; fields sent as null are cleared."""
    coordinator = container[MediaCoordinator]
    return await coordinator.update_song_with_files(song_id, request)


@content_router.put("/{song_id}/upload", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def update_song_with_files(  # noqa: PLR0913
    song_id: UUID,
    container: Annotated[Container, Depends(get_container)],
    title: Annotated[str | None, Form()] = None,
    artist: Annotated[str | None, Form()] = None,
    genre_id: Annotated[str | None, Form()] = None,
    release_year: Annotated[str | None, Form()] = None,
    audio_file: Annotated[UploadFile | None, File()] = None,
    image_file: Annotated[UploadFile | None, File()] = None,
) -> Song:
    """Partially update a song, replacing its media files when new ones are sent.

    Empty genre_id and release_year fields leave the stored values unchanged.
    """
    supplied: dict[str, object] = {}
    if title is not None:
        supplied["title"] = title
    if artist is not None:
        supplied["artist"] = artist
    if genre_id:
        supplied["genre_id"] = parse_form_uuid("genre ID", genre_id)
    if release_year:
        supplied["release_year"] = parse_form_int("release year", release_year)

    coordinator = container[MediaCoordinator]
    return await coordinator.update_song_with_files(
        song_id,
        UpdateSongRequest(**supplied),
        audio_file=await to_media_file(audio_file),
        image_file=await to_media_file(image_file),
    )


@content_router.delete("/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_use_case_errors
async def delete_song(
    song_id: UUID,
    container: Annotated[Container, Depends(get_container)],
) -> None:
    """Delete a song and, best-effort, its media files."""
    coordinator = container[MediaCoordinator]
    return await coordinator.delete_song(song_id)
