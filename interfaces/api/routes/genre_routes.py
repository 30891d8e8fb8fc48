from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status
from lagom import Container

from application.dtos.genre_dtos import CreateGenreRequest, UpdateGenreRequest
from application.use_cases.genre_use_cases import (
    CreateGenreUseCase,
    DeleteGenreUseCase,
    GetGenreUseCase,
    ListGenresUseCase,
    UpdateGenreUseCase,
)
from domain.entities.genre import Genre
from interfaces.api.auth import require_admin
from interfaces.api.middleware import handle_use_case_errors
from interfaces.dependencies import get_container

router = APIRouter(prefix="/genres", tags=["genres"])

content_router = APIRouter(
    prefix="/api/content/genres",
    tags=["content"],
    dependencies=[Depends(require_admin)],
)


@router.get("", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def list_genres(
    container: Annotated[Container, Depends(get_container)],
) -> list[Genre]:
    """List all genres."""
    use_case = container[ListGenresUseCase]
    return await use_case.execute()


@router.get("/{genre_id}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def get_genre(
    genre_id: UUID,
    container: Annotated[Container, Depends(get_container)],
) -> Genre:
    use_case = container[GetGenreUseCase]
    return await use_case.execute(genre_id)


@content_router.post("", status_code=status.HTTP_201_CREATED)
@handle_use_case_errors
async def create_genre(
    request: CreateGenreRequest,
    container: Annotated[Container, Depends(get_container)],
) -> Genre:
    """Create a new genre.

    Returns:
        201 Created: Genre successfully created
        400 Bad Request: Blank name
        409 Conflict: A genre with this name already exists

    """
    use_case = container[CreateGenreUseCase]
    return await use_case.execute(request)


@content_router.put("/{genre_id}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def update_genre(
    genre_id: UUID,
    request: UpdateGenreRequest,
    container: Annotated[Container, Depends(get_container)],
) -> Genre:
    """Rename a genre."""
    use_case = container[UpdateGenreUseCase]
    return await use_case.execute(genre_id, request)


@content_router.delete("/{genre_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_use_case_errors
async def delete_genre(
    genre_id: UUID,
    container: Annotated[Container, Depends(get_container)],
) -> None:
    """Delete a genre; refused with 409 while songs still reference it."""
    use_case = container[DeleteGenreUseCase]
    return await use_case.execute(genre_id)
