from uuid import UUID

from fastapi import HTTPException, UploadFile, status

from application.dtos.errors import AppError
from domain.value_objects.media_file import MediaFile


def _map_app_error_to_http_exception(error: AppError) -> HTTPException:
    """Map application layer errors to appropriate HTTP exceptions."""
    if error.category == "validation":
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )
    if error.category == "not_found":
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=error.message,
        )
    if error.category == "conflict":
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=error.message,
        )
    if error.category == "upload":
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=error.message,
        )
    if error.category == "persist":
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save changes",
        )
    if error.category == "infrastructure":
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service temporarily unavailable",
        )
    # Unknown error category
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


def parse_form_uuid(field_name: str, value: str | None) -> UUID | None:
    """Parse an optional UUID form field; an empty string counts as absent."""
    if not value:
        return None
    try:
        return UUID(value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {field_name} format",
        ) from None


def parse_form_int(field_name: str, value: str | None) -> int | None:
    """Parse an optional integer form field; an empty string counts as absent."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {field_name} format",
        ) from None


async def to_media_file(upload: UploadFile | None) -> MediaFile | None:
    """Read a multipart file part into a MediaFile; an empty part counts as absent."""
    if upload is None or not upload.filename:
        return None
    content = await upload.read()
    return MediaFile(
        content=content,
        filename=upload.filename,
        content_type=upload.content_type,
    )
