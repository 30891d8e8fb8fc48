from uuid import UUID

from pydantic import BaseModel, Field


class CreateSongRequest(BaseModel):
    """Request DTO for creating a new song."""

    title: str = Field(..., description="Title of the song")
    artist: str = Field(..., description="Performing artist")
    genre_id: UUID | None = Field(None, description="Genre the song belongs to")
    release_year: int | None = Field(None, description="Year the song was released")


class UpdateSongRequest(BaseModel):
    """Request DTO for a partial song update.

    Only the fields present in ``model_fields_set`` are applied. A field sent
    as ``null`` clears the stored value; a field left out keeps it.
    """

    title: str | None = Field(None, description="New title")
    artist: str | None = Field(None, description="New artist")
    genre_id: UUID | None = Field(None, description="New genre, or null to clear it")
    release_year: int | None = Field(None, description="New release year, or null to clear it")

    def supplied(self) -> dict[str, object]:
        """Return only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class SongFields(BaseModel):
    """Full set of writable song columns, as handed to the catalog store."""

    title: str
    artist: str
    genre_id: UUID | None = None
    release_year: int | None = None
    audio_file_path: str | None = None
    image_path: str | None = None
