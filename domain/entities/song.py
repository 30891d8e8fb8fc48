from uuid import UUID

from pydantic import BaseModel, Field


class Song(BaseModel):
    """A song row as stored in the catalog.

    ``genre_name`` is a read projection joined from the genres table; writes
    ignore it.
    """

    song_id: UUID = Field(..., description="Server-generated identifier of the song")
    title: str = Field(..., description="Title of the song")
    artist: str = Field(..., description="Performing artist")
    genre_id: UUID | None = Field(None, description="Genre the song belongs to")
    genre_name: str | None = Field(None, description="Name of the referenced genre")
    release_year: int | None = Field(None, description="Year the song was released")
    audio_file_path: str | None = Field(None, description="Public reference of the audio blob")
    image_path: str | None = Field(None, description="Public reference of the cover image blob")

    def blob_references(self) -> list[str]:
        """Return every non-empty blob reference held by this song."""
        return [ref for ref in (self.audio_file_path, self.image_path) if ref]
