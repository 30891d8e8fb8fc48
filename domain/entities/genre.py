from uuid import UUID

from pydantic import BaseModel, Field


class Genre(BaseModel):
    """A genre row as stored in the catalog."""

    genre_id: UUID = Field(..., description="Server-generated identifier of the genre")
    genre_name: str = Field(..., description="Unique display name of the genre")
