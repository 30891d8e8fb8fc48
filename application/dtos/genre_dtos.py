from pydantic import BaseModel, Field


class CreateGenreRequest(BaseModel):
    """Request DTO for creating a new genre."""

    genre_name: str = Field(..., description="Unique display name of the genre")


class UpdateGenreRequest(BaseModel):
    """Request DTO for renaming a genre."""

    genre_name: str = Field(..., description="New display name of the genre")
