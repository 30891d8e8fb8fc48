from pydantic import BaseModel, Field


class MediaFile(BaseModel):
    """Value object representing an inbound file destined for the blob store."""

    content: bytes = Field(..., description="Raw file bytes")
    filename: str | None = Field(None, description="Original filename as sent by the client")
    content_type: str | None = Field(None, description="Declared MIME type of the file")
