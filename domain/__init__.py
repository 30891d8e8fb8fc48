"""Domain layer exports."""

from domain.entities import Genre, Song
from domain.exceptions import (
    ConflictError,
    DomainError,
    InfrastructureError,
    RecordNotFoundError,
    ValidationError,
)
from domain.value_objects import MediaFile, MediaFolder, Principal, Role

__all__ = [
    "ConflictError",
    "DomainError",
    "Genre",
    "InfrastructureError",
    "MediaFile",
    "MediaFolder",
    "Principal",
    "RecordNotFoundError",
    "Role",
    "Song",
    "ValidationError",
]
