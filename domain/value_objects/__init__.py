"""Domain value objects."""

from domain.value_objects.media_file import MediaFile
from domain.value_objects.media_folder import MediaFolder
from domain.value_objects.principal import Principal, Role

__all__ = [
    "MediaFile",
    "MediaFolder",
    "Principal",
    "Role",
]
