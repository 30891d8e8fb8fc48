from enum import Enum


class MediaFolder(str, Enum):
    """Logical folders inside the storage bucket, one per kind of song media."""

    AUDIO = "song_audio"
    IMAGE = "song_images"
