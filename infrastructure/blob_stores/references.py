"""Helpers shared by blob store adapters for naming objects and parsing references."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import TYPE_CHECKING
from uuid import uuid4

if TYPE_CHECKING:
    from domain.value_objects.media_folder import MediaFolder

PUBLIC_SEGMENT = "public"


def build_object_key(folder: MediaFolder, original_name: str | None) -> str:
    """Generate a fresh ``{folder}/{uuid}{ext}`` key; never reuses a name."""
    extension = PurePosixPath(original_name).suffix if original_name else ""
    return f"{folder.value}/{uuid4()}{extension}"


def public_reference(public_base: str, bucket: str, key: str) -> str:
    return f"{public_base.rstrip('/')}/{PUBLIC_SEGMENT}/{bucket}/{key}"


def object_key_from_reference(reference: str, bucket: str) -> str | None:
    """Recover the object key from a public reference.

    ``https://host/storage/v1/object/public/media/song_audio/x.mp3`` with
    bucket ``media`` gives ``song_audio/x.mp3``. Returns None when the
    reference has no ``public/{bucket}/`` segment followed by a key.
    """
    parts = reference.split("/")
    for index in range(len(parts) - 2):
        if parts[index] == PUBLIC_SEGMENT and parts[index + 1] == bucket:
            key = "/".join(parts[index + 2 :])
            return key or None
    return None
