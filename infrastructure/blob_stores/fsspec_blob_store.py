from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING

import fsspec
from returns.result import Failure, Result, Success

from application.ports.blob_store import (
    BlobDeleteFailure,
    BlobStore,
    BlobUploadFailure,
    DeleteFailureKind,
)
from infrastructure.blob_stores.references import (
    build_object_key,
    object_key_from_reference,
    public_reference,
)

if TYPE_CHECKING:
    from domain.value_objects.media_folder import MediaFolder


class FsspecBlobStore(BlobStore):
    """Blob store on any fsspec filesystem (local disk, ``memory://``, ...).

    References carry the same ``.../public/{bucket}/{key}`` shape as the
    remote store so deletes recover keys the same way.
    """

    def __init__(
        self,
        base_url: str,
        public_base_url: str,
        bucket: str,
        *,
        storage_options: dict | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.public_base_url = public_base_url.rstrip("/")
        self.bucket = bucket
        self.storage_options = storage_options or {}

    def _url(self, key: str) -> str:
        return f"{self.base_url}/{self.bucket}/{key}"

    def upload(
        self,
        content: bytes,
        original_name: str | None,
        folder: MediaFolder,
        *,
        content_type: str | None = None,  # noqa: ARG002
    ) -> Result[str, BlobUploadFailure]:
        key = build_object_key(folder, original_name)
        try:
            fs, path = fsspec.core.url_to_fs(self._url(key), **self.storage_options)
            fs.makedirs(posixpath.dirname(path), exist_ok=True)
            with fs.open(path, "wb") as out:
                out.write(content)
        except OSError as e:
            return Failure(BlobUploadFailure(folder=folder.value, detail=f"write failed: {e!s}"))

        return Success(public_reference(self.public_base_url, self.bucket, key))

    def delete(self, reference: str) -> Result[None, BlobDeleteFailure]:
        key = object_key_from_reference(reference, self.bucket)
        if key is None:
            return Failure(
                BlobDeleteFailure(
                    reference=reference,
                    kind=DeleteFailureKind.OTHER,
                    detail=f"invalid file path format: {reference}",
                ),
            )

        try:
            fs, path = fsspec.core.url_to_fs(self._url(key), **self.storage_options)
            fs.rm(path)
        except FileNotFoundError:
            return Failure(BlobDeleteFailure(reference=reference, kind=DeleteFailureKind.NOT_FOUND))
        except OSError as e:
            return Failure(
                BlobDeleteFailure(
                    reference=reference,
                    kind=DeleteFailureKind.OTHER,
                    detail=f"remove failed: {e!s}",
                ),
            )
        return Success(None)
