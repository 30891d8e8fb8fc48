from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import structlog
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

logger = structlog.get_logger()

# Error codes the storage API puts in the JSON body for a missing object
_NOT_FOUND_CODES = frozenset({"not_found", "NoSuchKey", "404"})


class SupabaseBlobStore(BlobStore):
    """Blob store backed by the Supabase Storage HTTP API."""

    def __init__(  # noqa: PLR0913
        self,
        base_url: str,
        api_key: str | None,
        bucket: str,
        *,
        upload_timeout: float = 30.0,
        delete_timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            base_url: Project URL, e.g. ``https://abc.supabase.co``
            api_key: Service key sent as a bearer token
            bucket: Storage bucket holding song media
            upload_timeout: Seconds before an upload is abandoned
            delete_timeout: Seconds before a delete is abandoned
            transport: Optional httpx transport (tests pass a MockTransport)

        """
        self.base_url = base_url.rstrip("/")
        self.bucket = bucket
        self.upload_timeout = upload_timeout
        self.delete_timeout = delete_timeout

        headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self._client = httpx.Client(
            base_url=f"{self.base_url}/storage/v1",
            headers=headers,
            transport=transport,
        )

    def _object_path(self, key: str) -> str:
        return f"/object/{self.bucket}/{key}"

    def upload(
        self,
        content: bytes,
        original_name: str | None,
        folder: MediaFolder,
        *,
        content_type: str | None = None,
    ) -> Result[str, BlobUploadFailure]:
        key = build_object_key(folder, original_name)
        try:
            response = self._client.post(
                self._object_path(key),
                content=content,
                headers={
                    "Content-Type": content_type or "application/octet-stream",
                    "Cache-Control": "3600",
                },
                timeout=self.upload_timeout,
            )
        except httpx.TimeoutException:
            detail = f"upload timed out after {self.upload_timeout}s"
            return Failure(BlobUploadFailure(folder=folder.value, detail=detail))
        except httpx.HTTPError as e:
            return Failure(BlobUploadFailure(folder=folder.value, detail=f"transport error: {e!s}"))

        if response.status_code not in (httpx.codes.OK, httpx.codes.CREATED):
            detail = f"upload failed with status {response.status_code}: {response.text}"
            return Failure(BlobUploadFailure(folder=folder.value, detail=detail))

        logger.debug("blob_uploaded", key=key, size_bytes=len(content))
        return Success(public_reference(f"{self.base_url}/storage/v1/object", self.bucket, key))

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
            response = self._client.delete(self._object_path(key), timeout=self.delete_timeout)
        except httpx.TimeoutException:
            return Failure(
                BlobDeleteFailure(
                    reference=reference,
                    kind=DeleteFailureKind.OTHER,
                    detail=f"delete timed out after {self.delete_timeout}s",
                ),
            )
        except httpx.HTTPError as e:
            return Failure(
                BlobDeleteFailure(
                    reference=reference,
                    kind=DeleteFailureKind.OTHER,
                    detail=f"transport error: {e!s}",
                ),
            )

        if response.status_code in (httpx.codes.OK, httpx.codes.NO_CONTENT):
            return Success(None)

        kind = DeleteFailureKind.NOT_FOUND if _is_not_found(response) else DeleteFailureKind.OTHER
        return Failure(
            BlobDeleteFailure(
                reference=reference,
                kind=kind,
                detail=f"delete failed with status {response.status_code}: {response.text}",
            ),
        )

    def close(self) -> None:
        self._client.close()


def _is_not_found(response: httpx.Response) -> bool:
    """Classify a failed delete response as "object already absent"."""
    if response.status_code == httpx.codes.NOT_FOUND:
        return True
    try:
        body = response.json()
    except ValueError:
        return False
    if not isinstance(body, dict):
        return False
    codes = {str(body.get("error", "")), str(body.get("statusCode", "")), str(body.get("code", ""))}
    return bool(codes & _NOT_FOUND_CODES)
