from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from returns.result import Result

    from domain.value_objects.media_folder import MediaFolder


class DeleteFailureKind(str, Enum):
    NOT_FOUND = "not_found"
    OTHER = "other"


@dataclass(frozen=True)
class BlobUploadFailure:
    folder: str
    detail: str


@dataclass(frozen=True)
class BlobDeleteFailure:
    reference: str
    kind: DeleteFailureKind
    detail: str = ""

    @property
    def is_not_found(self) -> bool:
        return self.kind is DeleteFailureKind.NOT_FOUND


class BlobStore(Protocol):
    """Port for the remote object storage holding song media.

    Implementations classify failures where the transport error is received;
    callers never inspect error text.
    """

    def upload(
        self,
        content: bytes,
        original_name: str | None,
        folder: MediaFolder,
        *,
        content_type: str | None = None,
    ) -> Result[str, BlobUploadFailure]:
        """Store ``content`` under a freshly generated name inside ``folder``.

        Returns the public reference of the stored object.
        """
        ...

    def delete(self, reference: str) -> Result[None, BlobDeleteFailure]:
        """Remove the object behind a reference previously returned by ``upload``."""
        ...
