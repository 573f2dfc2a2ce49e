"""Ports for the object store and the unit of work."""

import io
from abc import ABC, abstractmethod


class StorageServiceBase(ABC):
    """Stores files under a key and hands back their locator."""

    @abstractmethod
    async def upload(
        self,
        file_name: str,
        data: io.IOBase | bytes,
        content_type: str | None = None,
    ) -> str:
        """Upload a file.

        Args:
            file_name: Storage key, see ``storage_file_name``.
            data: File-like object or bytes to upload.
            content_type: MIME type; guessed from the key when omitted.

        Returns:
            Locator to persist on the aggregate and to pass to ``delete``.

        Raises:
            StorageException: If the upload fails.
        """

    @abstractmethod
    async def delete(self, file_path: str) -> None:
        """Delete a file by the locator ``upload`` returned.

        Raises:
            StorageException: If the object store refuses the delete.
        """


class UnitOfWorkBase(ABC):
    """Boundary that makes staged record-store writes durable at once."""

    @abstractmethod
    async def commit(self) -> None:
        """Apply every staged write.

        Raises:
            CommitException: If nothing could be made durable.
        """

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every staged write."""
