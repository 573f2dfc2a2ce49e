"""Unit of work over the document database."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pymongo.errors import PyMongoError

from media_catalog.application.exceptions import CommitException
from media_catalog.application.interfaces import UnitOfWorkBase
from media_catalog.commons.infrastructure.documentdb.base import DocumentDBBase
from media_catalog.commons.telemetry import get_logger, log_exceptions, timed


class OperationKind(str, Enum):
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class PendingOperation:
    """A document write waiting for the next commit."""

    kind: OperationKind
    collection: str
    document_id: str
    document: dict[str, Any] | None = None


class DocumentUnitOfWork(UnitOfWorkBase):
    """Stages document writes and applies them, in order, on commit.

    Repositories built on the same instance only stage; nothing reaches the
    database before ``commit``. Pending operations are dropped after every
    commit attempt and on rollback, so an instance can be reused.
    """

    def __init__(self, document_db: DocumentDBBase) -> None:
        self._db = document_db
        self._pending: list[PendingOperation] = []
        self._logger = get_logger(__name__)

    @property
    def pending(self) -> list[PendingOperation]:
        return list(self._pending)

    def register_insert(
        self, collection: str, document_id: str, document: dict[str, Any]
    ) -> None:
        self._pending.append(
            PendingOperation(OperationKind.INSERT, collection, document_id, document)
        )

    def register_update(
        self, collection: str, document_id: str, document: dict[str, Any]
    ) -> None:
        self._pending.append(
            PendingOperation(OperationKind.UPDATE, collection, document_id, document)
        )

    def register_delete(self, collection: str, document_id: str) -> None:
        self._pending.append(
            PendingOperation(OperationKind.DELETE, collection, document_id)
        )

    @log_exceptions(message="Commit failed")
    @timed
    async def commit(self) -> None:
        """Apply every staged write.

        Raises:
            CommitException: If the database rejects a write, or an update
                or delete targets a document that does not exist.
        """
        operations, self._pending = self._pending, []
        self._logger.debug("Committing", extra={"operations": len(operations)})

        try:
            for operation in operations:
                await self._apply(operation)
        except PyMongoError as e:
            raise CommitException(str(e)) from e

    async def rollback(self) -> None:
        if self._pending:
            self._logger.debug(
                "Discarding staged writes", extra={"operations": len(self._pending)}
            )
        self._pending = []

    async def _apply(self, operation: PendingOperation) -> None:
        if operation.kind is OperationKind.INSERT:
            await self._db.insert(operation.collection, operation.document or {})
            return

        if operation.kind is OperationKind.UPDATE:
            found = await self._db.update(
                operation.collection, operation.document_id, operation.document or {}
            )
        else:
            found = await self._db.delete(operation.collection, operation.document_id)

        if not found:
            raise CommitException(
                f"{operation.kind.value} of '{operation.document_id}' in "
                f"'{operation.collection}' matched no document"
            )
