"""Application-level exceptions raised by the use-case services."""

from media_catalog.domain.repositories import RelationKind


class ApplicationException(Exception):
    """Base exception for application errors."""


class NotFoundException(ApplicationException):
    """Raised when a requested aggregate does not exist."""

    def __init__(self, message: str, aggregate_id: str | None = None) -> None:
        self.aggregate_id = aggregate_id
        super().__init__(message)

    @classmethod
    def for_video(cls, video_id: str) -> "NotFoundException":
        return cls(f"Video '{video_id}' not found.", video_id)


class RelatedAggregateException(ApplicationException):
    """Raised when referenced categories, genres or cast members are missing."""

    def __init__(self, kind: RelationKind, missing_ids: list[str]) -> None:
        self.kind = kind
        self.missing_ids = list(missing_ids)
        super().__init__(
            f"Related {kind.value} Id (or Ids) not found: {','.join(self.missing_ids)}."
        )


class StorageException(ApplicationException):
    """Raised when the object store fails to upload or delete a file."""

    def __init__(self, operation: str, file_path: str, reason: str) -> None:
        self.operation = operation
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Storage {operation} failed for '{file_path}': {reason}")


class CommitException(ApplicationException):
    """Raised when the unit of work fails to make pending changes durable."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Commit failed: {reason}")
