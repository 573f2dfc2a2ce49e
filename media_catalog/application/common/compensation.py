"""Compensating deletes for uploads orphaned by a failed request."""

from dataclasses import dataclass, field

from media_catalog.application.interfaces import StorageServiceBase
from media_catalog.commons.telemetry import get_logger

logger = get_logger(__name__)


@dataclass
class CompensationFailure:
    """A compensating delete that did not go through."""

    file_path: str
    error: Exception


@dataclass
class StorageCompensation:
    """Files to delete again if the request fails after uploading them.

    Deletes are best-effort: a failing delete is logged and collected, and
    the remaining files are still deleted.
    """

    storage: StorageServiceBase
    paths: list[str] = field(default_factory=list)
    failures: list[CompensationFailure] = field(default_factory=list)

    def record(self, file_path: str) -> None:
        self.paths.append(file_path)

    async def compensate(self) -> list[CompensationFailure]:
        """Delete every recorded file.

        Returns:
            The deletes that failed; empty when cleanup was complete.
        """
        for path in self.paths:
            try:
                await self.storage.delete(path)
                logger.debug("Compensating delete done", extra={"file_path": path})
            except Exception as e:
                logger.error(
                    "Compensating delete failed",
                    extra={"file_path": path, "error": str(e)},
                    exc_info=True,
                )
                self.failures.append(CompensationFailure(path, e))

        if self.paths:
            logger.info(
                "Storage compensation finished",
                extra={
                    "deleted": len(self.paths) - len(self.failures),
                    "failed": len(self.failures),
                },
            )
        return list(self.failures)

    def attach_to(self, error: BaseException) -> None:
        """Annotate the propagating error with the cleanups that failed."""
        for failure in self.failures:
            error.add_note(
                f"Compensating delete of '{failure.file_path}' also failed: "
                f"{failure.error!r}"
            )
