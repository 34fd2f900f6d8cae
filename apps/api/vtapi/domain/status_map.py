"""Elemental Conductor job status vocabulary."""

from vtapi.schemas.job import JobStatus

_CONDUCTOR_STATUSES: dict[str, JobStatus] = {
    "pending": JobStatus.QUEUED,
    "preprocessing": JobStatus.STARTED,
    "running": JobStatus.STARTED,
    "postprocessing": JobStatus.STARTED,
    "complete": JobStatus.FINISHED,
    "cancelled": JobStatus.CANCELED,
    "error": JobStatus.FAILED,
}


def map_conductor_status(status: str | None) -> JobStatus:
    """Translate a backend status; anything unrecognized becomes ``UNKNOWN``."""
    return _CONDUCTOR_STATUSES.get(status or "", JobStatus.UNKNOWN)
