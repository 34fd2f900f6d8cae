"""Transcoding provider interfaces."""

from abc import ABC, abstractmethod

from vtapi.schemas.job import ProviderJobStatus, TranscodeProfile
from vtapi.schemas.provider import Capabilities


class TranscodingProvider(ABC):
    """Provider-neutral transcoding interface."""

    name: str

    @abstractmethod
    def transcode(self, job_id: str, profile: TranscodeProfile) -> ProviderJobStatus:
        """Build and submit a backend job for the profile."""

    @abstractmethod
    def job_status(self, job_id: str) -> ProviderJobStatus:
        """Return the canonical status of a backend job."""

    @abstractmethod
    def cancel_job(self, job_id: str) -> None:
        """Cancel a backend job."""

    @abstractmethod
    def healthcheck(self) -> None:
        """Raise ``HealthcheckError`` when the backend cannot take new work."""

    @abstractmethod
    def capabilities(self) -> Capabilities:
        """Describe supported inputs, outputs and destinations."""


__all__ = ["TranscodingProvider"]
