"""Elemental Conductor client interface."""

from abc import ABC, abstractmethod

from vtapi.schemas.conductor import CloudConfig, ConductorJob, Node


class ConductorClientError(Exception):
    """Raised when the backend rejects or fails a request."""


class ConductorClient(ABC):
    """Backend calls the provider relies on.

    Transport, request signing, retries and timeouts are the implementation's
    concern; callers see either a result or a ``ConductorClientError``.
    """

    @abstractmethod
    def create_job(self, job: ConductorJob) -> ConductorJob:
        """Submit a job and return it as recorded by the backend."""

    @abstractmethod
    def get_job(self, job_id: str) -> ConductorJob:
        """Fetch a job document by backend id."""

    @abstractmethod
    def cancel_job(self, job_id: str) -> None:
        """Request cancellation of a job."""

    @abstractmethod
    def get_nodes(self) -> list[Node]:
        """Return the current node inventory."""

    @abstractmethod
    def get_cloud_config(self) -> CloudConfig:
        """Return the cluster scaling configuration."""


__all__ = ["ConductorClient", "ConductorClientError"]
