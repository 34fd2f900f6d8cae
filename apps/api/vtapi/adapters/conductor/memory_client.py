"""In-memory Elemental Conductor client for local development and tests."""

from __future__ import annotations

from datetime import UTC, datetime
from itertools import count

from vtapi.adapters.conductor.base import ConductorClient, ConductorClientError
from vtapi.schemas.conductor import CloudConfig, ConductorJob, Node


class InMemoryConductorClient(ConductorClient):
    """Records submitted jobs and serves a configurable node inventory.

    Submitted jobs start as ``pending`` and are addressed by sequential ids.
    Tests seed ``jobs`` directly to simulate backend progress.
    """

    def __init__(
        self,
        *,
        nodes: list[Node] | None = None,
        cloud_config: CloudConfig | None = None,
    ) -> None:
        self.jobs: dict[str, ConductorJob] = {}
        self.canceled_jobs: list[str] = []
        self._nodes = list(nodes or [])
        self._cloud_config = cloud_config or CloudConfig()
        self._ids = count(1)

    def set_nodes(self, nodes: list[Node]) -> None:
        self._nodes = list(nodes)

    def set_cloud_config(self, cloud_config: CloudConfig) -> None:
        self._cloud_config = cloud_config

    def create_job(self, job: ConductorJob) -> ConductorJob:
        job_id = str(next(self._ids))
        created = job.model_copy(
            update={
                "href": f"/jobs/{job_id}",
                "status": "pending",
                "percent_complete": 0,
                "submitted": datetime.now(UTC),
            },
            deep=True,
        )
        self.jobs[job_id] = created
        return created

    def get_job(self, job_id: str) -> ConductorJob:
        job = self.jobs.get(job_id)
        if job is None:
            raise ConductorClientError(f"job {job_id} not found")
        return job

    def cancel_job(self, job_id: str) -> None:
        self.canceled_jobs.append(job_id)
        job = self.jobs.get(job_id)
        if job is not None:
            self.jobs[job_id] = job.model_copy(update={"status": "cancelled"})

    def get_nodes(self) -> list[Node]:
        return list(self._nodes)

    def get_cloud_config(self) -> CloudConfig:
        return self._cloud_config


__all__ = ["InMemoryConductorClient"]
