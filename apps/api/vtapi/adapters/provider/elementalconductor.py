"""Elemental Conductor provider adapter."""

from __future__ import annotations

import logging

from vtapi.adapters.conductor.base import ConductorClient
from vtapi.adapters.provider.base import TranscodingProvider
from vtapi.core.config import Settings
from vtapi.core.logging_safety import safe_log_uri
from vtapi.domain.destination import output_destination
from vtapi.domain.healthcheck import check_cluster_health
from vtapi.domain.job_builder import build_conductor_job
from vtapi.domain.status_map import map_conductor_status
from vtapi.errors import InvalidProviderConfigError
from vtapi.schemas.conductor import ConductorJob
from vtapi.schemas.job import JobStatus, ProviderJobStatus, TranscodeProfile
from vtapi.schemas.provider import Capabilities

NAME = "elementalconductor"

logger = logging.getLogger(__name__)


class ElementalConductorProvider(TranscodingProvider):
    """Runs transcode jobs on an Elemental Conductor File cluster."""

    name = NAME

    def __init__(self, client: ConductorClient, settings: Settings) -> None:
        self.client = client
        self.settings = settings

    def new_job(self, job_id: str, profile: TranscodeProfile) -> ConductorJob:
        return build_conductor_job(
            job_id,
            profile,
            provider_name=self.name,
            access_key_id=self.settings.aws_access_key_id,
            secret_access_key=self.settings.aws_secret_access_key,
            destination=self.settings.elemental_conductor_destination,
        )

    def transcode(self, job_id: str, profile: TranscodeProfile) -> ProviderJobStatus:
        new_job = self.new_job(job_id, profile)
        created = self.client.create_job(new_job)
        logger.info(
            "conductor.job_submitted job_id=%s provider_job_id=%s source=%s output_groups=%s streams=%s",
            job_id,
            created.id,
            safe_log_uri(profile.source_media),
            len(new_job.output_groups),
            len(new_job.stream_assemblies),
        )
        return ProviderJobStatus(
            provider_name=self.name,
            provider_job_id=created.id,
            status=JobStatus.QUEUED,
        )

    def job_status(self, job_id: str) -> ProviderJobStatus:
        job = self.client.get_job(job_id)
        return ProviderJobStatus(
            provider_name=self.name,
            provider_job_id=job_id,
            progress=float(job.percent_complete),
            status=map_conductor_status(job.status),
            provider_status={
                "status": job.status,
                "submitted": job.submitted,
            },
            output_destination=output_destination(job),
        )

    def cancel_job(self, job_id: str) -> None:
        self.client.cancel_job(job_id)
        logger.info("conductor.job_cancel_requested provider_job_id=%s", job_id)

    def healthcheck(self) -> None:
        check_cluster_health(self.client)

    def capabilities(self) -> Capabilities:
        return Capabilities(
            input_formats=["prores", "h264"],
            output_formats=["mp4", "hls"],
            destinations=["akamai", "s3"],
        )


def elemental_conductor_factory(settings: Settings, client: ConductorClient) -> ElementalConductorProvider:
    """Build the provider, rejecting settings without full connection parameters."""
    if (
        not settings.elemental_conductor_host
        or not settings.elemental_conductor_user_login
        or not settings.elemental_conductor_api_key
        or settings.elemental_conductor_auth_expires <= 0
    ):
        raise InvalidProviderConfigError(
            "missing Elemental user login, API key, auth expiry or host; "
            "set VTAPI_ELEMENTAL_CONDUCTOR_USER_LOGIN, VTAPI_ELEMENTAL_CONDUCTOR_API_KEY, "
            "VTAPI_ELEMENTAL_CONDUCTOR_AUTH_EXPIRES and VTAPI_ELEMENTAL_CONDUCTOR_HOST"
        )
    return ElementalConductorProvider(client=client, settings=settings)


__all__ = ["NAME", "ElementalConductorProvider", "elemental_conductor_factory"]
