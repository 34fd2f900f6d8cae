"""Job service layer."""

from datetime import UTC, datetime
import logging
from uuid import uuid4

from vtapi.adapters.conductor.base import ConductorClient, ConductorClientError
from vtapi.adapters.provider import TranscodingProvider, get_provider_factory
from vtapi.core.config import Settings
from vtapi.core.logging_safety import safe_log_identifier, safe_log_uri
from vtapi.errors import (
    ApiError,
    HealthcheckError,
    InvalidProviderConfigError,
    PresetMapNotFoundError,
    ProviderNotFoundError,
)
from vtapi.schemas.job import CreateJobRequest, Job, ProviderJobStatus, TranscodeProfile
from vtapi.schemas.provider import ProviderDescription, ProviderHealth

logger = logging.getLogger(__name__)


class JobService:
    def __init__(self, client: ConductorClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    def create_job(self, *, payload: CreateJobRequest, correlation_id: str | None = None) -> Job:
        provider = self._provider(payload.provider or self._settings.default_provider)
        safe_correlation_id = safe_log_identifier(correlation_id, prefix="cid")

        try:
            provider.healthcheck()
        except HealthcheckError as exc:
            logger.warning(
                "job.rejected correlation_id=%s provider=%s code=PROVIDER_UNHEALTHY required=%s found=%s",
                safe_correlation_id,
                provider.name,
                exc.required,
                exc.found,
            )
            raise ApiError(
                status_code=503,
                code="PROVIDER_UNHEALTHY",
                message=str(exc),
                details={"required": exc.required, "found": exc.found},
            ) from exc
        except ConductorClientError as exc:
            raise self._upstream_error(exc) from exc

        job_id = uuid4().hex
        profile = TranscodeProfile(
            source_media=payload.source,
            presets=payload.presets,
            streaming_params=payload.streaming_params,
        )
        try:
            status = provider.transcode(job_id, profile)
        except PresetMapNotFoundError as exc:
            logger.warning(
                "job.rejected correlation_id=%s provider=%s code=PRESET_MAP_NOT_FOUND preset=%s",
                safe_correlation_id,
                provider.name,
                exc.preset_name,
            )
            raise ApiError(
                status_code=400,
                code="PRESET_MAP_NOT_FOUND",
                message=str(exc),
                details={"preset_name": exc.preset_name, "provider_name": exc.provider_name},
            ) from exc
        except ConductorClientError as exc:
            raise self._upstream_error(exc) from exc

        logger.info(
            "job.created correlation_id=%s job_id=%s provider=%s provider_job_id=%s source=%s",
            safe_correlation_id,
            job_id,
            provider.name,
            status.provider_job_id,
            safe_log_uri(payload.source),
        )
        return Job(
            id=job_id,
            provider_name=provider.name,
            provider_job_id=status.provider_job_id,
            status=status.status,
            streaming_params=payload.streaming_params,
            created_at=datetime.now(UTC),
        )

    def get_job_status(self, *, job_id: str, provider_name: str | None = None) -> ProviderJobStatus:
        provider = self._provider(provider_name or self._settings.default_provider)
        try:
            return provider.job_status(job_id)
        except ConductorClientError as exc:
            raise self._upstream_error(exc) from exc

    def cancel_job(
        self,
        *,
        job_id: str,
        provider_name: str | None = None,
        correlation_id: str | None = None,
    ) -> ProviderJobStatus:
        provider = self._provider(provider_name or self._settings.default_provider)
        try:
            provider.cancel_job(job_id)
        except ConductorClientError as exc:
            raise self._upstream_error(exc) from exc

        logger.info(
            "job.cancel_requested correlation_id=%s provider=%s provider_job_id=%s",
            safe_log_identifier(correlation_id, prefix="cid"),
            provider.name,
            job_id,
        )
        return self.get_job_status(job_id=job_id, provider_name=provider.name)

    def describe_provider(self, *, name: str) -> ProviderDescription:
        provider = self._provider(name)
        try:
            provider.healthcheck()
            health = ProviderHealth(status="ok")
        except (HealthcheckError, ConductorClientError) as exc:
            health = ProviderHealth(status="unhealthy", message=str(exc))
        return ProviderDescription(name=provider.name, capabilities=provider.capabilities(), health=health)

    def _provider(self, name: str) -> TranscodingProvider:
        try:
            factory = get_provider_factory(name)
        except ProviderNotFoundError as exc:
            raise ApiError(status_code=404, code="PROVIDER_NOT_FOUND", message="Provider not found") from exc

        try:
            return factory(self._settings, self._client)
        except InvalidProviderConfigError as exc:
            logger.error("provider.config_invalid provider=%s reason=%s", name, exc)
            raise ApiError(
                status_code=500,
                code="PROVIDER_CONFIG_INVALID",
                message="Provider is not configured",
            ) from exc

    @staticmethod
    def _upstream_error(exc: ConductorClientError) -> ApiError:
        logger.warning(
            "provider.request_failed code=PROVIDER_REQUEST_FAILED reason=%s",
            type(exc).__name__,
        )
        return ApiError(
            status_code=502,
            code="PROVIDER_REQUEST_FAILED",
            message="Transcoding provider request failed",
            details={"reason": str(exc)},
        )
