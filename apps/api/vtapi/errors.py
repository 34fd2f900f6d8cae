"""Application exception types."""

from vtapi.schemas.error import ErrorResponse


class ApiError(Exception):
    """Structured API error that maps directly to contract error payloads."""

    def __init__(self, status_code: int, code: str, message: str, details: dict | None = None) -> None:
        self.status_code = status_code
        self.payload = ErrorResponse(code=code, message=message, details=details)
        super().__init__(message)


class ProviderError(Exception):
    """Base class for provider-level failures."""


class InvalidProviderConfigError(ProviderError):
    """Raised when a provider is built from incomplete connection settings."""


class ProviderNotFoundError(ProviderError):
    """Raised when no factory is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"provider {name!r} is not registered")


class PresetMapNotFoundError(ProviderError):
    """Raised when a preset has no mapping for the active provider."""

    def __init__(self, preset_name: str, provider_name: str) -> None:
        self.preset_name = preset_name
        self.provider_name = provider_name
        super().__init__("preset mapping not found")


class HealthcheckError(ProviderError):
    """Raised when the backend has fewer active workers than it requires."""

    def __init__(self, required: int, found: int) -> None:
        self.required = required
        self.found = found
        super().__init__(
            "there are not enough active nodes. "
            f"{required} nodes required to be active, but found only {found}"
        )


__all__ = [
    "ApiError",
    "HealthcheckError",
    "InvalidProviderConfigError",
    "PresetMapNotFoundError",
    "ProviderError",
    "ProviderNotFoundError",
]
