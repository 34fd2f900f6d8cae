"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    default_provider: str = "elementalconductor"

    elemental_conductor_host: str = ""
    elemental_conductor_user_login: str = ""
    elemental_conductor_api_key: str = ""
    elemental_conductor_auth_expires: int = 0
    elemental_conductor_destination: str = ""

    # Credentials the encoder uses to read sources and write outputs.
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""

    model_config = SettingsConfigDict(env_prefix="VTAPI_", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
