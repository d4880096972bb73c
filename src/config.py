from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be overridden with an `IP_TRACE_` prefixed variable
    (e.g. `IP_TRACE_PROVIDER_TIMEOUT_SECONDS=2.5`) or from a local `.env` file.
    """

    model_config = SettingsConfigDict(env_prefix="IP_TRACE_", env_file=".env", extra="ignore")

    app_name: str = "IP Trace Service"
    app_version: str = "0.1.0"
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")

    ip_locator_base_url: str = Field(
        default="https://apimobile.meituan.com",
        description="Base URL of the IP -> coordinates provider.",
    )
    reverse_geocoder_base_url: str = Field(
        default="https://apimobile.meituan.com",
        description="Base URL of the coordinates -> address detail provider.",
    )
    provider_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout applied to every outbound provider call. Calls are never retried.",
    )

    unknown_client_ip: str = Field(
        default="unknown",
        description="Returned by /api/clientip when no client address header is present.",
    )

    host: str = "127.0.0.1"
    port: int = Field(default=8000, gt=0, lt=65536)
    reload: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
