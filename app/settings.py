## Application settings configuration
from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.errors import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "dev"
    log_level: str = "INFO"

    # Store
    database_url: str

    # Identity service (Supabase auth)
    supabase_url: str
    supabase_anon_key: str
    identity_timeout_seconds: float = 10.0

    # Generation gateway
    LLM_PROVIDER: Literal["gateway", "openai"] = "gateway"
    LOVABLE_API_KEY: str
    GATEWAY_BASE_URL: str = "https://ai.gateway.lovable.dev/v1"
    GATEWAY_MODEL: str = "google/gemini-2.5-flash"
    gateway_timeout_seconds: float = 120.0

    # Off keeps every failure on HTTP 500 for existing callers
    differentiate_error_status: bool = False

    @field_validator("database_url", "supabase_url", "supabase_anon_key", "LOVABLE_API_KEY")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


def load_settings(**overrides) -> Settings:
    """Build settings once at startup; any missing secret is fatal."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise ConfigurationError(
            f"Missing or invalid configuration: {', '.join(fields)}"
        ) from e
