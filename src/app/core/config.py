from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Contract Assistant"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True  # Set to False in production
    csp_production: str = "default-src 'self'; frame-ancestors 'none'"

    # Database
    database_url: str
    database_migrations_url: str | None = None
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_ssl_mode: str = "prefer"  # disable, prefer, require, verify-ca, verify-full
    database_statement_cache_size: int = 100  # 0 for pgbouncer/CockroachDB serverless
    run_migrations_on_startup: bool = False

    # Identity provider (Supabase-compatible auth API)
    identity_provider_url: str | None = None
    identity_provider_api_key: str | None = None
    identity_jwt_secret: str | None = None  # If set, tokens are verified locally
    identity_jwt_audience: str = "authenticated"
    identity_timeout_seconds: float = 10.0

    # LLM provider
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    report_model: str = "gpt-4o"
    communication_model: str = "gpt-4.1"
    llm_temperature: float = 0.5
    llm_timeout_seconds: float = 60.0

    # Rate limiting (generation endpoints are unauthenticated and costly)
    generation_rate_limit: str = "10/minute"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("llm_temperature")
    @classmethod
    def validate_llm_temperature(cls, v: float) -> float:
        if not 0 < v <= 1:
            raise ValueError("LLM_TEMPERATURE must be greater than 0 and at most 1")
        return v

    @field_validator("identity_provider_url", "openai_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.rstrip("/") or None
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
