"""Application settings — Pydantic-based configuration sourced from the environment.

Configuration is loaded from (in order of precedence):
  1. Environment variables (COMMUNITY_SEARCH_ prefix)
  2. A ``.env`` file in the working directory
  3. Default values

The resulting ``Settings`` object is built once and handed to the app factory,
so request handling never reads the process environment directly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

# Upstream accepts at most this many hits per search call.
MAX_COUNT_PAGE_SIZE = 100


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8080, description="Server port")
    workers: int = Field(default=1, description="Number of worker processes")
    cors_origin: str = Field(default="*", description="Value of Access-Control-Allow-Origin")
    search_path: str = Field(default="/api/search", description="Search endpoint path as callers reach it, used in pager URLs")
    public_base_url: str | None = Field(
        default=None,
        description="Absolute base URL of this adapter, used when forwarding headers are missing",
    )


class AuthSettings(BaseModel):
    """Shared-secret authentication between the community platform and the adapter."""

    adapter_key: str = Field(default="", description="Shared secret; empty disables authentication")


class HelpCenterSettings(BaseModel):
    """Public help center whose article URLs mark a hit as published."""

    base_url: str = Field(default="https://help.example.com", description="Help center base URL")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slashes(cls, v: str) -> str:
        return v.rstrip("/")


class UpstreamSettings(BaseModel):
    """Knowledge-base search API configuration."""

    base_url: str = Field(default="https://api.devrev.ai", description="Upstream API base URL")
    search_path: str = Field(default="/search.core", description="Upstream search endpoint path")
    token: str = Field(default="", description="Bearer token for the upstream API")
    timeout: float = Field(default=30.0, gt=0, description="Upstream HTTP timeout in seconds")


class CountSettings(BaseModel):
    """Bounds of the cursor walk used to approximate the total match count."""

    max_pages: int = Field(default=50, description="Maximum upstream calls per count walk")
    page_size: int = Field(default=50, ge=1, description="Hits requested per count-walk call")

    @field_validator("page_size")
    @classmethod
    def _cap_page_size(cls, v: int) -> int:
        return min(v, MAX_COUNT_PAGE_SIZE)


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Nested settings use double underscores::

        COMMUNITY_SEARCH_AUTH__ADAPTER_KEY=s3cret
        COMMUNITY_SEARCH_UPSTREAM__TOKEN=eyJ...
        COMMUNITY_SEARCH_HELP_CENTER__BASE_URL=https://help.acme.io
        COMMUNITY_SEARCH_COUNT__MAX_PAGES=20
    """

    model_config = {
        "env_prefix": "COMMUNITY_SEARCH_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    app_name: str = Field(default="Community Search Adapter", description="Application name")
    debug: bool = Field(default=False, description="Allow ?debug=1 diagnostics in error responses")

    server: ServerSettings = Field(default_factory=ServerSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    help_center: HelpCenterSettings = Field(default_factory=HelpCenterSettings)
    upstream: UpstreamSettings = Field(default_factory=UpstreamSettings)
    count: CountSettings = Field(default_factory=CountSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
