"""Application configuration using pydantic-settings."""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CLOUDFLARE_GRAPHQL_ENDPOINT = "https://api.cloudflare.com/client/v4/graphql"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # GraphQL API
    graphql_endpoint: str = Field(
        default=CLOUDFLARE_GRAPHQL_ENDPOINT,
        validation_alias="GRAPHQL_ENDPOINT",
    )
    graphql_api_timeout: float = Field(default=30.0, validation_alias="GRAPHQL_API_TIMEOUT")

    # Fallbacks used when the request carries no Authorization / X-Account-Id header
    # (e.g. stdio transport for local clients)
    graphql_api_token: str = Field(default="", validation_alias="GRAPHQL_API_TOKEN")
    default_account_id: str = Field(default="", validation_alias="DEFAULT_ACCOUNT_ID")

    # Server
    mcp_host: str = Field(default="0.0.0.0", validation_alias="MCP_HOST")
    mcp_port: int = Field(default=8001, validation_alias="MCP_PORT")
    mcp_transport: str = Field(default="http", validation_alias="MCP_TRANSPORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("graphql_api_timeout")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Reject non-positive request timeouts."""
        if value <= 0:
            raise ValueError("GRAPHQL_API_TIMEOUT must be greater than 0")
        return value

    @field_validator("mcp_transport")
    @classmethod
    def validate_transport(cls, value: str) -> str:
        """Only streamable HTTP and stdio transports are served."""
        normalized = value.strip().lower()
        if normalized not in ("http", "stdio"):
            raise ValueError(f"Unsupported MCP_TRANSPORT '{value}' (expected 'http' or 'stdio')")
        return normalized

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level name so logging accepts it."""
        return value.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
