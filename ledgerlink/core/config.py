"""Client configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables (LEDGERLINK_*)."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGERLINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote service
    base_url: str = "https://quickbooks.api.intuit.com"
    realm_id: str = ""
    access_token: str = ""
    minor_version: str = "75"

    # Queries
    page_size: int = 1000  # service maximum for MAXRESULTS

    # HTTP
    request_timeout: float = 30.0  # seconds

    # Logging
    debug: bool = False


# Create settings instance
settings = Settings()
