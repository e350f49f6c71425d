"""
Sprintdesk configuration management.

Loads configuration from environment variables or .env file.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SprintdeskConfig(BaseSettings):
    """
    Sprintdesk configuration settings.

    Can be loaded from:
    1. Environment variables (SPRINTDESK_SUPABASE_URL, SPRINTDESK_SUPABASE_KEY, etc.)
    2. The plain Supabase variables (SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)
    3. .env file in project root
    4. Direct instantiation with kwargs

    Example:
        ```python
        # From environment
        config = SprintdeskConfig()

        # Direct instantiation
        config = SprintdeskConfig(
            supabase_url="https://xxx.supabase.co",
            supabase_key="your-service-role-key"
        )
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="SPRINTDESK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Supabase connection
    supabase_url: str = Field(
        ...,
        description="Supabase project URL (e.g., https://xxx.supabase.co)",
        validation_alias=AliasChoices(
            "supabase_url", "SPRINTDESK_SUPABASE_URL", "SUPABASE_URL"
        ),
    )

    supabase_key: str = Field(
        ...,
        description="Supabase service role key (never exposed to clients)",
        validation_alias=AliasChoices(
            "supabase_key",
            "SPRINTDESK_SUPABASE_KEY",
            "SUPABASE_SERVICE_ROLE_KEY",
        ),
    )

    # Database schema
    db_schema: str = Field(
        default="public",
        description="PostgreSQL schema where the user tables live",
    )

    # User partitions
    internal_users_table: str = Field(
        default="users_internal",
        description="Table holding internal team members",
    )

    partner_users_table: str = Field(
        default="users_partner",
        description="Table holding partner (client) users",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )

    log_format: str = Field(
        default="json",
        description="Log output format: json or text",
    )

    # Debug
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    @field_validator("supabase_url")
    @classmethod
    def validate_supabase_url(cls, v: str) -> str:
        """Ensure Supabase URL is valid."""
        if not v.startswith("https://"):
            raise ValueError("supabase_url must start with https://")
        return v.rstrip("/")

    @field_validator("supabase_key")
    @classmethod
    def validate_supabase_key(cls, v: str) -> str:
        """Ensure Supabase key is not empty."""
        if not v or len(v) < 10:
            raise ValueError("supabase_key appears invalid (too short)")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug flag."""
        return "DEBUG" if self.debug else self.log_level.upper()


def load_config(**kwargs) -> SprintdeskConfig:
    """
    Load Sprintdesk configuration.

    Priority order:
    1. Keyword arguments
    2. Environment variables (SPRINTDESK_*, then SUPABASE_*)
    3. .env file

    Args:
        **kwargs: Override configuration values

    Returns:
        SprintdeskConfig instance

    Raises:
        ValidationError: If required fields are missing or invalid

    Example:
        ```python
        # Load from environment
        config = load_config()

        # Override specific values
        config = load_config(debug=True)
        ```
    """
    return SprintdeskConfig(**kwargs)
