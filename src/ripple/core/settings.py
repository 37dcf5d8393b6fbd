"""Application settings and configuration.

This module defines all configuration options for the Ripple API.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Ripple API", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    debug: bool = Field(default=False, alias="DEBUG")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 7,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )
    password_hash_iterations: int = Field(default=390_000, alias="PASSWORD_HASH_ITERATIONS")

    # Database configuration
    database_url: str = Field(default="sqlite:///./ripple.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Feed and search limits
    feed_default_limit: int = Field(default=50, alias="FEED_DEFAULT_LIMIT")
    feed_max_limit: int = Field(default=100, alias="FEED_MAX_LIMIT")
    top_stories_limit: int = Field(default=20, alias="TOP_STORIES_LIMIT")
    search_min_characters: int = Field(default=2, alias="SEARCH_MIN_CHARACTERS")
    search_max_results: int = Field(default=5, alias="SEARCH_MAX_RESULTS")

    # Notifications are refreshed by client polling; this is the advertised interval.
    notification_list_limit: int = Field(default=50, alias="NOTIFICATION_LIST_LIMIT")
    notification_poll_seconds: int = Field(default=30, alias="NOTIFICATION_POLL_SECONDS")

    # Accounts allowed to review identity verification requests
    reviewer_emails: list[str] = Field(default_factory=list, alias="REVIEWER_EMAILS")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts asyncpg URLs to psycopg for synchronous database operations
        like Alembic migrations.
        """
        url = self.effective_database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides."""
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url

    def is_reviewer(self, email: str) -> bool:
        """Return True if the account email belongs to a verification reviewer."""
        allowed = {address.strip().lower() for address in self.reviewer_emails}
        return email.strip().lower() in allowed


settings = Settings()  # type: ignore[call-arg]
