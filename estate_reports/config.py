"""Configuration management for estate-reports."""

from dataclasses import dataclass, field
from typing import Any

from estate_reports.exceptions import ConfigurationError


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "estate"
    user: str = "postgres"
    password: str = "postgres"
    connect_timeout: int = 10

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to psycopg connect() keyword arguments."""
        return {
            "host": self.host,
            "port": self.port,
            "dbname": self.database,
            "user": self.user,
            "password": self.password,
            "connect_timeout": self.connect_timeout,
        }


@dataclass
class RetryConfig:
    """Retry policy for transport failures in the data access layer."""

    max_attempts: int = 3
    backoff_seconds: float = 0.5
    backoff_multiplier: float = 2.0
    max_backoff_seconds: float = 10.0


@dataclass
class CacheConfig:
    """Report cache configuration."""

    enabled: bool = True
    ttl_seconds: float = 300.0
    max_entries: int = 256


@dataclass
class ReportingConfig:
    """Main configuration for estate-reports."""

    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    trend_window_days: int = 30
    max_workers: int = 6
    top_listings: int = 5
    recent_items: int = 5
    preview_mode: bool = False
    preview_seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.trend_window_days < 1:
            raise ConfigurationError("trend_window_days must be at least 1")
        if self.max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1")
        if self.retry.max_attempts < 1:
            raise ConfigurationError("retry.max_attempts must be at least 1")

    @classmethod
    def from_env(cls) -> "ReportingConfig":
        """Create config from environment variables."""
        import os

        postgres = PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=_env_int("POSTGRES_PORT", 5432),
            database=os.getenv("POSTGRES_DB", "estate"),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", "postgres"),
            connect_timeout=_env_int("POSTGRES_CONNECT_TIMEOUT", 10),
        )

        retry = RetryConfig(
            max_attempts=_env_int("FETCH_MAX_ATTEMPTS", 3),
            backoff_seconds=_env_float("FETCH_BACKOFF_SECONDS", 0.5),
        )

        cache = CacheConfig(
            enabled=os.getenv("REPORT_CACHE_ENABLED", "true").lower() == "true",
            ttl_seconds=_env_float("REPORT_CACHE_TTL", 300.0),
        )

        preview_seed = os.getenv("PREVIEW_SEED")

        return cls(
            postgres=postgres,
            retry=retry,
            cache=cache,
            trend_window_days=_env_int("TREND_WINDOW_DAYS", 30),
            max_workers=_env_int("FETCH_WORKERS", 6),
            preview_mode=os.getenv("ESTATE_REPORTS_PREVIEW_MODE", "false").lower() == "true",
            preview_seed=_env_int("PREVIEW_SEED", 0) if preview_seed else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: int) -> int:
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
