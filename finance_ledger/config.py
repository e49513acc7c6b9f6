"""Configuration for the finance ledger API and web frontend.

All values come from environment variables so the same image can run in
docker-compose, locally against SQLite, or under tests.
"""
import os
from dataclasses import dataclass, field
from typing import List, Tuple


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _split_address(address: str) -> Tuple[str, int]:
    """Split 'host:port' into its parts."""
    host, _, port = address.rpartition(":")
    if not host or not port.isdigit():
        raise ValueError(f"Invalid address (expected host:port): {address}")
    return host, int(port)


@dataclass
class Settings:
    """Application settings."""

    environment: str = "development"
    db_type: str = "postgres"
    database_url: str = ""
    postgres_host: str = "postgres"
    postgres_port: str = "5432"
    postgres_user: str = "finance"
    postgres_password: str = "finance"
    postgres_db: str = "finance"
    sqlite_path: str = "finance.db"
    log_level: str = "INFO"
    base_asset: str = "USD"
    auto_create_schema: bool = True
    cors_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:8080", "http://127.0.0.1:8080"]
    )
    service_address: str = "0.0.0.0:3000"
    web_address: str = "0.0.0.0:8080"
    api_base_url: str = "http://127.0.0.1:3000"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""
        defaults = cls()
        cors = os.getenv("CORS_ORIGINS")
        return cls(
            environment=os.getenv("ENVIRONMENT", defaults.environment),
            db_type=os.getenv("DB_TYPE", defaults.db_type),
            database_url=os.getenv("DATABASE_URL", defaults.database_url),
            postgres_host=os.getenv("POSTGRES_HOST", defaults.postgres_host),
            postgres_port=os.getenv("POSTGRES_PORT", defaults.postgres_port),
            postgres_user=os.getenv("POSTGRES_USER", defaults.postgres_user),
            postgres_password=os.getenv("POSTGRES_PASSWORD", defaults.postgres_password),
            postgres_db=os.getenv("POSTGRES_DB", defaults.postgres_db),
            sqlite_path=os.getenv("SQLITE_PATH", defaults.sqlite_path),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
            base_asset=os.getenv("BASE_ASSET", defaults.base_asset).upper(),
            auto_create_schema=_get_bool("AUTO_CREATE_SCHEMA", defaults.auto_create_schema),
            cors_origins=(
                [origin.strip() for origin in cors.split(",") if origin.strip()]
                if cors
                else defaults.cors_origins
            ),
            service_address=os.getenv("SERVICE_ADDRESS", defaults.service_address),
            web_address=os.getenv("WEB_ADDRESS", defaults.web_address),
            api_base_url=os.getenv("API_BASE_URL", defaults.api_base_url).rstrip("/"),
        )

    @property
    def sqlalchemy_url(self) -> str:
        """Database URL for SQLAlchemy, derived from DB_TYPE unless DATABASE_URL is set."""
        if self.database_url:
            return self.database_url
        if self.db_type == "postgres":
            return (
                f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
                f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
            )
        elif self.db_type == "sqlite":
            return f"sqlite:///{self.sqlite_path}"
        else:
            raise ValueError(f"Unsupported DB_TYPE: {self.db_type}")

    @property
    def service_bind(self) -> Tuple[str, int]:
        return _split_address(self.service_address)

    @property
    def web_bind(self) -> Tuple[str, int]:
        return _split_address(self.web_address)


_settings = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
