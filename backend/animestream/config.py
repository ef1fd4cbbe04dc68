import json
import os
import threading
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


def _parse_origins(raw_allowed_origins: str) -> list[str]:
    # Support both CSV format and JSON array format
    if raw_allowed_origins.startswith("["):
        try:
            parsed_list = json.loads(raw_allowed_origins)
        except json.JSONDecodeError as exc:
            raise ValueError(f"ALLOWED_ORIGINS JSON is malformed: {exc}") from exc
        if not isinstance(parsed_list, list):
            raise ValueError("ALLOWED_ORIGINS JSON must be an array")
        return [
            origin.strip()
            for origin in parsed_list
            if isinstance(origin, str) and origin.strip()
        ]
    return [origin.strip() for origin in raw_allowed_origins.split(",") if origin.strip()]


def _parse_bool(name: str, default: bool) -> bool:
    raw_value = os.getenv(name, str(default)).strip().lower()
    if raw_value in {"1", "true", "yes", "on"}:
        return True
    if raw_value in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"{name} must be a boolean value")


def _is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


class Settings(BaseModel):
    app_name: str = Field(default="AnimeStream Backend")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    database_url: str = Field(default="")
    allowed_origins: list[str] = Field(default_factory=list)
    db_pool_size: int = Field(default=5)
    db_max_overflow: int = Field(default=10)
    db_pool_recycle: int = Field(default=1800)
    db_pool_pre_ping: bool = Field(default=True)
    auth_url: str = Field(default="")
    auth_api_key: str | None = Field(default=None)
    auth_jwt_secret: str | None = Field(default=None)
    auth_jwt_algorithm: str = Field(default="HS256")
    auth_timeout_seconds: float = Field(default=10.0)

    @classmethod
    def from_env(cls) -> "Settings":
        raw_allowed_origins = os.getenv("ALLOWED_ORIGINS", "").strip()
        if not raw_allowed_origins:
            raise ValueError("ALLOWED_ORIGINS environment variable must be set")

        allowed_origins = _parse_origins(raw_allowed_origins)
        if not allowed_origins:
            raise ValueError("ALLOWED_ORIGINS must contain at least one origin")

        if "*" in allowed_origins:
            raise ValueError(
                "ALLOWED_ORIGINS cannot contain '*' when credentialed requests are used"
            )

        for origin in allowed_origins:
            if not _is_http_url(origin):
                raise ValueError(
                    "ALLOWED_ORIGINS must contain valid http/https origins with host"
                )

        database_url = os.getenv("DATABASE_URL", "").strip()
        if not database_url:
            raise ValueError("DATABASE_URL environment variable must be set")

        parsed_db = urlparse(database_url)
        if parsed_db.scheme != "postgresql+asyncpg":
            raise ValueError("DATABASE_URL must start with 'postgresql+asyncpg://'")
        if not parsed_db.hostname:
            raise ValueError("DATABASE_URL must include hostname")

        auth_url = os.getenv("AUTH_URL", "").strip().rstrip("/")
        if not auth_url:
            raise ValueError("AUTH_URL environment variable must be set")
        if not _is_http_url(auth_url):
            raise ValueError("AUTH_URL must be a valid http/https URL")

        db_pool_size = int(os.getenv("DB_POOL_SIZE", cls.model_fields["db_pool_size"].default))
        if db_pool_size <= 0:
            raise ValueError("DB_POOL_SIZE must be greater than 0")

        db_max_overflow = int(
            os.getenv("DB_MAX_OVERFLOW", cls.model_fields["db_max_overflow"].default)
        )
        if db_max_overflow < 0:
            raise ValueError("DB_MAX_OVERFLOW must be greater than or equal to 0")

        db_pool_recycle = int(
            os.getenv("DB_POOL_RECYCLE", cls.model_fields["db_pool_recycle"].default)
        )
        if db_pool_recycle <= 0:
            raise ValueError("DB_POOL_RECYCLE must be greater than 0")

        auth_timeout_seconds = float(
            os.getenv(
                "AUTH_TIMEOUT_SECONDS", cls.model_fields["auth_timeout_seconds"].default
            )
        )
        if auth_timeout_seconds <= 0:
            raise ValueError("AUTH_TIMEOUT_SECONDS must be greater than 0")

        log_level = os.getenv("LOG_LEVEL", cls.model_fields["log_level"].default).strip().upper()
        if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")

        return cls(
            app_name=os.getenv("APP_NAME", cls.model_fields["app_name"].default),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=log_level,
            database_url=database_url,
            allowed_origins=allowed_origins,
            db_pool_size=db_pool_size,
            db_max_overflow=db_max_overflow,
            db_pool_recycle=db_pool_recycle,
            db_pool_pre_ping=_parse_bool(
                "DB_POOL_PRE_PING", cls.model_fields["db_pool_pre_ping"].default
            ),
            auth_url=auth_url,
            auth_api_key=os.getenv("AUTH_API_KEY", "").strip() or None,
            auth_jwt_secret=os.getenv("AUTH_JWT_SECRET", "").strip() or None,
            auth_jwt_algorithm=os.getenv(
                "AUTH_JWT_ALGORITHM", cls.model_fields["auth_jwt_algorithm"].default
            ),
            auth_timeout_seconds=auth_timeout_seconds,
        )


# Settings are validated on first access, not at import time.
_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Get settings instance, creating it on first access.

    Uses double-checked locking so concurrent first accesses build a single
    instance.

    Raises:
        ValueError: If required environment variables are missing or invalid
    """
    global _settings_instance

    if _settings_instance is not None:
        return _settings_instance

    with _settings_lock:
        if _settings_instance is None:
            _settings_instance = Settings.from_env()

    return _settings_instance


class _SettingsProxy:
    """Proxy to defer settings creation until first attribute access."""

    def __getattr__(self, name: str):
        return getattr(get_settings(), name)


settings = _SettingsProxy()  # type: ignore[assignment]
