from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    app_env: str
    log_level: str
    sentry_dsn: str | None
    log_preview_chars: int
    cors_allowed_origins: tuple[str, ...]
    cors_allow_credentials: bool
    min_job_description_chars: int
    max_job_description_chars: int

    @property
    def expose_error_details(self) -> bool:
        return self.app_env == "development"


def load_settings() -> Settings:
    return Settings(
        app_env=(_get_env("APP_ENV", "production") or "production").strip().lower(),
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        sentry_dsn=_get_env("SENTRY_DSN"),
        log_preview_chars=_get_env_int("LOG_PREVIEW_CHARS", 50),
        cors_allowed_origins=_get_env_list(
            "CORS_ALLOWED_ORIGINS",
            [
                "http://localhost:3000",
                "http://127.0.0.1:3000",
            ],
        ),
        cors_allow_credentials=_get_env_bool("CORS_ALLOW_CREDENTIALS", False),
        min_job_description_chars=_get_env_int("MIN_JOB_DESCRIPTION_CHARS", 10),
        max_job_description_chars=_get_env_int("MAX_JOB_DESCRIPTION_CHARS", 50000),
    )


settings = load_settings()

if settings.min_job_description_chars < 1:
    raise RuntimeError("MIN_JOB_DESCRIPTION_CHARS must be a positive integer.")

if settings.max_job_description_chars < settings.min_job_description_chars:
    raise RuntimeError("MAX_JOB_DESCRIPTION_CHARS must not be smaller than MIN_JOB_DESCRIPTION_CHARS.")
