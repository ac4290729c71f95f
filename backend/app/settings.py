"""Settings for the LeetCode profile service with observability configuration."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_field(default, *env_names: str):
    if env_names:
        alias = AliasChoices(*env_names) if len(env_names) > 1 else env_names[0]
        return Field(default=default, validation_alias=alias)
    return Field(default=default)


class Settings(BaseSettings):
    # Upstream platform
    leetcode_graphql_url: str = _env_field("https://leetcode.com/graphql", "LEETCODE_GRAPHQL_URL")
    leetcode_timeout_seconds: float = _env_field(10.0, "LEETCODE_TIMEOUT_SECONDS")
    # Bound on recentAcSubmissionList; upstream caps it anyway
    leetcode_recent_limit: int = _env_field(20, "LEETCODE_RECENT_LIMIT")
    leetcode_user_agent: str = _env_field(
        "Mozilla/5.0 (compatible; lcprofile/1.0)",
        "LEETCODE_USER_AGENT",
    )

    environment: str = _env_field("production", "ENV", "APP_ENV", "ENVIRONMENT")
    obs_enabled: bool = _env_field(True, "OBS_ENABLED")
    obs_metrics_public: bool = _env_field(False, "OBS_METRICS_PUBLIC")
    obs_log_level: str = _env_field("INFO", "LOG_LEVEL")
    obs_log_sampling_rate_info: float = _env_field(1.0, "LOG_SAMPLING_RATE_INFO")
    service_name: str = _env_field("lcprofile-api", "SERVICE_NAME")
    git_commit: str = _env_field("unknown", "GIT_COMMIT", "COMMIT_SHA", "SOURCE_VERSION")

    cors_allow_origins: Any = _env_field((), "CORS_ALLOW_ORIGINS")

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("leetcode_recent_limit")
    def _clamp_recent_limit(cls, value: int) -> int:  # type: ignore[override]
        return max(1, min(100, value))

    @field_validator("cors_allow_origins", mode="before")
    def _split_cors(cls, value):  # type: ignore[override]
        if value in (None, ""):
            return ()
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        if isinstance(value, (list, tuple, set)):
            return tuple(str(item).strip() for item in value if str(item).strip())
        return ()


def _normalise_level(level: str) -> str:
    return level.upper()


settings = Settings()
settings.obs_log_level = _normalise_level(settings.obs_log_level)
