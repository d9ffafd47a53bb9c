"""
Settings loading from the environment and a project `.env` file.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_API_URL = "https://api.dayline.observer"


class ConfigError(RuntimeError):
    """Raised when settings cannot be validated."""


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Runtime settings read from `DAYLINE_*` environment variables.

    Attributes:
        api_url: Base URL of the feed API; feed paths are appended to it.
        request_timeout: Seconds to wait for each feed request.
        timezone: IANA zone used for display timestamps instead of the guessed local zone.
        local_time: When false, timestamps are shown in UTC without a zone suffix.
        web_root: Directory the `build` command writes pages into.
    """
    api_url: str = Field(default=DEFAULT_API_URL, alias="DAYLINE_API_URL")
    request_timeout: float = Field(default=20.0, gt=0, alias="DAYLINE_REQUEST_TIMEOUT")
    timezone: Optional[str] = Field(default=None, alias="DAYLINE_TIMEZONE")
    local_time: bool = Field(default=True, alias="DAYLINE_LOCAL_TIME")
    web_root: Path = Field(default=Path("outputs/dashboard"), alias="DAYLINE_WEB_ROOT")

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("api_url")
    @classmethod
    def _check_api_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("api_url must be an http(s) URL")
        return value

    @field_validator("timezone")
    @classmethod
    def _blank_timezone_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.

    Raises:
        ConfigError: If a variable holds an invalid value.
    """
    values = {
        field.alias: os.getenv(field.alias)
        for field in Settings.model_fields.values()
        if os.getenv(field.alias) is not None
    }
    try:
        return Settings(**values)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
