from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

# Load .env file from project root
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


_TRUTHY = {"true", "1", "yes"}


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(4443, ge=1, le=65535)
    manifest: Path | None = None
    log_level: str = "INFO"
    json_logging: bool = False
    log_file: Path | None = None

    @field_validator("manifest", "log_file", mode="before")
    @classmethod
    def _blank_path_is_none(cls, value: Any) -> Any:  # noqa: D401
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:  # noqa: D401
        return value.strip().upper()

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables.

        Recognised variables: ``GCS_MOCK_HOST``, ``GCS_MOCK_PORT``,
        ``GCS_MOCK_MANIFEST``, ``LOG_LEVEL``, ``JSON_LOGGING`` and ``LOG_FILE``.
        Unset variables keep the model defaults.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        env_fields = {
            "host": "GCS_MOCK_HOST",
            "port": "GCS_MOCK_PORT",
            "manifest": "GCS_MOCK_MANIFEST",
            "log_level": "LOG_LEVEL",
            "log_file": "LOG_FILE",
        }
        payload: dict[str, Any] = {}
        for field_name, env_name in env_fields.items():
            value = os.getenv(env_name)
            if value:
                payload[field_name] = value
        payload["json_logging"] = os.getenv("JSON_LOGGING", "false").lower() in _TRUTHY
        try:
            return cls(**payload)
        except ValidationError as exc:
            raise ValueError(f"Invalid configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


__all__ = ["Settings", "get_settings"]
