"""Settings model for keymapdoc."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class KeymapDocSettings(BaseSettings):
    """Settings with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (KEYMAPDOC_*)
    2. Constructor arguments (file data)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="KEYMAPDOC_",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override values read from the config file."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    # Logging
    log_level: str = Field(default="WARNING", description="Console log level")
    log_file: Path | None = Field(
        default=None, description="Optional JSON log file path"
    )
    json_logs: bool = Field(
        default=False, description="Render console logs as JSON lines"
    )

    # Parsing
    container_block: str = Field(
        default="keymap",
        description="Name of the block that holds the layer definitions",
    )
    placeholder: str = Field(
        default="---",
        description="Cell label used where a layer has no binding",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        upper_v = v.strip().upper()
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return upper_v

    @field_validator("container_block")
    @classmethod
    def validate_container_block(cls, v: str) -> str:
        """Block names are plain identifiers."""
        stripped = v.strip()
        if not stripped or not stripped.replace("_", "").isalnum():
            raise ValueError("container_block must be an identifier")
        return stripped

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_log_file(cls, v: Any) -> Path | None:
        if v is None or v == "":
            return None
        return Path(v).expanduser()
