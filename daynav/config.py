from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .conversion import get_zoneinfo

DEFAULT_CONFIG_PATH = "configuration.yaml"


class OutputConfig(BaseModel):
    show_weekday_label: bool = True
    # passed straight to datetime.isoformat(timespec=...)
    timespec: str = "auto"

    @field_validator("timespec")
    @classmethod
    def _validate_timespec(cls, v: str) -> str:
        allowed = {"auto", "hours", "minutes", "seconds", "milliseconds", "microseconds"}
        if v not in allowed:
            raise ValueError(f"output.timespec must be one of {sorted(allowed)}, got: {v}")
        return v


class Settings(BaseSettings):
    """
    Loads configuration from:
    1) configuration.yaml (repo-level, non-secret)
    2) .env (local dev convenience)
    3) environment variables (deployment overrides)
    4) init kwargs

    Later entries override earlier ones.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
        populate_by_name=True,
    )

    # --- Global runtime ---
    env: str = Field(default="dev", validation_alias="ENV")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # --- Navigation defaults ---
    default_timezone: Optional[str] = Field(default=None, validation_alias="DEFAULT_TIMEZONE")
    output: OutputConfig = Field(default_factory=OutputConfig)

    config_path: str = Field(default=DEFAULT_CONFIG_PATH, validation_alias="CONFIG_PATH")

    @field_validator("env")
    @classmethod
    def _validate_env(cls, v: str) -> str:
        allowed = {"dev", "prod", "test"}
        if v not in allowed:
            raise ValueError(f"ENV must be one of {sorted(allowed)}, got: {v}")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Priority order for settings sources.
        pydantic-settings gives earlier sources precedence: INIT > ENV > DOTENV > YAML
        """
        def yaml_source() -> Dict[str, Any]:
            init_kwargs = getattr(init_settings, "init_kwargs", {}) or {}
            path = (
                init_kwargs.get("config_path")
                or init_kwargs.get("CONFIG_PATH")
                or os.environ.get("CONFIG_PATH")
                or DEFAULT_CONFIG_PATH
            )
            return _load_yaml_config(path)

        return (
            init_settings,      # test/manual overrides (highest priority)
            env_settings,       # deployment environment variables
            dotenv_settings,    # local .env file
            yaml_source,        # lowest priority (base config from YAML)
        )

    def validate_runtime(self) -> None:
        """
        Fail fast if the configured default timezone does not resolve.
        """
        if self.default_timezone is not None:
            get_zoneinfo(self.default_timezone)


def _load_yaml_config(path: str) -> Dict[str, Any]:
    """
    Load configuration.yaml content.
    If the file does not exist, return an empty dict (env + defaults still work).
    """
    p = Path(path)
    if not p.exists():
        return {}

    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a YAML mapping/object at top-level")
    return data


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Main entrypoint used by the CLI.
    Returns validated Settings with env > yaml override behavior.
    """
    if config_path is None:
        return Settings()
    return Settings(config_path=config_path)
