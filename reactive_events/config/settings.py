"""
Global Event Settings

Centralized configuration for clocks, default throttling and logging, with
validation handled by pydantic.
"""

from typing import Any, Callable, Dict, Literal, Optional
import json
import logging
import os
import time

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "REACTIVE_EVENTS_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Global event settings"""

    model_config = ConfigDict(validate_assignment=True)

    clock: Literal["monotonic", "wall"] = Field(
        default="monotonic", description="Time source used for action intervals"
    )
    default_interval: float = Field(
        default=0,
        ge=0,
        description="Interval applied when add_action is called without one",
    )
    log_level: str = Field(default="WARNING", description="Level for event loggers")
    debug: bool = Field(default=False, description="Force DEBUG logging")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def effective_log_level(self) -> str:
        return logging.getLevelName(logging.DEBUG) if self.debug else self.log_level

    def get_clock(self) -> Callable[[], float]:
        """Return the configured time source"""
        return time.monotonic if self.clock == "monotonic" else time.time

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    def save_to_file(self, file_path: str) -> None:
        """Save current settings to a JSON file"""
        with open(file_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, file_path: str) -> "Settings":
        """Load settings from a JSON file"""
        with open(file_path, "r") as f:
            data = json.load(f)
        return cls.model_validate(data)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from REACTIVE_EVENTS_* variables, reading .env first"""
        dotenv.load_dotenv()

        values: Dict[str, Any] = {}
        for field_name in cls.model_fields:
            raw = os.environ.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None:
                values[field_name] = raw
        return cls.model_validate(values)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def initialize_settings(config_file: Optional[str] = None, **overrides) -> Settings:
    """Initialize settings with optional config file and overrides"""
    global _settings

    if config_file and os.path.exists(config_file):
        _settings = Settings.load_from_file(config_file)
    else:
        _settings = Settings.from_env()

    for key, value in overrides.items():
        if key in Settings.model_fields:
            setattr(_settings, key, value)

    return _settings


def reset_settings() -> None:
    """Reset settings to default (useful for testing)"""
    global _settings
    _settings = None
