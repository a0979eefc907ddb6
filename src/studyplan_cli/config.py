"""Configuration management for the study planner CLI."""

import json
import os
from pathlib import Path
from typing import Any, Literal, Optional

from platformdirs import user_config_dir, user_data_dir, user_log_dir
from pydantic import BaseModel, Field, field_validator

APP_DIR_NAME = "studyplan-cli"
DATA_DIR_ENV = "STUDYPLAN_DATA_DIR"


class StorageConfig(BaseModel):
    """Storage configuration."""

    # Empty means the platform user data directory
    data_dir: str = Field(default="")


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="table")
    color: bool = Field(default=True)
    date_format: str = Field(default="%b %d, %Y")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    # Empty means <data dir>/logs under STUDYPLAN_DATA_DIR, else user_log_dir
    dir: str = Field(default="")

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class Config(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages study planner configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir(APP_DIR_NAME))
        self.default_data_dir = Path(user_data_dir(APP_DIR_NAME))
        self.default_log_dir = Path(user_log_dir(APP_DIR_NAME))
        self.config_file = self.config_dir / "config.json"

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def data_dir(self) -> Path:
        """Directory holding tasks.json and notes.json."""
        override = os.environ.get(DATA_DIR_ENV)
        if override:
            return Path(override).expanduser()
        if self.config.storage.data_dir:
            return Path(self.config.storage.data_dir).expanduser()
        return self.default_data_dir

    @property
    def log_dir(self) -> Path:
        """Directory holding studyplan.log.

        A data directory chosen through STUDYPLAN_DATA_DIR keeps its own
        logs beside it, so separate planners do not share a log file.
        """
        if self.config.logging.dir:
            return Path(self.config.logging.dir).expanduser()
        if os.environ.get(DATA_DIR_ENV):
            return self.data_dir / "logs"
        return self.default_log_dir

    def load_config(self) -> Config:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return Config(**data)
            except Exception:
                # If config is corrupted, return default
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration value
            pydantic.ValidationError: If the value has the wrong type
        """
        if self.get(key) is None:
            raise KeyError(key)

        keys = key.split(".")
        config_dict = self.config.model_dump()

        # Navigate to the nested dictionary
        current = config_dict
        for k in keys[:-1]:
            current = current[k]

        # Set the value
        current[keys[-1]] = value

        # Reload config from the modified dictionary
        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = Config()
        else:
            # Reset specific key to default
            default_value = self.get_from_config(Config(), key)
            if default_value is not None:
                self.set(key, default_value)
        self.save_config()

    def get_from_config(self, config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        keys = key.split(".")
        value: Any = config
        for k in keys:
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
