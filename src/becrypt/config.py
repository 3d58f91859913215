"""
Configuration management for becrypt using Pydantic.

Configuration is optional. When the `BECRYPT_CONFIG` environment
variable names a YAML file it is loaded and validated; otherwise the
defaults below apply.
"""

import logging
import os
from pathlib import Path
from typing import Any, List, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError

# Constants
CONFIG_ENV_VAR = "BECRYPT_CONFIG"
MIN_COST = 4
MAX_COST = 31
DEFAULT_COST = 10
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class HashingConfig(BaseModel):
    """Hash generation configuration."""

    default_cost: int = Field(default=DEFAULT_COST, ge=MIN_COST, le=MAX_COST)


class PromptConfig(BaseModel):
    """Interactive password prompt configuration."""

    confirm: bool = False
    attempts: int = Field(default=3, ge=1)


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: str = "becrypt.log"
    max_size: str = "1MB"
    backup_count: int = 3


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: str = _LOG_FORMAT
    file: FileLoggingConfig = Field(default_factory=FileLoggingConfig)

    @field_validator("level")  # type: ignore[misc]
    @classmethod
    def check_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class Config(BaseModel):
    """Main configuration class."""

    hashing: HashingConfig = Field(default_factory=HashingConfig)
    prompt: PromptConfig = Field(default_factory=PromptConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_path: str) -> "Config":
        """
        Load configuration from a YAML file.
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML configuration: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read configuration: {e}") from e

        # An empty file means "all defaults"
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError("Config file must be a dictionary")

        try:
            return cls.model_validate(data)  # type: ignore[no-any-return]
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Load configuration from the file named by `BECRYPT_CONFIG`, if any.
        """
        if environ is None:
            environ = os.environ

        config_path = environ.get(CONFIG_ENV_VAR, "").strip()
        if not config_path:
            return cls()
        return cls.from_file(config_path)

    def setup_logging(self) -> None:
        """
        Configure logging based on the configuration.

        Log records always go to stderr; stdout is reserved for results.
        """
        log_level = getattr(logging, self.logging.level.upper(), logging.WARNING)

        handlers: List[logging.Handler] = [logging.StreamHandler()]

        if self.logging.file.enabled:
            log_path = Path(self.logging.file.path)
            try:
                log_path.parent.mkdir(parents=True, exist_ok=True)

                from logging.handlers import RotatingFileHandler

                file_handler = RotatingFileHandler(
                    log_path,
                    maxBytes=parse_size(self.logging.file.max_size),
                    backupCount=self.logging.file.backup_count,
                )
                file_handler.setFormatter(logging.Formatter(self.logging.format))
                handlers.append(file_handler)
            except OSError as e:
                # Fall back to stderr only (e.g. permissions)
                logging.getLogger(__name__).warning(
                    f"Failed to setup file logging: {e}"
                )

        logging.basicConfig(
            level=log_level,
            format=self.logging.format,
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
            force=True,
        )


def parse_size(size: str, default: int = 1024 * 1024) -> int:
    """
    Parse a size such as "500K", "10MB" or "2048" into bytes.

    Unparseable values fall back to `default`.
    """
    size_str = size.strip().upper()
    try:
        if size_str.endswith("KB") or size_str.endswith("K"):
            return int(float(size_str.rstrip("KB")) * 1024)
        if size_str.endswith("MB") or size_str.endswith("M"):
            return int(float(size_str.rstrip("MB")) * 1024 * 1024)
        return int(size_str)
    except ValueError:
        return default
