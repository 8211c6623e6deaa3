"""Configuration management for overlap-chunk using Pydantic v2."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Type, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    EnvSettingsSource,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SecretsSettingsSource,
    SettingsConfigDict,
)

from .chunking import clamp_overlap_percentage
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "OVERLAP_CHUNK_"

DEFAULT_CHUNK_SIZE = 100
DEFAULT_OVERLAP_PERCENTAGE = 0

# Searched in order when no config file is given explicitly
DEFAULT_CONFIG_PATHS = [
    Path("overlap-chunk.yaml"),
    Path("~/.config/overlap-chunk/config.yaml").expanduser(),
]

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ChunkOptions(BaseModel):
    """Options for a single chunking call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    overlap_percentage: int = Field(
        default=DEFAULT_OVERLAP_PERCENTAGE,
        description="Overlap between neighbouring chunks in percent of the chunk size (0-100)",
    )

    @field_validator("overlap_percentage")
    @classmethod
    def saturate_overlap(cls, v: int) -> int:
        """Bring out-of-range percentages back into 0-100 instead of rejecting them."""
        return clamp_overlap_percentage(v)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Logging level")
    file: Optional[Path] = Field(None, description="Path to log file")
    max_size: int = Field(
        10 * 1024 * 1024, description="Maximum log file size in bytes"
    )
    backup_count: int = Field(5, description="Number of backup log files to keep")
    format: str = Field(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s",
        description="Log message format for the log file",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(
                "level must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        return v

    @field_validator("file", mode="before")
    @classmethod
    def resolve_log_file(cls, v: Optional[Union[str, Path]]) -> Optional[Path]:
        if v is None or v == "":
            return None
        return Path(v).expanduser()


class AppConfig(BaseSettings):
    """Application configuration.

    Values come from keyword arguments (a YAML file is loaded this way), then
    ``OVERLAP_CHUNK_*`` environment variables, then the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    chunk_size: int = Field(
        DEFAULT_CHUNK_SIZE, gt=0, description="Chunk size in codepoints"
    )
    overlap_percentage: int = Field(
        DEFAULT_OVERLAP_PERCENTAGE,
        ge=0,
        le=100,
        description="Overlap between neighbouring chunks in percent",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: InitSettingsSource,
        env_settings: EnvSettingsSource,
        dotenv_settings: DotEnvSettingsSource,
        file_secret_settings: SecretsSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
        )

    def chunk_options(self) -> ChunkOptions:
        """Build the :class:`ChunkOptions` described by this configuration."""
        return ChunkOptions(overlap_percentage=self.overlap_percentage)

    @classmethod
    def from_yaml(cls, file_path: Union[str, Path]) -> "AppConfig":
        """Load configuration from a YAML file.

        Args:
            file_path: Path to the YAML configuration file.

        Returns:
            An instance of AppConfig with settings from the file.

        Raises:
            ConfigurationError: If the file cannot be read, parsed or validated.
        """
        file_path = Path(file_path).expanduser().resolve()
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {file_path}: {e}"
            ) from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration file {file_path} must contain a mapping"
            )

        try:
            return cls(**config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {file_path}: {e}") from e

    def to_yaml(self, file_path: Union[str, Path]) -> None:
        """Save configuration to a YAML file.

        Args:
            file_path: Path to save the YAML configuration to.
        """
        file_path = Path(file_path).expanduser().resolve()
        file_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self.model_dump(mode="json")

        with open(file_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False)

    def update_from_dict(self, data: Dict[str, Any]) -> "AppConfig":
        """Return a copy with the given non-``None`` values applied.

        Args:
            data: Dictionary of configuration values to update.
        """
        updates = {k: v for k, v in data.items() if v is not None and k in type(self).model_fields}
        if not updates:
            return self
        try:
            return type(self)(**{**self.model_dump(), **updates})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration override: {e}") from e


def load_config(config_path: Optional[Union[str, Path]] = None) -> AppConfig:
    """Load application configuration.

    Args:
        config_path: Optional path to a YAML config file.

    Returns:
        Loaded AppConfig instance.

    Raises:
        ConfigurationError: If an explicit config file is missing or any config
            file is invalid.
    """
    # If config_path is provided, use it exclusively
    if config_path:
        config_path = Path(config_path).expanduser().resolve()
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")
        logger.info(f"Loading configuration from {config_path}")
        return AppConfig.from_yaml(config_path)

    # Otherwise, try default paths
    for path in DEFAULT_CONFIG_PATHS:
        if path.exists():
            logger.info(f"Found config file at: {path}")
            return AppConfig.from_yaml(path)

    logger.debug("No configuration file found, using defaults")
    try:
        return AppConfig()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration from environment: {e}") from e
