"""Inspector configuration models.

Pydantic models describing how raw tags are interpreted and how results
are logged. Loaded from YAML via
[load_yaml()][nostrtags.core.yaml.load_yaml]; every field has a default so
an empty file (or no file) yields a working configuration.

Examples:
    ```yaml
    relay:
      allow_local: false
    logging:
      level: INFO
      json_output: false
    ```

See Also:
    [TagInspector][nostrtags.services.inspector.TagInspector]: The
        component that consumes this configuration.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from nostrtags.exceptions import ConfigurationError

from .yaml import load_yaml


class RelayConfig(BaseModel):
    """Relay hint validation policy."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    allow_local: bool = Field(
        default=False,
        description="Accept relay hints pointing to localhost or private networks",
    )


class LoggingConfig(BaseModel):
    """Log output settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    json_output: bool = Field(default=False, description="Emit JSON log lines")


class InspectorConfig(BaseModel):
    """Top-level configuration for tag inspection.

    See Also:
        [RelayConfig][nostrtags.core.config.RelayConfig],
        [LoggingConfig][nostrtags.core.config.LoggingConfig]: Nested sections.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    relay: RelayConfig = Field(default_factory=RelayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InspectorConfig:
        """Validate a configuration dictionary.

        Raises:
            ConfigurationError: If the dictionary does not match the schema.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid inspector configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str) -> InspectorConfig:
        """Load and validate a YAML configuration file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the YAML or the schema is invalid.
        """
        return cls.from_dict(load_yaml(config_path))
