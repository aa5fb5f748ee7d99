"""Core layer: logging and configuration shared by services and the CLI.

Sits between [nostrtags.models][] and [nostrtags.services][] and depends
only on the models layer and [nostrtags.exceptions][].

Attributes:
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][nostrtags.core.logger.Logger].
    InspectorConfig: Pydantic configuration for tag inspection.
        See [InspectorConfig][nostrtags.core.config.InspectorConfig].
    YAML: Safe YAML loading with ``yaml.safe_load()`` to prevent code execution.
        See [load_yaml()][nostrtags.core.yaml.load_yaml].
"""

from .config import InspectorConfig, LoggingConfig, RelayConfig
from .logger import Logger, StructuredFormatter
from .yaml import load_yaml


__all__ = [
    "InspectorConfig",
    "Logger",
    "LoggingConfig",
    "RelayConfig",
    "StructuredFormatter",
    "load_yaml",
]
