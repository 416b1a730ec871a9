"""
Engine configuration.

Configuration is a plain dataclass built from defaults in ``constants``, an
optional JSON file and ``RDFMETA_*`` environment variables (highest
precedence).

Example config.json:
    {
        "max_list_nodes": 5000,
        "force_large_input": false,
        "default_base_uri": "https://example.org/records/",
        "prefixes": {"schema": "http://schema.org/"},
        "logging": {"level": "DEBUG", "format": "json"}
    }
"""

import json
import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from ..constants import EnvVars, LoggingConfig, ProcessingLimits
from .validators import InputValidator

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class EngineConfig:
    """Runtime settings for parsing, writing and list traversal."""
    max_list_nodes: int = ProcessingLimits.MAX_LIST_NODES
    force_large_input: bool = False
    default_base_uri: Optional[str] = None
    prefixes: Dict[str, str] = field(default_factory=dict)
    logging: Dict[str, Any] = field(default_factory=lambda: {"level": LoggingConfig.DEFAULT_LOG_LEVEL})

    def __post_init__(self) -> None:
        self.max_list_nodes = InputValidator.validate_max_nodes(self.max_list_nodes)
        if not isinstance(self.prefixes, dict):
            raise TypeError(f"prefixes must be a mapping, got {type(self.prefixes).__name__}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineConfig":
        """
        Build a config from a dictionary. Unknown keys are ignored with a warning.

        Raises:
            TypeError: If data is not a mapping or a value has the wrong type
            ValueError: If a value is out of range
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Configuration must be a JSON object, got {type(data).__name__}")

        known = {"max_list_nodes", "force_large_input", "default_base_uri", "prefixes", "logging"}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")

        kwargs = {key: data[key] for key in known if key in data}
        if "logging" in kwargs and not isinstance(kwargs["logging"], dict):
            raise TypeError("logging configuration must be a JSON object")
        return cls(**kwargs)

    @classmethod
    def from_env(cls, base: Optional["EngineConfig"] = None, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Apply ``RDFMETA_*`` environment overrides on top of ``base``."""
        env = os.environ if environ is None else environ
        if base is None:
            config = cls()
        else:
            config = replace(base, prefixes=dict(base.prefixes), logging=dict(base.logging))

        raw_nodes = env.get(EnvVars.MAX_LIST_NODES)
        if raw_nodes:
            try:
                config.max_list_nodes = InputValidator.validate_max_nodes(int(raw_nodes))
            except ValueError as e:
                raise ValueError(f"Invalid {EnvVars.MAX_LIST_NODES}={raw_nodes!r}: {e}") from e

        raw_force = env.get(EnvVars.FORCE_LARGE_INPUT)
        if raw_force:
            config.force_large_input = raw_force.strip().lower() in _TRUE_VALUES

        raw_level = env.get(EnvVars.LOG_LEVEL)
        if raw_level:
            config.logging = {**config.logging, "level": raw_level.strip().upper()}

        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_list_nodes": self.max_list_nodes,
            "force_large_input": self.force_large_input,
            "default_base_uri": self.default_base_uri,
            "prefixes": dict(self.prefixes),
            "logging": dict(self.logging),
        }


def load_config(config_path: str, apply_env: bool = True) -> EngineConfig:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file
        apply_env: If True, environment overrides are applied after the file

    Returns:
        The loaded EngineConfig

    Raises:
        ValueError: If config_path is empty or the file contains invalid JSON
        FileNotFoundError: If the configuration file doesn't exist
        PermissionError: If the file cannot be read or is a symlink
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    validated_path = InputValidator.validate_config_file_path(config_path)

    try:
        with open(validated_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in configuration file {validated_path}: "
            f"line {e.lineno}, column {e.colno}: {e.msg}"
        ) from e

    config = EngineConfig.from_dict(data)
    logger.debug(f"Loaded configuration from {validated_path}")

    if apply_env:
        config = EngineConfig.from_env(config)
    return config
