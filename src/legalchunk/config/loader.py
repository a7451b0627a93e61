"""Configuration loader for legalchunk.

Resolves a ChunkerConfig from CLI options, an optional YAML file,
LEGALCHUNK_* environment variables (with .env support) and built-in
defaults.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError as PydanticValidationError

from legalchunk.config.defaults import DEFAULT_CHUNKER_CONFIG, ENV_VAR_MAP
from legalchunk.config.validator import (
    flatten_pydantic_errors,
    parse_bool,
    parse_positive_int,
)
from legalchunk.lib.errors import ConfigError, FileNotFoundError, ValidationError
from legalchunk.lib.logging_config import get_logger
from legalchunk.models.config import ChunkerConfig

logger = get_logger(__name__)

# Config files may nest settings under this key or keep them at top level
CONFIG_SECTION = "chunker"


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse an environment variable value to the field's type.

    Raises:
        ValidationError: If value cannot be parsed
    """
    if field_name == "split_oversized_units":
        return parse_bool(field_name, value)
    return parse_positive_int(field_name, value)


def _get_env_value(field_name: str, env_vars: Mapping[str, str]) -> Any | None:
    """Get the environment override for a field.

    Args:
        field_name: ChunkerConfig field name
        env_vars: Environment variables mapping

    Returns:
        Parsed value, or None if unset or invalid
    """
    env_var_name = ENV_VAR_MAP.get(field_name)
    if not env_var_name or env_var_name not in env_vars:
        return None

    try:
        return _parse_env_value(field_name, env_vars[env_var_name])
    except ValidationError as e:
        logger.warning(f"Ignoring {env_var_name}: {e.message} ({e.actual})")
        return None


class ConfigLoader:
    """Loads and resolves chunker configuration.

    Configuration priority (highest to lowest):
    1. CLI options
    2. YAML config file
    3. Environment variables (LEGALCHUNK_* and .env)
    4. Built-in defaults
    """

    def __init__(self, env_file: str | Path | None = None) -> None:
        """Initialize the loader.

        Args:
            env_file: Optional .env file to load. When None, the nearest .env
                from the working directory upwards is used. Variables already set
                in the environment are not overridden.
        """
        self._env_file = env_file
        self._env_loaded = False

    def _load_env(self) -> None:
        if self._env_loaded:
            return
        env_file = self._env_file or find_dotenv(usecwd=True)
        if env_file:
            logger.debug(f"Loading environment from {env_file}")
            load_dotenv(dotenv_path=env_file, override=False)
        self._env_loaded = True

    def parse_yaml(self, file_path: str | Path) -> dict[str, Any]:
        """Parse a YAML config file into the chunker settings mapping.

        Args:
            file_path: Path to the YAML file

        Returns:
            Settings mapping; empty when the file is empty

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If YAML parsing fails or the content is not a mapping
        """
        path = Path(file_path)

        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise FileNotFoundError(
                str(file_path),
                f"Configuration file not found at {file_path}. "
                f"Please ensure the file exists at this path.",
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse",
                f"Failed to parse YAML file {file_path}: {str(e)}",
            ) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(
                "yaml_parse",
                f"Expected a mapping in {file_path}, got {type(content).__name__}",
            )

        section = content.get(CONFIG_SECTION, content)
        if not isinstance(section, dict):
            raise ConfigError(
                CONFIG_SECTION,
                f"Expected '{CONFIG_SECTION}' to be a mapping in {file_path}",
            )
        return dict(section)

    def load_config(
        self,
        config_path: str | Path | None = None,
        cli_overrides: Mapping[str, Any] | None = None,
    ) -> ChunkerConfig:
        """Resolve a ChunkerConfig.

        Args:
            config_path: Optional YAML config file
            cli_overrides: Values given on the command line; None entries
                are treated as not given

        Returns:
            Validated ChunkerConfig

        Raises:
            FileNotFoundError: If config_path does not exist
            ConfigError: If the file cannot be parsed or values are invalid
        """
        self._load_env()

        file_values: dict[str, Any] = {}
        if config_path is not None:
            logger.debug(f"Loading chunker configuration from {config_path}")
            file_values = self.parse_yaml(config_path)

        cli_values = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
        resolved: dict[str, Any] = {}

        for field in ChunkerConfig.model_fields:
            # Priority 1: CLI option
            if field in cli_values:
                resolved[field] = cli_values[field]
            # Priority 2: YAML config file
            elif field in file_values:
                resolved[field] = file_values[field]
            # Priority 3: Environment variable
            elif (env_value := _get_env_value(field, os.environ)) is not None:
                resolved[field] = env_value
            # Priority 4: Built-in default
            else:
                resolved[field] = DEFAULT_CHUNKER_CONFIG[field]

        unknown = sorted(set(file_values) - set(ChunkerConfig.model_fields))
        for key in unknown:
            resolved[key] = file_values[key]

        try:
            config = ChunkerConfig(**resolved)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            source = config_path or "command line / environment"
            raise ConfigError(
                "chunker_validation",
                f"Invalid chunker configuration ({source}):\n{error_text}",
            ) from e

        logger.debug(f"Resolved chunker configuration: {config.model_dump()}")
        return config
