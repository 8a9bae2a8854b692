"""Conversion option loading from YAML files and the environment.

Option values are resolved in layers, later layers winning:

    1. built-in CLI defaults (every flag on)
    2. YAML config file (.wiki2md.yaml in the working directory, or --config)
    3. environment variables (WIKI2MD_INCLUDE_TABLES, ...), with .env
       files loaded through python-dotenv
    4. explicit command-line flags

Config file structure:
    include_tables: true
    preserve_links: true
    include_images: false
    include_math: true
    include_frontmatter: false
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from wiki2md.cli.errors import ConfigError
from wiki2md.models.conversion_options import ConversionOptions

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Resolves ConversionOptions for a CLI run."""

    DEFAULT_CONFIG_FILE = '.wiki2md.yaml'

    # CLI default for every flag not set anywhere else
    DEFAULT_VALUE = True

    OPTION_FIELDS = tuple(ConversionOptions.WIRE_KEYS.values())

    ENV_VARS = {
        name: f"WIKI2MD_{name.upper()}" for name in OPTION_FIELDS
    }

    TRUE_VALUES = {'1', 'true', 'yes', 'on'}
    FALSE_VALUES = {'0', 'false', 'no', 'off'}

    @classmethod
    def load(
        cls,
        config_path: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
        overrides: Optional[Mapping[str, Optional[bool]]] = None,
    ) -> ConversionOptions:
        """Resolve conversion options.

        Args:
            config_path: Explicit YAML config file. When None, the default
                file is used if it exists.
            env: Environment mapping. When None, .env is loaded and
                os.environ is used.
            overrides: Command-line values; None entries are ignored

        Returns:
            ConversionOptions with every flag resolved

        Raises:
            ConfigError: If the config file or an environment value is invalid
        """
        values: Dict[str, bool] = {name: cls.DEFAULT_VALUE for name in cls.OPTION_FIELDS}

        values.update(cls._load_file(config_path))

        if env is None:
            load_dotenv(find_dotenv(usecwd=True))
            env = os.environ
        values.update(cls._load_env(env))

        for name, value in (overrides or {}).items():
            if value is not None:
                values[name] = value

        return ConversionOptions(**values)

    @classmethod
    def _load_file(cls, config_path: Optional[str]) -> Dict[str, bool]:
        if config_path is None:
            if not os.path.exists(cls.DEFAULT_CONFIG_FILE):
                return {}
            config_path = cls.DEFAULT_CONFIG_FILE

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found: {config_path}")
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}")

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            return {}

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        values = {}
        for key, value in config_dict.items():
            if key not in cls.OPTION_FIELDS:
                raise ConfigError("Unknown option", config_field=str(key))
            if not isinstance(value, bool):
                raise ConfigError(
                    f"Expected true or false, got {value!r}", config_field=key
                )
            values[key] = value

        logger.debug(f"Loaded {len(values)} option(s) from {config_path}")
        return values

    @classmethod
    def _load_env(cls, env: Mapping[str, str]) -> Dict[str, bool]:
        values = {}
        for name, var in cls.ENV_VARS.items():
            raw = env.get(var)
            if raw is None or raw.strip() == '':
                continue
            values[name] = cls.parse_bool(raw, var)
        return values

    @classmethod
    def parse_bool(cls, raw: Any, field_name: str) -> bool:
        """Parse a boolean from an environment string.

        Raises:
            ConfigError: If the value is not a recognised boolean
        """
        text = str(raw).strip().lower()
        if text in cls.TRUE_VALUES:
            return True
        if text in cls.FALSE_VALUES:
            return False
        raise ConfigError(f"Expected a boolean, got {raw!r}", config_field=field_name)
