"""YAML configuration loading and validation.

This module handles loading and saving converter configuration from YAML
files. A missing default configuration file is normal and yields the
defaults; a missing file that was asked for explicitly is an error.
The config path can also be supplied through the MDLITE_CONFIG
environment variable (a .env file is honoured via python-dotenv).
"""

import codecs
import logging
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .errors import ConfigError, ConfigNotFoundError, FilesystemError
from .models import ConverterConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Handles configuration file loading, validation, and saving.

    Configuration file structure:
        encoding: utf-8
        output_suffix: .html
        output_dir: ./site
        overwrite: false

    All fields are optional; unknown fields are ignored.
    """

    DEFAULT_CONFIG_DIR = '.mdlite'
    DEFAULT_CONFIG_FILE = 'config.yaml'
    CONFIG_ENV_VAR = 'MDLITE_CONFIG'

    # Default values for optional fields
    DEFAULTS = {
        'encoding': 'utf-8',
        'output_suffix': '.html',
        'output_dir': None,
        'overwrite': False,
    }

    @classmethod
    def default_path(cls) -> str:
        """Return the default config path relative to the working directory."""
        return os.path.join(cls.DEFAULT_CONFIG_DIR, cls.DEFAULT_CONFIG_FILE)

    @classmethod
    def resolve(cls, config_path: Optional[str] = None) -> ConverterConfig:
        """Load configuration from an explicit path, MDLITE_CONFIG, or the default.

        Args:
            config_path: Path given on the command line, if any

        Returns:
            ConverterConfig (defaults when no file is configured or present)

        Raises:
            ConfigNotFoundError: If an explicitly named file does not exist
            ConfigError: If the configuration is invalid
            FilesystemError: If the file exists but cannot be read
        """
        load_dotenv()

        explicit_path = config_path or os.getenv(cls.CONFIG_ENV_VAR)
        if explicit_path:
            if not os.path.exists(explicit_path):
                raise ConfigNotFoundError(explicit_path)
            return cls.load(explicit_path)

        default_path = cls.default_path()
        if not os.path.exists(default_path):
            logger.debug(f"No config file at {default_path}, using defaults")
            return ConverterConfig()
        return cls.load(default_path)

    @classmethod
    def load(cls, config_path: str) -> ConverterConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ConverterConfig object with parsed configuration

        Raises:
            FilesystemError: If file cannot be read
            ConfigError: If configuration is invalid or malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise FilesystemError(
                config_path,
                'read',
                'Configuration file not found'
            )
        except PermissionError:
            raise FilesystemError(
                config_path,
                'read',
                'Permission denied'
            )
        except UnicodeDecodeError as e:
            raise ConfigError(
                f"Configuration file is not valid UTF-8: {e.reason}"
            )
        except OSError as e:
            raise FilesystemError(
                config_path,
                'read',
                str(e)
            )

        # Empty file means "all defaults"
        if not content.strip():
            return ConverterConfig()

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML syntax: {str(e)}"
            )

        if config_dict is None:
            return ConverterConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        logger.info(f"Loaded configuration from {config_path}")
        return cls._parse_config(config_dict)

    @classmethod
    def save(cls, config_path: str, config: ConverterConfig) -> None:
        """Save configuration to a YAML file.

        Args:
            config_path: Path to the YAML configuration file
            config: ConverterConfig object to save

        Raises:
            FilesystemError: If file cannot be written
        """
        config_dict = {
            'encoding': config.encoding,
            'output_suffix': config.output_suffix,
            'output_dir': config.output_dir,
            'overwrite': config.overwrite,
        }

        yaml_str = yaml.safe_dump(
            config_dict,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )

        config_dir = os.path.dirname(config_path)
        if config_dir:
            try:
                os.makedirs(config_dir, exist_ok=True)
            except OSError as e:
                raise FilesystemError(
                    config_dir,
                    'create_directory',
                    str(e)
                )

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                f.write(yaml_str)
        except PermissionError:
            raise FilesystemError(
                config_path,
                'write',
                'Permission denied'
            )
        except OSError as e:
            raise FilesystemError(
                config_path,
                'write',
                str(e)
            )

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> ConverterConfig:
        """Parse and validate configuration dictionary.

        Args:
            config_dict: Raw configuration dictionary from YAML

        Returns:
            Validated ConverterConfig object

        Raises:
            ConfigError: If configuration is invalid
        """
        encoding = config_dict.get('encoding', cls.DEFAULTS['encoding'])
        output_suffix = config_dict.get('output_suffix', cls.DEFAULTS['output_suffix'])
        output_dir = config_dict.get('output_dir', cls.DEFAULTS['output_dir'])
        overwrite = config_dict.get('overwrite', cls.DEFAULTS['overwrite'])

        if not isinstance(encoding, str) or not encoding.strip():
            raise ConfigError(
                "Field must be a non-empty string",
                'encoding'
            )
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ConfigError(
                f"Unknown encoding '{encoding}'",
                'encoding'
            )

        if not isinstance(output_suffix, str) or not output_suffix.startswith('.'):
            raise ConfigError(
                f"Suffix must be a string starting with '.', got {output_suffix!r}",
                'output_suffix'
            )
        if len(output_suffix) < 2:
            raise ConfigError(
                "Suffix cannot be just '.'",
                'output_suffix'
            )

        if output_dir is not None:
            if not isinstance(output_dir, str) or not output_dir.strip():
                raise ConfigError(
                    "Field must be a non-empty string or null",
                    'output_dir'
                )

        if not isinstance(overwrite, bool):
            raise ConfigError(
                f"Field must be true or false, got {overwrite!r}",
                'overwrite'
            )

        return ConverterConfig(
            encoding=encoding,
            output_suffix=output_suffix,
            output_dir=output_dir,
            overwrite=overwrite
        )
