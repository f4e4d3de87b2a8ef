# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Configuration loader for the catalog client factory
Loads catalog properties from a JSON or YAML file, with environment overrides
"""
import json
import os
import time
from pathlib import Path
from typing import Any, Dict, Optional
import logging

import yaml

from .config_types import ENV_VAR_MAPPINGS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'icebergaws/.config/config.json'


def _property_value(value: Any) -> str:
    """Render a parsed config value the way it would appear in a properties file"""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class ConfigLoader:
    """Configuration loader for the catalog client factory"""

    def __init__(self):
        self._cache: Optional[Dict[str, Any]] = None
        self._cache_time: float = 0
        self.CACHE_TTL = 300  # 5 minutes
        self._client_factory = None

    def get_config_path(self) -> Path:
        """CONFIG_PATH environment variable, else the local development config"""
        return Path(os.environ.get('CONFIG_PATH', DEFAULT_CONFIG_PATH))

    def load_config(self) -> Dict[str, Any]:
        """
        Load configuration from CONFIG_PATH

        - Local development: icebergaws/.config/config.json
        - Deployed: any .json/.yaml/.yml file named by CONFIG_PATH
        """
        if self._cache and (time.time() - self._cache_time) < self.CACHE_TTL:
            return self._cache

        config_path = self.get_config_path()
        try:
            with open(config_path, 'r') as f:
                if config_path.suffix in ('.yaml', '.yml'):
                    config = yaml.safe_load(f)
                else:
                    config = json.load(f)
            logger.info(f"Loaded config from: {config_path}")

            if not isinstance(config, dict) or 'catalog' not in config:
                raise ValueError("Invalid config: missing catalog section")

            self._cache = config
            self._cache_time = time.time()

            return config

        except Exception as error:
            logger.error(f"Failed to load configuration: {error}")
            logger.error(f"  Configuration path checked: {config_path}")
            logger.error("  Set CONFIG_PATH to a valid .json or .yaml config file")
            raise RuntimeError(f"Configuration not found or invalid: {error}") from error

    def load_properties(self) -> Dict[str, str]:
        """
        Get the flat catalog property map

        Values are rendered as strings. Credential properties can be
        overridden by environment variables, e.g. 'aws.s3.region' by AWS_S3_REGION.
        """
        config = self.load_config()
        raw_properties = config['catalog'].get('properties') or {}
        if not isinstance(raw_properties, dict):
            raise RuntimeError("Invalid config: catalog.properties must be a mapping")

        properties = {
            str(key): _property_value(value)
            for key, value in raw_properties.items()
            if value is not None
        }

        for key, env_var in ENV_VAR_MAPPINGS.items():
            if env_var in os.environ:
                logger.debug(f"Property {key} overridden by environment variable {env_var}")
                properties[key] = os.environ[env_var]

        return properties

    def clear_cache(self) -> None:
        """Clear configuration cache"""
        self._cache = None
        self._cache_time = 0
        self._client_factory = None

    def get_client_factory(self):
        """
        Get the initialized AwsClientFactory (singleton)

        Returns:
            AwsClientFactory built from load_properties()
        """
        if self._client_factory is None:
            from .client_factory import AwsClientFactory
            self._client_factory = AwsClientFactory(self.load_properties())
        return self._client_factory

# Export singleton instance
config_loader = ConfigLoader()
