"""
Configuration management for propdoc.
"""
from typing import Any

from propdoc.core.error_handling import InvalidConfigurationError


class Configuration:
    """Configuration manager for propdoc."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Configuration, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Initialize the configuration with defaults."""
        self._config = {
            'source': {
                'extensions': ['.ts', '.tsx'],
                'exclude': ['index'],
                'encoding': 'utf-8',
            },
            'output': {
                'extension': '.mdx',
            },
            'render': {
                'cesium_doc_url': 'https://cesiumjs.org/Cesium/Build/Documentation',
                'menu': 'Components',
            },
            'events': {
                'mapping_name': 'cesiumEventProps',
            },
            'parsing': {
                'cache_size': 128,
            },
            'logging': {
                'level': 'WARNING',
            }
        }

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        try:
            return self._config[section][key]
        except KeyError:
            return default

    def set(self, section: str, key: str, value: Any):
        """Set a configuration value."""
        if section == 'output' and key == 'extension' and not str(value).startswith('.'):
            raise InvalidConfigurationError(f'{section}.{key}', value, "extension must start with '.'")
        if section not in self._config:
            self._config[section] = {}
        self._config[section][key] = value

    def reset(self):
        """Restore the defaults."""
        self._initialize()

# Initialize configuration
config = Configuration()
