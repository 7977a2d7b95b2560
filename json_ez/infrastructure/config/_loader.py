# json_ez/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from json_ez.core.types.json import JSONDict
from json_ez.infrastructure.config._models import AppConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader exposing the settings documents read at call time"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)

    @property
    def config(self) -> JSONDict:
        """Full config as dict"""
        return self._app_config.model_dump()

    @property
    def app_config(self) -> AppConfig:
        return self._app_config

    @property
    def strict(self) -> bool:
        """Whether typed retrieval rejects coercions"""
        return self._app_config.conversion.strict

    @property
    def indent(self) -> int | None:
        """Indentation used by encode()"""
        return self._app_config.encoding.indent

    @property
    def snapshot_max_length(self) -> int | None:
        """Clip length for snapshots in error messages"""
        return self._app_config.errors.snapshot_max_length

    @property
    def debug(self) -> bool:
        return self._app_config.logging.debug

    @property
    def log_file(self) -> str | None:
        return self._app_config.logging.log_file


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader()
        logger.debug("Loaded default json_ez configuration")

    return _default_config


def reset_config() -> None:
    """Forget the global default instance so the next get_config() reloads it"""
    global _default_config
    _default_config = None
