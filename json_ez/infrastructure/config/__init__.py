# json_ez/infrastructure/config/__init__.py

"""Configuration infrastructure for json_ez.

This module manages configuration loading, validation, and models.
"""

# Local imports
from json_ez.infrastructure.config._loader import ConfigLoader
from json_ez.infrastructure.config._loader import get_config
from json_ez.infrastructure.config._loader import reset_config
from json_ez.infrastructure.config._models import AppConfig
from json_ez.infrastructure.config._models import ConversionConfig
from json_ez.infrastructure.config._models import EncodingConfig
from json_ez.infrastructure.config._models import ErrorsConfig
from json_ez.infrastructure.config._models import LoggingConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "ConversionConfig",
    "EncodingConfig",
    "ErrorsConfig",
    "LoggingConfig",
    "get_config",
    "reset_config",
]
