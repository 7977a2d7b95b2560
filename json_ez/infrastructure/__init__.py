# json_ez/infrastructure/__init__.py

"""System infrastructure components for configuration and logging."""

# Local imports
from json_ez.infrastructure.config import ConfigLoader
from json_ez.infrastructure.config import get_config
from json_ez.infrastructure.logging import setup_logging

__all__ = ["ConfigLoader", "get_config", "setup_logging"]
