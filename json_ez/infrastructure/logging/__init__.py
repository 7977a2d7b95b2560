# json_ez/infrastructure/logging/__init__.py

"""Logging infrastructure for json_ez.

This module provides centralized logging configuration and setup.
"""

# Local imports
from json_ez.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging"]
