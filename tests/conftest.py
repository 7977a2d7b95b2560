# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import getLogger

# Third party imports
import pytest

# Local imports
from json_ez import Document
from json_ez import inline
from json_ez.infrastructure.config import reset_config


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - reset logging and the global config"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    reset_config()

    yield

    reset_config()


@pytest.fixture
def hitchhiker_document() -> Document:
    """The nested document used throughout the examples"""
    return inline(
        ("title", "The Hitchhiker's Guide to the Galaxy"),
        (
            "novels",
            [
                inline(("title", "The Hitchhiker's Guide to the Galaxy"), ("read", True)),
                inline(("title", "The Restaurant at the End of the Universe"), ("read", True)),
                inline(("title", "Life, the Universe and Everything"), ("read", True)),
                inline(("title", "So Long, and Thanks for All the Fish"), ("read", True)),
                inline(("title", "Mostly Harmless"), ("read", False)),
                inline(("title", "And Another Thing..."), ("read", False)),
            ],
        ),
        (
            "movie",
            inline(("title", "The Hitchhiker's Guide to the Galaxy"), ("release_date", 2005)),
        ),
    )
