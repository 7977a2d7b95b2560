# json_ez/__init__.py

"""json_ez

Typed access to JSON documents. Build a Document from ordinary Python
values, read fields back as the type you need, and tell a missing key apart
from a value of the wrong shape.
"""

# Local imports
from json_ez.adapters.codec import decode
from json_ez.adapters.codec import encode
from json_ez.adapters.codec import inline
from json_ez.core.domain.document import Document
from json_ez.core.domain.errors import ConversionFailedError
from json_ez.core.domain.errors import DocumentError
from json_ez.core.domain.errors import KeyNotFoundError
from json_ez.core.types.result import Err
from json_ez.core.types.result import Ok
from json_ez.core.types.result import Result
from json_ez.infrastructure.config import ConfigLoader
from json_ez.infrastructure.config import get_config
from json_ez.infrastructure.logging import setup_logging

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Document
    "Document",
    "inline",
    # Text form
    "encode",
    "decode",
    # Errors
    "DocumentError",
    "KeyNotFoundError",
    "ConversionFailedError",
    # Result values
    "Ok",
    "Err",
    "Result",
    # Infrastructure
    "ConfigLoader",
    "get_config",
    "setup_logging",
    # Version
    "__version__",
]
