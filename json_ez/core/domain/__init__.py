# json_ez/core/domain/__init__.py

"""Core domain: the Document and the errors its accessors raise"""

# Local imports
from json_ez.core.domain.document import Document
from json_ez.core.domain.errors import ConversionFailedError
from json_ez.core.domain.errors import DocumentError
from json_ez.core.domain.errors import KeyNotFoundError

__all__ = [
    "ConversionFailedError",
    "Document",
    "DocumentError",
    "KeyNotFoundError",
]
