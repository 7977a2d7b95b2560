# json_ez/adapters/codec.py

"""Text encoding and decoding of Documents, plus the inline builder

Parsing and printing belong to pydantic; this module only binds them to the
Document type.
"""

# Standard library imports
from logging import getLogger

# Third party imports
from pydantic import TypeAdapter

# Local imports
from json_ez.core.domain.document import Document
from json_ez.infrastructure.config import get_config

logger = getLogger(__name__)

_DOCUMENT_ADAPTER: TypeAdapter[Document] = TypeAdapter(Document)


def encode(doc: Document, indent: int | None = None) -> str:
    """Render a Document as JSON text

    Args:
        doc: Document to render
        indent: Indentation width, None for the configured default (compact
            output unless ``encoding.indent`` is set)

    Returns:
        JSON text with keys in insertion order
    """
    if indent is None:
        indent = get_config().indent
    return _DOCUMENT_ADAPTER.dump_json(doc, indent=indent).decode("utf-8")


def decode(text: str | bytes) -> Document:
    """Parse JSON text into a Document

    Raises:
        pydantic.ValidationError: If ``text`` is not well-formed JSON or its
            top level is not an object
    """
    doc = _DOCUMENT_ADAPTER.validate_json(text)
    logger.debug(f"Decoded document with {len(doc)} fields")
    return doc


def inline(*pairs: tuple[str, object], **fields: object) -> Document:
    """Build a Document in one expression

    Positional ``(key, value)`` pairs are added first, in order, then keyword
    fields. Later values win for repeated keys, exactly as with ``add``.

    Example:
        >>> movie = inline(("title", "The Hitchhiker's Guide to the Galaxy"), release_date=2005)
        >>> movie.get("release_date", int)
        2005
    """
    doc = Document.from_pairs(pairs)
    for key, value in fields.items():
        doc.add(key, value)
    return doc


__all__ = ["encode", "decode", "inline"]
