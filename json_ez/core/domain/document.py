# json_ez/core/domain/document.py

"""Document: a JSON object with typed add/get access

A Document owns a mapping from field name to a dynamic JSON value. Values go
in through ``add`` from any type pydantic can render, and come out through
``get`` as whatever type the caller asks for. Reading distinguishes a key
that was never set (``KeyNotFoundError``) from a value of the wrong shape
(``ConversionFailedError``).

Example:
    >>> doc = Document()
    >>> doc.add("title", "The Hitchhiker's Guide to the Galaxy")
    >>> doc.add("release_date", 2005)
    >>> doc.get("release_date", int)
    2005
"""

# Standard library imports
from copy import deepcopy
from logging import getLogger
from typing import Iterable
from typing import Iterator
from typing import Self

# Third party imports
from pydantic import GetCoreSchemaHandler
from pydantic import ValidationError
from pydantic_core import CoreSchema
from pydantic_core import core_schema

# Local imports
from json_ez.core.domain.conversion import canonical
from json_ez.core.domain.conversion import from_dynamic
from json_ez.core.domain.conversion import render
from json_ez.core.domain.conversion import to_dynamic
from json_ez.core.domain.conversion import type_name
from json_ez.core.domain.errors import ConversionFailedError
from json_ez.core.domain.errors import DocumentError
from json_ez.core.domain.errors import KeyNotFoundError
from json_ez.core.types.json import JSONDict
from json_ez.core.types.json import JSONType
from json_ez.core.types.result import Err
from json_ez.core.types.result import Ok
from json_ez.core.types.result import Result
from json_ez.infrastructure.config import get_config

logger = getLogger(__name__)


class Document:
    """A JSON object wrapper with typed insertion and retrieval

    Documents have value semantics: values are converted when added, copies
    are deep, and nothing returned from ``get`` aliases internal storage.
    """

    __slots__ = ("_fields",)

    def __init__(self) -> None:
        self._fields: JSONDict = {}

    # Construction

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, object]]) -> Self:
        """Build a document by adding each pair in order

        A repeated key keeps the value of its last pair.
        """
        doc = cls()
        for key, value in pairs:
            doc.add(key, value)
        return doc

    # Mutation

    def add(self, key: str, value: object) -> None:
        """Store ``value`` under ``key``, replacing any previous value

        Raises:
            TypeError: If ``key`` is not a string or ``value`` has no JSON form
        """
        if not isinstance(key, str):
            raise TypeError(f"Document keys must be str, not {type(key).__name__}")
        to_dynamic(key)
        self._fields[key] = to_dynamic(value)

    # Retrieval

    def get[T](self, key: str, as_type: type[T], strict: bool | None = None) -> T:
        """Get the value stored under ``key`` as ``as_type``

        Args:
            key: Field name
            as_type: Requested type, anything a pydantic TypeAdapter accepts
                (``int``, ``list[str]``, ``Document``, a model class, ...)
            strict: Override the configured ``conversion.strict`` setting

        Returns:
            A freshly built value owned by the caller

        Raises:
            KeyNotFoundError: If ``key`` was never added
            ConversionFailedError: If the stored value does not fit ``as_type``
        """
        config = get_config()
        if strict is None:
            strict = config.strict

        if key not in self._fields:
            logger.debug(f"Key {key!r} not found among {len(self._fields)} fields")
            raise KeyNotFoundError(key, render(self._fields), config.snapshot_max_length)

        value = self._fields[key]
        try:
            return from_dynamic(value, as_type, strict=strict)
        except ValidationError as e:
            target = type_name(as_type)
            logger.debug(f"Value under {key!r} does not convert to {target}: {e}")
            raise ConversionFailedError(
                render(value), target, reason=str(e), max_length=config.snapshot_max_length
            ) from e

    def try_get[T](self, key: str, as_type: type[T], strict: bool | None = None) -> Result[T]:
        """Like ``get``, but report failure as an ``Err`` value instead of raising"""
        try:
            return Ok(value=self.get(key, as_type, strict=strict))
        except DocumentError as e:
            return Err(error=e)

    # Views

    def keys(self) -> list[str]:
        return list(self._fields)

    def to_dict(self) -> JSONDict:
        """Deep copy of the dynamic representation"""
        return deepcopy(self._fields)

    def encode(self, indent: int | None = None) -> str:
        # Local imports
        from json_ez.adapters.codec import encode

        return encode(self, indent=indent)

    @classmethod
    def decode(cls, text: str | bytes) -> "Document":
        # Local imports
        from json_ez.adapters.codec import decode

        return decode(text)

    # Value semantics

    def copy(self) -> Self:
        """Independent deep copy of this document"""
        clone = type(self)()
        clone._fields = self.to_dict()
        return clone

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> Self:
        return self.copy()

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._fields))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return canonical(self._fields) == canonical(other._fields)

    def __repr__(self) -> str:
        return f"Document({render(self._fields)})"

    # pydantic integration

    @classmethod
    def _from_mapping(cls, fields: dict[str, JSONType]) -> "Document":
        try:
            return cls.from_pairs(fields.items())
        except TypeError as e:
            # pydantic only wraps ValueError into a ValidationError
            raise ValueError(str(e)) from e

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: object, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        """Let pydantic validate a JSON object into a Document and dump it back"""
        from_mapping = core_schema.no_info_after_validator_function(
            cls._from_mapping,
            core_schema.dict_schema(
                keys_schema=core_schema.str_schema(),
                values_schema=core_schema.any_schema(),
            ),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_mapping,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_mapping]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(cls.to_dict),
        )


__all__ = ["Document"]
