# json_ez/core/domain/conversion.py

"""Conversion between typed Python values and the dynamic JSON representation

pydantic does the heavy lifting in both directions:

- ``to_dynamic`` renders any value pydantic can serialize (primitives,
  containers, models, dataclasses, enums, dates, nested Documents) into plain
  JSON-shaped data.
- ``from_dynamic`` rebuilds a requested type from stored data by validating
  it in JSON mode, which is where the no-silent-coercion rules come from.
"""

# Standard library imports
from functools import lru_cache
from math import isfinite

# Third party imports
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError
from pydantic_core import to_json
from pydantic_core import to_jsonable_python

# Local imports
from json_ez.core.types.json import JSONType


def _fallback(value: object) -> JSONType:
    """Render values pydantic has no serializer for"""
    # Local imports
    from json_ez.core.domain.document import Document

    if isinstance(value, Document):
        return value.to_dict()
    raise TypeError(f"Cannot convert value of type {type(value).__name__} to a JSON value")


def _reject_non_finite(value: JSONType) -> None:
    """NaN and Infinity would be written as null, so they have no JSON form"""
    if isinstance(value, float) and not isfinite(value):
        raise TypeError(f"Cannot convert non-finite float {value!r} to a JSON value")
    if isinstance(value, dict):
        for item in value.values():
            _reject_non_finite(item)
    elif isinstance(value, list):
        for item in value:
            _reject_non_finite(item)


def to_dynamic(value: object) -> JSONType:
    """Convert a typed value into a fresh JSON-shaped value

    The result shares no mutable containers with ``value`` and always encodes.

    Raises:
        TypeError: If ``value`` (or something nested in it) has no JSON form,
            including non-finite floats and strings that are not valid UTF-8
    """
    try:
        result = to_jsonable_python(value, fallback=_fallback)
        to_json(result)
    except PydanticSerializationError as e:
        raise TypeError(str(e)) from e
    _reject_non_finite(result)
    return result


@lru_cache(maxsize=256)
def _cached_adapter(as_type: object) -> TypeAdapter:
    return TypeAdapter(as_type)


def get_adapter(as_type: object) -> TypeAdapter:
    """Get a (cached) TypeAdapter for a requested type"""
    try:
        return _cached_adapter(as_type)
    except TypeError:
        # Unhashable type expressions can't be cached
        return TypeAdapter(as_type)


def from_dynamic[T](value: JSONType, as_type: type[T], strict: bool = True) -> T:
    """Rebuild ``as_type`` from a stored value

    Raises:
        pydantic.ValidationError: If the stored shape does not fit ``as_type``
    """
    return get_adapter(as_type).validate_json(to_json(value), strict=strict)


def render(value: JSONType) -> str:
    """Compact JSON text for a stored value, used for error snapshots"""
    return to_json(value).decode("utf-8")


def _sort_keys(value: JSONType) -> JSONType:
    if isinstance(value, dict):
        return {key: _sort_keys(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [_sort_keys(item) for item in value]
    return value


def canonical(value: JSONType) -> str:
    """Key-order independent JSON text, used for equality"""
    return render(_sort_keys(value))


def type_name(as_type: object) -> str:
    """Readable name of a requested type"""
    if isinstance(as_type, type) and getattr(as_type, "__origin__", None) is None:
        return as_type.__name__
    return repr(as_type)


__all__ = [
    "to_dynamic",
    "from_dynamic",
    "get_adapter",
    "render",
    "canonical",
    "type_name",
]
