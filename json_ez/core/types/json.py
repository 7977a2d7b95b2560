# json_ez/core/types/json.py

"""JSON type definitions for the dynamic value representation."""

# JSON Type Usage Guide:
# - JSONDict: the storage of a Document and any nested document value
# - JSONList: a stored sequence
# - JSONType: any stored value, the dynamic value of a field
# - NEVER use Any - it's not allowed in our codebase

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
