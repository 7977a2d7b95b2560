# json_ez/core/types/__init__.py

"""Type definitions for json_ez

Pure type definitions with no document logic: the JSON aliases describing
stored values and the result values returned by non-raising accessors.
"""

# Local imports
from json_ez.core.types.json import JSONDict
from json_ez.core.types.json import JSONList
from json_ez.core.types.json import JSONPrimitive
from json_ez.core.types.json import JSONType
from json_ez.core.types.result import Err
from json_ez.core.types.result import Ok
from json_ez.core.types.result import Result

__all__ = [
    # JSON
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    # Result values
    "Ok",
    "Err",
    "Result",
]
