# json_ez/core/types/result.py

"""Result values for operations that report failure as data."""

# Standard library imports
from typing import Callable
from typing import NoReturn

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict


class Ok[T](BaseModel):
    """Success result."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def map[U](self, func: Callable[[T], U]) -> "Ok[U]":
        """Map function over success value."""
        return Ok(value=func(self.value))

    def flat_map[U](self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Flat map for chaining operations."""
        return func(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


class Err(BaseModel):
    """Error result carrying the exception that caused it."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    error: Exception

    @property
    def is_ok(self) -> bool:
        return False

    def map[U](self, func: Callable[[object], U]) -> "Err":
        """Map has no effect on errors."""
        return self

    def flat_map[U](self, func: Callable[[object], "Result[U]"]) -> "Err":
        """Flat map has no effect on errors."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error

    def unwrap_or[U](self, default: U) -> U:
        return default


type Result[T] = Ok[T] | Err

__all__ = ["Ok", "Err", "Result"]
