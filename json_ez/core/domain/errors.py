# json_ez/core/domain/errors.py

"""Errors raised when reading typed values out of a Document.

Both kinds carry a rendered JSON snapshot taken when the error was built,
so an error stays meaningful after the document it came from has changed.
"""


def _clip(text: str, max_length: int | None) -> str:
    """Shorten a snapshot for display, keeping the full text on the error"""
    if max_length is None or len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class DocumentError(Exception):
    """Base class for all document access errors."""


class KeyNotFoundError(DocumentError, KeyError):
    """Raised when a requested key was never set on the document."""

    def __init__(self, key: str, document_snapshot: str, max_length: int | None = None):
        super().__init__(key, document_snapshot)
        self.key = key
        self.document_snapshot = document_snapshot
        self.max_length = max_length

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the args
        snapshot = _clip(self.document_snapshot, self.max_length)
        return f"KeyNotFound: Cannot find key {self.key} in {snapshot}"


class ConversionFailedError(DocumentError, ValueError):
    """Raised when a stored value cannot be reconstructed as the requested type."""

    def __init__(
        self,
        value_snapshot: str,
        target: str,
        reason: str | None = None,
        max_length: int | None = None,
    ):
        super().__init__(value_snapshot, target)
        self.value_snapshot = value_snapshot
        self.target = target
        self.reason = reason
        self.max_length = max_length

    def __str__(self) -> str:
        snapshot = _clip(self.value_snapshot, self.max_length)
        return f"ConversionFailed: Cannot convert value {snapshot} to {self.target}"


__all__ = ["DocumentError", "KeyNotFoundError", "ConversionFailedError"]
