"""Exception types raised by svgtree."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class SvgTreeError(Exception):
    """Base class for svgtree errors with a stable code for callers to match on."""

    code = "E_SVGTREE"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class AttributeValueError(SvgTreeError, ValueError):
    """Raised when a numeric accessor reads an attribute that is not a number."""

    code = "E_ATTR_NOT_NUMERIC"

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"attribute {name!r} is not numeric: {value!r}")
        self.name = name
        self.value = value


class SvgWriteError(SvgTreeError, OSError):
    """Raised when a serialized document cannot be written."""

    code = "E_IO_WRITE"

    def __init__(self, path: Path, hint: Optional[str] = None) -> None:
        super().__init__(f"failed to write output file: {path}")
        self.path = path
        self.hint = hint


__all__ = ["SvgTreeError", "AttributeValueError", "SvgWriteError"]
