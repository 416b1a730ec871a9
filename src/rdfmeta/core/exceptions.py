"""
Exception hierarchy for the rdfmeta engine.

All errors are local to a single parse, serialize or extraction call.
Malformed list shapes are deliberately not represented here; they degrade
to empty or multiply-visited sequences (see ``formats.rdf.list_inspector``).
"""

from typing import Optional


class RDFMetaError(Exception):
    """Base class for all errors raised by rdfmeta."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.details = details
        super().__init__(message)


class ParseError(RDFMetaError):
    """Raised when input does not conform to its declared syntax."""

    def __init__(
        self,
        message: str,
        format: Optional[str] = None,
        line: Optional[int] = None,
        offset: Optional[int] = None,
        details: Optional[str] = None,
    ):
        self.format = format
        self.line = line
        self.offset = offset
        super().__init__(message, details)

    def __str__(self) -> str:
        message = super().__str__()
        location = []
        if self.line is not None:
            location.append(f"line {self.line}")
        if self.offset is not None:
            location.append(f"offset {self.offset}")
        if location:
            return f"{message} ({', '.join(location)})"
        return message


class SerializationError(RDFMetaError):
    """Raised when a statement cannot be represented in the target syntax."""

    def __init__(self, message: str, format: Optional[str] = None, details: Optional[str] = None):
        self.format = format
        super().__init__(message, details)


class CyclicListError(RDFMetaError):
    """Raised when list traversal revisits a node or exceeds its node budget."""

    def __init__(self, message: str, node: Optional[str] = None, steps: int = 0):
        self.node = node
        self.steps = steps
        super().__init__(message)


class UnsupportedFormatError(RDFMetaError, ValueError):
    """Raised for an unknown serialization format tag."""
