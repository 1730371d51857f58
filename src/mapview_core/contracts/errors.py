from __future__ import annotations


class MapViewError(Exception):
    """Base error for mapview_core."""


class ContractError(MapViewError):
    """Raised when a contract (record/operator/source) is violated."""


class ValidationError(ContractError):
    """Raised when an input value fails validation."""


class AttributeSourceError(MapViewError):
    """Raised by the bundled attribute sources when a query cannot be answered."""


class AttributeTypeError(AttributeSourceError):
    """Raised when an attribute exists but holds a value of the wrong type."""


class RecycledSourceError(AttributeSourceError):
    """Raised when an attribute source is used after it has been recycled."""


class CodecError(MapViewError):
    """Raised when a binary record is exhausted or carries a foreign header."""
