"""Collection errors – raised by Option, Seq and Map operations.

Each class also derives from the closest builtin exception so callers may
catch either the scalike type or the familiar Python one
(``except KeyError`` keeps working for a missing map key).
"""

from __future__ import annotations

from typing import Any, Self

from scalike.errors.base import ScalikeError


class CollectionError(ScalikeError):
    """Base class for errors raised by collection operations."""

    default_code = "collection_error"

    @classmethod
    def unexpected(cls, operation: str, expected: str, value: Any) -> Self:
        """``"<operation> needs <expected>, <type> given"``, with the type in ``detail``."""
        type_name = type(value).__name__
        return cls(
            f"{operation} needs {expected}, {type_name} given",
            operation=operation,
            detail={"type": type_name},
        )


class EmptyCollectionError(CollectionError, ValueError):
    """``head``/``max``/``min``/``reduce``-style call on an empty collection."""

    default_code = "empty_collection"

    def __init__(self, operation: str, **kwargs: Any) -> None:
        super().__init__(f"empty.{operation}", operation=operation, **kwargs)


class EmptyValueError(EmptyCollectionError):
    """``Option.get()`` called on ``Nothing``."""

    default_code = "empty_value"


class MissingKeyError(CollectionError, KeyError):
    """A key, field or index is absent."""

    default_code = "missing_key"

    def __init__(self, key: Any, **kwargs: Any) -> None:
        super().__init__(f"Undefined key {key!r}", detail={"key": repr(key)}, **kwargs)
        self.key = key


class IndexOutOfRangeError(CollectionError, IndexError):
    """Out-of-bounds subscript read on a ``Seq``."""

    default_code = "index_out_of_range"

    def __init__(self, index: Any, size: int, **kwargs: Any) -> None:
        super().__init__(
            f"Undefined offset {index!r} (size {size})",
            detail={"index": repr(index), "size": size},
            **kwargs,
        )
        self.index = index
        self.size = size


class InvalidMappingError(CollectionError, TypeError):
    """A mapper returned a value that is not iterable / pair-shaped."""

    default_code = "invalid_mapping"


class InvalidArgumentError(CollectionError, TypeError):
    """A construction or projector argument has an unsupported type."""

    default_code = "invalid_argument"


class UnsupportedOperationError(CollectionError, NotImplementedError):
    """The operation is deliberately unavailable for this variant."""

    default_code = "unsupported_operation"


class TypeMismatchError(CollectionError, TypeError):
    """``Option.flat_map``/``flatten`` produced something that is not an Option."""

    default_code = "type_mismatch"


__all__ = [
    "CollectionError",
    "EmptyCollectionError",
    "EmptyValueError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "InvalidMappingError",
    "MissingKeyError",
    "TypeMismatchError",
    "UnsupportedOperationError",
]
