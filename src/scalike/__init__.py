"""scalike – Scala-style Option, Seq and Map collections for Python.

Quick start::

    from scalike import Map, Option, Seq

    Seq.of(1, 9, 2, 8, 3).max()                           # 9
    Seq.from_iterable(rows()).filter(valid).take(10)      # lazy, nothing pulled yet
    Map.of({"Civic": "Honda"}).get("Levorg")              # Nothing
    Option.of(5).filter(lambda x: x > 10).get_or_else(0)  # 0
"""

from scalike.collections import (
    ArrayMap,
    ArraySeq,
    CachingIterator,
    LazyMap,
    LazySeq,
    Map,
    MutableMap,
    Nothing,
    Option,
    Seq,
    Some,
    field,
)
from scalike.errors import (
    CollectionError,
    EmptyCollectionError,
    EmptyValueError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidMappingError,
    MissingKeyError,
    ScalikeError,
    TypeMismatchError,
    UnsupportedOperationError,
)

__version__ = "0.1.0"

__all__ = [
    "ArrayMap",
    "ArraySeq",
    "CachingIterator",
    "CollectionError",
    "EmptyCollectionError",
    "EmptyValueError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "InvalidMappingError",
    "LazyMap",
    "LazySeq",
    "Map",
    "MissingKeyError",
    "MutableMap",
    "Nothing",
    "Option",
    "ScalikeError",
    "Seq",
    "Some",
    "TypeMismatchError",
    "UnsupportedOperationError",
    "__version__",
    "field",
]
