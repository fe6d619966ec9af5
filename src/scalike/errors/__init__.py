"""Error hierarchy – public re-export surface.

Hierarchy::

    ScalikeError
    ├── CollectionError              (collection.py)
    │   ├── EmptyCollectionError
    │   │   └── EmptyValueError
    │   ├── MissingKeyError
    │   ├── IndexOutOfRangeError
    │   ├── InvalidMappingError
    │   ├── InvalidArgumentError
    │   ├── UnsupportedOperationError
    │   └── TypeMismatchError
    └── ConfigError                  (scalike.config.errors)
"""

from scalike.errors.base import ScalikeError
from scalike.errors.collection import (
    CollectionError,
    EmptyCollectionError,
    EmptyValueError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidMappingError,
    MissingKeyError,
    TypeMismatchError,
    UnsupportedOperationError,
)

__all__ = [
    "CollectionError",
    "EmptyCollectionError",
    "EmptyValueError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "InvalidMappingError",
    "MissingKeyError",
    "ScalikeError",
    "TypeMismatchError",
    "UnsupportedOperationError",
]
