"""Collections – Option, Seq and Map in eager and lazy variants."""

from scalike.collections.option import Nothing, Option, Some
from scalike.collections.caching import CachingIterator
from scalike.collections.projection import field, resolve_projector
from scalike.collections.traversable import Traversable
from scalike.collections.seq import ArraySeq, LazySeq, Seq
from scalike.collections.map import ArrayMap, LazyMap, Map
from scalike.collections.mutable_map import MutableMap

__all__ = [
    "ArrayMap",
    "ArraySeq",
    "CachingIterator",
    "LazyMap",
    "LazySeq",
    "Map",
    "MutableMap",
    "Nothing",
    "Option",
    "Seq",
    "Some",
    "Traversable",
    "field",
    "resolve_projector",
]
