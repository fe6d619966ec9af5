"""Projectors – turn a field name or a callable into a key-extraction function.

``sort_by``, ``group_by`` and ``to_map`` accept either a callable or a field
reference.  A field reference is a ``str`` (mapping key or attribute name) or
an ``int`` (sequence index); :func:`field` turns it into an explicit
``element -> Option[key]`` extractor.
"""

from __future__ import annotations

from typing import Any, Callable

from scalike.collections.option import Option
from scalike.errors import InvalidArgumentError, MissingKeyError

Projector = Callable[[Any], Any]


def field(name: str | int) -> Callable[[Any], Option[Any]]:
    """Extractor returning ``Some(element[name])`` or ``Nothing`` when absent."""

    def extract(element: Any) -> Option[Any]:
        return Option.from_field(element, name)

    return extract


def resolve_projector(key_or_fn: Any, operation: str) -> Projector:
    """Return a callable projector for *key_or_fn*.

    Field projectors raise :class:`MissingKeyError` for elements lacking the
    field.  Anything that is neither callable nor a field reference raises
    :class:`InvalidArgumentError`.
    """
    if callable(key_or_fn):
        return key_or_fn
    if isinstance(key_or_fn, (str, int)) and not isinstance(key_or_fn, bool):
        extract = field(key_or_fn)

        def project(element: Any) -> Any:
            found = extract(element)
            if found.is_empty():
                raise MissingKeyError(key_or_fn, operation=operation)
            return found.get()

        return project
    raise InvalidArgumentError.unexpected(operation, "a field name or a callable", key_or_fn)


__all__ = ["Projector", "field", "resolve_projector"]
