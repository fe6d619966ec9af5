"""JSON-like serialization for Option, Seq and Map.

Any object exposing ``json_serialize()`` is converted through it, so nested
collections serialize recursively: a ``Seq`` becomes a list, a ``Map`` a
dict, ``Some(x)`` the serialization of ``x`` and ``Nothing`` ``null``.
"""
from __future__ import annotations

import json
from typing import Any

from scalike.config import active_settings


def to_jsonable(value: Any) -> Any:
    """Recursively convert *value* into plain lists / dicts / scalars."""
    serialize = getattr(value, "json_serialize", None)
    if callable(serialize):
        return serialize()
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def _default(value: Any) -> Any:
    serialize = getattr(value, "json_serialize", None)
    if callable(serialize):
        return serialize()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(value: Any, **kwargs: Any) -> str:
    """Serialize *value* to a JSON string.

    ``ensure_ascii`` and ``indent`` default to the active
    :class:`~scalike.config.ScalikeSettings`; explicit *kwargs* win.
    """
    settings = active_settings()
    kwargs.setdefault("ensure_ascii", settings.json_ensure_ascii)
    kwargs.setdefault("indent", settings.json_indent or None)
    kwargs.setdefault("default", _default)
    return json.dumps(value, **kwargs)


__all__ = ["dumps", "to_jsonable"]
