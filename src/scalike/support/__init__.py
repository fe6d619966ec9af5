"""Support – iterable predicates and JSON serialization helpers."""
