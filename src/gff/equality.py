"""
Structural equality over JSON-like values.

Used to decide whether two fields that share an id are "the same" field.

Rules:
    - identical objects are equal
    - if either side is not a container (mapping or list/tuple), the two
      values must be the same primitive (True is never equal to 1)
    - containers are equal when they have the same number of keys, every
      key of `a` exists in `b`, and the values under each key are equal

Sequences are compared as mappings keyed by their index ("0", "1", ...),
so element order matters. Mapping keys are compared by their string form,
as they would be once serialized to JSON.

A key holding None is NOT equal to a missing key: {"a": None} != {}.

Cyclic structures are not supported and must not be passed in.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _own_entries(value: Any) -> Dict[str, Any]:
    if isinstance(value, Mapping):
        return {str(key): item for key, item in value.items()}
    return {str(index): item for index, item in enumerate(value)}


def _same_primitive(a: Any, b: Any) -> bool:
    # bools are singletons, so equal bools were already caught by `is`
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    return a == b


def deep_equal(a: Any, b: Any) -> bool:
    """Return True when `a` and `b` are structurally equal."""
    if a is b:
        return True

    if not _is_container(a) or not _is_container(b):
        return _same_primitive(a, b)

    entries_a = _own_entries(a)
    entries_b = _own_entries(b)

    if len(entries_a) != len(entries_b):
        return False

    for key, value in entries_a.items():
        if key not in entries_b:
            return False
        if not deep_equal(value, entries_b[key]):
            return False

    return True
