"""
Dot-path utilities for param trees (plain dict contract).
Supports dotted keys like "car.info.age" for nested lookup; a literal top-level
key that contains dots always wins over the dotted interpretation.
"""
import re
from typing import Any, List, Mapping


PATH_SEPARATOR = "."

# Canonical integer keys in ASCII: "0", "7", "12" but not "007" or "²"
INTEGER_KEY_PATTERN = re.compile(r"0|[1-9][0-9]*")


# -----------------------------------------------------------------------------
# Path parsing
# -----------------------------------------------------------------------------

def split_path(key: str) -> List[str]:
    """Split a dot-path into segments. "a.b.c" -> ["a", "b", "c"]; "a" -> ["a"]."""
    return str(key).split(PATH_SEPARATOR)


def _list_index(segment: str, size: int):
    """Return segment as a list index, or None if it does not address an item."""
    if not INTEGER_KEY_PATTERN.fullmatch(segment):
        return None
    index = int(segment)
    return index if index < size else None


# -----------------------------------------------------------------------------
# Lookup helpers
# -----------------------------------------------------------------------------

def get_param(params: Mapping, name: str, default: Any = None) -> Any:
    """
    Read a value from params, supporting dotted keys for nested dicts.
    E.g. get_param(p, "car.info.age", 0) -> p["car"]["info"]["age"] or default.
    If name is itself a top-level key it is returned before any splitting.
    Lists are traversable by decimal index ("tags.0").
    If any segment is missing or the node is a scalar, returns default.
    """
    if not isinstance(params, Mapping):
        return default
    if name in params:
        return params[name]
    current = params
    for key in split_path(name):
        if isinstance(current, Mapping):
            if key not in current:
                return default
            current = current[key]
        elif isinstance(current, list):
            index = _list_index(key, len(current))
            if index is None:
                return default
            current = current[index]
        else:
            return default
    return current


def walk_path(params: dict, keys: List[str]) -> dict:
    """
    Descend through keys, creating containers as needed, and return the
    container that holds the last visited key's value.

    Every visited key whose value is missing or not a dict is replaced by a new
    empty dict; scalars and lists sitting in the path are discarded.
    Returns params itself when keys is empty.
    """
    target = params
    for key in keys:
        if not isinstance(target.get(key), dict):
            target[key] = {}
        target = target[key]
    return target


def next_index_key(container: Mapping) -> str:
    """Next free numeric key of a mapping used as an array: max int key + 1, or "0"."""
    indices = [int(k) for k in container if isinstance(k, str) and INTEGER_KEY_PATTERN.fullmatch(k)]
    return str(max(indices) + 1) if indices else "0"
