"""
Param merging: shallow replace and recursive replace of nested dicts.
Override values win at the top level (replace) or at any nesting level
(replace_recursive). Lists are leaves: an override list replaces the base list.
"""
from typing import Dict, Any, Mapping


def replace(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge two dicts. Top-level override keys replace base keys;
    non-conflicting keys from both survive.
    Returns a new dict (does not mutate inputs).
    """
    result = dict(base)
    result.update(override)
    return result


def replace_recursive(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Deep merge two dicts. override values take precedence.
    Returns a new dict (does not mutate inputs).
    """
    result = dict(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            # Recursively merge nested dicts
            result[key] = replace_recursive(result[key], value)
        else:
            # Override (or add new) key
            result[key] = value

    return result


def merge_params(base: Mapping[str, Any], override: Mapping[str, Any], recursive: bool = False) -> Dict[str, Any]:
    """Pick replace or replace_recursive by flag."""
    function = replace_recursive if recursive else replace
    return function(base, override)
