"""Utility for layering configuration mappings."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively, so a project can add a single entry to
      an inherited link table.
    - Any other value in 'update' (lists included) replaces the one in 'base'.
    - 'base' and 'update' are left unmodified.
    """
    result = dict(base)
    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
