"""Dictionary helpers for layering config overrides."""

from __future__ import annotations

from typing import Any


def deep_merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override onto base without mutating either; nested dicts merge key by key."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge_dicts(current, value)
        else:
            merged[key] = value
    return merged


def flatten_to_nested(flat: dict[str, Any], separator: str = "__") -> dict[str, Any]:
    """
    Convert a flat dict with ``__`` separators into a nested dict.

    Example::

        {"payout__flush": 8}
        →  {"payout": {"flush": 8}}
    """
    result: dict[str, Any] = {}
    for key, value in flat.items():
        *parents, leaf = key.split(separator)
        current = result
        for part in parents:
            current = current.setdefault(part, {})
        current[leaf] = value
    return result
