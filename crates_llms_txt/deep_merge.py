"""Utility for layering a user configuration over the defaults."""

from typing import Any

# List settings that accumulate across layers instead of being replaced.
ADDITIVE_KEYS = frozenset({"features"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update`` without mutating either.

    Nested mappings merge key by key. Lists named in ``ADDITIVE_KEYS`` are
    unioned and sorted; every other value in ``update`` wins outright.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif key in ADDITIVE_KEYS and isinstance(current, list) and isinstance(
            value, list
        ):
            merged[key] = sorted({*current, *value})
        else:
            merged[key] = value
    return merged
