"""
Change diff - previous values of the fields an update actually changes.
"""

from typing import Any, Mapping


def diff_fields(original: Mapping[str, Any], update: Mapping[str, Any]) -> dict[str, Any]:
    """
    Return the original values of the keys in `update` whose value changes.

    Keys missing from `original` are ignored and unchanged keys are omitted,
    so an empty update yields an empty diff.

    Example:
        >>> diff_fields({"code": "HR", "description": "Human Resource"},
        ...             {"code": "HR", "description": "HR Ops"})
        {'description': 'Human Resource'}
    """
    return {
        key: original[key]
        for key, value in update.items()
        if key in original and original[key] != value
    }
