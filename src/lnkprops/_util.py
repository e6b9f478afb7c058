"""Internal helpers for validating and normalizing caller input."""

import os
from collections.abc import Mapping

from ._constants import SHORTCUT_EXTENSIONS


def is_list_of_strings(value: object) -> bool:
    """True if *value* is a non-empty list holding only strings."""
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(isinstance(item, str) for item in value)
    )


def is_list_of_mappings(value: object) -> bool:
    """True if *value* is a non-empty list holding only mappings."""
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(isinstance(item, Mapping) for item in value)
    )


def has_shortcut_extension(path: str) -> bool:
    return path.lower().endswith(SHORTCUT_EXTENSIONS)


def normalize_file(path: str) -> str | None:
    """Return the absolute normalized form of *path*, or None if unusable.

    The path must end in ``.lnk`` or ``.url`` (any case) and name an
    existing regular file.
    """
    if not path or not isinstance(path, str):
        return None
    if not has_shortcut_extension(path):
        return None
    normalized = os.path.normpath(os.path.abspath(path))
    if not os.path.isfile(normalized):
        return None
    return normalized
