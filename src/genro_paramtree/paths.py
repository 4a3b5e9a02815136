# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Composite key handling.

A composite key is a string of segments joined by the tree separator,
e.g. ``'database.primary.host'``. There is no escaping: a segment can never
contain the separator itself.
"""

from __future__ import annotations

from typing import Any

from .exceptions import InvalidSeparatorError

DEFAULT_SEPARATOR = '.'


def check_separator(separator: Any) -> str:
    """Validate a separator and return it.

    Raises:
        InvalidSeparatorError: If separator is not a non-empty string.
    """
    if not isinstance(separator, str):
        raise InvalidSeparatorError(
            f"separator must be a string, not {type(separator).__name__}"
        )
    if not separator:
        raise InvalidSeparatorError("separator must not be empty")
    return separator


def normalize_key(key: Any) -> str:
    """Return key as a path string (ints and other labels via str())."""
    return key if isinstance(key, str) else str(key)


def split_key(key: Any, separator: str = DEFAULT_SEPARATOR) -> tuple[str, str | None]:
    """Split a composite key into its local segment and the remainder.

    Only the first occurrence of separator is used. The remainder is None
    when the key has no separator, and may be an empty string when the key
    ends with one.

    Args:
        key: Composite key.
        separator: Segment delimiter.

    Returns:
        Tuple of (local, remainder).

    Examples:
        >>> split_key('a.b.c')
        ('a', 'b.c')
        >>> split_key('a')
        ('a', None)
        >>> split_key('a.')
        ('a', '')
    """
    key = normalize_key(key)
    local, sep, remainder = key.partition(separator)
    if not sep:
        return key, None
    return local, remainder


def join_path(separator: str, prefix: str, label: str) -> str:
    """Join an absolute prefix and a local label.

    An empty prefix denotes the root, so no leading separator is added.
    """
    if not prefix:
        return label
    return f"{prefix}{separator}{label}"
