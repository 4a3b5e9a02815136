# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Typed accessors for ParamTree.

Thin casts on top of ``get``. Values stored in a tree often come from text
sources, so the casts accept strings loosely: ``'5 apples'`` reads as 5,
``'0'`` reads as False.
"""

from __future__ import annotations

import re
from typing import Any

from ..exceptions import TypeMismatchError

# Leading number: optional blanks and sign, digits with optional fraction, optional exponent
_NUMERIC_PREFIX = re.compile(
    r'^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)'
)


def _kind_of(value: Any) -> str:
    if isinstance(value, dict):
        return 'branch'
    return type(value).__name__


def cast_int(value: Any) -> int:
    """Cast a stored value to int.

    Examples:
        >>> cast_int('5 apples')
        5
        >>> cast_int('apples')
        0
        >>> cast_int(3.9)
        3
    """
    if value is None:
        return 0
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        if value != value or value in (float('inf'), float('-inf')):
            return 0
        return int(value)
    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if match is None:
            return 0
        number = match.group(1)
        try:
            return int(number)
        except ValueError:
            as_float = float(number)
            if as_float in (float('inf'), float('-inf')):
                return 0
            return int(as_float)
    if isinstance(value, dict):
        return 1 if value else 0
    return int(value)


def cast_bool(value: Any) -> bool:
    """Cast a stored value to bool; the string '0' is false."""
    if isinstance(value, str):
        return value not in ('', '0')
    return bool(value)


def cast_str(value: Any) -> str:
    """Cast a scalar to str (True -> '1', False and None -> '')."""
    if value is None or value is False:
        return ''
    if value is True:
        return '1'
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return str(value)


class TypedAccessMixin:
    """Typed getters for classes providing ``get(key, default)``."""

    __slots__ = ()

    def get_int(self, key: str, default: int = 0) -> int:
        """Get the value at key as an int.

        Numeric strings read as their leading number, other strings as 0.
        """
        return cast_int(self.get(key, default))

    def get_boolean(self, key: str, default: bool = False) -> bool:
        """Get the value at key as a bool.

        False, None, zero, the empty string and '0' are false.
        """
        return cast_bool(self.get(key, default))

    def get_string(self, key: str, default: str = '') -> str:
        """Get the value at key as a str.

        Raises:
            TypeMismatchError: If key holds a branch.
        """
        value = self.get(key, default)
        if isinstance(value, (dict, list, tuple)):
            raise TypeMismatchError(
                f"Requested '{key}' as a string but the stored value "
                f"is a {_kind_of(value)}"
            )
        return cast_str(value)
