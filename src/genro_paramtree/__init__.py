# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-ParamTree - Hierarchical, path-addressable value store.

A lightweight, zero-dependency library for configuration-shaped data in the
Genro ecosystem: nested values addressed by composite keys ('a.b.c'),
exported back to plain dicts or JSON.
"""

__version__ = "0.1.0"

from .exceptions import (
    InvalidSeparatorError,
    MissingValueError,
    ParamTreeError,
    TypeMismatchError,
    ValueExistsError,
)
from .paths import DEFAULT_SEPARATOR, join_path, split_key
from .serialization import is_list_shaped, to_json, to_json_data, to_plain
from .store import ParamTree, ParamTreeNode

__all__ = [
    # Core classes
    "ParamTree",
    "ParamTreeNode",
    # Paths
    "DEFAULT_SEPARATOR",
    "split_key",
    "join_path",
    # Serialization
    "to_plain",
    "to_json",
    "to_json_data",
    "is_list_shaped",
    # Exceptions
    "ParamTreeError",
    "MissingValueError",
    "ValueExistsError",
    "TypeMismatchError",
    "InvalidSeparatorError",
]
