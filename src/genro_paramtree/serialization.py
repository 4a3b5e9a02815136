# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Exporting a ParamTree to plain data and JSON.

Plain export keeps every level as a dict with string keys. JSON export
applies one structural rule per level: a level whose key set is exactly
``{'0', '1', ..., 'n-1'}`` is written as a list ordered by index, any other
level as an object. Insertion order does not matter for the rule, so
``{'1': 'b', '0': 'a'}`` is written as ``["a", "b"]``.

Example:
    >>> tree = ParamTree({'rows': [[0, 0], [0, 1]], 'name': 'grid'})
    >>> to_json(tree)
    '{"rows": [[0, 0], [0, 1]], "name": "grid"}'
"""

from __future__ import annotations

import json
from typing import Any, Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .store import ParamTree


def to_plain(tree: ParamTree) -> dict[str, Any]:
    """Convert a tree to nested dicts (recursive, insertion order kept)."""
    result: dict[str, Any] = {}
    for node in tree:
        if node.is_branch:
            result[node.label] = to_plain(node.value)
        else:
            result[node.label] = node.value
    return result


def is_list_shaped(keys: Iterable[str]) -> bool:
    """True if keys are exactly the indexes '0'..'n-1' in any order.

    An empty key set is list shaped.
    """
    keys = list(keys)
    return set(keys) == {str(i) for i in range(len(keys))}


def to_json_data(tree: ParamTree) -> dict[str, Any] | list[Any]:
    """Convert a tree to JSON-ready data, turning indexed levels into lists."""
    data: dict[str, Any] = {}
    for node in tree:
        if node.is_branch:
            data[node.label] = to_json_data(node.value)
        else:
            data[node.label] = node.value
    if is_list_shaped(data):
        return [data[str(i)] for i in range(len(data))]
    return data


def to_json(tree: ParamTree, **kwargs: Any) -> str:
    """Serialize a tree to JSON text.

    Args:
        tree: The tree to serialize.
        **kwargs: Passed through to ``json.dumps`` (indent, sort_keys, ...).
    """
    return json.dumps(to_json_data(tree), **kwargs)
