# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Absorbing nested containers into a ParamTree.

A container is a mapping, a list or tuple (keyed by position), or another
ParamTree. Containers are read in full first, then absorbed one scalar leaf
at a time, so nested containers become child branches and every write obeys
the same overwrite rules. Mapping and list keys go through ``ParamTree.set``;
labels of a ParamTree source are copied as they are.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator, TYPE_CHECKING

from ..paths import normalize_key
from ..serialization import to_plain

if TYPE_CHECKING:
    from .core import ParamTree


def is_container(value: Any) -> bool:
    """True if value is absorbed as a branch rather than stored as a leaf."""
    from .core import ParamTree
    return isinstance(value, (Mapping, list, tuple, ParamTree))


def iter_entries(source: Any) -> Iterator[tuple[str, Any]]:
    """Yield (key, value) pairs of a container in its own order.

    Args:
        source: Mapping, list/tuple, or ParamTree.

    Yields:
        Tuples of (string key, value). A ParamTree is read from a plain
        snapshot taken up front, so its branches come out as plain dicts
        detached from the source.

    Raises:
        TypeError: If source is not a container.
    """
    from .core import ParamTree

    if isinstance(source, ParamTree):
        yield from to_plain(source).items()
    elif isinstance(source, Mapping):
        for key, value in source.items():
            yield normalize_key(key), value
    elif isinstance(source, (list, tuple)):
        for index, value in enumerate(source):
            yield str(index), value
    else:
        raise TypeError(
            f"source must be a mapping, list, tuple or ParamTree, "
            f"not {type(source).__name__}"
        )


def snapshot(source: Any) -> tuple[list[tuple[str, Any]], bool]:
    """Read every entry of source before anything is written.

    Returns:
        Tuple of (entries, verbatim). verbatim is True for a ParamTree
        source: its labels are copied as they are, never split again on
        the target separator.
    """
    from .core import ParamTree
    entries = list(iter_entries(source))
    return entries, isinstance(source, ParamTree)


def absorb(
    target: ParamTree,
    entries: list[tuple[str, Any]],
    verbatim: bool,
    force: bool = False,
) -> None:
    """Write snapshotted entries into target.

    Raises:
        ValueExistsError: If a scalar meets an existing branch and force
            is False. Entries written before the failure stay set.
    """
    for label, value in entries:
        if not verbatim:
            target.set(label, value, force)
        elif isinstance(value, dict):
            absorb(target._ensure_branch(label), list(value.items()), True, force)
        else:
            target._set_label(label, value, force)


def load_into(target: ParamTree, source: Any, force: bool = False) -> None:
    """Absorb every entry of source into target.

    Entries are snapshotted first, so a tree can be loaded from itself or
    from one of its own branches. Mapping and list keys go through
    ``set`` and may address nested paths; ParamTree labels are copied
    as they are.

    Args:
        target: The tree receiving the entries.
        source: Container to read from.
        force: Passed to every write.

    Raises:
        TypeError: If source is not a container.
        ValueExistsError: If a scalar meets an existing branch and force
            is False. Entries set before the failure stay set.
    """
    entries, verbatim = snapshot(source)
    absorb(target, entries, verbatim, force)
