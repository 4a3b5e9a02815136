# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ParamTree - A hierarchical, path-addressable value store.

This module provides the ParamTree class, the core container of the
genro-paramtree library. Leaves hold scalar values, branches hold child
ParamTree instances, and every entry is reachable through a composite key
built from its labels and the tree separator.

Key Features:
    - **Path navigation**: Composite keys ('a.b.c') with a configurable separator
    - **Lazy branches**: Intermediate branches are created by ``set`` on demand
    - **Branch protection**: A scalar cannot replace a branch unless forced
    - **Plain export**: ``get`` on a branch returns plain dicts, never a live tree
    - **JSON export**: Levels keyed 0..n-1 are written as JSON lists

Path Syntax:
    - Composite keys: 'parent.child.leaf'
    - Custom separator: ParamTree(separator='/') reads 'parent/child/leaf'
    - Only the first separator of a key is consumed at each level

Example:
    Basic usage::

        tree = ParamTree({'database': {'host': 'localhost'}})
        tree.set('database.port', 5432)

        tree.get('database.port')       # 5432
        tree.get('database')            # {'host': 'localhost', 'port': 5432}
        tree.get('database.user', 'me') # 'me'

    Live branches::

        db = tree.get_branch('database')
        db.set('user', 'admin')
        tree['database.user']           # 'admin'
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from ..exceptions import MissingValueError, ValueExistsError
from ..paths import DEFAULT_SEPARATOR, check_separator, join_path, split_key
from ..serialization import to_json, to_json_data, to_plain
from .accessors import TypedAccessMixin
from .loading import absorb, is_container, load_into, snapshot
from .node import ParamTreeNode

logger = logging.getLogger(__name__)


def _strict_equal(stored: Any, value: Any) -> bool:
    """Equality without coercion: True never matches 1, '1' never matches 1."""
    return type(stored) is type(value) and bool(stored == value)


class ParamTree(TypedAccessMixin):
    """A hierarchical value store addressed by composite keys.

    ParamTree provides:
    - set(key, value, force): Store values, creating branches as needed
    - get(key, default) / tree[key]: Read values or plain branch exports
    - get_branch(key): Get a live child ParamTree
    - delete(key) / has_key(key): Remove and test entries
    - find(value) / get_keys() / count(): Search and enumerate leaves
    - get_int / get_boolean / get_string: Typed reads

    Attributes:
        parent: The ParamTreeNode holding this tree as its value,
            or None if this is a root tree.

    Example:
        >>> tree = ParamTree()
        >>> tree.set('app.debug', True)
        >>> tree['app.debug']
        True
    """

    __slots__ = ('_nodes', '_separator', '_path', 'parent')

    def __init__(
        self,
        source: Any = None,
        separator: str = DEFAULT_SEPARATOR,
        path: str = '',
        parent: ParamTreeNode | None = None,
    ) -> None:
        """Initialize a ParamTree.

        Args:
            source: Optional initial data. Can be:
                - dict (or any mapping): nested mappings become branches
                - list/tuple: items keyed by position ('0', '1', ...)
                - ParamTree: deep copy of another tree
            separator: Delimiter for composite keys. Shared by every branch
                of the tree.
            path: Absolute path of this tree from its root. Set internally
                when branches are created.
            parent: The ParamTreeNode that contains this tree as its value.

        Raises:
            InvalidSeparatorError: If separator is not a non-empty string.
            TypeError: If source is not a supported container.

        Example:
            >>> ParamTree({'a': 1, 'b': {'c': 2}})
            >>> ParamTree(['x', 'y'])  # keys '0' and '1'
            >>> ParamTree(other_tree)  # copy
            >>> ParamTree(separator='/')
        """
        self._nodes: dict[str, ParamTreeNode] = {}
        self._separator = check_separator(separator)
        self._path = path
        self.parent = parent

        if source is not None:
            self.load(source)

    @classmethod
    def from_dict(
        cls, data: Any, separator: str = DEFAULT_SEPARATOR
    ) -> ParamTree:
        """Build a root tree from nested data."""
        return cls(data, separator=separator)

    def load(self, source: Any, force: bool = False) -> None:
        """Absorb the entries of a container into this tree.

        Args:
            source: Mapping, list/tuple, or ParamTree.
            force: Allow scalars of source to replace existing branches.

        Raises:
            TypeError: If source is not a container.
            ValueExistsError: On an unforced branch overwrite.
        """
        load_into(self, source, force)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing entry labels."""
        return f"ParamTree({list(self._nodes.keys())})"

    def __len__(self) -> int:
        """Return the number of direct entries in this tree."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[ParamTreeNode]:
        """Iterate over direct entries in insertion order."""
        return iter(list(self._nodes.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParamTree):
            return NotImplemented
        return (
            self._separator == other._separator
            and list(self.iter_keys()) == list(other.iter_keys())
            and self.to_plain() == other.to_plain()
        )

    __hash__ = None  # type: ignore[assignment]

    def __contains__(self, key: Any) -> bool:
        """Check if a key or composite key is present."""
        return self.has_key(key)

    def __getitem__(self, key: Any) -> Any:
        """Get value by key, None if missing.

        Example:
            >>> tree['database.host']
            'localhost'
            >>> tree['no.such.key'] is None
            True
        """
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        """Set value by key without force."""
        self.set(key, value)

    def __delitem__(self, key: Any) -> None:
        """Delete key; missing keys are ignored."""
        self.delete(key)

    def __json__(self) -> dict[str, Any] | list[Any]:
        """Return JSON-ready data (indexed levels as lists)."""
        return to_json_data(self)

    # ==================== Path Utilities ====================

    @property
    def separator(self) -> str:
        """The composite key delimiter of this tree."""
        return self._separator

    @property
    def path(self) -> str:
        """Absolute path of this tree from the root ('' for the root)."""
        return self._path

    def value_path(self, label: str) -> str:
        """Absolute path of the entry label on this tree."""
        return join_path(self._separator, self._path, label)

    def _split(self, key: Any) -> tuple[str, str | None]:
        return split_key(key, self._separator)

    def _ensure_branch(self, label: str) -> ParamTree:
        """Get the branch at label, creating it or replacing a scalar.

        Replacing a scalar here is not gated by force: the caller is writing
        below label, so label has to become a branch.
        """
        node = self._nodes.get(label)
        if node is not None and node.is_branch:
            return node.value

        child = ParamTree(separator=self._separator, path=self.value_path(label))
        if node is None:
            node = ParamTreeNode(label, child, parent=self)
            self._nodes[label] = node
        else:
            logger.debug(
                "Replacing value %r at '%s' with a branch",
                node.value, self.value_path(label),
            )
            node.value = child
        child.parent = node
        return child

    # ==================== Core API ====================

    def get(self, key: Any, default: Any = None) -> Any:
        """Get the value at key.

        Args:
            key: Composite key relative to this tree.
            default: Returned when key is missing or descends past a leaf.

        Returns:
            The scalar at key, a plain dict export if key is a branch,
            or default.

        Example:
            >>> tree.get('key2.subkey1')
            45
            >>> tree.get('key2.subkey1.deeper', 123)
            123
        """
        local, remainder = self._split(key)
        node = self._nodes.get(local)
        if node is None:
            return default
        if remainder is None:
            return to_plain(node.value) if node.is_branch else node.value
        if not node.is_branch:
            return default
        return node.value.get(remainder, default)

    def get_branch(self, key: Any) -> ParamTree | None:
        """Get the live child tree at key.

        Changes made through the returned tree are visible in this one.
        A key holding an explicit None leaf returns None.

        Raises:
            MissingValueError: If key is missing, holds a non-None value,
                or descends past a leaf.
        """
        local, remainder = self._split(key)
        node = self._nodes.get(local)
        if node is None:
            raise MissingValueError(
                f"Invalid key - '{key}' does not exist under '{self._path}'."
            )
        if node.is_leaf:
            if node.value is None:
                return None
            if remainder is None:
                raise MissingValueError(
                    f"Invalid key - '{key}' is a value, not a branch - "
                    f"under '{self._path}'."
                )
            raise MissingValueError(
                f"Invalid key - '{key}' does not exist under '{self._path}'."
            )
        if remainder is None:
            return node.value
        return node.value.get_branch(remainder)

    def set(self, key: Any, value: Any, force: bool = False) -> None:
        """Set a value at key, creating intermediate branches as needed.

        Containers (mappings, lists, tuples, trees) are absorbed entry by
        entry as a branch at key. A scalar may replace a scalar freely but
        replaces a branch only with force.

        Args:
            key: Composite key relative to this tree.
            value: Scalar or container.
            force: Allow a scalar to discard an existing branch.

        Raises:
            ValueExistsError: If a scalar would replace a branch and force
                is False. Entries absorbed before the failure stay set.

        Example:
            >>> tree.set('a.b', 1)
            >>> tree.set('a', 99)            # raises ValueExistsError
            >>> tree.set('a', 99, force=True)
        """
        local, remainder = self._split(key)

        if remainder is not None:
            self._ensure_branch(local).set(remainder, value, force)
            return

        if is_container(value):
            entries, verbatim = snapshot(value)
            absorb(self._ensure_branch(local), entries, verbatim, force)
            return

        self._set_label(local, value, force)

    def _set_label(self, label: str, value: Any, force: bool) -> None:
        """Store a scalar under label on this tree, without splitting it."""
        node = self._nodes.get(label)
        if node is None:
            self._nodes[label] = ParamTreeNode(label, value, parent=self)
            return
        if node.is_branch:
            if not force:
                raise ValueExistsError(
                    f"Tried to override a branch ({self.value_path(label)}) "
                    f"with a value without specifying force=True."
                )
            logger.debug("Discarding branch at '%s'", self.value_path(label))
            node.value.parent = None
        node.value = value

    def delete(self, key: Any) -> None:
        """Delete the value or branch at key. Missing keys are ignored."""
        local, remainder = self._split(key)
        if remainder is not None:
            node = self._nodes.get(local)
            if node is not None and node.is_branch:
                node.value.delete(remainder)
            return
        node = self._nodes.pop(local, None)
        if node is not None:
            node.parent = None

    def has_key(self, key: Any) -> bool:
        """True if key is present, including keys holding None."""
        local, remainder = self._split(key)
        node = self._nodes.get(local)
        if remainder is None:
            return node is not None
        if node is None or not node.is_branch:
            return False
        return node.value.has_key(remainder)

    def find(self, value: Any) -> str | None:
        """Find the absolute path of the first leaf equal to value.

        Equality is strict: type and value must both match. Leaves of this
        tree are checked before descending into branches, both in insertion
        order.

        Returns:
            The absolute path, or None if no leaf matches.
        """
        branches = []
        for node in self._nodes.values():
            if node.is_branch:
                branches.append(node.value)
            elif _strict_equal(node.value, value):
                return self.value_path(node.label)
        for branch in branches:
            found = branch.find(value)
            if found is not None:
                return found
        return None

    def get_keys(self) -> list[str]:
        """Return absolute paths of every leaf below this tree.

        Depth-first, insertion order. Branch paths are not included.
        """
        keys: list[str] = []
        for node in self._nodes.values():
            if node.is_branch:
                keys.extend(node.value.get_keys())
            else:
                keys.append(self.value_path(node.label))
        return keys

    def count(self) -> int:
        """Return the number of entries on and below this tree.

        Branch entries count once each, plus everything they contain.
        """
        total = len(self._nodes)
        for node in self._nodes.values():
            if node.is_branch:
                total += node.value.count()
        return total

    # ==================== Iteration ====================

    def iter_keys(self) -> Iterator[str]:
        """Yield labels at this level in insertion order."""
        for node in self._nodes.values():
            yield node.label

    def iter_values(self) -> Iterator[Any]:
        """Yield values at this level; branches as live trees."""
        for node in self._nodes.values():
            yield node.value

    def iter_items(self) -> Iterator[tuple[str, Any]]:
        """Yield (label, value) pairs in insertion order."""
        for node in self._nodes.values():
            yield node.label, node.value

    def keys(self) -> list[str]:
        """Return list of labels at this level in insertion order."""
        return list(self.iter_keys())

    def values(self) -> list[Any]:
        """Return list of values at this level in insertion order."""
        return list(self.iter_values())

    def items(self) -> list[tuple[str, Any]]:
        """Return list of (label, value) pairs in insertion order."""
        return list(self.iter_items())

    def nodes(self) -> list[ParamTreeNode]:
        """Return list of entries at this level in insertion order."""
        return list(self._nodes.values())

    def walk(self) -> Iterator[tuple[str, ParamTreeNode]]:
        """Yield (absolute_path, node) for every entry, depth-first.

        Unlike get_keys, branch entries are yielded too, before their
        content.

        Example:
            >>> for path, node in tree.walk():
            ...     print(path, node.is_branch)
        """
        for node in list(self._nodes.values()):
            yield self.value_path(node.label), node
            if node.is_branch:
                yield from node.value.walk()

    # ==================== Navigation ====================

    @property
    def root(self) -> ParamTree:
        """Get the root ParamTree of this hierarchy."""
        if self.parent is None or self.parent.parent is None:
            return self
        return self.parent.parent.root

    @property
    def depth(self) -> int:
        """Get the depth of this tree in the hierarchy (root=0)."""
        if self.parent is None or self.parent.parent is None:
            return 0
        return self.parent.parent.depth + 1

    # ==================== Conversion ====================

    def to_plain(self) -> dict[str, Any]:
        """Convert to nested plain dicts (recursive)."""
        return to_plain(self)

    as_dict = to_plain

    def to_json(self, **kwargs: Any) -> str:
        """Serialize to JSON; levels keyed '0'..'n-1' become lists."""
        return to_json(self, **kwargs)

    def clear(self) -> None:
        """Remove all entries from this tree."""
        for node in self._nodes.values():
            node.parent = None
        self._nodes.clear()
