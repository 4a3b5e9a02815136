# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ParamTree slot node."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import ParamTree


class ParamTreeNode:
    """One entry of a ParamTree.

    Each node has:
    - label: The entry key within its parent
    - value: Either a scalar (leaf) or an owned ParamTree (branch)
    - parent: The ParamTree holding this entry

    Example:
        >>> node = ParamTreeNode('port', 5432)
        >>> node.is_leaf
        True
    """

    __slots__ = ('label', 'value', 'parent')

    def __init__(
        self,
        label: str,
        value: Any = None,
        parent: ParamTree | None = None,
    ) -> None:
        self.label = label
        self.value = value
        self.parent = parent

    def __repr__(self) -> str:
        value_repr = (
            f"ParamTree({len(self.value)})"
            if self.is_branch
            else repr(self.value)
        )
        return f"ParamTreeNode({self.label!r}, value={value_repr})"

    @property
    def is_branch(self) -> bool:
        """True if this node holds a child ParamTree."""
        from .core import ParamTree
        return isinstance(self.value, ParamTree)

    @property
    def is_leaf(self) -> bool:
        """True if this node holds a scalar value."""
        return not self.is_branch

    @property
    def path(self) -> str:
        """Absolute path of this entry from the tree root."""
        if self.parent is None:
            return self.label
        return self.parent.value_path(self.label)
