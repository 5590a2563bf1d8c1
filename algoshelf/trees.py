"""Binary trees: height and spiral (zigzag) level-order traversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class TreeNode:
    """A binary tree node holding ``data`` and optional children."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    """Yield the nodes of each level, left to right, from the root down."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def height(node: Optional[TreeNode]) -> int:
    """Return the number of levels in the tree; an empty tree has height 0."""
    return sum(1 for _ in _levels(node))


def spiral_order(root: Optional[TreeNode]) -> list[Any]:
    """Return node data level by level, alternating direction.

    The first level is read right to left, the second left to right, and so on.
    """
    result: list[Any] = []
    for depth, level in enumerate(_levels(root)):
        ordered = reversed(level) if depth % 2 == 0 else level
        result.extend(node.data for node in ordered)
    return result