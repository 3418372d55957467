"""Binary trees: BST building, traversals, root-to-leaf sums and common ancestors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)


def bst_insert(root: Optional[TreeNode], value: int) -> TreeNode:
    """Insert ``value`` into a binary search tree, ignoring duplicates."""
    if root is None:
        return TreeNode(value)
    if value < root.val:
        root.left = bst_insert(root.left, value)
    elif value > root.val:
        root.right = bst_insert(root.right, value)
    return root


def build_bst(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a binary search tree by inserting ``values`` in order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = bst_insert(root, value)
    return root


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.val, *inorder(root.right)]


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order."""
    if root is None:
        return []
    return [root.val, *preorder(root.left), *preorder(root.right)]


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.val]


def sum_root_to_leaf(root: Optional[TreeNode]) -> int:
    """Sum the numbers formed by reading digits along each root-to-leaf path."""

    def walk(node: Optional[TreeNode], value: int) -> int:
        if node is None:
            return 0
        value = value * 10 + node.val
        if node.left is None and node.right is None:
            return value
        return walk(node.left, value) + walk(node.right, value)

    return walk(root, 0)


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node having both ``p`` and ``q`` as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root