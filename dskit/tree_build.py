"""Rebuilding a binary tree from its preorder and inorder traversals."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dskit.binary_tree import BinaryTree, TreeNode


def build_from_traversals(preorder, inorder):
    """Return the tree whose preorder and inorder traversals are those given.

    Each preorder value is looked up in its part of the inorder sequence;
    with repeated values the first match in that part is used.
    """
    pre: Sequence[Any] = list(preorder)
    ino: Sequence[Any] = list(inorder)
    if len(pre) != len(ino):
        raise ValueError("preorder and inorder must have the same length")
    upcoming = iter(pre)

    def build(begin: int, end: int) -> TreeNode | None:
        if begin > end:
            return None
        node = TreeNode(next(upcoming))
        if begin == end:
            if ino[begin] != node.value:
                raise ValueError(f"{node.value!r} does not fit the inorder sequence")
            return node
        try:
            split = ino.index(node.value, begin, end + 1)
        except ValueError:
            raise ValueError(
                f"{node.value!r} does not fit the inorder sequence"
            ) from None
        node.left = build(begin, split - 1)
        node.right = build(split + 1, end)
        return node

    return BinaryTree(build(0, len(ino) - 1))