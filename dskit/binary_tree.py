"""Binary trees built level by level, with recursive and iterative traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, eq=False)
class TreeNode:
    """One node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    @property
    def degree(self) -> int:
        """Number of children, 0 to 2."""
        return (self.left is not None) + (self.right is not None)


class BinaryTree:
    """A binary tree reachable from ``root``; an empty tree has no root."""

    def __init__(self, root=None):
        self.root: TreeNode | None = root

    @classmethod
    def from_level_order(cls, values):
        """Build a tree from values given level by level.

        The first value is the root. Then, for every node in the order it
        was added, come its left and its right child, where ``None`` means
        the child is absent. Children missing at the end count as absent.
        """
        items: Iterator[Any] = iter(values)
        first = next(items, None)
        if first is None:
            if next(items, None) is not None:
                raise ValueError("values given for a tree without a root")
            return cls()
        root = TreeNode(first)
        pending: deque[TreeNode] = deque([root])
        while pending:
            parent = pending.popleft()
            left = next(items, None)
            if left is not None:
                parent.left = TreeNode(left)
                pending.append(parent.left)
            right = next(items, None)
            if right is not None:
                parent.right = TreeNode(right)
                pending.append(parent.right)
        if any(value is not None for value in items):
            raise ValueError("values left over with no parent to attach them to")
        return cls(root)

    def _walk(self) -> Iterable[TreeNode]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self):
        """Values in root, left, right order, found recursively."""
        out: list[Any] = []

        def visit(node: TreeNode | None) -> None:
            if node is not None:
                out.append(node.value)
                visit(node.left)
                visit(node.right)

        visit(self.root)
        return out

    def inorder(self):
        """Values in left, root, right order, found recursively."""
        out: list[Any] = []

        def visit(node: TreeNode | None) -> None:
            if node is not None:
                visit(node.left)
                out.append(node.value)
                visit(node.right)

        visit(self.root)
        return out

    def postorder(self):
        """Values in left, right, root order, found recursively."""
        out: list[Any] = []

        def visit(node: TreeNode | None) -> None:
            if node is not None:
                visit(node.left)
                visit(node.right)
                out.append(node.value)

        visit(self.root)
        return out

    def levelorder(self):
        """Values level by level, left to right, using a queue."""
        if self.root is None:
            return []
        out = [self.root.value]
        pending: deque[TreeNode] = deque([self.root])
        while pending:
            node = pending.popleft()
            for child in (node.left, node.right):
                if child is not None:
                    out.append(child.value)
                    pending.append(child)
        return out

    def preorder_iterative(self):
        """Preorder values using an explicit stack."""
        out: list[Any] = []
        stack: list[TreeNode] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                out.append(node.value)
                stack.append(node)
                node = node.left
            else:
                node = stack.pop().right
        return out

    def inorder_iterative(self):
        """Inorder values using an explicit stack."""
        out: list[Any] = []
        stack: list[TreeNode] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                out.append(node.value)
                node = node.right
        return out

    def postorder_two_stacks(self):
        """Postorder values: one stack gathers nodes, the other reverses them."""
        if self.root is None:
            return []
        children = [self.root]
        gathered: list[TreeNode] = []
        while children:
            node = children.pop()
            gathered.append(node)
            if node.left is not None:
                children.append(node.left)
            if node.right is not None:
                children.append(node.right)
        return [node.value for node in reversed(gathered)]

    def postorder_one_stack(self):
        """Postorder values with a single stack, emitting finished subtrees."""
        out: list[Any] = []
        stack: list[TreeNode] = []
        node = self.root
        while node is not None or stack:
            if node is not None:
                stack.append(node)
                node = node.left
                continue
            node = stack[-1].right
            if node is None:
                last: TreeNode | None = None
                while stack and stack[-1].right is last:
                    last = stack.pop()
                    out.append(last.value)
        return out

    def height(self):
        """Edges on the longest path from the root; 0 for a leaf or an empty tree."""

        def measure(node: TreeNode | None) -> int:
            if node is None or node.degree == 0:
                return 0
            return max(measure(node.left), measure(node.right)) + 1

        return measure(self.root)

    def count_nodes(self):
        """Total number of nodes."""
        return sum(1 for _ in self._walk())

    def count_leaves(self):
        """Nodes with no children."""
        return sum(1 for node in self._walk() if node.degree == 0)

    def count_single_child(self):
        """Nodes with exactly one child."""
        return sum(1 for node in self._walk() if node.degree == 1)

    def count_two_children(self):
        """Nodes with both children."""
        return sum(1 for node in self._walk() if node.degree == 2)

    def count_non_leaves(self):
        """Nodes with at least one child."""
        return sum(1 for node in self._walk() if node.degree > 0)

    def __repr__(self) -> str:
        return f"BinaryTree(levelorder={self.levelorder()!r})"