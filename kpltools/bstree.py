"""An unbalanced binary search tree mapping keys to values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass
class _Node:
    key: Any
    value: Any
    left: _Node | None = None
    right: _Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class BSTree:
    """Binary search tree; equal keys are placed in the left subtree."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, key: Any, value: Any = None) -> None:
        new = _Node(key, value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if key > node.key:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    return
                node = node.left

    def _find(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.right if key > node.key else node.left
        return None

    def search(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if it is absent."""
        node = self._find(key)
        return None if node is None else node.value

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def delete(self, key: Any) -> None:
        """Remove one node holding ``key``; a missing key is ignored."""
        self._root = self._delete(self._root, key)

    @classmethod
    def _delete(cls, node: _Node | None, key: Any) -> _Node | None:
        if node is None:
            return None
        if key < node.key:
            node.left = cls._delete(node.left, key)
            return node
        if key > node.key:
            node.right = cls._delete(node.right, key)
            return node
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        node.right, (node.key, node.value) = cls._pop_min(node.right)
        return node

    @classmethod
    def _pop_min(cls, node: _Node) -> tuple[_Node | None, tuple[Any, Any]]:
        if node.left is None:
            return node.right, (node.key, node.value)
        node.left, pair = cls._pop_min(node.left)
        return node, pair

    def _nodes(self) -> Iterator[_Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            stack.extend(child for child in (node.left, node.right) if child)

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        best = 0
        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            stack.extend((child, depth + 1) for child in (node.left, node.right) if child)
        return best

    def leaf_count(self) -> int:
        return sum(1 for node in self._nodes() if node.is_leaf)

    def inner_count(self) -> int:
        return sum(1 for node in self._nodes() if not node.is_leaf)

    def right_count(self) -> int:
        """Number of nodes that have a right child."""
        return sum(1 for node in self._nodes() if node.right is not None)

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())