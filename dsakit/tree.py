"""Binary tree nodes, binary search tree insertion and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class Node:
    """A binary tree node."""

    value: int
    left: Node | None = None
    right: Node | None = None


def insert(root: Node | None, value: int) -> Node:
    """Insert value into the binary search tree at root and return the root.

    Larger values go right; equal and smaller values go left.
    """
    new = Node(value)
    if root is None:
        return new
    current = root
    while True:
        if value > current.value:
            if current.right is None:
                current.right = new
                return root
            current = current.right
        else:
            if current.left is None:
                current.left = new
                return root
            current = current.left


def inorder(root: Node | None) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.value
    yield from inorder(root.right)


def preorder(root: Node | None) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    if root is None:
        return
    yield root.value
    yield from preorder(root.left)
    yield from preorder(root.right)


def postorder(root: Node | None) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.value