"""Binary trees: building from preorder input, traversals and subtree sums."""

from dataclasses import dataclass
from typing import Optional

_MISSING = (None, -1)


@dataclass
class Node:
    """A binary tree node."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def build_tree(values):
    """Build a tree from values given in preorder.

    ``-1`` or ``None`` marks a missing node. Raises ValueError when the values
    end before the tree is complete or when values are left over.
    """
    items = iter(values)

    def build():
        try:
            value = next(items)
        except StopIteration:
            raise ValueError("values end before the tree is complete") from None
        if value in _MISSING:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    root = build()
    if next(items, _MISSING) is not _MISSING:
        raise ValueError("values are left over after the tree is complete")
    return root


def _preorder(node):
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node):
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node):
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def preorder(root):
    """List the node values in preorder."""
    return list(_preorder(root))


def inorder(root):
    """List the node values in inorder."""
    return list(_inorder(root))


def postorder(root):
    """List the node values in postorder."""
    return list(_postorder(root))


def iterative_preorder(root):
    """List the node values in preorder, using an explicit stack."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def iterative_inorder(root):
    """List the node values in inorder, using an explicit stack."""
    result = []
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def iterative_postorder(root):
    """List the node values in postorder, using an explicit stack."""
    result = []
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if node is None:
            continue
        if expanded:
            result.append(node.data)
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
    return result


def count_subtrees_with_sum(root, x):
    """Count the subtrees whose values add up to ``x``."""
    count = 0

    def subtree_sum(node):
        nonlocal count
        if node is None:
            return 0
        total = node.data + subtree_sum(node.left) + subtree_sum(node.right)
        if total == x:
            count += 1
        return total

    subtree_sum(root)
    return count