"""Binary search tree nodes ordered by weight."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A tree node carrying a symbol and its weight."""

    symbol: int
    weight: int
    left: Optional[Node] = None
    right: Optional[Node] = None

    def is_leaf(self):
        """Return True when the node has no children."""
        return self.left is None and self.right is None


def insert_node(root, symbol, weight):
    """Insert a node by weight (equal weights go left) and return the root."""
    if root is None:
        return Node(symbol, weight)
    if weight <= root.weight:
        root.left = insert_node(root.left, symbol, weight)
    else:
        root.right = insert_node(root.right, symbol, weight)
    return root


def delete_node(root, weight):
    """Remove one node with the given weight and return the new root."""
    if root is None:
        return None
    if weight < root.weight:
        root.left = delete_node(root.left, weight)
    elif weight > root.weight:
        root.right = delete_node(root.right, weight)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = find_minimum(root.right)
        root.symbol = successor.symbol
        root.weight = successor.weight
        root.right = delete_node(root.right, successor.weight)
    return root


def find_minimum(root):
    """Return the leftmost node of the tree, or None for an empty tree."""
    if root is None:
        return None
    while root.left is not None:
        root = root.left
    return root


def search_by_symbol(root, symbol):
    """Return the first node in pre-order holding ``symbol``, or None."""
    if root is None:
        return None
    if root.symbol == symbol:
        return root
    found = search_by_symbol(root.left, symbol)
    if found is not None:
        return found
    return search_by_symbol(root.right, symbol)


def search_by_weight(root, weight):
    """Return a node with the given weight, following the search order."""
    while root is not None and root.weight != weight:
        root = root.left if weight <= root.weight else root.right
    return root