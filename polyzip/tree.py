"""Adaptive Huffman tree holding a not-yet-transmitted (NYT) node."""

from polyzip.node import Node, search_by_symbol

NYT_SYMBOL = -1
INTERNAL_SYMBOL = -1


def _find_parent(root, target):
    if root is None or root is target:
        return None
    if root.left is target or root.right is target:
        return root
    return _find_parent(root.left, target) or _find_parent(root.right, target)


class Tree:
    """A tree that starts as a lone NYT node and grows as symbols arrive."""

    def __init__(self):
        self.nyt_node = Node(NYT_SYMBOL, 0)
        self.root = self.nyt_node

    def add_symbol(self, symbol):
        """Count one more occurrence of ``symbol`` and return the tree."""
        existing = search_by_symbol(self.root, symbol)
        if existing is not None:
            existing.weight += 1
            return self

        new_nyt = Node(NYT_SYMBOL, 0)
        internal = Node(INTERNAL_SYMBOL, 1, left=new_nyt, right=Node(symbol, 1))
        if self.root is self.nyt_node:
            self.root = internal
        else:
            parent = _find_parent(self.root, self.nyt_node)
            if parent.left is self.nyt_node:
                parent.left = internal
            else:
                parent.right = internal
        self.nyt_node = new_nyt
        return self