# An unbalanced binary search tree with lazy stack-based traversals.

import logging


logger = logging.getLogger(__name__)


class Node:

    def __init__(self, item, left=None, right=None):
        self._item = item
        self.left = left
        self.right = right

    @property
    def item(self):
        return self._item

    def __str__(self):
        children = [child.item if child is not None else None
                    for child in (self.left, self.right)]
        return f'({self.item}) -> ({children[0]}, {children[1]})'

    def add(self, item):
        """Attach `item` below this node. Items the node is not greater than go right."""
        node = self
        while True:
            if node.item > item:
                if node.left is None:
                    node.left = Node(item)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(item)
                    return
                node = node.right

    def contains(self, item) -> bool:
        node = self
        while node is not None:
            if node.item == item:
                return True
            node = node.left if node.item > item else node.right
        return False


class Tree:
    """
    Binary search tree owning a chain of `Node`s.

    Nothing is ever removed, so `size()` is the number of `add` calls and
    duplicates are kept (they land in the right subtree of their equal).
    """

    def __init__(self, items=None):
        self._root = None
        self._size = 0
        # bumped on every mutation so live iterators can detect it
        self._version = 0
        if items is not None:
            self.extend(items)

    def add(self, item):
        if self._root is None:
            self._root = Node(item)
            logger.debug('created root node for item %r', item)
        else:
            self._root.add(item)
        self._size += 1
        self._version += 1

    def extend(self, items):
        for item in items:
            self.add(item)

    def contains(self, item) -> bool:
        if self._root is None:
            return False
        return self._root.contains(item)

    def size(self) -> int:
        return self._size

    def root(self):
        return self._root

    def in_order_iter(self):
        return InOrderIterator(self)

    def left_iter(self):
        """Left-spine-first walk; yields the same order as `in_order_iter`."""
        return InOrderIterator(self)

    def preorder_iter(self):
        return PreorderIterator(self)

    def __len__(self):
        return self._size

    def __contains__(self, item):
        return self.contains(item)

    def __iter__(self):
        return self.in_order_iter()

    def __str__(self):
        return f'Tree({list(self)})'


class _TreeIterator:

    def __init__(self, tree: Tree):
        self._tree = tree
        self._version = tree._version
        self._stack = []
        self._exhausted = False

    def __iter__(self):
        return self

    def __next__(self):
        if self._exhausted:
            raise StopIteration
        if self._version != self._tree._version:
            logger.debug('tree changed from version %d to %d while iterating',
                         self._version, self._tree._version)
            raise RuntimeError('Tree mutated during iteration')
        if not self._stack:
            self._exhausted = True
            raise StopIteration
        return self._advance()


class InOrderIterator(_TreeIterator):
    """Yields items in ascending order."""

    def __init__(self, tree: Tree):
        super().__init__(tree)
        self._push_left(tree.root())

    def _push_left(self, node):
        while node is not None:
            self._stack.append(node)
            node = node.left

    def _advance(self):
        node = self._stack.pop()
        self._push_left(node.right)
        return node.item


class PreorderIterator(_TreeIterator):
    """Yields each node before its left subtree, then its right subtree."""

    def __init__(self, tree: Tree):
        super().__init__(tree)
        if tree.root() is not None:
            self._stack.append(tree.root())

    def _advance(self):
        node = self._stack.pop()
        if node.right is not None:
            self._stack.append(node.right)
        if node.left is not None:
            self._stack.append(node.left)
        return node.item


def verify_bst(node: Node):
    """Check that lesser items sit left and equal-or-greater items sit right, at every level."""
    stack = [(node, None, None)]
    while stack:
        node, t_min, t_max = stack.pop()
        if node is None:
            continue

        if t_min is not None and t_min > node.item:
            return False
        if t_max is not None and t_max <= node.item:
            return False

        stack.append((node.left, t_min, node.item))
        stack.append((node.right, node.item, t_max))

    return True
