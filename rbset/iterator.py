"""
Bidirectional in-order cursor.

Stepping only follows parent/child links, so walking the whole tree costs O(1)
per step on average and needs no auxiliary stack. The end position is the
tree's `EndNode`: stepping forward off the maximum lands there, and stepping
back from it lands on the maximum because `end.left` is the root.
"""
from .nodes import EndNode
from .search import subtree_max, subtree_min


class InvalidIteratorError(Exception):
    pass


def successor(node):
    if isinstance(node, EndNode):
        raise InvalidIteratorError("cannot increment past the end")

    if node.right is not None:
        return subtree_min(node.right)

    while not node.is_left_child:
        node = node.parent
    return node.parent


def predecessor(node):
    if node.left is not None:
        return subtree_max(node.left)

    if isinstance(node, EndNode):
        raise InvalidIteratorError("cannot decrement the end of an empty tree")

    while node.parent.left is node:
        node = node.parent
        if isinstance(node, EndNode):
            raise InvalidIteratorError("cannot decrement before the beginning")
    return node.parent


class TreeIterator:
    """
    A position in a tree. Two iterators are equal when they sit on the same
    node, so `it == tree.end()` is the loop-termination test.
    """

    __slots__ = ("node",)

    def __init__(self, node):
        self.node = node

    @property
    def is_end(self):
        return isinstance(self.node, EndNode)

    @property
    def key(self):
        if self.is_end:
            raise InvalidIteratorError("cannot dereference the end position")
        return self.node.key

    @property
    def color(self):
        if self.is_end:
            raise InvalidIteratorError("cannot dereference the end position")
        return self.node.color

    def increment(self):
        self.node = successor(self.node)
        return self

    def decrement(self):
        self.node = predecessor(self.node)
        return self

    def copy(self):
        return TreeIterator(self.node)

    __copy__ = copy

    def __eq__(self, other):
        if not isinstance(other, TreeIterator):
            return NotImplemented
        return self.node is other.node

    # the position moves on increment/decrement, so it must not be hashed
    __hash__ = None

    def __repr__(self):
        if self.is_end:
            return "TreeIterator(<end>)"
        return f"TreeIterator({self.node.key!r})"
