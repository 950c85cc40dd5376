"""
Node storage for the red-black tree.

Every node a tree ever creates is appended to its `NodeArena` and lives until the
arena is dropped. There is no deletion, so the arena only grows. The `left`,
`right` and `parent` attributes are plain navigational references into that arena
and carry no ownership.

The root's parent is the tree's `EndNode`, not None. The end node only has a
`left` slot, which holds the root, and doubles as the past-the-end iterator
position.
"""
from enum import Enum


class Color(Enum):
    RED = 0x00
    BLACK = 0x01


class EndNode:
    __slots__ = ("left",)

    # never recolored, so the fix-up loop stops at the root
    color = Color.BLACK

    def __init__(self):
        self.left = None

    def __repr__(self):
        return "<end>"


class Node:
    __slots__ = ("key", "color", "left", "right", "parent")

    def __init__(self, key, color=Color.RED, parent=None):
        self.key = key
        self.color = color
        self.left = None
        self.right = None
        self.parent = parent

    @property
    def is_red(self):
        return self.color is Color.RED

    @property
    def is_left_child(self):
        return self.parent.left is self

    def __repr__(self):
        col = "R" if self.color is Color.RED else "B"
        return f"<{col} {self.key!r}>"


def is_red(node):
    """
    Absent children count as black.
    """
    return node is not None and node.color is Color.RED


class NodeArena:
    """
    Owns the nodes of one tree in creation order.
    """

    def __init__(self):
        self.nodes = []

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def allocate(self, key, color=Color.RED):
        # the node is fully built before the caller links it anywhere
        node = Node(key, color)
        self.nodes.append(node)
        return node
