"""
An ordered set of keys kept in a red-black tree.

Nodes are never removed, so the tree only supports insertion and lookup. The
layout follows the usual ordered-container trick: the root hangs off the
`left` slot of a per-tree `EndNode`, which is also the `end()` position. The
tree caches its minimum and maximum nodes so `begin()`, `min()` and `max()`
are O(1). Both caches point at the end node while the tree is empty.
"""
import copy as _copy
import logging
import operator

from . import settings
from .fixup import insert_fixup
from .iterator import TreeIterator, predecessor, successor
from .nodes import Color, EndNode, NodeArena, is_red
from .search import (
    find,
    find_with_parent,
    lower_bound,
    subtree_max,
    subtree_min,
    upper_bound,
)

logger = logging.getLogger(__name__)


class TreeCorruption(Exception):
    pass


class RBTree:
    def __init__(self, keys=None, less=None):
        self._less = less if less is not None else operator.lt
        self._reset()

        if keys is not None:
            self.update(keys)

    def _reset(self):
        self._arena = NodeArena()
        self._end = EndNode()
        self._leftmost = self._end
        self._rightmost = self._end
        self._size = 0

    @property
    def _root(self):
        return self._end.left

    # capacity

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size != 0

    def empty(self):
        return self._size == 0

    # iterators

    def begin(self):
        return TreeIterator(self._leftmost)

    def end(self):
        return TreeIterator(self._end)

    def __iter__(self):
        node = self._leftmost
        while node is not self._end:
            yield node.key
            node = successor(node)

    def __reversed__(self):
        node = self._end
        while node is not self._leftmost:
            node = predecessor(node)
            yield node.key

    def min(self):
        if not self._size:
            raise KeyError("min(): tree is empty")
        return self._leftmost.key

    def max(self):
        if not self._size:
            raise KeyError("max(): tree is empty")
        return self._rightmost.key

    # modifiers

    def insert(self, key):
        """
        Insert `key` unless an equal key is already stored. Returns a
        `(position, inserted)` pair; on a duplicate the position is the existing
        node and the tree is left untouched.
        """
        if not self._size:
            node = self._insert_root(key)
        else:
            existing, parent = find_with_parent(self._root, key, self._less)
            if existing is not None:
                return TreeIterator(existing), False
            node = self._insert_under(parent, key)

        if settings.VALIDATE_ON_INSERT:
            black_height = self.validate()
            logger.debug(
                "inserted %r, %d keys, black height %d", key, self._size, black_height
            )

        return TreeIterator(node), True

    def update(self, keys):
        """
        Insert every key from an iterable, silently skipping duplicates. Returns
        how many keys were actually added.
        """
        inserted = 0
        for key in keys:
            inserted += self.insert(key)[1]
        return inserted

    def _insert_root(self, key):
        node = self._arena.allocate(key, Color.BLACK)

        node.parent = self._end
        self._end.left = node
        self._leftmost = self._rightmost = node
        self._size += 1
        return node

    def _insert_under(self, parent, key):
        # every comparison happens before the node exists
        go_left = self._less(key, parent.key)
        node = self._arena.allocate(key, Color.RED)

        node.parent = parent
        if go_left:
            parent.left = node
            if parent is self._leftmost:
                self._leftmost = node
        else:
            parent.right = node
            if parent is self._rightmost:
                self._rightmost = node

        self._size += 1
        insert_fixup(self._end, node)
        return node

    def swap(self, other):
        """
        Exchange the whole contents of two trees in O(1).
        """
        self._less, other._less = other._less, self._less
        self._arena, other._arena = other._arena, self._arena
        self._end, other._end = other._end, self._end
        self._leftmost, other._leftmost = other._leftmost, self._leftmost
        self._rightmost, other._rightmost = other._rightmost, self._rightmost
        self._size, other._size = other._size, self._size
        logger.debug("swapped trees of %d and %d keys", self._size, other._size)

    def move(self):
        """
        Hand every node over to a new tree in O(1). This tree is left empty and
        can be reused.
        """
        moved = RBTree(less=self._less)
        moved.swap(self)
        return moved

    def move_from(self, other):
        """
        Replace this tree's contents with `other`'s by transfer; `other` ends up
        empty.
        """
        if other is self:
            return
        self.swap(other)
        other._reset()

    def assign(self, other):
        """
        Replace this tree's contents with a structural clone of `other`.
        """
        if other is self:
            return
        self.swap(other.copy())

    # lookup

    def _position(self, node):
        return TreeIterator(node if node is not None else self._end)

    def find(self, key):
        return self._position(find(self._root, key, self._less))

    def lower_bound(self, key):
        return self._position(lower_bound(self._root, key, self._less))

    def upper_bound(self, key):
        return self._position(upper_bound(self._root, key, self._less))

    def contains(self, key):
        return find(self._root, key, self._less) is not None

    __contains__ = contains

    # whole-tree copies

    def copy(self, copy_key=None):
        """
        Build an independent tree with the same keys, the same shape and the
        same colors. Source and clone are walked in lockstep: go left while
        the source has a left child the clone lacks, then right, otherwise
        climb both. `copy_key` is applied to every key; by default keys are
        shared.
        """
        clone = RBTree(less=self._less)
        source_root = self._root
        if source_root is None:
            return clone

        if copy_key is None:
            copy_key = _identity

        arena = clone._arena
        root = arena.allocate(copy_key(source_root.key), source_root.color)
        root.parent = clone._end
        clone._end.left = root
        clone._note_cache(source_root, root, self)

        src, dst = source_root, root
        while src is not self._end:
            if src.left is not None and dst.left is None:
                src = src.left
                child = arena.allocate(copy_key(src.key), src.color)
                child.parent = dst
                dst.left = child
                dst = child
                clone._note_cache(src, dst, self)
            elif src.right is not None and dst.right is None:
                src = src.right
                child = arena.allocate(copy_key(src.key), src.color)
                child.parent = dst
                dst.right = child
                dst = child
                clone._note_cache(src, dst, self)
            else:
                src = src.parent
                dst = dst.parent

        clone._size = self._size
        logger.debug("copied tree of %d keys", clone._size)
        return clone

    def _note_cache(self, src, dst, source):
        if src is source._leftmost:
            self._leftmost = dst
        if src is source._rightmost:
            self._rightmost = dst

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy(copy_key=lambda key: _copy.deepcopy(key, memo))

    # diagnostics

    def height(self):
        """
        Number of nodes on the longest root-to-leaf path, 0 when empty.
        """
        level = [self._root] if self._root is not None else []
        height = 0
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def validate(self):
        """
        Check every red-black and bookkeeping invariant. Returns the number of
        black nodes on each root-to-leaf path, or raises `TreeCorruption`
        describing the first violation found.
        """
        try:
            return self._check()
        except TreeCorruption as e:
            logger.error("red-black tree failed validation: %s", e)
            raise

    def _check(self):
        end = self._end
        root = end.left

        if root is None:
            if self._size:
                raise TreeCorruption(f"empty root but size is {self._size}")
            if self._leftmost is not end or self._rightmost is not end:
                raise TreeCorruption("empty tree caches do not point at the end")
            return 0

        if root.parent is not end:
            raise TreeCorruption("root parent is not the end node")
        if root.color is not Color.BLACK:
            raise TreeCorruption("root is not black")
        if self._leftmost is not subtree_min(root):
            raise TreeCorruption("leftmost cache is not the minimum")
        if self._rightmost is not subtree_max(root):
            raise TreeCorruption("rightmost cache is not the maximum")

        black_height = None
        for node in self._arena:
            for child in (node.left, node.right):
                if child is None:
                    continue
                if child.parent is not node:
                    raise TreeCorruption(f"broken parent link under {node!r}")
                if node.is_red and child.is_red:
                    raise TreeCorruption(f"red node {node!r} has red child {child!r}")

            if node.left is None or node.right is None:
                blacks = 0
                walk = node
                while walk is not end:
                    if not is_red(walk):
                        blacks += 1
                    walk = walk.parent
                if black_height is None:
                    black_height = blacks
                elif blacks != black_height:
                    raise TreeCorruption(
                        f"black height {blacks} below {node!r}, expected {black_height}"
                    )

        count = 0
        previous = None
        node = self._leftmost
        while node is not end:
            if previous is not None and not self._less(previous.key, node.key):
                raise TreeCorruption(f"{previous!r} is not less than {node!r}")
            count += 1
            if count > self._size:
                break
            previous = node
            node = successor(node)

        if count != self._size or len(self._arena) != self._size:
            raise TreeCorruption(
                f"size is {self._size} but the tree holds {count} reachable "
                f"and {len(self._arena)} allocated nodes"
            )

        return black_height

    def __repr__(self):
        keys = []
        for key in self:
            if len(keys) == settings.REPR_MAX_KEYS:
                keys.append("...")
                break
            keys.append(repr(key))
        return f"RBTree([{', '.join(keys)}])"


def _identity(key):
    return key
