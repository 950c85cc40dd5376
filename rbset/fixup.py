"""
Rotations and the post-insert rebalancing loop.

Both work purely on node links. Because the root's parent is the tree's end
node and `end.left` is the root, a rotation at the root needs no special case:
the parent slot being rewritten is just `end.left`.
"""
from .nodes import Color, is_red


def _replace_child(old, new):
    parent = old.parent
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new
    new.parent = parent


def rotate_left(node):
    """
    Rotates the subtree rooted at `node` so that its right child becomes the
    new subtree root and `node` becomes that child's left child.
    """
    pivot = node.right
    if pivot is None:
        raise RuntimeError("rotate_left called on a node with no right child")

    node.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = node

    _replace_child(node, pivot)

    pivot.left = node
    node.parent = pivot
    return pivot


def rotate_right(node):
    """
    Inverse of `rotate_left`.
    """
    pivot = node.left
    if pivot is None:
        raise RuntimeError("rotate_right called on a node with no left child")

    node.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = node

    _replace_child(node, pivot)

    pivot.right = node
    node.parent = pivot
    return pivot


def insert_fixup(end, node):
    """
    Restore the red-black properties after `node` was attached as a red leaf.
    `end` is the tree's end node, whose `left` is the root.
    """
    while is_red(node.parent):
        parent = node.parent
        grandparent = parent.parent

        if parent is grandparent.left:
            uncle = grandparent.right
            if is_red(uncle):
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
                continue

            if node is parent.right:
                # zig-zag, straighten it first
                rotate_left(parent)
                node, parent = parent, node

            rotate_right(grandparent)
        else:
            uncle = grandparent.left
            if is_red(uncle):
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
                continue

            if node is parent.left:
                rotate_right(parent)
                node, parent = parent, node

            rotate_left(grandparent)

        parent.color = Color.BLACK
        grandparent.color = Color.RED
        break

    end.left.color = Color.BLACK
