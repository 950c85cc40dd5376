"""
Descent routines over a subtree. None of these allocate or mutate anything;
they return a node or None and leave it to the caller to map None to `end()`.

Keys are only ever compared with `less(a, b)`. A key equals a node's key when
neither is less than the other.
"""


def subtree_min(node):
    while node.left is not None:
        node = node.left
    return node


def subtree_max(node):
    while node.right is not None:
        node = node.right
    return node


def find(root, key, less):
    current = root

    while current is not None:
        if less(key, current.key):
            current = current.left
        elif less(current.key, key):
            current = current.right
        else:
            return current

    return None


def find_with_parent(root, key, less):
    """
    Same descent as `find` but also hands back the last node visited, which is
    where a missing key would be attached. Returns `(node, parent)`; `node` is
    None on a miss and `parent` is None only when the tree is empty.
    """
    parent = None
    current = root

    while current is not None:
        if less(key, current.key):
            parent, current = current, current.left
        elif less(current.key, key):
            parent, current = current, current.right
        else:
            return current, parent

    return None, parent


def lower_bound(root, key, less):
    """
    The node holding the smallest key that is not less than `key`.
    """
    candidate = None
    current = root

    while current is not None:
        if less(current.key, key):
            current = current.right
        else:
            candidate = current
            current = current.left

    return candidate


def upper_bound(root, key, less):
    """
    The node holding the smallest key greater than `key`.
    """
    candidate = None
    current = root

    while current is not None:
        if less(key, current.key):
            candidate = current
            current = current.left
        else:
            current = current.right

    return candidate
