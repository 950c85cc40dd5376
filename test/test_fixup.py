import pytest

from rbset.fixup import insert_fixup, rotate_left, rotate_right
from rbset.nodes import Color, EndNode, NodeArena

RED = Color.RED
BLACK = Color.BLACK


def attach(parent, child, side):
    setattr(parent, side, child)
    child.parent = parent
    return child


def make_root(arena, end, key, color=BLACK):
    root = arena.allocate(key, color)
    root.parent = end
    end.left = root
    return root


def test_rotate_left_at_root():
    arena, end = NodeArena(), EndNode()
    x = make_root(arena, end, 10)
    a = attach(x, arena.allocate(5), "left")
    y = attach(x, arena.allocate(20), "right")
    b = attach(y, arena.allocate(15), "left")
    c = attach(y, arena.allocate(25), "right")

    assert rotate_left(x) is y

    assert end.left is y and y.parent is end
    assert y.left is x and x.parent is y
    assert y.right is c
    assert x.left is a and x.right is b
    assert b.parent is x


def test_rotate_right_below_root():
    arena, end = NodeArena(), EndNode()
    root = make_root(arena, end, 50)
    y = attach(root, arena.allocate(30), "left")
    x = attach(y, arena.allocate(20), "left")
    b = attach(x, arena.allocate(25), "right")

    assert rotate_right(y) is x

    assert root.left is x and x.parent is root
    assert x.right is y and y.parent is x
    assert y.left is b and b.parent is y
    assert x.left is None


def test_rotate_without_child():
    arena, end = NodeArena(), EndNode()
    root = make_root(arena, end, 1)

    with pytest.raises(RuntimeError):
        rotate_left(root)
    with pytest.raises(RuntimeError):
        rotate_right(root)

    # nothing was relinked
    assert end.left is root and root.parent is end


def test_fixup_red_uncle_recolors():
    arena, end = NodeArena(), EndNode()
    root = make_root(arena, end, 20)
    left = attach(root, arena.allocate(10, RED), "left")
    right = attach(root, arena.allocate(30, RED), "right")
    new = attach(left, arena.allocate(5, RED), "left")

    insert_fixup(end, new)

    assert end.left is root
    assert root.color is BLACK
    assert left.color is BLACK
    assert right.color is BLACK
    assert new.color is RED


def test_fixup_straight_line_rotates_once():
    arena, end = NodeArena(), EndNode()
    top = make_root(arena, end, 10)
    mid = attach(top, arena.allocate(20, RED), "right")
    new = attach(mid, arena.allocate(30, RED), "right")

    insert_fixup(end, new)

    assert end.left is mid and mid.parent is end
    assert mid.color is BLACK
    assert mid.left is top and top.color is RED
    assert mid.right is new and new.color is RED


def test_fixup_zig_zag_rotates_twice():
    arena, end = NodeArena(), EndNode()
    top = make_root(arena, end, 30)
    mid = attach(top, arena.allocate(10, RED), "left")
    new = attach(mid, arena.allocate(20, RED), "right")

    insert_fixup(end, new)

    assert end.left is new and new.parent is end
    assert new.color is BLACK
    assert new.left is mid and mid.parent is new
    assert new.right is top and top.parent is new
    assert mid.color is RED and top.color is RED
    assert mid.right is None and top.left is None


def test_fixup_leaves_black_parent_alone():
    arena, end = NodeArena(), EndNode()
    root = make_root(arena, end, 10)
    new = attach(root, arena.allocate(5, RED), "left")

    insert_fixup(end, new)

    assert end.left is root
    assert root.left is new
    assert new.color is RED
