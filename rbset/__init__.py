"""
An ordered set built on a red-black tree. It works like so:

- Every key lives in a node owned by the tree's node arena. Nodes are linked
  with left/right/parent references and colored red or black.
- The root hangs off an end node that is also the past-the-end position, so
  "is this the root" and "did iteration finish" are both identity checks.
- An insert descends once to find the attachment point, links a red leaf and
  then walks back up recoloring and rotating until no red node has a red
  parent. The height stays within 2 * log2(n + 1), so lookups and inserts are
  O(log n) in the worst case.
- Iteration steps through parent/child links only, forwards from `begin()` or
  backwards from `end()`.
- Copies reproduce the exact shape and colors of the source with a lockstep
  walk over both trees; moves and swaps just exchange ownership.

TODO:
 - [x] Cache the minimum and maximum nodes
 - [x] Structural copy without recursion
 - [ ] Key deletion (needs the double-black fix-up)

 LIMITS:
  Keys only need a strict less-than ordering, either their own `<` or the
  `less` callable passed to `RBTree`.
"""
