"""Binary search tree nodes with parent links and the classic tree operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class BstNode:
    """A binary search tree node holding an integer key."""

    key: int
    parent: Optional["BstNode"] = field(default=None, repr=False)
    left: Optional["BstNode"] = None
    right: Optional["BstNode"] = None

    def add_left_child(self, key: int) -> "BstNode":
        """Attach a new left child with this node as its parent and return it."""
        child = BstNode(key, parent=self)
        self.left = child
        return child

    def add_right_child(self, key: int) -> "BstNode":
        """Attach a new right child with this node as its parent and return it."""
        child = BstNode(key, parent=self)
        self.right = child
        return child

    def copy(self) -> "BstNode":
        """Return a new node sharing this node's key, parent and children."""
        return BstNode(self.key, parent=self.parent, left=self.left, right=self.right)

    def tree_search(self, key: int) -> Optional["BstNode"]:
        """Find the node holding ``key`` in the subtree rooted here.

        The search goes left when ``key`` is smaller and a left child exists;
        in every other case it goes right.
        """
        node: Optional[BstNode] = self
        while node is not None:
            if node.key == key:
                return node
            if key < node.key and node.left is not None:
                node = node.left
            else:
                node = node.right
        return None

    def minimum(self) -> "BstNode":
        """The leftmost node of the subtree rooted here."""
        node = self
        while node.left is not None:
            node = node.left
        return node

    def maximum(self) -> "BstNode":
        """The rightmost node of the subtree rooted here."""
        node = self
        while node.right is not None:
            node = node.right
        return node

    def root(self) -> "BstNode":
        """The topmost ancestor of this node, or the node itself."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def tree_successor(self) -> Optional["BstNode"]:
        """The node with the next larger key, or None for the largest key.

        Ancestors are matched against the path by key.
        """
        if self.right is not None:
            return self.right.minimum()
        x = self
        y = self.parent
        while y is not None:
            if y.left is not None and y.left.key == x.key:
                return y
            x, y = y, y.parent
        return None

    def tree_successor_simpler(self) -> Optional["BstNode"]:
        """Successor lookup driven by the "nil" test on nodes.

        A node counts as nil unless it has a parent and both children. The
        right subtree is used only when the right child is not nil; otherwise
        the walk climbs while the current ancestor is nil and the node matches
        the first ancestor's right child. Returns None when the walk ends at
        the root. Raises ValueError when the walk needs a parent that does not
        exist.
        """
        if not _is_nil(self.right):
            return self.right.minimum()
        if self.parent is None:
            raise ValueError(f"node {self.key} has no parent to climb to")
        x = self
        y = self.parent
        y_right = y.right
        while _is_nil(y) and _same_key(x, y_right):
            if y.parent is None:
                raise ValueError(f"node {y.key} has no parent to climb to")
            x, y = y, y.parent
        if _same_key(y, x.root()):
            return None
        return y


def _is_nil(node: Optional[BstNode]) -> bool:
    """True unless the node exists with a parent and both children."""
    return (
        node is None
        or node.parent is None
        or node.left is None
        or node.right is None
    )


def _same_key(first: Optional[BstNode], second: Optional[BstNode]) -> bool:
    """True when both are absent, or both present with equal keys."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return first.key == second.key


def _adopt_children(node: BstNode) -> None:
    for child in (node.left, node.right):
        if child is not None:
            child.parent = node


def tree_insert(root: BstNode, key: int) -> BstNode:
    """Insert a new node holding ``key`` below ``root`` and return it.

    Equal keys go to the right.
    """
    new_node = BstNode(key)
    parent: Optional[BstNode] = None
    current: Optional[BstNode] = root
    while current is not None:
        parent = current
        current = current.left if key < current.key else current.right
    if parent is not None:
        if key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node
        new_node.parent = parent
    return new_node


def transplant(root: BstNode, u: BstNode, v: Optional[BstNode]) -> None:
    """Replace the subtree rooted at ``u`` with the one rooted at ``v``.

    When ``u`` has no parent, the ``root`` object itself takes over the key
    and children of ``v``; this requires ``v`` to be present.
    """
    parent = u.parent
    if parent is not None:
        if parent.left is u:
            parent.left = v
        else:
            parent.right = v
        if v is not None:
            v.parent = parent
        return
    if v is None:
        raise ValueError("cannot replace the root with an empty subtree")
    v.parent = None
    root.key = v.key
    root.parent = None
    root.left = v.left
    root.right = v.right
    _adopt_children(root)


def tree_delete(root: BstNode, z: BstNode) -> None:
    """Remove node ``z`` from the tree rooted at ``root``."""
    if z.left is None:
        transplant(root, z, z.right)
        return
    if z.right is None:
        transplant(root, z, z.left)
        return
    z_left = z.left
    y = z.right.minimum()
    if y.parent is not z:
        transplant(root, y, y.right)
        y.right = z.right
        y.right.parent = y
    replaces_root = z.parent is None
    transplant(root, z, y)
    target = root if replaces_root else y
    target.left = z_left
    z_left.parent = target