"""A plain binary tree with parent links and a few structural queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


def _same_value(first: Optional["Node"], second: Optional["Node"]) -> bool:
    """True when both are absent, or both present with equal values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return first.value == second.value


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value."""

    value: int
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def add_left_child(self, value: int) -> "Node":
        """Attach a new left child with this node as its parent and return it."""
        child = Node(value, parent=self)
        self.left = child
        return child

    def add_right_child(self, value: int) -> "Node":
        """Attach a new right child with this node as its parent and return it."""
        child = Node(value, parent=self)
        self.right = child
        return child

    def copy(self) -> "Node":
        """Return a new node sharing this node's value, parent and children."""
        return Node(self.value, parent=self.parent, left=self.left, right=self.right)

    def get_node_by_value(self, value: int) -> Optional["Node"]:
        """Return a copy of the first node found with ``value``.

        The search descends into the left subtree whenever it exists and
        only falls back to the right subtree when there is no left child.
        """
        if self.value == value:
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_value(value)
        if self.right is not None:
            return self.right.get_node_by_value(value)
        return None

    def get_node_by_full_property(self, node: "Node") -> Optional["Node"]:
        """Return a copy of the node whose value, parent and children match ``node``.

        Parents and children are compared by value. The search descends left
        when a left child exists, otherwise right.
        """
        if (
            self.value == node.value
            and _same_value(node.parent, self.parent)
            and _same_value(node.left, self.left)
            and _same_value(node.right, self.right)
        ):
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_full_property(node)
        if self.right is not None:
            return self.right.get_node_by_full_property(node)
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Cut away the path leading to the node holding ``value``.

        A matching node loses its parent link; every node passed on the way
        down loses the child link it followed. Returns whether a match was found.
        """
        if self.value == value:
            self.parent = None
            return True
        if self.left is not None:
            found = self.left.discard_node_by_value(value)
            self.left = None
            return found
        if self.right is not None:
            found = self.right.discard_node_by_value(value)
            self.right = None
            return found
        return False

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here."""
        return count_nodes_from(self.copy(), 0)

    def tree_depth(self) -> int:
        """Length in edges of the longest downward path from this node."""
        left_depth = self.left.tree_depth() + 1 if self.left is not None else 0
        right_depth = self.right.tree_depth() + 1 if self.right is not None else 0
        return max(left_depth, right_depth)

    def sibling(self) -> Optional["Node"]:
        """The other child of this node's parent, or None for a root."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left


def count_nodes_from(node: Node, count: int) -> int:
    """Count the nodes under ``node``, adding ``count`` at every node visited."""
    left_count = count_nodes_from(node.left, count) if node.left is not None else 0
    right_count = count_nodes_from(node.right, count) if node.right is not None else 0
    return count + left_count + right_count + 1