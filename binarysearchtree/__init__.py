"""Binary tree and binary search tree structures with Graphviz dot export."""

__version__ = "0.1.0"
__all__ = ["bst", "cli", "dotfile", "tree"]