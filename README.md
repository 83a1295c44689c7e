# binarysearchtree

Small binary tree and binary search tree structures that keep parent links,
plus helpers that write a tree out as a Graphviz `dot` graph.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command

```
binarysearchtree [--demo {bst,tree}] [--output-dir DIR]
```

`--demo bst` (the default) builds a sample binary search tree, writes it to
`bst_graph.dot`, prints the results of search, minimum, maximum, root and
successor queries, then inserts key 8, transplants a new node 99 in its
place, deletes key 7 and writes the final tree to `bst_updated.dot`.

`--demo tree` builds a small plain binary tree, prints its depth and node
counts and the results of lookups and a discard, and writes `prime.dot`,
`prime_t2.dot`, `prime_t3.dot` and `prime_t4.dot`.

`--output-dir` names the directory that receives the dot files; it is
created if missing and defaults to the current directory.

The same demonstrations are available as `binarysearchtree.cli.run_bst_demo`
and `run_tree_demo`, each taking the output directory and returning the
tree's root; `build_sample_bst()` returns the sample search tree on its own.

## Binary search tree

`binarysearchtree.bst.BstNode` holds an integer `key` and `parent`, `left`
and `right` links.

```python
from binarysearchtree.bst import BstNode, tree_insert, tree_delete, transplant
from binarysearchtree.dotfile import bst_dot, generate_dotfile_bst

root = BstNode(15)
root.add_left_child(6)
root.add_right_child(18)

found = root.tree_search(6)
print(found.key if found else "not found")
print(root.minimum().key, root.maximum().key)

tree_insert(root, 8)
print(bst_dot(root))
generate_dotfile_bst(root, "tree.dot")
```

- `add_left_child(key)` / `add_right_child(key)` attach and return a new
  child whose parent is the node.
- `tree_search(key)` returns the node holding `key`, or `None`.
- `minimum()`, `maximum()` and `root()` return the leftmost, rightmost and
  topmost node.
- `tree_successor()` returns the node with the next larger key, or `None`.
- `tree_successor_simpler()` is an alternative successor walk that only
  uses a right subtree whose root has a parent and both children; it may
  return `None` or raise `ValueError` where a textbook successor exists.
- `copy()` returns a new node sharing the key, parent and children.
- `tree_insert(root, key)` inserts and returns a new node; equal keys go
  right.
- `transplant(root, u, v)` replaces the subtree at `u` with `v`. When `u`
  has no parent the `root` object takes over `v`'s key and children, and a
  missing `v` raises `ValueError`.
- `tree_delete(root, z)` removes `z` from the tree.

## Plain binary tree

`binarysearchtree.tree.Node` holds an integer `value`:

```python
from binarysearchtree.tree import Node, count_nodes_from

root = Node(5)
root.add_left_child(3)
root.add_right_child(7)
print(root.count_nodes(), root.tree_depth())
```

- `count_nodes()` counts the subtree; `count_nodes_from(node, count)` does
  the same, adding `count` at every node visited.
- `tree_depth()` is the number of edges on the longest downward path.
- `sibling()` returns the other child of the parent, or `None` for a root.
- `get_node_by_value(value)` and `get_node_by_full_property(node)` return a
  copy of a matching node; they descend left whenever a left child exists
  and only go right otherwise.
- `discard_node_by_value(value)` cuts the links along the path to the
  matching node and returns whether it was found.

## Dot output

`binarysearchtree.dotfile` has `tree_dot` and `bst_dot`, which return the
graph text, and `generate_dotfile` and `generate_dotfile_bst`, which write
it to a path. The output is an undirected graph named `tree` with one
`parent--child;` edge per line: a node's edges to its children, then those
of its left subtree, then those of its right subtree.

## What it does not do

The package only writes `dot` text. It does not render graphs to images;
use Graphviz itself for that. The trees do not balance themselves.