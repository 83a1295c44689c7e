"""Command-line demonstrations of the binary tree and binary search tree."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

from binarysearchtree.bst import BstNode, transplant, tree_delete, tree_insert
from binarysearchtree.dotfile import generate_dotfile, generate_dotfile_bst
from binarysearchtree.tree import Node, count_nodes_from

_SEARCH_KEYS = (15, 9, 22)
_SUCCESSOR_KEYS = (2, 20, 15, 13, 9, 7, 22)

PathLike = Union[str, Path]


def build_sample_bst() -> BstNode:
    """Build the sample search tree used by the demonstration."""
    root = BstNode(15)
    six = root.add_left_child(6)
    eighteen = root.add_right_child(18)

    eighteen.add_left_child(17)
    eighteen.add_right_child(20)

    three = six.add_left_child(3)
    seven = six.add_right_child(7)
    three.add_left_child(2)
    three.add_right_child(4)
    thirteen = seven.add_right_child(13)
    thirteen.add_left_child(9)
    return root


def _find(root: BstNode, key: int) -> BstNode:
    node = root.tree_search(key)
    if node is None:
        raise LookupError(f"no node with key {key}")
    return node


def _output_dir(output_dir: PathLike) -> Path:
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def run_bst_demo(output_dir: PathLike) -> BstNode:
    """Exercise the search tree operations, printing results and writing dot files.

    Returns the root of the tree as it stands at the end.
    """
    directory = _output_dir(output_dir)
    root = build_sample_bst()
    generate_dotfile_bst(root, directory / "bst_graph.dot")

    for key in _SEARCH_KEYS:
        found = root.tree_search(key)
        result = f"found -> {found.key}" if found is not None else "not found"
        print(f"tree search result of key {key} is {result}")

    min_node = root.minimum()
    print(f"minimum result {min_node.key}")
    max_node = root.maximum()
    print(f"maximum result {max_node.key}")
    print(f"root node {max_node.root().key}")

    for key in _SUCCESSOR_KEYS:
        node = root.tree_search(key)
        if node is None:
            print(f"node with key of {key} does not exist, failed to get successor")
            continue
        successor = node.tree_successor_simpler()
        shown = successor.key if successor is not None else "not found"
        print(f"successor of node ({key}) is {shown}")

    print("\ntest tree_insert")
    inserted = tree_insert(root, 8)
    print(f"Inserted node with key {inserted.key}")

    print("\ntest transplant")
    new_node = BstNode(99)
    transplant(root, _find(root, 8), new_node)
    print(f"Transplanted node with key 8 with new node key {new_node.key}")

    print("\ntest tree_delete")
    tree_delete(root, _find(root, 7))
    print("Deleted node with key 7")

    generate_dotfile_bst(root, directory / "bst_updated.dot")
    return root


def run_tree_demo(output_dir: PathLike) -> Node:
    """Exercise the plain binary tree queries, printing results and writing dot files.

    Returns the root of the original tree.
    """
    directory = _output_dir(output_dir)
    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    generate_dotfile(root, directory / "prime.dot")

    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    generate_dotfile(root, directory / "prime_t2.dot")

    print(f"Current tree depth: {root.tree_depth()}")
    print(f"Amount of nodes in current tree: {root.count_nodes()}")
    print(f"Amount of nodes in current subtree: {count_nodes_from(right, 0)}")

    left.sibling()

    by_value = root.get_node_by_value(3)
    print(f"left subtree seek by value {by_value!r}")
    if by_value is None:
        raise LookupError("no node with value 3")
    by_property = root.get_node_by_full_property(by_value)
    print(f"left subtree seek by full property {by_property!r}")

    root_copy = root.copy()
    flag = root_copy.discard_node_by_value(3)
    print(f"status of node deletion: {str(flag).lower()}")
    generate_dotfile(root_copy, directory / "prime_t3.dot")

    print(f"Depth after discard {root_copy.tree_depth()}")
    print(f"Count nodes after discard {root_copy.count_nodes()}")

    generate_dotfile(root, directory / "prime_t4.dot")
    return root


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a demonstration and write its dot files to the chosen directory."""
    parser = argparse.ArgumentParser(
        prog="binarysearchtree",
        description="Demonstrate binary tree operations and write graphviz files.",
    )
    parser.add_argument(
        "--demo",
        choices=("bst", "tree"),
        default="bst",
        help="which demonstration to run (default: bst)",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="directory that receives the dot files (default: current directory)",
    )
    args = parser.parse_args(argv)
    if args.demo == "tree":
        run_tree_demo(args.output_dir)
    else:
        run_bst_demo(args.output_dir)
    return 0