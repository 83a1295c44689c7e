"""Render trees as undirected graphviz graphs."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, Optional, TypeVar, Union

from binarysearchtree.bst import BstNode
from binarysearchtree.tree import Node

_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"

_T = TypeVar("_T", Node, BstNode)


def _edge_lines(node: _T, label: Callable[[_T], int]) -> Iterator[str]:
    """Edges of ``node`` to its children, then those of the left and right subtrees."""
    children: list[Optional[_T]] = [node.left, node.right]
    for child in children:
        if child is not None:
            yield f"\t{label(node)}--{label(child)};\n"
    for child in children:
        if child is not None:
            yield from _edge_lines(child, label)


def tree_dot(root: Node) -> str:
    """Graphviz text for a plain binary tree."""
    body = "".join(_edge_lines(root, lambda node: node.value))
    return _PREAMBLE + body + _EPILOGUE


def bst_dot(root: BstNode) -> str:
    """Graphviz text for a binary search tree."""
    body = "".join(_edge_lines(root, lambda node: node.key))
    return _PREAMBLE + body + _EPILOGUE


def generate_dotfile(root: Node, output_path: Union[str, Path]) -> None:
    """Write the graphviz text of a plain binary tree to ``output_path``."""
    Path(output_path).write_text(tree_dot(root))


def generate_dotfile_bst(root: BstNode, output_path: Union[str, Path]) -> None:
    """Write the graphviz text of a binary search tree to ``output_path``."""
    Path(output_path).write_text(bst_dot(root))