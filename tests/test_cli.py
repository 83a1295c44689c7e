from typing import List, Optional

import pytest

from binarysearchtree.bst import BstNode
from binarysearchtree.cli import build_sample_bst, main, run_bst_demo, run_tree_demo
from binarysearchtree.dotfile import bst_dot


def _inorder(node: Optional[BstNode]) -> List[int]:
    if node is None:
        return []
    return _inorder(node.left) + [node.key] + _inorder(node.right)


def _parents_consistent(node: BstNode) -> bool:
    for child in (node.left, node.right):
        if child is not None:
            if child.parent is not node or not _parents_consistent(child):
                return False
    return True


def test_sample_bst_holds_source_keys_in_order():
    root = build_sample_bst()
    assert _inorder(root) == [2, 3, 4, 6, 7, 9, 13, 15, 17, 18, 20]


def test_sample_bst_parent_links_are_consistent():
    root = build_sample_bst()
    assert root.parent is None
    assert _parents_consistent(root)


def test_sample_bst_each_call_builds_a_fresh_tree():
    first = build_sample_bst()
    second = build_sample_bst()
    assert first is not second
    assert first.left is not second.left
    assert _inorder(first) == _inorder(second)


def test_bst_demo_writes_both_dot_files(tmp_path):
    run_bst_demo(tmp_path)
    initial = (tmp_path / "bst_graph.dot").read_text()
    updated = (tmp_path / "bst_updated.dot").read_text()
    assert initial == bst_dot(build_sample_bst())
    assert updated.startswith("graph tree{\n")
    assert updated.endswith("}")


def test_bst_demo_updated_file_matches_returned_tree(tmp_path):
    root = run_bst_demo(tmp_path)
    assert (tmp_path / "bst_updated.dot").read_text() == bst_dot(root)


def test_bst_demo_final_tree_has_changes_applied(tmp_path):
    root = run_bst_demo(tmp_path)
    keys = _inorder(root)
    assert 7 not in keys
    assert 8 not in keys
    assert 99 in keys
    assert root.tree_search(7) is None


def test_bst_demo_prints_search_results(tmp_path, capsys):
    run_bst_demo(tmp_path)
    out = capsys.readouterr().out.splitlines()
    assert "tree search result of key 15 is found -> 15" in out
    assert "tree search result of key 9 is found -> 9" in out
    assert "tree search result of key 22 is not found" in out


def test_bst_demo_prints_extremes_and_root(tmp_path, capsys):
    root = build_sample_bst()
    run_bst_demo(tmp_path)
    out = capsys.readouterr().out.splitlines()
    assert f"minimum result {root.minimum().key}" in out
    assert f"maximum result {root.maximum().key}" in out
    assert f"root node {root.key}" in out


def test_bst_demo_prints_successors(tmp_path, capsys):
    run_bst_demo(tmp_path)
    out = capsys.readouterr().out.splitlines()
    assert "successor of node (2) is 3" in out
    assert "node with key of 22 does not exist, failed to get successor" in out


def test_bst_demo_prints_modification_steps(tmp_path, capsys):
    run_bst_demo(tmp_path)
    out = capsys.readouterr().out.splitlines()
    assert "Inserted node with key 8" in out
    assert "Transplanted node with key 8 with new node key 99" in out
    assert "Deleted node with key 7" in out


def test_bst_demo_creates_missing_directory(tmp_path):
    target = tmp_path / "nested" / "out"
    run_bst_demo(target)
    assert (target / "bst_graph.dot").is_file()


def test_tree_demo_writes_four_dot_files(tmp_path):
    run_tree_demo(tmp_path)
    names = sorted(path.name for path in tmp_path.iterdir())
    assert names == ["prime.dot", "prime_t2.dot", "prime_t3.dot", "prime_t4.dot"]


def test_tree_demo_first_file_holds_root_edges(tmp_path):
    run_tree_demo(tmp_path)
    assert (tmp_path / "prime.dot").read_text() == "graph tree{\n\t5--3;\n\t5--7;\n}"


def test_tree_demo_original_tree_keeps_its_children(tmp_path):
    root = run_tree_demo(tmp_path)
    second = (tmp_path / "prime_t2.dot").read_text()
    fourth = (tmp_path / "prime_t4.dot").read_text()
    assert second == fourth
    assert root.left is not None and root.left.value == 3


def test_tree_demo_discarded_copy_loses_left_subtree(tmp_path):
    run_tree_demo(tmp_path)
    third = (tmp_path / "prime_t3.dot").read_text()
    assert "5--3" not in third
    assert "\t5--7;\n" in third


def test_tree_demo_reports_successful_discard(tmp_path, capsys):
    run_tree_demo(tmp_path)
    out = capsys.readouterr().out.splitlines()
    assert "status of node deletion: true" in out


def test_tree_demo_counts_agree_with_returned_tree(tmp_path, capsys):
    root = run_tree_demo(tmp_path)
    out = capsys.readouterr().out.splitlines()
    assert f"Current tree depth: {root.tree_depth()}" in out
    assert f"Amount of nodes in current tree: {root.count_nodes()}" in out


def test_main_runs_bst_demo_by_default(tmp_path):
    assert main(["--output-dir", str(tmp_path)]) == 0
    assert (tmp_path / "bst_graph.dot").is_file()
    assert (tmp_path / "bst_updated.dot").is_file()
    assert not (tmp_path / "prime.dot").exists()


def test_main_runs_tree_demo_on_request(tmp_path):
    assert main(["--demo", "tree", "--output-dir", str(tmp_path)]) == 0
    assert (tmp_path / "prime_t4.dot").is_file()
    assert not (tmp_path / "bst_graph.dot").exists()


def test_main_rejects_unknown_demo(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--demo", "forest", "--output-dir", str(tmp_path)])
    assert excinfo.value.code == 2