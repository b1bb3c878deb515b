import pytest

from drills.trees import (
    TreeNode,
    inorder_iterative,
    inorder_recursive,
    leaf_sums_by_level,
    preorder_iterative,
    preorder_recursive,
)


def small_tree():
    return TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))


def sample_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4)),
        TreeNode(3, TreeNode(5, TreeNode(7), TreeNode(8)), TreeNode(6)),
    )


def leafy_tree():
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4, None, TreeNode(8, None, TreeNode(12))), TreeNode(5, None, TreeNode(9))),
        TreeNode(3, TreeNode(6), TreeNode(7, TreeNode(10), TreeNode(11))),
    )


def bst_from(values):
    root = None
    for value in values:
        if root is None:
            root = TreeNode(value)
            continue
        node = root
        while True:
            side = "left" if value < node.value else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, TreeNode(value))
                break
            node = child
    return root


def collect(node):
    if node is None:
        return []
    return [node] + collect(node.left) + collect(node.right)


def test_inorder_of_documented_example():
    assert inorder_recursive(small_tree()) == [4, 2, 5, 1, 3]


def test_preorder_of_documented_example():
    assert preorder_recursive(small_tree()) == [1, 2, 4, 5, 3]


@pytest.mark.parametrize("tree", [small_tree(), sample_tree(), leafy_tree()])
def test_iterative_matches_recursive(tree):
    assert inorder_iterative(tree) == inorder_recursive(tree)
    assert preorder_iterative(tree) == preorder_recursive(tree)


def test_empty_tree_traversals():
    assert inorder_recursive(None) == []
    assert inorder_iterative(None) == []
    assert preorder_recursive(None) == []
    assert preorder_iterative(None) == []


def test_inorder_of_bst_is_sorted():
    values = [50, 30, 70, 20, 40, 60, 80, 35, 65]
    root = bst_from(values)
    assert inorder_iterative(root) == sorted(values)
    assert inorder_recursive(root) == sorted(values)


def test_preorder_starts_at_root_and_covers_all():
    tree = sample_tree()
    order = preorder_iterative(tree)
    assert order[0] == tree.value
    assert sorted(order) == sorted(node.value for node in collect(tree))


def test_leaf_sums_total_equals_sum_of_leaves():
    tree = leafy_tree()
    sums = leaf_sums_by_level(tree)
    leaves = [node.value for node in collect(tree) if node.is_leaf]
    assert sum(sums.values()) == sum(leaves)


def test_leaf_sums_cover_every_level_in_order():
    sums = leaf_sums_by_level(leafy_tree())
    assert list(sums) == list(range(1, len(sums) + 1))
    assert sums[1] == 0
    assert sums[len(sums)] == 12


def test_leaf_sums_single_node():
    assert leaf_sums_by_level(TreeNode(9)) == {1: 9}


def test_leaf_sums_empty_tree():
    assert leaf_sums_by_level(None) == {}