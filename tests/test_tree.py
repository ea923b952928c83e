import pytest

from dsakit.tree import (
    TreeNode,
    inorder_traversal,
    is_same_tree,
    max_depth,
    preorder,
)


def sample_tree():
    left = TreeNode(5, TreeNode(19), TreeNode(22))
    right = TreeNode(7, TreeNode(34), TreeNode(93))
    return TreeNode(3, left, right)


def left_chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


def test_preorder_of_sample_tree():
    assert list(preorder(sample_tree())) == [3, 5, 19, 22, 7, 34, 93]


def test_preorder_of_empty_tree():
    assert list(preorder(None)) == []


def test_inorder_of_sample_tree():
    assert inorder_traversal(sample_tree()) == [19, 5, 22, 3, 34, 7, 93]


def test_inorder_of_empty_tree():
    assert inorder_traversal(None) == []


def test_inorder_of_left_chain_is_reversed():
    values = [1, 2, 3, 4, 5]
    assert inorder_traversal(left_chain(values)) == list(reversed(values))


def test_traversals_visit_same_values():
    tree = sample_tree()
    assert sorted(preorder(tree)) == sorted(inorder_traversal(tree))


def test_same_tree_for_equal_copies():
    assert is_same_tree(sample_tree(), sample_tree()) is True


def test_same_tree_both_empty():
    assert is_same_tree(None, None) is True


def test_same_tree_one_empty():
    assert is_same_tree(sample_tree(), None) is False
    assert is_same_tree(None, sample_tree()) is False


def test_same_tree_different_value():
    other = sample_tree()
    other.right.left.val = 35
    assert is_same_tree(sample_tree(), other) is False


def test_same_tree_different_shape():
    a = TreeNode(1, TreeNode(2))
    b = TreeNode(1, None, TreeNode(2))
    assert is_same_tree(a, b) is False


def test_max_depth_empty():
    assert max_depth(None) == 0


def test_max_depth_single_node():
    assert max_depth(TreeNode(1)) == 1


@pytest.mark.parametrize("count", [1, 2, 5, 50])
def test_max_depth_of_chain_equals_length(count):
    assert max_depth(left_chain(list(range(count)))) == count


def test_max_depth_of_sample_tree():
    assert max_depth(sample_tree()) == 3


def test_default_node_value():
    node = TreeNode()
    assert (node.val, node.left, node.right) == (0, None, None)