import random

import pytest

from algobox.trees import (
    BinarySearchTree,
    BinaryTree,
    Node,
    inorder,
    level_order,
    postorder,
    preorder,
)

BST_KEYS = [7, 5, 6, 3, 4, 9, 8, 2, 1, 10]
DUPLICATE_KEYS = [7, 6, 4, 5, 9, 8, 10, 25, 12, 9, 11, 2, 3, 1]
LEVEL_KEYS = [5, 9, 7, 4, 2, 20]
COMPLETE_KEYS = [1, 3, 5, 6, 8, 2, 7, 9, 4, 10]


def _manual_tree() -> Node:
    root = Node(2)
    left = root.add_left(5)
    right = root.add_right(8)
    left.add_left(10)
    left.add_right(11)
    right.add_left(3)
    right.add_right(4)
    return root


def test_add_children_attach_and_return_nodes():
    root = Node(2)
    left = root.add_left(5)
    right = root.add_right(8)
    assert root.left is left and left.value == 5
    assert root.right is right and right.value == 8


def test_manual_tree_preorder_pinned():
    assert preorder(_manual_tree()) == [2, 5, 10, 11, 8, 3, 4]


def test_manual_tree_inorder_pinned():
    assert inorder(_manual_tree()) == [10, 5, 11, 2, 3, 8, 4]


def test_manual_tree_postorder_pinned():
    assert postorder(_manual_tree()) == [10, 11, 5, 3, 4, 8, 2]


def test_traversals_agree_on_root_and_contents():
    root = _manual_tree()
    assert preorder(root)[0] == root.value
    assert postorder(root)[-1] == root.value
    assert level_order(root)[0] == root.value
    expected = sorted(level_order(root))
    for order in (inorder(root), preorder(root), postorder(root)):
        assert sorted(order) == expected


@pytest.mark.parametrize("traversal", [inorder, preorder, postorder, level_order])
def test_traversals_of_empty_tree(traversal):
    assert traversal(None) == []


def test_bst_inorder_is_sorted():
    tree = BinarySearchTree(BST_KEYS)
    assert inorder(tree.root) == sorted(BST_KEYS)
    assert list(tree) == sorted(BST_KEYS)
    assert len(tree) == len(BST_KEYS)


def test_bst_root_is_first_inserted():
    tree = BinarySearchTree(BST_KEYS)
    assert tree.root.value == BST_KEYS[0]


def test_bst_search():
    tree = BinarySearchTree(BST_KEYS)
    assert (11 in tree) is False
    assert all(key in tree for key in BST_KEYS)


def test_bst_min_value():
    assert BinarySearchTree(BST_KEYS).min_value() == min(BST_KEYS)


def test_bst_min_value_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().min_value()


def test_bst_delete_root_with_two_children():
    tree = BinarySearchTree(BST_KEYS)
    tree.delete(7)
    assert inorder(tree.root) == sorted(k for k in BST_KEYS if k != 7)
    assert tree.root.value == 8
    assert 7 not in tree


def test_bst_delete_leaf_and_single_child():
    tree = BinarySearchTree(BST_KEYS)
    tree.delete(1)
    tree.delete(2)
    assert inorder(tree.root) == sorted(k for k in BST_KEYS if k not in (1, 2))


def test_bst_delete_missing_raises():
    tree = BinarySearchTree(BST_KEYS)
    with pytest.raises(KeyError):
        tree.delete(11)
    assert inorder(tree.root) == sorted(BST_KEYS)


def test_bst_delete_everything_in_random_order():
    keys = list(range(50))
    rng = random.Random(7)
    rng.shuffle(keys)
    tree = BinarySearchTree(keys)
    remaining = sorted(keys)
    order = list(keys)
    rng.shuffle(order)
    for key in order:
        tree.delete(key)
        remaining.remove(key)
        assert inorder(tree.root) == remaining
    assert tree.root is None


def test_bst_ignores_duplicates_when_asked():
    tree = BinarySearchTree(DUPLICATE_KEYS, allow_duplicates=False)
    assert tree.root.value == DUPLICATE_KEYS[0]
    assert inorder(tree.root) == sorted(set(DUPLICATE_KEYS))
    assert tree.insert(9) is False
    assert len(tree) == len(set(DUPLICATE_KEYS))


def test_bst_keeps_duplicates_by_default():
    tree = BinarySearchTree(DUPLICATE_KEYS)
    assert inorder(tree.root) == sorted(DUPLICATE_KEYS)
    tree.delete(9)
    assert inorder(tree.root).count(9) == DUPLICATE_KEYS.count(9) - 1


def test_bst_preorder_round_trip():
    tree = BinarySearchTree(BST_KEYS)
    rebuilt = BinarySearchTree(preorder(tree.root))
    assert preorder(rebuilt.root) == preorder(tree.root)
    assert postorder(rebuilt.root) == postorder(tree.root)


def test_bst_degenerate_tree_is_traversed_without_recursion_limit():
    tree = BinarySearchTree(range(5000))
    assert inorder(tree.root) == list(range(5000))
    assert postorder(tree.root) == list(range(4999, -1, -1))
    assert tree.min_value() == 0


def test_binary_tree_level_order_matches_insertion_order():
    tree = BinaryTree(LEVEL_KEYS)
    assert level_order(tree.root) == LEVEL_KEYS
    assert list(tree) == LEVEL_KEYS
    assert len(tree) == len(LEVEL_KEYS)


def test_binary_tree_fills_left_to_right():
    tree = BinaryTree(LEVEL_KEYS)
    root = tree.root
    assert root.value == LEVEL_KEYS[0]
    assert root.left.value == LEVEL_KEYS[1]
    assert root.right.value == LEVEL_KEYS[2]
    assert root.left.left.value == LEVEL_KEYS[3]
    assert root.left.right.value == LEVEL_KEYS[4]
    assert root.right.left.value == LEVEL_KEYS[5]
    assert root.right.right is None


def test_binary_tree_insert_returns_new_node():
    tree = BinaryTree(COMPLETE_KEYS)
    node = tree.insert(99)
    assert node.value == 99
    assert level_order(tree.root) == COMPLETE_KEYS + [99]


def test_binary_tree_traversals_share_contents():
    tree = BinaryTree(COMPLETE_KEYS)
    assert preorder(tree.root)[0] == COMPLETE_KEYS[0]
    assert postorder(tree.root)[-1] == COMPLETE_KEYS[0]
    assert sorted(preorder(tree.root)) == sorted(COMPLETE_KEYS)
    assert sorted(postorder(tree.root)) == sorted(COMPLETE_KEYS)