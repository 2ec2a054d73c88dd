import pytest

from bintree.tree import Node


@pytest.fixture
def sample():
    """98 with left 12 (right 54) and right 128 (right 402)."""
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


@pytest.fixture
def full_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(56, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _left_chain(values):
    root = Node(values[0])
    nodes = [root]
    for value in values[1:]:
        nodes.append(nodes[-1].insert_left(value))
    return root, nodes


def test_new_node_has_no_links():
    node = Node(5)
    assert node.value == 5
    assert node.parent is None
    assert node.left is None and node.right is None
    assert node.is_root() and node.is_leaf()


def test_node_with_parent_is_not_attached():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert root.left is None and root.right is None


def test_insert_left_into_empty_slot():
    root = Node(98)
    new = root.insert_left(54)
    assert root.left is new
    assert new.parent is root
    assert new.value == 54


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.parent is root


def test_insert_right_pushes_existing_child_down(sample):
    new = sample.right
    assert new.value == 128
    assert new.right.value == 402
    assert new.right.parent is new
    assert new.parent is sample
    assert sample.left.right.parent is sample.left


def test_delete_detaches_subtree(sample):
    before = sample.size()
    branch = sample.right
    removed = branch.size()
    branch.delete()
    assert sample.right is None
    assert sample.size() == before - removed
    assert branch.parent is None and branch.left is None and branch.right is None


def test_is_leaf_and_is_root(sample):
    assert not sample.is_leaf()
    assert not sample.right.is_leaf()
    assert sample.right.right.is_leaf()
    assert sample.is_root()
    assert not sample.right.is_root()
    assert not sample.right.right.is_root()


def test_preorder(full_tree):
    assert list(full_tree.preorder()) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder_of_search_tree_is_sorted(full_tree):
    values = list(full_tree.inorder())
    assert values == sorted(full_tree.preorder())


def test_postorder(full_tree):
    assert list(full_tree.postorder()) == [6, 56, 12, 256, 512, 402, 98]


def test_traversals_visit_every_node_once(sample):
    pre = list(sample.preorder())
    assert sorted(pre) == sorted(sample.inorder()) == sorted(sample.postorder())
    assert len(pre) == sample.size()


def test_height_of_leaf_is_zero():
    assert Node(1).height() == 0


def test_height_and_depth_of_chain():
    values = [10, 20, 30, 40, 50]
    root, nodes = _left_chain(values)
    assert root.height() == len(values) - 1
    for index, node in enumerate(nodes):
        assert node.depth() == index
        assert node.height() == len(values) - 1 - index


def test_depth_of_child_is_one_more_than_parent(sample):
    for child in (sample.left, sample.right, sample.right.right):
        assert child.depth() == child.parent.depth() + 1


def test_height_exceeds_child_heights(sample):
    assert sample.height() == max(sample.left.height(), sample.right.height()) + 1


def test_size_is_sum_of_parts(sample):
    assert sample.size() == sample.left.size() + sample.right.size() + 1


def test_leaves_and_internal_nodes_partition(sample, full_tree):
    for tree in (sample, full_tree):
        assert tree.leaves() + tree.internal_nodes() == tree.size()


def test_full_tree_has_one_more_leaf_than_inner_node(full_tree):
    assert full_tree.leaves() == full_tree.internal_nodes() + 1


def test_balance_of_perfect_tree_is_zero(full_tree):
    assert full_tree.balance() == 0
    assert full_tree.left.balance() == 0


def test_balance_mirrors():
    left_root, _ = _left_chain([1, 2, 3])
    right_root = Node(1)
    right_root.insert_right(2).insert_right(3)
    assert left_root.balance() == -right_root.balance()
    assert left_root.balance() == left_root.height()


def test_balance_of_leaf_is_zero():
    assert Node(7).balance() == 0


def test_is_full():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    root.left.left = Node(10, root.left)
    assert not root.is_full()
    assert root.left.is_full()
    assert not root.right.is_full()


def test_is_perfect_progression():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    assert root.is_perfect()
    root.right.right.left = Node(10, root.right.right)
    assert not root.is_perfect()
    root.right.right.right = Node(10, root.right.right)
    assert not root.is_perfect()


def test_leaf_is_perfect():
    assert Node(3).is_perfect()


@pytest.fixture
def family():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_sibling(family):
    assert family.left.sibling() is family.right
    assert family.right.left.sibling() is family.right.right
    assert family.left.right.sibling() is family.left.left
    assert family.sibling() is None


def test_sibling_missing():
    root = Node(1)
    child = root.insert_left(2)
    assert child.sibling() is None


def test_uncle(family):
    assert family.right.left.uncle() is family.left
    assert family.left.right.uncle() is family.right
    assert family.left.uncle() is None
    assert family.uncle() is None


def test_preorder_handles_deep_chain():
    values = list(range(5000))
    root, _ = _left_chain(values)
    assert list(root.preorder()) == values
    assert list(root.inorder()) == values[::-1]
    assert root.height() == len(values) - 1