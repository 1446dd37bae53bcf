import pytest

from dslab.bst import BinarySearchTree, main

VALUES = [50, 30, 70, 20, 40, 60, 80]


def _feed(monkeypatch, answers):
    remaining = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_inorder_is_sorted():
    tree = BinarySearchTree.from_values(VALUES)
    assert tree.inorder() == sorted(VALUES)
    assert len(tree) == len(VALUES)


def test_root_is_first_in_preorder_and_last_in_postorder():
    tree = BinarySearchTree.from_values(VALUES)
    assert tree.preorder()[0] == VALUES[0]
    assert tree.postorder()[-1] == VALUES[0]


def test_preorder_of_known_tree():
    tree = BinarySearchTree.from_values(VALUES)
    assert tree.preorder() == [50, 30, 20, 40, 70, 60, 80]


def test_postorder_of_known_tree():
    tree = BinarySearchTree.from_values(VALUES)
    assert tree.postorder() == [20, 40, 30, 60, 80, 70, 50]


def test_duplicates_are_ignored():
    values = [3, 1, 3, 2, 1]
    tree = BinarySearchTree.from_values(values)
    assert tree.inorder() == sorted(set(values))
    assert tree.insert(values[0]) is False


def test_empty_tree_traversals():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    assert tree.preorder() == []
    assert tree.postorder() == []
    assert len(tree) == 0


@pytest.mark.parametrize("value", VALUES)
def test_delete_each_value(value):
    tree = BinarySearchTree.from_values(VALUES)
    assert tree.delete(value) is True
    assert tree.inorder() == sorted(set(VALUES) - {value})
    assert value not in tree
    assert len(tree) == len(VALUES) - 1


def test_delete_root_with_two_children_uses_successor():
    tree = BinarySearchTree.from_values(VALUES)
    tree.delete(VALUES[0])
    successor = min(v for v in VALUES if v > VALUES[0])
    assert tree.preorder()[0] == successor


def test_delete_missing_value_leaves_tree_unchanged():
    tree = BinarySearchTree.from_values(VALUES)
    before = tree.preorder()
    assert tree.delete(max(VALUES) + 1) is False
    assert tree.preorder() == before


def test_delete_every_value_empties_tree():
    tree = BinarySearchTree.from_values(VALUES)
    for value in VALUES:
        tree.delete(value)
    assert tree.inorder() == []
    assert len(tree) == 0


def test_deep_degenerate_tree():
    values = list(range(3000))
    tree = BinarySearchTree.from_values(values)
    assert tree.inorder() == values
    assert tree.preorder() == values
    assert tree.postorder() == values[::-1]
    assert tree.delete(values[0]) is True
    assert tree.inorder() == values[1:]


def test_main_create_display_delete(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "3", "2", "1", "3", "2", "3", "1", "2", "4"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Inorder Traversal: 1 2 3" in out
    assert "Element 1 deleted from the BST!" in out
    assert "Inorder Traversal: 2 3" in out


def test_main_empty_tree_messages(monkeypatch, capsys):
    _feed(monkeypatch, ["2", "3", "1", "0"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Tree is empty!" in out
    assert "Tree is empty! Deletion not possible." in out
    assert "Invalid input! Number of elements should be > 0." in out