"""A binary search tree of distinct integers with an interactive menu."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """An unbalanced search tree; inserting a value already present does nothing."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    @classmethod
    def from_values(cls, values: Iterable[int]) -> BinarySearchTree:
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    def insert(self, value: int) -> bool:
        """Add ``value``; return False if it was already in the tree."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return True
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def _replace(self, parent: _Node | None, old: _Node, new: _Node | None) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def delete(self, value: int) -> bool:
        """Remove ``value``; return False if it was not in the tree."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return False
        if node.left is None:
            self._replace(parent, node, node.right)
        elif node.right is None:
            self._replace(parent, node, node.left)
        else:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            self._replace(successor_parent, successor, successor.right)
        self._size -= 1
        return True

    def inorder(self) -> list[int]:
        result: list[int] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def preorder(self) -> list[int]:
        result: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[int]:
        result: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return iter(self.inorder())


def _ask_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _line(values: list[int]) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Run the binary search tree menu on standard input and output."""
    tree = BinarySearchTree()
    try:
        while True:
            print("\n=== BINARY SEARCH TREE OPERATIONS MENU ===")
            print("1. Create a BST")
            print("2. Display traversals (Inorder, Preorder, Postorder)")
            print("3. Delete an element from BST")
            print("4. Exit")
            choice = _ask_int("Enter your choice (1-4): ")
            if choice == 1:
                count = _ask_int("\nEnter the number of elements to insert: ")
                if count is None or count <= 0:
                    print("\nInvalid input! Number of elements should be > 0.")
                    continue
                tree = BinarySearchTree()
                print("\nEnter the elements:")
                entered = 0
                while entered < count:
                    value = _ask_int(f"Element {entered + 1}: ")
                    if value is None:
                        print("Invalid element!")
                        continue
                    tree.insert(value)
                    entered += 1
                print("\nBinary Search Tree created successfully!")
            elif choice == 2:
                if not tree:
                    print("\nTree is empty!")
                    continue
                print("\nInorder Traversal: " + _line(tree.inorder()))
                print("Preorder Traversal: " + _line(tree.preorder()))
                print("Postorder Traversal: " + _line(tree.postorder()))
            elif choice == 3:
                if not tree:
                    print("\nTree is empty! Deletion not possible.")
                    continue
                value = _ask_int("\nEnter the element to delete: ")
                if value is None:
                    print("\nInvalid element!")
                    continue
                tree.delete(value)
                print(f"\nElement {value} deleted from the BST!")
            elif choice == 4:
                print("\nExiting program. Goodbye!")
                return 0
            else:
                print("\nInvalid choice! Please try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())