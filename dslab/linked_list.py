"""A singly linked list of integers with an interactive menu."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from itertools import islice

from dslab.stack import _ask_int, _attempt, _run_menu

_BAD_POSITION = "Invalid position! Position should be >= 1."
_OUT_OF_RANGE = "Position out of range!"
_EMPTY = "List is empty! Deletion not possible."


@dataclass(slots=True)
class _Node:
    value: int
    next: _Node | None = None


class SinglyLinkedList:
    """A chain of nodes addressed by 1-based positions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> _Node | None:
        """Return the node at 1-based ``position``, or None past the end."""
        return next(islice(self._nodes(), position - 1, None), None)

    def insert_at_beginning(self, value: int) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at_end(self, value: int) -> None:
        self.insert_at_position(value, self._size + 1)

    def insert_at_position(self, value: int, position: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        if position <= 0:
            raise ValueError(_BAD_POSITION)
        if position == 1:
            self.insert_at_beginning(value)
            return
        previous = self._node_at(position - 1)
        if previous is None:
            raise IndexError(_OUT_OF_RANGE)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def _require_items(self) -> None:
        if self._head is None:
            raise IndexError(_EMPTY)

    def delete_from_beginning(self) -> int:
        self._require_items()
        assert self._head is not None
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def delete_from_end(self) -> int:
        self._require_items()
        return self.delete_from_position(self._size)

    def delete_from_position(self, position: int) -> int:
        """Remove and return the value at 1-based ``position``."""
        self._require_items()
        if position <= 0:
            raise ValueError(_BAD_POSITION)
        if position == 1:
            return self.delete_from_beginning()
        previous = self._node_at(position - 1)
        if previous is None or previous.next is None:
            raise IndexError(_OUT_OF_RANGE)
        target = previous.next
        previous.next = target.next
        self._size -= 1
        return target.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


def _where(position: int) -> str:
    return "the beginning" if position == 1 else f"position {position}"


def main(argv: list[str] | None = None) -> int:
    """Run the linked list menu on standard input and output."""
    items = SinglyLinkedList()

    def ask_value() -> int | None:
        return _ask_int("\nEnter the value to insert: ", "\nInvalid value!")

    def ask_position(prompt: str) -> int | None:
        return _ask_int(prompt, f"\n{_BAD_POSITION}")

    def inserter(method: Callable[[int], None], where: str) -> Callable[[], None]:
        def action() -> None:
            value = ask_value()
            if value is not None:
                method(value)
                print(f"\n{value} inserted at {where} successfully!")

        return action

    def insert_at_position() -> None:
        value = ask_value()
        if value is None:
            return
        position = ask_position("Enter the position (1-based indexing): ")
        if position is not None:
            _attempt(
                lambda: items.insert_at_position(value, position),
                (ValueError, IndexError),
                lambda _: f"{value} inserted at {_where(position)} successfully!",
            )

    def deleter(method: Callable[[], int], where: str) -> Callable[[], None]:
        return lambda: _attempt(
            method, IndexError, lambda value: f"{value} deleted from {where} successfully!"
        )

    def delete_from_position() -> None:
        if not items:
            print(f"\n{_EMPTY}")
            return
        position = ask_position("\nEnter the position to delete (1-based indexing): ")
        if position is not None:
            _attempt(
                lambda: items.delete_from_position(position),
                (ValueError, IndexError),
                lambda value: f"{value} deleted from {_where(position)} successfully!",
            )

    def display() -> None:
        if not items:
            print("\nList is empty!")
        else:
            print("\nLinked List elements: " + "".join(f"{v} " for v in items))

    return _run_menu(
        "SINGLY LINKED LIST OPERATIONS MENU",
        [
            ("Insert at beginning", inserter(items.insert_at_beginning, "the beginning")),
            ("Insert at end", inserter(items.insert_at_end, "the end")),
            ("Insert at position", insert_at_position),
            ("Delete from beginning", deleter(items.delete_from_beginning, "the beginning")),
            ("Delete from end", deleter(items.delete_from_end, "the end")),
            ("Delete from position", delete_from_position),
            ("Display", display),
        ],
    )


if __name__ == "__main__":
    sys.exit(main())