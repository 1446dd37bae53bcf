"""A fixed-capacity stack of integers with an interactive menu."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator, Sequence
from typing import Any

MAX_SIZE = 10


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when taking from an empty stack."""


class BoundedStack:
    """A last-in first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, item: int) -> None:
        if self.is_full():
            raise StackOverflow("Stack Overflow!")
        self._items.append(item)

    def pop(self) -> int:
        self._require_items()
        return self._items.pop()

    def peek(self) -> int:
        self._require_items()
        return self._items[-1]

    def _require_items(self) -> None:
        if self.is_empty():
            raise StackUnderflow("Stack Underflow!")

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)


def _ask_int(prompt: str, complaint: str | None = None) -> int | None:
    """Read an integer; on a bad answer print ``complaint`` (if any) and return None."""
    try:
        return int(input(prompt).strip())
    except ValueError:
        if complaint is not None:
            print(complaint)
        return None


def _attempt(
    operation: Callable[[], Any],
    errors: type[Exception] | tuple[type[Exception], ...],
    success: Callable[[Any], str],
) -> None:
    """Run ``operation`` and print either its error or a success message."""
    try:
        result = operation()
    except errors as exc:
        print(f"\n{exc}")
    else:
        print(f"\n{success(result)}")


def _run_menu(title: str, entries: Sequence[tuple[str, Callable[[], None]]]) -> int:
    """Show a numbered menu until the user picks the final Exit entry."""
    labels = [label for label, _ in entries] + ["Exit"]
    actions = {number: action for number, (_, action) in enumerate(entries, 1)}
    last = len(labels)
    menu = "\n".join(
        [f"\n=== {title} ===", *(f"{n}. {label}" for n, label in enumerate(labels, 1))]
    )
    try:
        while True:
            print(menu)
            choice = _ask_int(f"Enter your choice (1-{last}): ")
            if choice == last:
                print("\nExiting program. Goodbye!")
                return 0
            action = actions.get(choice) if choice is not None else None
            if action is None:
                print("\nInvalid choice! Please try again.")
            else:
                action()
    except EOFError:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Run the stack operations menu on standard input and output."""
    stack = BoundedStack()

    def push() -> None:
        if stack.is_full():
            print("\nStack Overflow!")
            return
        item = _ask_int("\nEnter the element to be pushed: ", "\nInvalid element!")
        if item is not None:
            stack.push(item)
            print(f"\n{item} pushed to stack successfully!")

    def pop() -> None:
        _attempt(stack.pop, StackUnderflow, lambda item: f"{item} popped from stack successfully!")

    def display() -> None:
        if stack.is_empty():
            print("\nStack is empty!")
        else:
            print("\nStack elements are:")
            print("\n".join(map(str, stack)))

    return _run_menu(
        "STACK OPERATIONS MENU", [("Push", push), ("Pop", pop), ("Display", display)]
    )


if __name__ == "__main__":
    sys.exit(main())