"""A fixed-capacity first-in first-out queue with an interactive menu."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator

from dslab.stack import _ask_int, _attempt, _run_menu

MAX_SIZE = 5


class QueueOverflow(Exception):
    """Raised when adding to a full queue."""


class QueueUnderflow(Exception):
    """Raised when removing from an empty queue."""


class CircularQueue:
    """A queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def enqueue(self, item: int) -> None:
        if self.is_full():
            raise QueueOverflow("Circular Queue Overflow!")
        self._items.append(item)

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueUnderflow("Circular Queue Underflow!")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the front of the queue to the rear."""
        return iter(self._items)


def main(argv: list[str] | None = None) -> int:
    """Run the circular queue menu on standard input and output."""
    queue = CircularQueue()

    def insert() -> None:
        if queue.is_full():
            print("\nCircular Queue Overflow!")
            return
        item = _ask_int("\nEnter the element to insert: ", "\nInvalid element!")
        if item is not None:
            queue.enqueue(item)
            print(f"\n{item} inserted into the circular queue successfully!")

    def delete() -> None:
        _attempt(
            queue.dequeue,
            QueueUnderflow,
            lambda item: f"{item} deleted from the circular queue successfully!",
        )

    def display() -> None:
        if queue.is_empty():
            print("\nCircular Queue is empty!")
        else:
            print("\nCircular Queue elements:")
            print("".join(f"{item} " for item in queue))

    return _run_menu(
        "CIRCULAR QUEUE OPERATIONS MENU",
        [("Insert", insert), ("Delete", delete), ("Display", display)],
    )


if __name__ == "__main__":
    sys.exit(main())