"""A fixed-size hash table of integers using linear probing."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator

from dslab.stack import _ask_int, _attempt, _run_menu

TABLE_SIZE = 10


class TableFull(Exception):
    """Raised when no free slot is left for a new key."""


class LinearProbingTable:
    """Open-addressing table; deleting a key simply frees its slot."""

    def __init__(self, size: int = TABLE_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._slots: list[int | None] = [None] * size

    def hash(self, key: int) -> int:
        return key % self.size

    def _probe(self, key: int) -> Iterator[int]:
        start = self.hash(key)
        return ((start + step) % self.size for step in range(self.size))

    def insert(self, key: int) -> int:
        """Store ``key`` in the first free slot and return its index."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise TableFull(f"Hash Table is full! Cannot insert {key}")

    def search(self, key: int) -> int | None:
        """Return the index holding ``key``, or None if it is not found."""
        for index in self._probe(key):
            value = self._slots[index]
            if value is None:
                return None
            if value == key:
                return index
        return None

    def delete(self, key: int) -> int:
        """Free the slot holding ``key`` and return its index."""
        index = self.search(key)
        if index is None:
            raise KeyError(key)
        self._slots[index] = None
        return index

    def slots(self) -> list[int | None]:
        """Return the contents of every slot, None where it is empty."""
        return list(self._slots)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)


def main(argv: list[str] | None = None) -> int:
    """Run the hash table menu on standard input and output."""
    table = LinearProbingTable()

    def ask_key(verb: str) -> int | None:
        return _ask_int(f"\nEnter the element to {verb}: ", "\nInvalid element!")

    def insert() -> None:
        key = ask_key("insert")
        if key is not None:
            _attempt(
                lambda: table.insert(key),
                TableFull,
                lambda index: f"{key} inserted at index {index}",
            )

    def delete_or_none(key: int) -> int | None:
        try:
            return table.delete(key)
        except KeyError:
            return None

    def locate(verb: str, find: Callable[[int], int | None], done: str) -> Callable[[], None]:
        def action() -> None:
            key = ask_key(verb)
            if key is None:
                return
            index = find(key)
            if index is None:
                print(f"\n{key} not found in the hash table")
            else:
                print(f"\n{key} {done} index {index}")

        return action

    def display() -> None:
        print("\nHash Table:")
        print("Index\tValue")
        for index, value in enumerate(table.slots()):
            print(f"{index}\t{'Empty' if value is None else value}")

    return _run_menu(
        "HASH TABLE OPERATIONS MENU",
        [
            ("Insert element", insert),
            ("Search element", locate("search", table.search, "found at")),
            ("Delete element", locate("delete", delete_or_none, "deleted from")),
            ("Display hash table", display),
        ],
    )


if __name__ == "__main__":
    sys.exit(main())