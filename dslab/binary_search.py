"""Iterative and recursive binary search over a sorted sequence."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def binary_search(items: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == key:
            return mid
        if items[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def _search(items: Sequence[int], key: int, low: int, high: int) -> int | None:
    if high < low:
        return None
    mid = low + (high - low) // 2
    if items[mid] == key:
        return mid
    if items[mid] > key:
        return _search(items, key, low, mid - 1)
    return _search(items, key, mid + 1, high)


def recursive_binary_search(items: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in sorted ``items`` found by recursion."""
    return _search(items, key, 0, len(items) - 1)


def _ask_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Read a sorted array and answer search requests from standard input."""
    try:
        size = _ask_int("Enter the size of the array: ")
        if size is None or size <= 0:
            print("\nInvalid size! Size should be > 0.")
            return 1

        print(f"\nEnter {size} elements in sorted order:")
        items: list[int] = []
        while len(items) < size:
            value = _ask_int(f"Element {len(items) + 1}: ")
            if value is None:
                print("Invalid element!")
                continue
            items.append(value)

        while True:
            print("\n=== BINARY SEARCH MENU ===")
            print("1. Display array")
            print("2. Perform binary search")
            print("3. Exit")
            choice = _ask_int("Enter your choice (1-3): ")
            if choice == 1:
                print("\nArray elements: " + "".join(f"{item} " for item in items))
            elif choice == 2:
                key = _ask_int("\nEnter the element to search: ")
                if key is None:
                    print("\nInvalid element!")
                    continue
                print("\nSelect binary search method:")
                print("1. Iterative")
                print("2. Recursive")
                method = _ask_int("Enter your choice (1-2): ")
                if method == 2:
                    result = recursive_binary_search(items, key)
                else:
                    if method != 1:
                        print("\nInvalid choice! Using iterative method by default.")
                    result = binary_search(items, key)
                if result is None:
                    print(f"\n{key} not found in the array.")
                else:
                    print(f"\n{key} found at index {result} (position {result + 1}).")
            elif choice == 3:
                print("\nExiting program. Goodbye!")
                return 0
            else:
                print("\nInvalid choice! Please try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())