"""Tower of Hanoi, solved recursively and iteratively with three stacks."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """A single disk taken from the top of one pole and put on another."""

    disk: int
    source: str
    target: str


def _solve(n: int, source: str, target: str, auxiliary: str) -> Iterator[Move]:
    if n == 1:
        yield Move(1, source, target)
        return
    yield from _solve(n - 1, source, auxiliary, target)
    yield Move(n, source, target)
    yield from _solve(n - 1, auxiliary, target, source)


def hanoi_recursive(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> list[Move]:
    """Return the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 1:
        raise ValueError("number of disks must be at least 1")
    return list(_solve(n, source, target, auxiliary))


def _transfer(poles: dict[str, list[int]], first: str, second: str) -> Move:
    """Make the one legal move between two poles."""
    one, two = poles[first], poles[second]
    if not one or (two and one[-1] > two[-1]):
        one.append(two.pop())
        return Move(one[-1], second, first)
    two.append(one.pop())
    return Move(two[-1], first, second)


def hanoi_iterative(n: int) -> list[Move]:
    """Return the moves that carry ``n`` disks from pole S to pole D.

    The poles are labelled S (source), A (auxiliary) and D (destination).
    """
    src, aux, dest = "S", "A", "D"
    if n % 2 == 0:
        dest, aux = aux, dest
    poles: dict[str, list[int]] = {src: list(range(n, 0, -1)), aux: [], dest: []}
    pairs = ((src, dest), (src, aux), (aux, dest))
    total = (1 << n) - 1 if n > 0 else 0
    return [_transfer(poles, *pairs[(step - 1) % 3]) for step in range(1, total + 1)]


def main(argv: list[str] | None = None) -> int:
    """Read a number of disks and print both solutions."""
    args = sys.argv[1:] if argv is None else argv
    try:
        text = args[0] if args else input("Enter the number of disks: ")
    except EOFError:
        return 1
    try:
        n = int(text.strip())
    except ValueError:
        print("Invalid number of disks!")
        return 1
    if n < 1:
        print("Number of disks must be at least 1.")
        return 1

    print("\nSolving Tower of Hanoi using Recursive approach:")
    for move in hanoi_recursive(n, "A", "C", "B"):
        print(f"Move disk {move.disk} from rod {move.source} to rod {move.target}")

    print("\nSolving Tower of Hanoi using Iterative approach:")
    for move in hanoi_iterative(n):
        print(f"Move disk {move.disk} from {move.source} to {move.target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())