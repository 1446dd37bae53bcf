"""An undirected graph on an adjacency matrix, with BFS and DFS."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator


class Graph:
    """An undirected graph on vertices ``0 .. num_vertices - 1``."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.num_vertices = num_vertices
        self._adj = [[0] * num_vertices for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise ValueError(
                f"Invalid vertex! Vertex should be between 0 and {self.num_vertices - 1}."
            )

    def add_edge(self, src: int, dest: int) -> None:
        self._check(src)
        self._check(dest)
        self._adj[src][dest] = 1
        self._adj[dest][src] = 1

    def matrix(self) -> list[list[int]]:
        """Return a copy of the adjacency matrix."""
        return [row[:] for row in self._adj]

    def _neighbours(self, vertex: int) -> Iterator[int]:
        return (i for i, edge in enumerate(self._adj[vertex]) if edge)

    def bfs(self, start: int) -> list[int]:
        """Return vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = [False] * self.num_vertices
        visited[start] = True
        order = [start]
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for vertex in self._neighbours(current):
                if not visited[vertex]:
                    visited[vertex] = True
                    order.append(vertex)
                    queue.append(vertex)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return vertices in depth-first order from ``start``, lowest neighbour first."""
        self._check(start)
        visited = [False] * self.num_vertices
        visited[start] = True
        order = [start]
        stack = [self._neighbours(start)]
        while stack:
            for vertex in stack[-1]:
                if not visited[vertex]:
                    visited[vertex] = True
                    order.append(vertex)
                    stack.append(self._neighbours(vertex))
                    break
            else:
                stack.pop()
        return order


def _ask_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _read_graph() -> Graph | None:
    vertices = _ask_int("\nEnter the number of vertices: ")
    if vertices is None or vertices < 0:
        print("\nInvalid number of vertices!")
        return None
    graph = Graph(vertices)
    edges = _ask_int("Enter the number of edges: ")
    if edges is None:
        edges = 0
    added = 0
    while added < edges:
        parts = input(f"Enter edge {added + 1} (source destination): ").split()
        try:
            src, dest = (int(part) for part in parts[:2])
            if len(parts) < 2:
                raise ValueError
            graph.add_edge(src, dest)
        except ValueError:
            print(f"Invalid edge! Vertices should be between 0 and {vertices - 1}.")
            continue
        added += 1
    return graph


def main(argv: list[str] | None = None) -> int:
    """Run the graph traversal menu on standard input and output."""
    graph: Graph | None = None
    try:
        while True:
            print("\n=== GRAPH TRAVERSAL OPERATIONS MENU ===")
            print("1. Create a graph")
            print("2. Display adjacency matrix")
            print("3. BFS traversal")
            print("4. DFS traversal")
            print("5. Exit")
            choice = _ask_int("Enter your choice (1-5): ")
            if choice == 1:
                graph = _read_graph()
            elif choice in (2, 3, 4):
                if graph is None:
                    print("\nGraph not created yet! Please create a graph first.")
                    continue
                if choice == 2:
                    print("\nAdjacency Matrix:")
                    for row in graph.matrix():
                        print("".join(f"{cell} " for cell in row))
                    continue
                name = "BFS" if choice == 3 else "DFS"
                start = _ask_int(f"\nEnter the starting vertex for {name}: ")
                try:
                    if start is None:
                        raise ValueError(
                            "Invalid vertex! Vertex should be between 0 and "
                            f"{graph.num_vertices - 1}."
                        )
                    order = graph.bfs(start) if choice == 3 else graph.dfs(start)
                except ValueError as exc:
                    print(f"\n{exc}")
                    continue
                print(
                    f"\n{name} traversal starting from vertex {start}: "
                    + "".join(f"{vertex} " for vertex in order)
                )
            elif choice == 5:
                print("\nExiting program. Goodbye!")
                return 0
            else:
                print("\nInvalid choice! Please try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())