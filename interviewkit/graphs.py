"""A directed graph on vertices 0..n-1 with traversals and classic checks."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass
class Digraph:
    """A directed graph with a fixed number of vertices and ordered adjacency lists."""

    vertices: int
    adjacency: list[list[int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.vertices < 0:
            raise ValueError("vertex count cannot be negative")
        self.adjacency = [[] for _ in range(self.vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"vertex {vertex} is outside 0..{self.vertices - 1}")

    def add_edge(self, src: int, dest: int) -> None:
        """Add an edge from ``src`` to ``dest``."""
        self._check(src)
        self._check(dest)
        self.adjacency[src].append(dest)

    def bfs(self, start: int) -> list[int]:
        """Breadth-first visiting order from ``start``."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self.adjacency[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Depth-first visiting order from ``start`` using an explicit stack.

        Vertices are marked when pushed, so later neighbours are visited first.
        """
        self._check(start)
        visited = {start}
        stack = [start]
        order: list[int] = []
        while stack:
            node = stack.pop()
            order.append(node)
            for neighbour in self.adjacency[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return order

    def has_cycle(self) -> bool:
        """Return True when some directed cycle exists."""
        visited = [False] * self.vertices
        on_path = [False] * self.vertices

        def visit(node: int) -> bool:
            visited[node] = True
            on_path[node] = True
            for neighbour in self.adjacency[node]:
                if not visited[neighbour]:
                    if visit(neighbour):
                        return True
                elif on_path[neighbour]:
                    return True
            on_path[node] = False
            return False

        return any(not visited[v] and visit(v) for v in range(self.vertices))

    def is_bipartite(self) -> bool:
        """Return True when vertices can be two-coloured along every edge."""
        colour: list[int | None] = [None] * self.vertices

        def paint(node: int, col: int) -> bool:
            colour[node] = col
            for neighbour in self.adjacency[node]:
                if colour[neighbour] is None:
                    if not paint(neighbour, 1 - col):
                        return False
                elif colour[neighbour] == col:
                    return False
            return True

        return all(colour[v] is not None or paint(v, 0) for v in range(self.vertices))

    def topological_sort(self) -> list[int]:
        """Vertices in reverse depth-first finishing order."""
        visited = [False] * self.vertices
        finished: list[int] = []

        def visit(node: int) -> None:
            visited[node] = True
            for neighbour in self.adjacency[node]:
                if not visited[neighbour]:
                    visit(neighbour)
            finished.append(node)

        for vertex in range(self.vertices):
            if not visited[vertex]:
                visit(vertex)
        return finished[::-1]

    def transpose(self) -> "Digraph":
        """Return a new graph with every edge reversed."""
        reversed_graph = Digraph(self.vertices)
        for src, neighbours in enumerate(self.adjacency):
            for dest in neighbours:
                reversed_graph.add_edge(dest, src)
        return reversed_graph