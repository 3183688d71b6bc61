"""Undirected, unweighted graphs on nodes numbered from 1."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Optional


def _integers(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None


class Graph:
    """An undirected graph whose neighbours are always visited in ascending order."""

    def __init__(self, node_count: int, edges: Iterable[tuple[int, int]] = ()) -> None:
        if node_count < 0:
            raise ValueError("node count must not be negative")
        self.node_count = node_count
        neighbours: dict[int, set[int]] = {node: set() for node in self.nodes}
        for u, v in edges:
            self._check(u)
            self._check(v)
            neighbours[u].add(v)
            neighbours[v].add(u)
        self._neighbours = {node: sorted(adjacent) for node, adjacent in neighbours.items()}

    @classmethod
    def from_text(cls, text: str) -> "Graph":
        """Read a node count, an edge count, then that many node pairs."""
        values = list(_integers(text))
        if len(values) < 2:
            raise ValueError("expected a node count and an edge count")
        node_count, edge_count = values[0], values[1]
        if edge_count < 0:
            raise ValueError("edge count must not be negative")
        pairs = values[2:2 + 2 * edge_count]
        if len(pairs) < 2 * edge_count:
            raise ValueError(f"expected {edge_count} edges")
        it = iter(pairs)
        return cls(node_count, zip(it, it))

    @property
    def nodes(self) -> range:
        return range(1, self.node_count + 1)

    def _check(self, node: int) -> None:
        if node not in self.nodes:
            raise ValueError(f"node {node} is outside 1..{self.node_count}")

    def adjacency_matrix(self) -> list[list[int]]:
        """Rows and columns for nodes 1..n, with 1 where an edge exists."""
        return [
            [1 if other in self._neighbours[node] else 0 for other in self.nodes]
            for node in self.nodes
        ]

    def format_matrix(self) -> str:
        """The adjacency matrix, one space-separated row per line."""
        return "\n".join(
            " ".join(str(cell) for cell in row) for row in self.adjacency_matrix()
        )

    def bfs(self, start: int) -> list[int]:
        """Nodes reachable from ``start`` in breadth-first order."""
        return list(self._bfs_parents(start))

    def dfs(self, start: int) -> list[int]:
        """Nodes reachable from ``start`` in depth-first order."""
        self._check(start)
        order = [start]
        seen = {start}
        stack = [iter(self._neighbours[start])]
        while stack:
            for following in stack[-1]:
                if following not in seen:
                    seen.add(following)
                    order.append(following)
                    stack.append(iter(self._neighbours[following]))
                    break
            else:
                stack.pop()
        return order

    def components(self) -> dict[int, int]:
        """Map each node to its connected component, numbered from 1."""
        labels = dict.fromkeys(self.nodes, 0)
        label = 0
        for node in self.nodes:
            if labels[node] == 0:
                label += 1
                for member in self.dfs(node):
                    labels[member] = label
        return labels

    def _bfs_parents(self, start: int) -> dict[int, Optional[int]]:
        self._check(start)
        parents: dict[int, Optional[int]] = {start: None}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for following in self._neighbours[current]:
                if following not in parents:
                    parents[following] = current
                    queue.append(following)
        return parents

    def parents(self, start: int) -> dict[int, Optional[int]]:
        """Breadth-first parent of every node; None for ``start`` and unreached nodes."""
        found = self._bfs_parents(start)
        return {node: found.get(node) for node in self.nodes}

    def shortest_chain(self, start: int, end: int) -> list[int]:
        """A chain with fewest edges, listed from ``end`` back to ``start``."""
        self._check(end)
        parents = self.parents(start)
        chain = [end]
        while chain[-1] != start:
            parent = parents[chain[-1]]
            if parent is None:
                raise ValueError(f"node {end} is not reachable from {start}")
            chain.append(parent)
        return chain

    def _color(self, start: int) -> tuple[dict[int, int], bool]:
        self._check(start)
        colors = dict.fromkeys(self.nodes, 0)
        consistent = True
        colors[start] = 1
        stack = [(start, iter(self._neighbours[start]))]
        while stack:
            node, pending = stack[-1]
            for following in pending:
                if colors[following] == 0:
                    colors[following] = 3 - colors[node]
                    stack.append((following, iter(self._neighbours[following])))
                    break
                if colors[following] == colors[node]:
                    consistent = False
            else:
                stack.pop()
        return colors, consistent

    def two_coloring(self, start: int) -> dict[int, int]:
        """Colours 1 and 2 over the component of ``start``; 0 for other nodes."""
        return self._color(start)[0]

    def is_bipartite(self, start: int) -> bool:
        """Whether the component of ``start`` can be two-coloured."""
        return self._color(start)[1]