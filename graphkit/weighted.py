"""Weighted graph algorithms: shortest distances and minimum spanning trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

INFINITY = 10000
"""Weight standing for a missing arc and for an unreachable distance."""


@dataclass(frozen=True)
class WeightedEdge:
    """An edge or arc between two nodes numbered from 1."""

    source: int
    target: int
    weight: int


@dataclass
class SpanningTree:
    """The edges chosen for a spanning tree and their total weight."""

    edges: list[WeightedEdge]
    cost: int


def _integers(text: str) -> list[int]:
    values = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None
    return values


def parse_arcs(text: str) -> tuple[int, list[WeightedEdge]]:
    """Read a node count followed by ``source target weight`` triples up to the end."""
    values = _integers(text)
    if not values:
        raise ValueError("expected a node count")
    rest = values[1:]
    if len(rest) % 3:
        raise ValueError("incomplete arc at end of input")
    it = iter(rest)
    return values[0], [WeightedEdge(u, v, w) for u, v, w in zip(it, it, it)]


def parse_counted_edges(text: str) -> tuple[int, list[WeightedEdge]]:
    """Read a node count, an edge count, then that many weighted edges."""
    values = _integers(text)
    if len(values) < 2:
        raise ValueError("expected a node count and an edge count")
    node_count, edge_count = values[0], values[1]
    if edge_count < 0:
        raise ValueError("edge count must not be negative")
    triples = values[2:2 + 3 * edge_count]
    if len(triples) < 3 * edge_count:
        raise ValueError(f"expected {edge_count} edges")
    it = iter(triples)
    return node_count, [WeightedEdge(u, v, w) for u, v, w in zip(it, it, it)]


def _check_node(node_count: int, node: int) -> None:
    if not 1 <= node <= node_count:
        raise ValueError(f"node {node} is outside 1..{node_count}")


def _matrix(
    node_count: int, edges: Iterable[WeightedEdge], symmetric: bool
) -> list[list[int]]:
    """Weights indexed from 1; row and column 0 stand for "no node" and hold 0."""
    if node_count < 0:
        raise ValueError("node count must not be negative")
    size = node_count + 1
    matrix = [
        [0 if row == 0 or column == 0 or row == column else INFINITY for column in range(size)]
        for row in range(size)
    ]
    for edge in edges:
        _check_node(node_count, edge.source)
        _check_node(node_count, edge.target)
        matrix[edge.source][edge.target] = edge.weight
        if symmetric:
            matrix[edge.target][edge.source] = edge.weight
    return matrix


def weight_matrix(
    node_count: int, edges: Iterable[WeightedEdge], symmetric: bool = False
) -> list[list[int]]:
    """Weights for nodes 1..n: 0 on the diagonal, INFINITY where there is no edge."""
    return [row[1:] for row in _matrix(node_count, edges, symmetric)[1:]]


def dijkstra(node_count: int, arcs: Iterable[WeightedEdge], source: int) -> dict[int, int]:
    """Shortest distance from ``source`` to every node along directed arcs."""
    _check_node(node_count, source)
    weights = _matrix(node_count, arcs, symmetric=False)
    nodes = range(1, node_count + 1)
    distance = {node: weights[source][node] for node in nodes}
    distance[source] = 0
    done = {source}
    for _ in nodes:
        closest = None
        closest_distance = INFINITY
        for node in nodes:
            if node not in done and distance[node] < closest_distance:
                closest, closest_distance = node, distance[node]
        if closest is None:
            for node in nodes:
                if node not in done:
                    distance[node] = min(distance[node], INFINITY)
            break
        done.add(closest)
        for node in nodes:
            through = closest_distance + weights[closest][node]
            if node not in done and distance[node] > through:
                distance[node] = through
    return distance


def kruskal(node_count: int, edges: Iterable[WeightedEdge]) -> SpanningTree:
    """Minimum spanning forest, taking edges by weight with ties in input order."""
    edges = list(edges)
    for edge in edges:
        _check_node(node_count, edge.source)
        _check_node(node_count, edge.target)
    label = {node: node for node in range(1, node_count + 1)}
    chosen = []
    cost = 0
    for edge in sorted(edges, key=lambda e: e.weight):
        kept, replaced = label[edge.source], label[edge.target]
        if kept == replaced:
            continue
        cost += edge.weight
        chosen.append(edge)
        for node, current in label.items():
            if current == replaced:
                label[node] = kept
    return SpanningTree(chosen, cost)


def prim(node_count: int, edges: Iterable[WeightedEdge], start: int = 1) -> SpanningTree:
    """Minimum spanning tree of the component of ``start``, grown from ``start``.

    Edges are undirected; each chosen edge runs from parent to child, listed
    in child order. Nodes outside the component get no edge and add nothing
    to the cost.
    """
    _check_node(node_count, start)
    weights = _matrix(node_count, edges, symmetric=True)
    nodes = range(1, node_count + 1)
    visited = {start}
    parent = {node: start for node in nodes}
    parent[start] = 0
    for _ in range(node_count - 1):
        chosen = 0
        lightest = INFINITY
        for node in nodes:
            if node not in visited and weights[node][parent[node]] < lightest:
                chosen, lightest = node, weights[node][parent[node]]
        visited.add(chosen)
        for node in nodes:
            if node not in visited and weights[node][parent[node]] > weights[node][chosen]:
                parent[node] = chosen
    tree = [
        WeightedEdge(parent[node], node, weights[node][parent[node]])
        for node in nodes
        if parent[node]
    ]
    cost = sum(weights[node][parent[node]] for node in nodes)
    return SpanningTree(tree, cost)