"""Command-line entry point running the graph algorithms on input files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from graphkit.graph import Graph
from graphkit.weighted import dijkstra, kruskal, parse_arcs, parse_counted_edges, prim


def _run_bfs(text: str, args: argparse.Namespace) -> list[str]:
    graph = Graph.from_text(text)
    order = graph.bfs(args.start)
    lines = graph.format_matrix().splitlines()
    lines.append("BFS")
    lines.append(" ".join(str(node) for node in order))
    return lines


def _run_dijkstra(text: str, args: argparse.Namespace) -> list[str]:
    node_count, arcs = parse_arcs(text)
    distances = dijkstra(node_count, arcs, args.start)
    return [" ".join(str(distances[node]) for node in range(1, node_count + 1))]


def _run_kruskal(text: str, args: argparse.Namespace) -> list[str]:
    node_count, edges = parse_arcs(text)
    return [str(kruskal(node_count, edges).cost)]


def _run_prim(text: str, args: argparse.Namespace) -> list[str]:
    node_count, edges = parse_counted_edges(text)
    tree = prim(node_count, edges, args.start)
    by_child = {edge.target: edge for edge in tree.edges}
    lines = []
    for node in range(1, node_count + 1):
        edge = by_child.get(node)
        if edge is None:
            lines.append(f"0 {node} 0")
        else:
            lines.append(f"{edge.source} {edge.target} {edge.weight}")
    lines.append(str(tree.cost))
    return lines


_COMMANDS: dict[str, tuple[Callable[[str, argparse.Namespace], list[str]], str, int, str]] = {
    "bfs": (_run_bfs, "date.txt", 2, "breadth-first traversal of an undirected graph"),
    "dijkstra": (_run_dijkstra, "dijskstra.txt", 1, "shortest distances along weighted arcs"),
    "kruskal": (_run_kruskal, "kruskal.txt", 1, "cost of a minimum spanning forest"),
    "prim": (_run_prim, "prim.txt", 1, "minimum spanning tree grown from a start node"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="graphkit", description="Run graph algorithms.")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, default_file, default_start, description) in _COMMANDS.items():
        sub = commands.add_parser(name, help=description, description=description)
        sub.add_argument(
            "path",
            nargs="?",
            default=default_file,
            help=f"input file (default: {default_file})",
        )
        sub.add_argument(
            "--start",
            type=int,
            default=default_start,
            help=f"start node (default: {default_start})",
        )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, run the chosen algorithm and print its result."""
    args = _build_parser().parse_args(argv)
    run = _COMMANDS[args.command][0]
    try:
        text = Path(args.path).read_text()
    except OSError as exc:
        print(f"cannot open input file {args.path}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    try:
        lines = run(text, args)
    except ValueError as exc:
        print(f"{args.path}: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())