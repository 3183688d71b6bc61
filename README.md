# graphkit

Textbook graph algorithms and a B-tree in plain Python. The package has no
third-party dependencies.

## What is inside

- `graphkit.graph.Graph` is an undirected, unweighted graph with nodes
  numbered from 1. It always visits neighbours in ascending order. Its
  methods are:
  - `bfs(start)` and `dfs(start)`: the nodes reachable from `start`, in
    breadth-first or depth-first order.
  - `components()`: a map from each node to its connected component. The
    components are numbered from 1.
  - `parents(start)`: the breadth-first parent of every node. The value is
    `None` for `start` and for nodes that cannot be reached.
  - `shortest_chain(start, end)`: a chain with the fewest edges, listed from
    `end` back to `start`. It raises `ValueError` if `end` cannot be reached.
  - `two_coloring(start)`: colours 1 and 2 over the component of `start`, and
    0 for every other node.
  - `is_bipartite(start)`: whether the component of `start` can be coloured
    with two colours.
  - `adjacency_matrix()` and `format_matrix()`: the adjacency matrix as a
    list of lists, or as text.

  A node number outside `1..n` raises `ValueError`.

- `graphkit.weighted` holds the weighted-graph algorithms. Edges are
  `WeightedEdge(source, target, weight)` values. `INFINITY` (10000) stands
  for a missing arc and for an unreachable distance.
  - `dijkstra(node_count, arcs, source)` returns a dict with the shortest
    distance to each node along directed arcs.
  - `kruskal(node_count, edges)` returns a `SpanningTree` for a minimum
    spanning forest. It takes edges by weight, and equal weights in input
    order.
  - `prim(node_count, edges, start=1)` returns a `SpanningTree` for the
    component of `start`. Each edge in it runs from parent to child.
  - `weight_matrix(node_count, edges, symmetric=False)` builds the weight
    matrix. It has 0 on the diagonal and `INFINITY` where there is no edge.
  - `parse_arcs(text)` and `parse_counted_edges(text)` read the input formats
    described below. Each returns `(node_count, edges)`.

  A `SpanningTree` has two members: `edges`, the chosen edges, and `cost`,
  their total weight.

- `graphkit.btree.BTree(order=2)` is a B-tree whose pages hold between
  `order` and `2 * order` keys. Any keys that can be compared with each other
  will do.
  - Inserting a key that is already present increases its count instead of
    adding it again.
  - `remove(key)` drops the key together with its count. A key that is not in
    the tree is ignored.
  - It supports `in`, `len()` (the number of distinct keys) and iteration in
    ascending order.
  - `count(key)` gives the count of a key and `keys()` lists the keys.
  - `levels()` returns `(level, keys)` pairs, with each page's children
    listed before the page itself. `render()` shows these pairs as lines of
    the form `Level N: k1 k2 ...`.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Input formats

An unweighted graph is given as whitespace-separated integers: the node
count, the edge count, and then one pair of node numbers per edge.

```
4 3
1 2
2 3
3 4
```

`Graph.from_text` reads this format.

`parse_arcs` reads the node count followed by `from to weight` triples until
the input ends. `parse_counted_edges` reads the node count, then the edge
count, then that many `from to weight` triples. Both parsers raise
`ValueError` on malformed input.

## Using the library

```python
from graphkit.graph import Graph

g = Graph.from_text("4 3\n1 2\n2 3\n3 4\n")
print(g.bfs(2))                # [2, 1, 3, 4]
print(g.dfs(2))                # [2, 1, 3, 4]
print(g.components())          # {1: 1, 2: 1, 3: 1, 4: 1}
print(g.shortest_chain(1, 4))  # [4, 3, 2, 1]
print(g.is_bipartite(1))       # True
print(g.format_matrix())
```

```python
from graphkit.weighted import dijkstra, kruskal, parse_arcs

node_count, arcs = parse_arcs("3\n1 2 4\n2 3 1\n1 3 7\n")
print(dijkstra(node_count, arcs, 1))   # {1: 0, 2: 4, 3: 5}
print(kruskal(node_count, arcs).cost)  # 5
```

```python
from graphkit.btree import BTree

tree = BTree(2)
for key in (10, 20, 5, 6, 12, 30, 7, 17, 5):
    tree.insert(key)

print(6 in tree, tree.count(5), len(tree))  # True 2 8
tree.remove(6)
print(tree.keys())
print(tree.render())
```

## Command line

The `graphkit` command has four subcommands. Each takes an optional input
file and a `--start` node:

| Subcommand | Input format         | Default file    | Default start | Output |
|------------|----------------------|-----------------|---------------|--------|
| `bfs`      | unweighted graph     | `date.txt`      | 2             | the adjacency matrix, a `BFS` line, then the visiting order |
| `dijkstra` | `parse_arcs`         | `dijskstra.txt` | 1             | the distances to nodes 1..n on one line |
| `kruskal`  | `parse_arcs`         | `kruskal.txt`   | 1             | the cost of the spanning forest |
| `prim`     | `parse_counted_edges`| `prim.txt`      | 1             | a `parent node weight` line per node, then the total cost |

`kruskal` accepts `--start` but does not use it.

In the `prim` output, the start node and any node outside its component
appear as `0 node 0`.

For example:

```
graphkit dijkstra graph.txt --start 1
graphkit --help
```

If the input file cannot be read or is malformed, the command prints a
message to standard error and exits with status 1.

## What the package does not do

- The command line runs only `bfs`, `dijkstra`, `kruskal` and `prim`. Depth-first
  traversal, connected components, shortest chains, bipartiteness and the
  B-tree are available only from Python.
- The B-tree lives in memory. It cannot be saved or loaded.

## Running the tests

```
pip install .[test]
pytest
```