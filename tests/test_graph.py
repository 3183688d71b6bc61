import pytest
from hypothesis import given, strategies as st

from graphkit.graph import Graph


@st.composite
def graph_specs(draw):
    n = draw(st.integers(1, 8))
    edges = draw(
        st.lists(st.tuples(st.integers(1, n), st.integers(1, n)), max_size=15)
    )
    start = draw(st.integers(1, n))
    return n, edges, start


def test_from_text_builds_symmetric_matrix():
    graph = Graph.from_text("4 2\n1 2\n3 4\n")
    matrix = graph.adjacency_matrix()
    assert matrix[0][1] == matrix[1][0] == matrix[2][3] == matrix[3][2] == 1
    assert sum(map(sum, matrix)) == 4


def test_from_text_too_few_edges():
    with pytest.raises(ValueError):
        Graph.from_text("3 2\n1 2\n")


def test_from_text_rejects_garbage():
    with pytest.raises(ValueError):
        Graph.from_text("3 x")


def test_edge_outside_nodes_rejected():
    with pytest.raises(ValueError):
        Graph(3, [(1, 4)])


def test_bad_start_rejected():
    with pytest.raises(ValueError):
        Graph(3, [(1, 2)]).bfs(0)


def test_format_matrix_matches_matrix():
    graph = Graph(3, [(1, 2), (2, 3)])
    rows = [list(map(int, line.split())) for line in graph.format_matrix().splitlines()]
    assert rows == graph.adjacency_matrix()


def test_bfs_on_path():
    graph = Graph(4, [(1, 2), (2, 3), (3, 4)])
    assert graph.bfs(1) == [1, 2, 3, 4]


def test_dfs_goes_deep_first():
    graph = Graph(4, [(1, 2), (1, 3), (2, 4)])
    assert graph.dfs(1) == [1, 2, 4, 3]


def test_components_labels():
    graph = Graph.from_text("4 2\n1 2\n3 4")
    assert graph.components() == {1: 1, 2: 1, 3: 2, 4: 2}


@given(graph_specs())
def test_matrix_is_symmetric(spec):
    n, edges, _ = spec
    matrix = Graph(n, edges).adjacency_matrix()
    assert matrix == [list(column) for column in zip(*matrix)]


@given(graph_specs())
def test_bfs_covers_component_in_distance_order(spec):
    n, edges, start = spec
    graph = Graph(n, edges)
    order = graph.bfs(start)
    labels = graph.components()
    assert order[0] == start
    assert len(order) == len(set(order))
    assert set(order) == {node for node, label in labels.items() if label == labels[start]}
    lengths = [len(graph.shortest_chain(start, node)) for node in order]
    assert lengths == sorted(lengths)


@given(graph_specs())
def test_dfs_visits_same_nodes_as_bfs(spec):
    n, edges, start = spec
    graph = Graph(n, edges)
    order = graph.dfs(start)
    matrix = graph.adjacency_matrix()
    assert order[0] == start
    assert sorted(order) == sorted(graph.bfs(start))
    for position, node in enumerate(order[1:], start=1):
        assert any(matrix[node - 1][earlier - 1] for earlier in order[:position])


@given(graph_specs())
def test_components_respect_edges(spec):
    n, edges, _ = spec
    graph = Graph(n, edges)
    labels = graph.components()
    matrix = graph.adjacency_matrix()
    assert labels[1] == 1
    nodes = range(1, n + 1)
    for u in nodes:
        for v in nodes:
            if matrix[u - 1][v - 1]:
                assert labels[u] == labels[v]
    assert set(labels.values()) == set(range(1, max(labels.values()) + 1))


@given(graph_specs())
def test_parents_and_chains(spec):
    n, edges, start = spec
    graph = Graph(n, edges)
    parents = graph.parents(start)
    matrix = graph.adjacency_matrix()
    assert parents[start] is None
    reachable = set(graph.bfs(start))
    for node in range(1, n + 1):
        if node in reachable:
            chain = graph.shortest_chain(start, node)
            assert chain[0] == node and chain[-1] == start
            for a, b in zip(chain, chain[1:]):
                assert matrix[a - 1][b - 1] == 1
                assert parents[a] == b
        else:
            assert parents[node] is None
            with pytest.raises(ValueError):
                graph.shortest_chain(start, node)


def test_chain_to_self():
    assert Graph(2, []).shortest_chain(2, 2) == [2]


def test_even_cycle_is_bipartite():
    graph = Graph(4, [(1, 2), (2, 3), (3, 4), (4, 1)])
    assert graph.is_bipartite(1) is True
    colors = graph.two_coloring(1)
    assert colors[1] == colors[3] == 1
    assert colors[2] == colors[4] == 2


def test_triangle_is_not_bipartite():
    assert Graph(3, [(1, 2), (2, 3), (3, 1)]).is_bipartite(1) is False


def test_coloring_leaves_other_components_uncolored():
    colors = Graph(4, [(1, 2), (3, 4)]).two_coloring(1)
    assert colors[3] == colors[4] == 0


@given(graph_specs())
def test_bipartite_coloring_is_proper(spec):
    n, edges, start = spec
    graph = Graph(n, edges)
    colors = graph.two_coloring(start)
    matrix = graph.adjacency_matrix()
    reachable = set(graph.bfs(start))
    assert {node for node, color in colors.items() if color} == reachable
    if graph.is_bipartite(start):
        for u in reachable:
            for v in reachable:
                if matrix[u - 1][v - 1]:
                    assert colors[u] != colors[v]