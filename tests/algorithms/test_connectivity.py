from eulerpath.algorithms.connectivity import unreached_nodes, weakly_connected_from
from eulerpath.algorithms.degree import compute_degrees
from eulerpath.graph.adjacency import AdjacencyGraph


def test_connected_ignores_edge_direction():
    # 0 -> 1 <- 2: node 2 is only reachable against edge direction
    g = AdjacencyGraph.from_edges(3, [(0, 1), (2, 1)])
    profile = compute_degrees(g)
    assert weakly_connected_from(g, 0, profile)
    assert unreached_nodes(g, 0, profile) == []


def test_isolated_nodes_do_not_count():
    g = AdjacencyGraph.from_edges(5, [(1, 2), (2, 1)])
    profile = compute_degrees(g)
    assert weakly_connected_from(g, 1, profile)


def test_disconnected_components_reported(two_components4):
    profile = compute_degrees(two_components4)
    assert not weakly_connected_from(two_components4, 0, profile)
    assert unreached_nodes(two_components4, 0, profile) == [2, 3]
    assert unreached_nodes(two_components4, 3, profile) == [0, 1]


def test_self_loop_component_is_unreached():
    # A self-loop on its own forms a separate edge-bearing component
    g = AdjacencyGraph([[1], [0], [2]])
    profile = compute_degrees(g)
    assert unreached_nodes(g, 0, profile) == [2]


def test_single_self_loop_is_connected(self_loop1):
    assert weakly_connected_from(self_loop1, 0, compute_degrees(self_loop1))


def test_long_chain_is_traversed_without_recursion():
    n = 50_000
    g = AdjacencyGraph([[i + 1] for i in range(n - 1)] + [[]])
    assert weakly_connected_from(g, n - 1, compute_degrees(g))
