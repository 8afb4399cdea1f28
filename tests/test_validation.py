from eulerpath.algorithms.eulerian import find_eulerian_path
from eulerpath.graph.adjacency import AdjacencyGraph
from eulerpath.validation import (
    edge_multiplicity,
    remaining_edges,
    trail_problems,
    verify_trail,
)


def test_edge_multiplicity_counts_parallel_edges():
    g = AdjacencyGraph([[1, 1, 0], [0]])
    assert edge_multiplicity(g) == {(0, 1): 2, (0, 0): 1, (1, 0): 1}


def test_found_trail_leaves_nothing_over(joined_cycles9):
    trail = find_eulerian_path(joined_cycles9)
    remaining = remaining_edges(joined_cycles9, trail)
    assert set(remaining) == set(joined_cycles9.edges())
    assert all(count == 0 for count in remaining.values())
    assert verify_trail(joined_cycles9, trail)
    assert trail_problems(joined_cycles9, trail) == []


def test_reused_and_unused_edges_reported(double_cycle2):
    # Stops one edge short: a copy of 1->0 is never taken
    trail = [0, 1, 0, 1]
    problems = trail_problems(double_cycle2, trail)
    assert "trail has 4 nodes, expected 5" in problems
    assert remaining_edges(double_cycle2, trail) == {(0, 1): 0, (1, 0): 1}
    assert "edge 1->0 left unused 1 time(s)" in problems
    assert not verify_trail(double_cycle2, trail)


def test_edge_not_in_graph_reported():
    g = AdjacencyGraph([[1], [0]])
    problems = trail_problems(g, [0, 0, 1])
    assert "edge 0->0 used 1 extra time(s)" in problems
    assert "edge 1->0 left unused 1 time(s)" in problems


def test_edgeless_graph_accepts_only_empty_trail(edgeless3):
    assert verify_trail(edgeless3, [])
    assert not verify_trail(edgeless3, [0])
    assert trail_problems(edgeless3, [1]) == ["graph has no edges but trail has 1 nodes"]
