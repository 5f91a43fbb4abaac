from itertools import combinations

import numpy as np
import pytest

from graphopt.exceptions import (
    DirectedGraphNotSupportedError,
    MissingWeightError,
    UnweightedGraphError,
)
from graphopt.graph import Graph
from graphopt.minimum_spanning_tree import MinimumSpanningTree, kruskal_mst, mst_weight
from graphopt.union_find import UnionFind


def brute_force_mst_weight(graph: Graph) -> float:
    """全ての辺の組み合わせから全域木を列挙して最小の重みを求める"""
    n = graph.n_vertices
    edges = [(u, v, w) for u, v, w in graph.weighted_edges() if u != v]
    best = np.inf
    for subset in combinations(edges, n - 1):
        union_find = UnionFind(n)
        if all(union_find.union(u - 1, v - 1) for u, v, _ in subset):
            best = min(best, sum(w for _, _, w in subset))
    return best


def random_connected_graph(n: int, rng: np.random.Generator) -> Graph:
    graph = Graph(n, weighted=True)
    # 全域木を先に作って連結にする
    for v in range(2, n + 1):
        graph.add_edge(int(rng.integers(1, v)), v)
    for u, v in combinations(range(1, n + 1), 2):
        if rng.random() < 0.4:
            graph.add_edge(u, v)
    for u, v in graph.edges:
        graph.set_weight(u, v, float(rng.uniform(1, 100)))
    return graph


def test_weighted_triangle(triangle: Graph) -> None:
    edges = kruskal_mst(triangle)

    assert edges == [(2, 3), (1, 3)]
    assert mst_weight(triangle, edges) == pytest.approx(5.5)


@pytest.mark.parametrize("seed", range(10))
def test_matches_brute_force(seed: int) -> None:
    rng = np.random.default_rng(seed)
    graph = random_connected_graph(int(rng.integers(2, 7)), rng)

    edges = kruskal_mst(graph)

    assert len(edges) == graph.n_vertices - 1
    assert mst_weight(graph, edges) == pytest.approx(brute_force_mst_weight(graph))


def test_equal_weights_resolve_in_row_major_order() -> None:
    graph = Graph.from_edges([(1, 2, 1.0), (1, 3, 1.0), (2, 3, 1.0)], weighted=True)

    assert kruskal_mst(graph) == [(1, 2), (1, 3)]


def test_disconnected_graph_gives_forest() -> None:
    graph = Graph.from_edges([(1, 2, 1.0), (3, 4, 2.0)], weighted=True)

    edges = kruskal_mst(graph)

    assert edges == [(1, 2), (3, 4)]
    assert len(edges) < graph.n_vertices - 1


def test_self_loops_are_ignored() -> None:
    graph = Graph.from_edges([(1, 1, 0.1), (1, 2, 3.0)], weighted=True)

    assert kruskal_mst(graph) == [(1, 2)]


def test_trivial_graphs() -> None:
    assert kruskal_mst(Graph(0, weighted=True)) == []
    assert kruskal_mst(Graph(1, weighted=True)) == []


def test_rejects_directed_graph() -> None:
    with pytest.raises(DirectedGraphNotSupportedError):
        kruskal_mst(Graph(2, directed=True, weighted=True))


def test_rejects_unweighted_graph() -> None:
    with pytest.raises(UnweightedGraphError):
        kruskal_mst(Graph.from_edges([(1, 2)]))


def test_rejects_missing_weight() -> None:
    graph = Graph.from_edges([(1, 2, 1.0), (2, 3)], weighted=True)

    with pytest.raises(MissingWeightError, match=r"\(2, 3\)"):
        kruskal_mst(graph)


def test_solver_on_edge_arrays() -> None:
    edges = np.array(
        [
            (0, 1, 2),
            (0, 2, 3),
            (0, 3, 5),
            (1, 3, 7),
            (2, 4, 2),
            (3, 4, 15),
            (3, 5, 1),
            (4, 6, 11),
            (5, 6, 8),
        ]
    )
    edges, weights = np.split(edges, (2,), axis=1)
    mst = MinimumSpanningTree(edges, weights.ravel())

    tree_edges, tree_weights = mst.solve()

    assert mst.n_nodes == 7
    assert len(tree_edges) == 6
    assert tree_weights.sum() == 21
    np.testing.assert_array_equal(tree_weights, np.sort(tree_weights))

    adjacency_mat, distance_mat = mst.to_adjacency_matrix(tree_edges, tree_weights)
    np.testing.assert_array_equal(adjacency_mat, adjacency_mat.T)
    assert adjacency_mat.sum() == 12
    assert np.nansum(distance_mat) == 42
    assert np.isnan(distance_mat[3, 4])


def test_solver_rejects_length_mismatch() -> None:
    with pytest.raises(ValueError):
        MinimumSpanningTree([(0, 1), (1, 2)], [1.0])
