import numpy as np

from graphopt.christofides import check_metric
from graphopt.utils import circular_layout, euclidean_graph, sample_plane_points


def test_sample_plane_points() -> None:
    points = sample_plane_points(50, 3.0, rng=np.random.default_rng(0))

    assert points.shape == (50, 2)
    assert points.min() >= 0.0
    assert points.max() < 3.0


def test_sample_plane_points_is_reproducible() -> None:
    a = sample_plane_points(5, rng=np.random.default_rng(7))
    b = sample_plane_points(5, rng=np.random.default_rng(7))

    np.testing.assert_array_equal(a, b)


def test_euclidean_graph() -> None:
    points = np.array([[0.0, 0.0], [3.0, 0.0], [3.0, 4.0]])

    graph = euclidean_graph(points)

    assert graph.weighted
    assert not graph.directed
    assert graph.edges == [(1, 2), (1, 3), (2, 3)]
    assert graph.get_weight(1, 3) == 5.0
    assert graph.get_weight(3, 2) == 4.0
    assert graph.get_weight(1, 1) is None
    check_metric(graph)


def test_euclidean_graph_single_point() -> None:
    graph = euclidean_graph(np.zeros((1, 2)))

    assert graph.n_vertices == 1
    assert graph.edges == []


def test_circular_layout() -> None:
    pos = circular_layout(4)

    np.testing.assert_array_almost_equal(pos, [[0, 1], [1, 0], [0, -1], [-1, 0]])
    np.testing.assert_array_almost_equal(np.linalg.norm(pos, axis=1), np.ones(4))
    assert circular_layout(0).shape == (0, 2)
