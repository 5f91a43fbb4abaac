import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from graphopt.graph import Graph
from graphopt.utils import euclidean_graph


@pytest.fixture
def triangle() -> Graph:
    return Graph.from_edges([(1, 2, 4.5), (1, 3, 3.0), (2, 3, 2.5)], weighted=True)


@pytest.fixture
def square() -> Graph:
    points = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
    return euclidean_graph(points)


@pytest.fixture
def small_graph() -> Graph:
    return Graph.from_edges([(1, 2), (1, 3), (2, 3), (3, 4)])
