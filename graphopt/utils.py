import numpy as np
from numpy.typing import NDArray
from scipy.spatial.distance import pdist, squareform

from .graph import Graph


def sample_plane_points(num: int, scale: float = 1.0, rng: np.random.Generator | None = None) -> NDArray:
    """[0, scale)^2 の一様乱数で2次元点を生成する"""
    if rng is None:
        rng = np.random.default_rng()
    return rng.uniform(0, scale, (num, 2))


def euclidean_graph(points: NDArray) -> Graph:
    """点同士のユークリッド距離を重みとする完全グラフを作る。三角不等式は自動的に満たされる"""
    points = np.asarray(points, dtype=np.float64)
    n = len(points)

    adjacency = np.ones((n, n), dtype=np.uint8) - np.eye(n, dtype=np.uint8)
    distance_mat = squareform(pdist(points)) if n > 1 else np.zeros((n, n))

    return Graph.from_matrix(adjacency, directed=False, weights=distance_mat)


def circular_layout(num: int, r: float = 1.0) -> NDArray:
    """頂点を円周上に等間隔で並べた座標、頂点1が真上"""
    theta = np.pi / 2 - 2 * np.pi * np.arange(num) / max(num, 1)
    return r * np.stack((np.cos(theta), np.sin(theta)), axis=1)
