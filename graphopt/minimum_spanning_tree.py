import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .exceptions import DirectedGraphNotSupportedError, MissingWeightError, UnweightedGraphError
from .graph import Graph
from .union_find import UnionFind

logger = logging.getLogger(__name__)


class MinimumSpanningTree:
    def __init__(self, edges: ArrayLike, weights: ArrayLike, n_nodes: int | None = None):
        """最小全域木を求めるクラス

        入力データ形式（ノード番号は0始まり）
        edges: 各ノード間の辺、shapeは(N, 2)
        weights: edgesに対応した距離（重み）、shapeは(N, )
        n_nodes: ノード数、省略時はedgesに現れる最大の番号+1
        """
        edges = np.asarray(edges, dtype=np.int64).reshape(-1, 2)
        weights = np.asarray(weights, dtype=np.float64).ravel()

        if len(edges) != len(weights):
            raise ValueError(f"{len(edges)} edges but {len(weights)} weights")

        # 同じ重みの辺は入力順のまま並ぶ
        sort_ind = weights.argsort(kind="stable")
        self._sorted_edges = edges[sort_ind]
        self._sorted_weights = weights[sort_ind]

        if n_nodes is None:
            n_nodes = int(edges.max()) + 1 if len(edges) > 0 else 0
        self._n_nodes = n_nodes

    @property
    def n_nodes(self) -> int:
        return self._n_nodes

    def solve(self) -> tuple[NDArray[np.int64], NDArray[np.floating]]:
        """kruskal法で最小全域木を求める

        非連結の場合は最小全域森（辺数がn_nodes-1未満）を返す
        """
        union_find = UnionFind(self._n_nodes)
        n_target = max(self._n_nodes - 1, 0)

        selected = []
        for ind, (i, j) in enumerate(self._sorted_edges):
            if len(selected) == n_target:
                break
            if union_find.union(int(i), int(j)):
                selected.append(ind)

        selected = np.array(selected, dtype=np.int64)
        return self._sorted_edges[selected], self._sorted_weights[selected]

    def to_adjacency_matrix(
        self, edges: NDArray, weights: NDArray
    ) -> tuple[NDArray[np.uint8], NDArray[np.floating]]:
        """求めた最小全域木の計算結果を隣接行列と距離行列に変換する"""
        i_arr, j_arr = np.asarray(edges, dtype=np.int64).reshape(-1, 2).T
        adjacency_mat = np.zeros((self._n_nodes,) * 2, dtype=np.uint8)
        adjacency_mat[i_arr, j_arr] = 1
        adjacency_mat[j_arr, i_arr] = 1

        distance_mat = np.full(adjacency_mat.shape, np.nan)
        distance_mat[i_arr, j_arr] = weights
        distance_mat[j_arr, i_arr] = weights

        return adjacency_mat, distance_mat


def _upper_edges(graph: Graph) -> tuple[NDArray[np.int64], NDArray[np.floating]]:
    """隣接行列の上三角から辺と重みを行優先で取り出す"""
    if graph.directed:
        raise DirectedGraphNotSupportedError("MinimumSpanningTree")
    if not graph.weighted:
        raise UnweightedGraphError("minimum spanning tree needs a weighted graph")

    i_arr, j_arr = np.nonzero(np.triu(graph.adjacency))
    weights = graph.weight_matrix[i_arr, j_arr]

    missing = np.flatnonzero(np.isnan(weights))
    if len(missing) > 0:
        k = missing[0]
        raise MissingWeightError(int(i_arr[k]) + 1, int(j_arr[k]) + 1)

    return np.stack((i_arr, j_arr), axis=1), weights


def kruskal_mst(graph: Graph) -> list[tuple[int, int]]:
    """無向重み付きグラフの最小全域木の辺を重みの昇順で返す（頂点番号は1始まり）"""
    edges, weights = _upper_edges(graph)
    mst = MinimumSpanningTree(edges, weights, n_nodes=graph.n_vertices)
    tree_edges, _ = mst.solve()

    result = [(int(i) + 1, int(j) + 1) for i, j in tree_edges]
    if len(result) < graph.n_vertices - 1:
        logger.debug(
            "graph is disconnected: spanning forest has %d edges for %d vertices",
            len(result),
            graph.n_vertices,
        )
    return result


def mst_weight(graph: Graph, edges: list[tuple[int, int]]) -> float:
    total = 0.0
    for u, v in edges:
        weight = graph.get_weight(u, v)
        if weight is None:
            raise MissingWeightError(u, v)
        total += weight
    return total
