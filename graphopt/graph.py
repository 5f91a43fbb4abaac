import logging
from collections.abc import Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .exceptions import IndexOutOfRangeError, UnweightedGraphError

logger = logging.getLogger(__name__)


def _read_only(a: NDArray) -> NDArray:
    view = a.view()
    view.flags.writeable = False
    return view


class Graph:
    def __init__(self, n_vertices: int = 0, directed: bool = False, weighted: bool = False):
        """隣接行列で表現する密グラフ

        頂点番号は公開APIでは1..V、内部の行列では0..V-1。
        重み行列の未設定セルはNaNで表し、重み0.0とは区別する。
        """
        if n_vertices < 0:
            raise ValueError(f"n_vertices must be non-negative, got {n_vertices}")

        self._directed = directed
        self._weighted = weighted
        self._adjacency = np.zeros((n_vertices,) * 2, dtype=np.uint8)
        self._weight = np.full((n_vertices,) * 2, np.nan) if weighted else None

    @classmethod
    def from_matrix(
        cls, matrix: ArrayLike, directed: bool = False, weights: ArrayLike | None = None
    ) -> "Graph":
        """既存の隣接行列（と重み行列）からグラフを作る"""
        adjacency = np.asarray(matrix)
        if adjacency.ndim != 2 or adjacency.shape[0] != adjacency.shape[1]:
            raise ValueError(f"adjacency matrix must be square, got shape {adjacency.shape}")

        adjacency = (adjacency != 0).astype(np.uint8)
        if not directed and (adjacency != adjacency.T).any():
            raise ValueError("adjacency matrix of an undirected graph must be symmetric")

        graph = cls(adjacency.shape[0], directed=directed, weighted=weights is not None)
        graph._adjacency = adjacency

        if weights is not None:
            weight = np.array(weights, dtype=np.float64)
            if weight.shape != adjacency.shape:
                raise ValueError(
                    f"weight matrix shape {weight.shape} does not match adjacency {adjacency.shape}"
                )
            if not directed and not np.array_equal(weight, weight.T, equal_nan=True):
                raise ValueError("weight matrix of an undirected graph must be symmetric")
            weight[adjacency == 0] = np.nan
            graph._weight = weight

        return graph

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[int, int] | tuple[int, int, float | None]],
        n_vertices: int | None = None,
        directed: bool = False,
        weighted: bool = False,
    ) -> "Graph":
        """(u, v) または (u, v, w) の列からグラフを作る。頂点数の省略時は最大の頂点番号を使う"""
        edges = [tuple(e) for e in edges]
        if n_vertices is None:
            n_vertices = max((max(e[0], e[1]) for e in edges), default=0)

        graph = cls(n_vertices, directed=directed, weighted=weighted)
        for e in edges:
            weight = e[2] if len(e) > 2 else None
            graph.add_edge(e[0], e[1], weight if weighted else None)

        return graph

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def n_vertices(self) -> int:
        return self._adjacency.shape[0]

    def __len__(self) -> int:
        return self.n_vertices

    @property
    def adjacency(self) -> NDArray[np.uint8]:
        return _read_only(self._adjacency)

    @property
    def weight_matrix(self) -> NDArray[np.floating] | None:
        return None if self._weight is None else _read_only(self._weight)

    @property
    def edges(self) -> list[tuple[int, int]]:
        """隣接行列から導出する辺の一覧（行優先、無向ならu <= vのみ）"""
        rows, cols = np.nonzero(self._adjacency)
        if not self._directed:
            upper = rows <= cols
            rows, cols = rows[upper], cols[upper]
        return [(int(i) + 1, int(j) + 1) for i, j in zip(rows, cols)]

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    def weighted_edges(self) -> Iterator[tuple[int, int, float | None]]:
        for u, v in self.edges:
            yield u, v, self._weight_at(u - 1, v - 1)

    def vertices(self) -> range:
        return range(1, self.n_vertices + 1)

    def has_edge(self, u: int, v: int) -> bool:
        return bool(self._adjacency[self._index(u), self._index(v)])

    def neighbors(self, v: int) -> list[int]:
        """vから出る辺の行き先"""
        return [int(j) + 1 for j in np.flatnonzero(self._adjacency[self._index(v)])]

    def copy(self) -> "Graph":
        graph = Graph(0, directed=self._directed, weighted=self._weighted)
        graph._adjacency = self._adjacency.copy()
        graph._weight = None if self._weight is None else self._weight.copy()
        return graph

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        if self._weighted:
            kind += ", weighted"
        return f"Graph({self.n_vertices} vertices, {self.n_edges} edges, {kind})"

    def _index(self, v: int) -> int:
        if not 1 <= v <= self.n_vertices:
            raise IndexOutOfRangeError(v, self.n_vertices)
        return int(v) - 1

    def _weight_at(self, i: int, j: int) -> float | None:
        if self._weight is None or np.isnan(self._weight[i, j]):
            return None
        return float(self._weight[i, j])

    # 構造の変更

    def add_edge(self, u: int, v: int, weight: float | None = None) -> "Graph":
        i, j = self._index(u), self._index(v)
        if weight is not None and not self._weighted:
            raise UnweightedGraphError("cannot set weight on an unweighted graph")

        self._adjacency[i, j] = 1
        if not self._directed:
            self._adjacency[j, i] = 1

        if weight is not None:
            self._store_weight(i, j, weight)

        return self

    def remove_edge(self, u: int, v: int) -> "Graph":
        i, j = self._index(u), self._index(v)

        self._adjacency[i, j] = 0
        if not self._directed:
            self._adjacency[j, i] = 0

        if self._weight is not None:
            self._store_weight(i, j, np.nan)

        return self

    def add_vertex(self) -> int:
        """孤立頂点を追加し、その番号（V+1）を返す"""
        n = self.n_vertices
        self._adjacency = np.pad(self._adjacency, ((0, 1), (0, 1)))
        if self._weight is not None:
            self._weight = np.pad(self._weight, ((0, 1), (0, 1)), constant_values=np.nan)
        return n + 1

    def remove_vertex(self, v: int) -> "Graph":
        """頂点vと接続する辺を削除する

        vより大きい頂点番号は1つずつ詰められるので、外部で保持している番号は無効になる。
        範囲外のvは何もしない。
        """
        if not 1 <= v <= self.n_vertices:
            logger.debug("remove_vertex(%d) ignored: graph has %d vertices", v, self.n_vertices)
            return self

        i = v - 1
        self._adjacency = np.delete(np.delete(self._adjacency, i, axis=0), i, axis=1)
        if self._weight is not None:
            self._weight = np.delete(np.delete(self._weight, i, axis=0), i, axis=1)

        return self

    # 重み

    def set_weight(self, u: int, v: int, weight: float) -> "Graph":
        if not self._weighted:
            raise UnweightedGraphError("cannot set weight on an unweighted graph")
        self._store_weight(self._index(u), self._index(v), weight)
        return self

    def get_weight(self, u: int, v: int) -> float | None:
        """辺(u, v)の重み。未設定ならNone"""
        if not self._weighted:
            raise UnweightedGraphError("graph is unweighted")
        return self._weight_at(self._index(u), self._index(v))

    def _store_weight(self, i: int, j: int, weight: float) -> None:
        self._weight[i, j] = weight
        if not self._directed:
            self._weight[j, i] = weight

    # 次数

    def out_degree(self, v: int) -> int:
        return int(self._adjacency[self._index(v)].sum())

    def in_degree(self, v: int) -> int:
        return int(self._adjacency[:, self._index(v)].sum())

    def degree(self, v: int) -> int:
        if self._directed:
            return self.in_degree(v) + self.out_degree(v)
        return self.out_degree(v)

    def degrees(self) -> NDArray[np.int64]:
        """全頂点の次数（添字0が頂点1）"""
        out_deg = self._adjacency.sum(axis=1, dtype=np.int64)
        if self._directed:
            return out_deg + self._adjacency.sum(axis=0, dtype=np.int64)
        return out_deg

    def min_max_degree(self) -> tuple[int, int]:
        degrees = self.degrees()
        if len(degrees) == 0:
            return 0, 0
        return int(degrees.min()), int(degrees.max())

    def even_odd_degree_counts(self) -> tuple[int, int]:
        degrees = self.degrees()
        n_odd = int((degrees % 2).sum())
        return len(degrees) - n_odd, n_odd

    def sorted_by_degrees(self) -> list[int]:
        """次数を降順に並べたもの。同じ次数は頂点番号順に安定"""
        degrees = self.degrees()
        order = np.argsort(-degrees, kind="stable")
        return [int(d) for d in degrees[order]]
