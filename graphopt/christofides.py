"""Christofides法による巡回セールスマン問題の近似解法

教科書的なChristofides法との違いは2点ある。

* 奇数次数頂点のマッチングは最小重み完全マッチングではなく、リスト順に最も近い未マッチ頂点と
  組む貪欲法（greedy_matching）で求める
* オイラー閉路は作らず、MST+マッチングの多重グラフを頂点1から深さ優先で辿り、
  訪問済み頂点を飛ばした順序をそのまま巡回路とする（dfs_shortcut）

どちらも3/2近似の保証を弱めるが、意図した簡略化として残している。
"""

import logging
from collections import Counter

import numpy as np

from .exceptions import (
    DirectedGraphNotSupportedError,
    DisconnectedGraphError,
    MissingWeightError,
    NonMetricGraphError,
    UnweightedGraphError,
)
from .graph import Graph
from .minimum_spanning_tree import kruskal_mst, mst_weight
from .trace import Trace, emit

logger = logging.getLogger(__name__)

Multigraph = dict[int, Counter[int]]


def _require_undirected_weighted(graph: Graph, algorithm: str) -> None:
    if graph.directed:
        raise DirectedGraphNotSupportedError(algorithm)
    if not graph.weighted:
        raise UnweightedGraphError(f"{algorithm}: graph must be weighted")


def check_metric(graph: Graph, atol: float = 1e-9) -> None:
    """3辺とも存在する全ての相異なる頂点の組(i, j, k)で w(i,j) <= w(i,k) + w(k,j) を確かめる

    計算量はO(V^3)、メモリはO(V^2)。浮動小数点の丸め誤差はatolまで許容する。
    """
    _require_undirected_weighted(graph, "check_metric")

    n = graph.n_vertices
    present = graph.adjacency.astype(bool) & ~np.eye(n, dtype=bool)
    W = graph.weight_matrix

    missing = np.argwhere(present & np.isnan(W))
    if len(missing) > 0:
        i, j = missing[0]
        raise MissingWeightError(int(i) + 1, int(j) + 1)

    W = np.nan_to_num(W, nan=0.0)
    for k in range(n):
        # kを経由する迂回路の長さ、detour[i, j] = w(i,k) + w(k,j)
        detour = W[:, k, np.newaxis] + W[np.newaxis, k, :]
        mask = present & present[:, k, np.newaxis] & present[np.newaxis, k, :]
        mask[k, :] = False
        mask[:, k] = False

        violation = np.argwhere(mask & (W > detour + atol))
        if len(violation) > 0:
            i, j = violation[0]
            raise NonMetricGraphError(
                int(i) + 1, int(j) + 1, k + 1, float(W[i, j]), float(detour[i, j])
            )


def odd_degree_vertices(n_vertices: int, edges: list[tuple[int, int]]) -> list[int]:
    """辺集合での次数が奇数の頂点を番号順に返す"""
    degree = Counter()
    for u, v in edges:
        degree[u] += 1
        degree[v] += 1
    return [v for v in range(1, n_vertices + 1) if degree[v] % 2 == 1]


def greedy_matching(
    graph: Graph, vertices: list[int], trace: Trace | None = None
) -> list[tuple[int, int]]:
    """リスト順に未マッチの頂点を取り、それより後ろにある未マッチ頂点のうち最も近いものと組む

    最小重み完全マッチングの近似。辺の無い組は候補にしない。相手が見つからない頂点は
    マッチしないまま残る。同じ重みの候補はリストで前にあるものを選ぶ。
    """
    matched: set[int] = set()
    matching = []

    for pos, u in enumerate(vertices):
        if u in matched:
            continue

        best, best_weight = None, np.inf
        for v in vertices[pos + 1 :]:
            if v in matched or not graph.has_edge(u, v):
                continue
            weight = graph.get_weight(u, v)
            if weight is None:
                raise MissingWeightError(u, v)
            if weight < best_weight:
                best, best_weight = v, weight

        if best is None:
            emit(trace, f"Vertex {u} has no unmatched neighbour and stays unmatched.")
            continue

        matched.update((u, best))
        matching.append((u, best))
        emit(trace, f"Matching {u} with {best} (weight {best_weight:.2f}).")

    return matching


def build_multigraph(
    n_vertices: int, *edge_lists: list[tuple[int, int]]
) -> Multigraph:
    """辺のリストを重ね合わせた多重グラフ（隣接頂点ごとの辺の本数）を作る"""
    multigraph: Multigraph = {v: Counter() for v in range(1, n_vertices + 1)}
    for edges in edge_lists:
        for u, v in edges:
            multigraph[u][v] += 1
            multigraph[v][u] += 1
    return multigraph


def dfs_shortcut(multigraph: Multigraph, start: int = 1) -> list[int]:
    """startから深さ優先で辿り、各頂点を初めて訪れた順に並べる

    隣接頂点は番号の小さい順に訪れる。オイラー閉路を辿って重複を飛ばす代わりの簡略化。
    """
    visited: set[int] = set()
    order = []
    stack = [start]

    while stack:
        v = stack.pop()
        if v in visited:
            continue
        visited.add(v)
        order.append(v)
        # 小さい番号から取り出されるよう逆順に積む
        stack.extend(w for w in sorted(multigraph.get(v, ()), reverse=True) if w not in visited)

    return order


def tour_length(graph: Graph, tour: list[int]) -> float:
    """巡回路（最後の頂点から最初の頂点に戻る辺を含む）の長さ"""
    if len(tour) < 2:
        return 0.0

    total = 0.0
    for u, v in zip(tour, tour[1:] + tour[:1]):
        weight = graph.get_weight(u, v)
        if weight is None:
            raise MissingWeightError(u, v)
        total += weight
    return total


def christofides(graph: Graph, trace: Trace | None = None, atol: float = 1e-9) -> list[int]:
    """無向重み付きの距離グラフで巡回セールスマン問題の近似巡回路を求める

    返り値は全頂点を1度ずつ含む頂点番号の列（頂点1から始まる）。
    """
    _require_undirected_weighted(graph, "christofides")

    n = graph.n_vertices
    if n == 0:
        return []

    check_metric(graph, atol=atol)
    emit(trace, "Graph satisfies the triangle inequality.")

    # 1. 最小全域木
    mst = kruskal_mst(graph)
    if len(mst) < n - 1:
        raise DisconnectedGraphError(
            f"christofides: graph is not connected ({len(mst)} tree edges for {n} vertices)"
        )
    emit(trace, f"MST edges: {mst}")
    emit(trace, f"MST weight: {mst_weight(graph, mst):.2f}")

    # 2. 最小全域木で次数が奇数の頂点
    odd = odd_degree_vertices(n, mst)
    emit(trace, f"Odd-degree vertices: {odd}")

    # 3. 奇数次数頂点の貪欲マッチング
    matching = greedy_matching(graph, odd, trace)
    emit(trace, f"Matching edges: {matching}")

    # 4. 多重グラフを深さ優先で辿って巡回路にする
    multigraph = build_multigraph(n, mst, matching)
    tour = dfs_shortcut(multigraph, start=1)
    emit(trace, f"Tour: {tour + tour[:1]}")
    if trace is not None:
        closing = zip(tour, tour[1:] + tour[:1])
        if len(tour) < 2 or all(graph.has_edge(u, v) for u, v in closing):
            emit(trace, f"Tour length: {tour_length(graph, tour):.2f}")
        else:
            emit(trace, "Tour shortcuts between vertices with no direct edge.")

    logger.debug("christofides tour over %d vertices: %s", n, tour)
    return tour
