import numpy as np

from graphopt.christofides import christofides, tour_length
from graphopt.graph import Graph
from graphopt.io import format_matrix
from graphopt.minimum_spanning_tree import kruskal_mst, mst_weight
from graphopt.trace import Trace
from graphopt.utils import euclidean_graph, sample_plane_points
from graphopt.vertex_cover import approximate_vertex_cover
from graphopt.visualization import show_graph, show_tour, show_vertex_cover


def main():
    rng = np.random.default_rng(123)

    # 辺の追加と削除
    graph = Graph(4)
    graph.add_edge(2, 3).add_edge(1, 3).add_edge(2, 2).add_edge(4, 1)
    print(format_matrix(graph))
    graph.remove_edge(2, 3)
    print(graph.edges)

    # 頂点の追加と削除
    v = graph.add_vertex()
    graph.add_edge(3, v)
    print(format_matrix(graph))
    graph.remove_vertex(3)
    print(format_matrix(graph))
    print(graph.edges)

    # 次数
    print("Min/max degree:", graph.min_max_degree())
    print("Even/odd degree counts:", graph.even_odd_degree_counts())
    print("Degrees:", graph.sorted_by_degrees())

    # 頂点被覆
    graph = Graph.from_edges([(1, 2), (1, 3), (2, 3), (3, 4)])
    trace = Trace()
    cover = approximate_vertex_cover(graph, trace)
    print(trace)
    show_vertex_cover(graph, cover)

    # 最小全域木
    graph = Graph.from_edges([(1, 2, 4.5), (1, 3, 3.0), (2, 3, 2.5)], weighted=True)
    show_graph(graph, title="Weighted triangle")
    mst = kruskal_mst(graph)
    print("MST:", mst, "weight:", mst_weight(graph, mst))

    # ランダムな点のユークリッド完全グラフで巡回路を求める
    points = sample_plane_points(12, 10.0, rng=rng)
    graph = euclidean_graph(points)
    trace = Trace()
    tour = christofides(graph, trace)
    print(trace)
    print("Tour length:", tour_length(graph, tour))
    show_tour(graph, tour, pos=points)


if __name__ == "__main__":
    main()
