from os import PathLike

import matplotlib.pyplot as plt
from numpy.typing import NDArray

from .graph import Graph
from .utils import circular_layout


class GraphPlotter:
    def __init__(
        self,
        pos: NDArray | None = None,
        figsize: tuple[int, int] | None = None,
        title: str | None = None,
    ) -> None:
        """頂点座標posにグラフを描く。posの行iが頂点i+1の座標、省略時は円周上に並べる"""
        self.fig = plt.figure(figsize=figsize)
        self.ax = self.fig.add_subplot()
        self.ax.set_title(title)
        self.ax.set_aspect("equal")
        self.ax.set_axis_off()
        self.pos = pos

    def _positions(self, graph: Graph) -> NDArray:
        if self.pos is None:
            self.pos = circular_layout(graph.n_vertices)
        return self.pos

    def plot_graph(self, graph: Graph, color: str = "gray", show_weights: bool = False) -> None:
        """辺と頂点を描く。有向グラフは矢印で描く"""
        pos = self._positions(graph)

        for u, v, weight in graph.weighted_edges():
            p, q = pos[u - 1], pos[v - 1]
            if graph.directed:
                self.ax.annotate(
                    "", xy=q, xytext=p, arrowprops=dict(arrowstyle="->", color=color)
                )
            else:
                self.ax.plot([p[0], q[0]], [p[1], q[1]], color=color, linewidth=1, zorder=1)

            if show_weights and weight is not None:
                mid = (p + q) / 2
                self.ax.text(mid[0], mid[1], f"{weight:.2f}", fontsize=8, color=color)

        self.plot_vertices(graph)

    def plot_vertices(self, graph: Graph, color: str | list = "white") -> None:
        pos = self._positions(graph)
        self.ax.scatter(pos[:, 0], pos[:, 1], s=300, c=color, edgecolors="black", zorder=2)
        for v in graph.vertices():
            self.ax.text(*pos[v - 1], str(v), ha="center", va="center", zorder=3)

    def highlight_vertices(self, graph: Graph, vertices: list[int], color: str = "orange") -> None:
        """頂点被覆などの頂点集合を色付きで描く"""
        selected = set(vertices)
        colors = [color if v in selected else "white" for v in graph.vertices()]
        self.plot_vertices(graph, color=colors)

    def plot_tour(self, tour: list[int], color: str = "red") -> None:
        """巡回路を最後の頂点から最初の頂点に戻る辺も含めて描く"""
        if self.pos is None or len(tour) < 2:
            return
        closed = self.pos[[v - 1 for v in tour + tour[:1]]]
        self.ax.plot(closed[:, 0], closed[:, 1], color=color, linewidth=2, zorder=1)

    def save(self, path: str | PathLike) -> None:
        self.fig.savefig(path)

    def show(self) -> None:
        plt.show()

    def close(self) -> None:
        plt.close(self.fig)


def show_graph(graph: Graph, pos: NDArray | None = None, title: str | None = None) -> None:
    plotter = GraphPlotter(pos, title=title)
    plotter.plot_graph(graph, show_weights=graph.weighted)
    plotter.show()
    plotter.close()


def show_vertex_cover(graph: Graph, cover: list[int], pos: NDArray | None = None) -> None:
    plotter = GraphPlotter(pos, title=f"Vertex cover ({len(cover)} vertices)")
    plotter.plot_graph(graph)
    plotter.highlight_vertices(graph, cover)
    plotter.show()
    plotter.close()


def show_tour(graph: Graph, tour: list[int], pos: NDArray | None = None) -> None:
    plotter = GraphPlotter(pos, title="Approximate TSP tour")
    plotter.plot_graph(graph, color="lightgray")
    plotter.plot_tour(tour)
    plotter.plot_vertices(graph)
    plotter.show()
    plotter.close()
