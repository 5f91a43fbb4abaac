import logging
import pathlib
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

import click
import numpy as np

from . import io
from .christofides import christofides, tour_length
from .exceptions import GraphError
from .graph import Graph
from .minimum_spanning_tree import kruskal_mst, mst_weight
from .trace import Trace
from .utils import euclidean_graph, sample_plane_points
from .vertex_cover import approximate_vertex_cover

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

_graph_file = click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path)
)
_directed = click.option(
    "--directed", is_flag=True, help="Read an edge-list file as a directed graph."
)
_trace = click.option("--trace", "show_trace", is_flag=True, help="Print every algorithm step.")
_plot = click.option(
    "--plot",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    help="Save a picture of the result to this file.",
)


def _graph_errors(func: Callable[P, R]) -> Callable[P, R]:
    """GraphErrorをClickExceptionに変換する"""

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except GraphError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def _load(path: pathlib.Path, directed: bool) -> Graph:
    graph = io.load_graph(path, directed=directed)
    logger.info(f"Loaded {graph!r} from {path}")
    return graph


def _save_plot(path: pathlib.Path, draw: Callable[..., None]) -> None:
    import matplotlib

    matplotlib.use("Agg")
    from .visualization import GraphPlotter

    plotter = GraphPlotter()
    try:
        draw(plotter)
        plotter.save(path)
    finally:
        plotter.close()
    click.echo(f"Plot written to {path}")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="GRAPHOPT_LOG_LEVEL",
    show_default=True,
)
def main(log_level: str) -> None:
    """Approximation algorithms on dense graphs."""
    logging.basicConfig(
        level=log_level.upper(), format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )


@main.command()
@_graph_file
@_directed
@_graph_errors
def info(path: pathlib.Path, directed: bool) -> None:
    """Show degree statistics and the adjacency matrix."""
    graph = _load(path, directed)
    min_degree, max_degree = graph.min_max_degree()
    n_even, n_odd = graph.even_odd_degree_counts()

    click.echo(f"Vertices: {graph.n_vertices}")
    click.echo(f"Edges: {graph.n_edges}")
    click.echo(f"Directed: {graph.directed}, weighted: {graph.weighted}")
    click.echo(f"Min/max degree: {min_degree}/{max_degree}")
    click.echo(f"Even/odd degree vertices: {n_even}/{n_odd}")
    click.echo(f"Degrees (descending): {graph.sorted_by_degrees()}")
    click.echo()
    click.echo(io.format_matrix(graph), nl=False)


@main.command()
@_graph_file
@_directed
@_trace
@_plot
@_graph_errors
def cover(path: pathlib.Path, directed: bool, show_trace: bool, plot: pathlib.Path | None) -> None:
    """Compute a 2-approximate vertex cover."""
    graph = _load(path, directed)
    trace = Trace() if show_trace else None

    result = approximate_vertex_cover(graph, trace)

    if trace is not None:
        click.echo(str(trace), nl=False)
    click.echo(f"Vertex cover ({len(result)} vertices): {result}")

    if plot is not None:

        def draw(plotter):
            plotter.plot_graph(graph)
            plotter.highlight_vertices(graph, result)

        _save_plot(plot, draw)


@main.command()
@_graph_file
@_plot
@_graph_errors
def mst(path: pathlib.Path, plot: pathlib.Path | None) -> None:
    """Compute a minimum spanning tree with Kruskal's algorithm."""
    graph = _load(path, directed=False)

    edges = kruskal_mst(graph)

    for u, v in edges:
        click.echo(f"{u} -- {v}  {graph.get_weight(u, v):.2f}")
    click.echo(f"Total weight: {mst_weight(graph, edges):.2f}")
    if len(edges) < graph.n_vertices - 1:
        click.echo(f"Graph is disconnected: spanning forest with {len(edges)} edges")

    if plot is not None:
        tree = Graph.from_edges(
            [(u, v, graph.get_weight(u, v)) for u, v in edges],
            n_vertices=graph.n_vertices,
            weighted=True,
        )

        def draw(plotter):
            plotter.plot_graph(graph, color="lightgray")
            plotter.plot_graph(tree, color="blue", show_weights=True)

        _save_plot(plot, draw)


@main.command()
@_graph_file
@_trace
@_plot
@_graph_errors
def tsp(path: pathlib.Path, show_trace: bool, plot: pathlib.Path | None) -> None:
    """Approximate a travelling salesman tour with Christofides' heuristic."""
    graph = _load(path, directed=False)
    trace = Trace() if show_trace else None

    tour = christofides(graph, trace)

    if trace is not None:
        click.echo(str(trace), nl=False)
    click.echo(f"Tour: {' -> '.join(map(str, tour + tour[:1]))}")
    if all(graph.has_edge(u, v) for u, v in zip(tour, tour[1:] + tour[:1])) or len(tour) < 2:
        click.echo(f"Length: {tour_length(graph, tour):.2f}")

    if plot is not None:

        def draw(plotter):
            plotter.plot_graph(graph, color="lightgray")
            plotter.plot_tour(tour)
            plotter.plot_vertices(graph)

        _save_plot(plot, draw)


@main.command()
@_graph_file
@_directed
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    help="Write to this file instead of stdout.",
)
@_graph_errors
def dot(path: pathlib.Path, directed: bool, output: pathlib.Path | None) -> None:
    """Convert a graph file to Graphviz DOT."""
    graph = _load(path, directed)
    if output is None:
        click.echo(io.to_dot(graph), nl=False)
    else:
        io.write_dot(graph, output)
        click.echo(f"Wrote {output}")


@main.command()
@click.argument("n_points", type=click.IntRange(min=1))
@click.option("--seed", type=int, default=None, help="Random seed.")
@click.option("--scale", type=float, default=10.0, show_default=True)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    help="Write to this file instead of stdout.",
)
def random(n_points: int, seed: int | None, scale: float, output: pathlib.Path | None) -> None:
    """Generate a complete Euclidean graph over random points as an edge list."""
    points = sample_plane_points(n_points, scale, rng=np.random.default_rng(seed))
    graph = euclidean_graph(points)
    if output is None:
        click.echo(io.to_edge_list(graph), nl=False)
    else:
        io.write_edge_list(graph, output)
        click.echo(f"Wrote {output}")


if __name__ == "__main__":
    main()
