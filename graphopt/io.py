"""グラフの読み書き

* 辺リスト形式: 1行に ``u v [weight]``
* DOT形式（Graphviz）: ``graph G { 1 -- 2 [label="1.50"]; }``
"""

import logging
import re
from os import PathLike
from pathlib import Path

import numpy as np

from .exceptions import MalformedInputError
from .graph import Graph

logger = logging.getLogger(__name__)

_DOT_EDGE = re.compile(
    r"""^\s*(?P<u>\d+)\s*(?P<op>->|--)\s*(?P<v>\d+)\s*
    (?:\[\s*label\s*=\s*"(?P<label>[^"]*)"\s*\])?\s*;?\s*$""",
    re.VERBOSE,
)


def _build(
    edges: list[tuple[int, int, float | None]], directed: bool, source: str | None
) -> Graph:
    weighted = any(w is not None for _, _, w in edges)
    graph = Graph.from_edges(edges, directed=directed, weighted=weighted)
    logger.debug("loaded %r from %s", graph, source or "<string>")
    return graph


def parse_edge_list(text: str, directed: bool = False, source: str | None = None) -> Graph:
    """辺リスト形式の文字列を読む。空行と#以降は無視する

    1本でも重み付きの辺があれば重み付きグラフになる。頂点数は現れた最大の頂点番号。
    """
    edges = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        parts = line.split("#", 1)[0].split()
        if not parts:
            continue

        if len(parts) not in (2, 3):
            raise MalformedInputError(f"expected 'u v [weight]', got {line.strip()!r}", source, line_no)

        try:
            u, v = int(parts[0]), int(parts[1])
            weight = float(parts[2]) if len(parts) == 3 else None
        except ValueError as e:
            raise MalformedInputError(f"invalid number in {line.strip()!r}", source, line_no) from e

        if u < 1 or v < 1:
            raise MalformedInputError(f"vertex ids start at 1, got {line.strip()!r}", source, line_no)

        edges.append((u, v, weight))

    return _build(edges, directed, source)


def load_edge_list(path: str | PathLike, directed: bool = False) -> Graph:
    path = Path(path)
    return parse_edge_list(path.read_text(), directed=directed, source=str(path))


def to_edge_list(graph: Graph) -> str:
    lines = []
    for u, v, weight in graph.weighted_edges():
        lines.append(f"{u} {v}" if weight is None else f"{u} {v} {weight!r}")
    return "\n".join(lines) + ("\n" if lines else "")


def write_edge_list(graph: Graph, path: str | PathLike) -> None:
    Path(path).write_text(to_edge_list(graph))


def parse_dot(text: str, source: str | None = None) -> Graph:
    """to_dotで書き出したDOT形式を読む。digraphで始まれば有向グラフ"""
    directed = False
    edges = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if stripped.startswith("digraph"):
            directed = True
            continue

        if "->" not in stripped and "--" not in stripped:
            continue

        m = _DOT_EDGE.match(stripped)
        if m is None:
            raise MalformedInputError(f"cannot parse DOT edge {stripped!r}", source, line_no)

        u, v = int(m["u"]), int(m["v"])
        if u < 1 or v < 1:
            raise MalformedInputError(f"vertex ids start at 1, got {stripped!r}", source, line_no)

        try:
            weight = float(m["label"]) if m["label"] is not None else None
        except ValueError as e:
            raise MalformedInputError(f"label is not a number in {stripped!r}", source, line_no) from e

        edges.append((u, v, weight))

    return _build(edges, directed, source)


def load_dot(path: str | PathLike) -> Graph:
    path = Path(path)
    return parse_dot(path.read_text(), source=str(path))


def to_dot(graph: Graph) -> str:
    graph_type, connector = ("digraph", "->") if graph.directed else ("graph", "--")

    lines = [f"{graph_type} G {{"]
    for u, v, weight in graph.weighted_edges():
        if weight is None:
            lines.append(f"  {u} {connector} {v};")
        else:
            lines.append(f'  {u} {connector} {v} [label="{weight:.2f}"];')
    lines.append("}")

    return "\n".join(lines) + "\n"


def write_dot(graph: Graph, path: str | PathLike) -> None:
    Path(path).write_text(to_dot(graph))


def load_graph(path: str | PathLike, directed: bool = False) -> Graph:
    """拡張子が.dot/.gvならDOT形式、それ以外は辺リスト形式として読む"""
    if Path(path).suffix.lower() in (".dot", ".gv"):
        return load_dot(path)
    return load_edge_list(path, directed=directed)


def format_matrix(graph: Graph) -> str:
    """隣接行列（重み付きなら重み行列も）を1始まりの行・列番号付きで整形する"""
    n = graph.n_vertices
    width = len(str(n))

    lines = [" " * width + " " + "".join(f" {i:>{width}}" for i in range(1, n + 1))]
    for i, row in enumerate(graph.adjacency, start=1):
        lines.append(f"{i:>{width}} " + "".join(f" {val:>{width}}" for val in row))

    if graph.weighted:
        lines.append("")
        lines.append("Weight Matrix:")
        lines.append(" " * width + "".join(f"{i:>7}" for i in range(1, n + 1)))
        for i, row in enumerate(graph.weight_matrix, start=1):
            cells = ("-" if np.isnan(w) else f"{w:.1f}" for w in row)
            lines.append(f"{i:>{width}}" + "".join(f"{c:>7}" for c in cells))

    return "\n".join(lines) + "\n"
