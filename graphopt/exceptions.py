class GraphError(Exception):
    """グラフ操作に関する例外の基底クラス"""


class DirectedGraphNotSupportedError(GraphError):
    """無向グラフ専用のアルゴリズムに有向グラフが渡された"""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"{algorithm}: cannot use a directed graph in this algorithm")
        self.algorithm = algorithm


class UnweightedGraphError(GraphError):
    """重みなしグラフで重みを読み書きしようとした"""


class NonMetricGraphError(GraphError):
    """辺の重みが三角不等式を満たさない"""

    def __init__(self, i: int, j: int, k: int, direct: float, detour: float) -> None:
        super().__init__(
            f"graph does not satisfy the triangle inequality: "
            f"w({i},{j})={direct:g} > w({i},{k})+w({k},{j})={detour:g}"
        )
        self.triple = (i, j, k)


class MalformedInputError(GraphError, ValueError):
    """グラフファイルの書式が不正"""

    def __init__(self, message: str, path: str | None = None, line_no: int | None = None) -> None:
        location = ""
        if path is not None:
            location = f"{path}:{line_no}: " if line_no is not None else f"{path}: "
        elif line_no is not None:
            location = f"line {line_no}: "
        super().__init__(f"{location}{message}")
        self.path = path
        self.line_no = line_no


class IndexOutOfRangeError(GraphError, IndexError):
    """頂点番号が1..Vの範囲外"""

    def __init__(self, vertex: int, n_vertices: int) -> None:
        super().__init__(f"vertex {vertex} out of range 1..{n_vertices}")
        self.vertex = vertex


class MissingWeightError(GraphError):
    """重みが設定されていない辺をアルゴリズムが参照した"""

    def __init__(self, u: int, v: int) -> None:
        super().__init__(f"edge ({u}, {v}) has no weight")
        self.edge = (u, v)


class DisconnectedGraphError(GraphError):
    """連結グラフを前提とするアルゴリズムに非連結グラフが渡された"""
