import logging
from collections import Counter

from .exceptions import DirectedGraphNotSupportedError
from .graph import Graph
from .trace import Trace, emit

logger = logging.getLogger(__name__)


def approximate_vertex_cover(graph: Graph, trace: Trace | None = None) -> list[int]:
    """辺を1本選んで両端点を被覆に加え、その両端点に接する辺を取り除くことを繰り返す

    選ぶ辺は残りの辺のうち両端点の次数の和が最大のもの、同点なら辞書順最小のもの。
    選んだ辺は互いに端点を共有しないので、被覆の大きさは最小頂点被覆の高々2倍。
    """
    if graph.directed:
        raise DirectedGraphNotSupportedError("approximate_vertex_cover")

    remaining = graph.edges
    cover: set[int] = set()

    while remaining:
        degree = Counter(w for e in remaining for w in e)
        u, v = max(remaining, key=lambda e: degree[e[0]] + degree[e[1]])
        cover.update((u, v))
        emit(trace, f"Adding vertices {u} and {v} to the cover.")

        remaining = [e for e in remaining if u not in e and v not in e]
        emit(trace, f"Current cover set: {sorted(cover)}")
        emit(trace, f"Remaining edges after removal: {remaining}")

    result = sorted(cover)
    emit(trace, f"Approximate Vertex Cover: {result}")
    logger.debug("vertex cover of %r has %d vertices", graph, len(result))

    return result


def is_vertex_cover(graph: Graph, cover: list[int] | set[int]) -> bool:
    cover = set(cover)
    return all(u in cover or v in cover for u, v in graph.edges)
