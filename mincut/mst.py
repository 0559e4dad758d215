from typing import List, Optional

import numpy as np

from mincut.graph import Edge, Graph


class MSTResult:
    """
    Outcome of find_mst.

    `spanning` is False when the start vertex's component does not cover the
    whole graph; `edges` then holds the spanning tree of that component only.
    """
    __slots__ = ['edges', 'explored', 'spanning']

    def __init__(self, edges: List[Edge], explored: list, spanning: bool):
        self.edges = edges
        self.explored = explored
        self.spanning = spanning

    @property
    def total_weight(self) -> int:
        return sum(e.weight for e in self.edges)

    def __len__(self):
        return len(self.edges)

    def __iter__(self):
        return iter(self.edges)

    def __repr__(self):
        return (f"MSTResult(edges={len(self.edges)}, weight={self.total_weight}, "
                f"spanning={self.spanning})")


def _choose_next_edge(graph: Graph, explored: dict) -> Optional[Edge]:
    result = None

    for vid in explored:
        for edge in graph.incident_edges(vid):
            # exactly one endpoint outside the explored set
            if (edge.from_id in explored) != (edge.to_id in explored):
                if result is None or edge.weight < result.weight:
                    result = edge

    return result


def find_mst(graph: Graph, rng: Optional[np.random.Generator] = None) -> MSTResult:
    """
    Grows a minimum spanning tree from a random start vertex, Prim style.

    Each step rescans every edge incident to the explored set and takes the
    cheapest crossing edge, O(V * E) overall. The graph is not modified.
    Stops early with spanning=False when no crossing edge is left.
    """
    if rng is None:
        rng = np.random.default_rng()

    vertex_ids = list(graph.get_nodes())
    num_vertices = len(vertex_ids)
    if num_vertices == 0:
        return MSTResult([], [], True)

    start = vertex_ids[int(rng.integers(num_vertices))]

    # dict as an insertion-ordered set
    explored = {start: None}
    mst = []

    while len(explored) < num_vertices:
        edge = _choose_next_edge(graph, explored)
        if edge is None:
            break

        explored[edge.from_id] = None
        explored[edge.to_id] = None
        mst.append(edge)

    return MSTResult(mst, list(explored), len(explored) == num_vertices)
