import operator
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Union


MAX_VERTEX_ID = 2**64 - 1


class VertexNotFoundError(KeyError):
    """Raised in strict mode when an operation names a vertex that does not exist."""


class StaleEdgeError(ValueError):
    """Raised when contracting an edge that is not part of the current graph."""


class Vertex:
    __slots__ = ['id', 'edges']

    def __init__(self, vertex_id: int):
        self.id = vertex_id
        # ids of incident edges, in insertion order; a self-loop appears twice
        self.edges: List[int] = []

    def degree(self) -> int:
        return len(self.edges)

    def __repr__(self):
        return f"Vertex(id={self.id}, edges={self.edges})"


class Edge:
    __slots__ = ['id', 'from_id', 'to_id', 'weight']

    def __init__(self, edge_id: int, from_id: int, to_id: int, weight: int = 1):
        self.id = edge_id
        self.from_id = from_id
        self.to_id = to_id
        self.weight = weight

    def endpoints(self) -> tuple:
        return self.from_id, self.to_id

    def is_self_loop(self) -> bool:
        return self.from_id == self.to_id

    def other(self, vertex_id: int) -> int:
        """
        Returns the endpoint opposite to `vertex_id`.
        """
        if vertex_id == self.from_id:
            return self.to_id
        if vertex_id == self.to_id:
            return self.from_id
        raise ValueError(f"vertex {vertex_id} is not an endpoint of {self}")

    def __str__(self):
        return f"({self.from_id},{self.to_id},{self.weight})"

    def __repr__(self):
        return f"Edge(id={self.id}, from_id={self.from_id}, to_id={self.to_id}, weight={self.weight})"


def _check_vertex_id(vertex_id) -> int:
    # bool is an int subclass but never a meaningful vertex id
    if isinstance(vertex_id, bool):
        raise ValueError(f"vertex id must be an integer, got {vertex_id!r}")
    try:
        vertex_id = operator.index(vertex_id)
    except TypeError:
        raise ValueError(f"vertex id must be an integer, got {vertex_id!r}") from None
    if vertex_id < 0 or vertex_id > MAX_VERTEX_ID:
        raise ValueError(f"vertex id must be in [0, 2**64), got {vertex_id}")
    return vertex_id


class Graph:
    """
    Weighted undirected multigraph stored as an id-based arena.

    Vertices live in a dict keyed by vertex id, edges in an insertion-ordered
    dict keyed by edge id which doubles as the global edge sequence. Edges
    refer to their endpoints by vertex id, so contracting a vertex amounts to
    rewriting ids in the edge records.

    Args:
        strict (bool):
            If False (default), edge and adjacency insertion silently create
            missing endpoints. If True, missing endpoints raise
            VertexNotFoundError and vertices must be added with add_node().
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._vertices: Dict[int, Vertex] = {}
        self._edges: Dict[int, Edge] = {}
        self._next_edge_id = 0

    # -----------------
    # QUERIES
    # -----------------

    def num_nodes(self) -> int:
        return len(self._vertices)

    def num_edges(self) -> int:
        return len(self._edges)

    def get_node(self, vertex_id: int) -> Optional[Vertex]:
        return self._vertices.get(vertex_id)

    def get_nodes(self) -> Mapping[int, Vertex]:
        return MappingProxyType(self._vertices)

    def get_edges(self) -> List[Edge]:
        return list(self._edges.values())

    def get_edge(self, edge_id: int) -> Optional[Edge]:
        return self._edges.get(edge_id)

    def incident_edges(self, vertex_id: int) -> List[Edge]:
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            return []
        return [self._edges[eid] for eid in vertex.edges]

    # -----------------
    # MUTATION
    # -----------------

    def _resolve(self, vertex_id) -> Vertex:
        vertex_id = _check_vertex_id(vertex_id)
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            if self.strict:
                raise VertexNotFoundError(vertex_id)
            vertex = Vertex(vertex_id)
            self._vertices[vertex_id] = vertex
        return vertex

    def add_node(self, vertex_id: int) -> Vertex:
        vertex_id = _check_vertex_id(vertex_id)
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            vertex = Vertex(vertex_id)
            self._vertices[vertex_id] = vertex
        return vertex

    def _new_edge(self, v1: Vertex, v2: Vertex, weight: int) -> Edge:
        edge = Edge(self._next_edge_id, v1.id, v2.id, weight)
        self._next_edge_id += 1

        v1.edges.append(edge.id)
        v2.edges.append(edge.id)
        self._edges[edge.id] = edge
        return edge

    def add_edge(self, id1: int, id2: int, weight: int = 1) -> Edge:
        """
        Adds one edge between id1 and id2. Parallel edges and self-loops are
        accepted as given; contraction and remove_self_loops() clean up
        self-loops.
        """
        v1 = self._resolve(id1)
        v2 = self._resolve(id2)
        return self._new_edge(v1, v2, weight)

    def insert_node_adjacency(self, vertex_id: int, neighbors: Iterable[int]) -> List[Edge]:
        """
        Adds one unit-weight edge from `vertex_id` to each listed neighbor.

        Nothing is deduplicated: listing the same pair from both sides, or
        calling twice, yields parallel edges.
        """
        # validate every id up front so a bad neighbor leaves the graph untouched
        vertex_id = _check_vertex_id(vertex_id)
        neighbors = [_check_vertex_id(v) for v in neighbors]
        if self.strict:
            for vid in [vertex_id] + neighbors:
                if vid not in self._vertices:
                    raise VertexNotFoundError(vid)

        node = self._resolve(vertex_id)
        targets = [self._resolve(v) for v in neighbors]
        return [self._new_edge(node, target, 1) for target in targets]

    def remove_node(self, vertex_id: int) -> None:
        if vertex_id not in self._vertices:
            return

        dropped = {eid for eid, e in self._edges.items()
                   if e.from_id == vertex_id or e.to_id == vertex_id}

        affected = set()
        for eid in dropped:
            edge = self._edges.pop(eid)
            affected.add(edge.from_id)
            affected.add(edge.to_id)
        affected.discard(vertex_id)

        for vid in affected:
            vertex = self._vertices[vid]
            vertex.edges = [eid for eid in vertex.edges if eid not in dropped]

        del self._vertices[vertex_id]

    def contract_edge(self, edge: Union[Edge, int]) -> None:
        """
        Merges the `to` endpoint of `edge` into its `from` endpoint.

        Every edge incident to `to` is redirected to `from`, the resulting
        self-loops (the contracted edge included) are purged, and `to` is
        deleted. Parallel edges to third vertices are kept, so the merged
        vertex carries the combined multiplicity.

        Raises:
            StaleEdgeError: if the edge is not a live edge of this graph.
        """
        edge = self._live_edge(edge)
        source = self._vertices[edge.from_id]
        target = self._vertices[edge.to_id]

        for eid in target.edges:
            to_edge = self._edges[eid]
            if to_edge.from_id == target.id:
                to_edge.from_id = source.id
            if to_edge.to_id == target.id:
                to_edge.to_id = source.id

        source.edges.extend(target.edges)
        target.edges = []

        self.remove_self_loops()

        # nothing references `target` any more, removal is just the dict entry
        del self._vertices[target.id]

    def _live_edge(self, edge: Union[Edge, int]) -> Edge:
        if isinstance(edge, Edge):
            current = self._edges.get(edge.id)
            if current is not edge:
                raise StaleEdgeError(f"edge {edge!r} is not part of this graph")
        else:
            current = self._edges.get(edge)
            if current is None:
                raise StaleEdgeError(f"no edge with id {edge!r} in this graph")

        if current.is_self_loop():
            raise StaleEdgeError(f"cannot contract self-loop {current}")
        if current.from_id not in self._vertices or current.to_id not in self._vertices:
            raise StaleEdgeError(f"edge {current} references a removed vertex")
        return current

    def remove_self_loops(self) -> int:
        """
        Drops every self-loop from the edge sequence and the incident lists.
        Returns the number of edges removed.
        """
        loops = {eid for eid, e in self._edges.items() if e.is_self_loop()}
        if not loops:
            return 0

        owners = set()
        for eid in loops:
            owners.add(self._edges.pop(eid).from_id)

        for vid in owners:
            vertex = self._vertices.get(vid)
            if vertex is not None:
                vertex.edges = [eid for eid in vertex.edges if eid not in loops]
        return len(loops)

    # -----------------
    # MISC
    # -----------------

    def copy(self) -> "Graph":
        clone = Graph(strict=self.strict)
        for vid, vertex in self._vertices.items():
            v = Vertex(vid)
            v.edges = list(vertex.edges)
            clone._vertices[vid] = v
        for eid, e in self._edges.items():
            clone._edges[eid] = Edge(eid, e.from_id, e.to_id, e.weight)
        clone._next_edge_id = self._next_edge_id
        return clone

    def __len__(self):
        return len(self._vertices)

    def __contains__(self, vertex_id):
        return vertex_id in self._vertices

    def __str__(self):
        lines = []
        for vid, vertex in self._vertices.items():
            incident = " ".join(str(self._edges[eid]) for eid in vertex.edges)
            lines.append(f"{vid}: {incident}".rstrip())
        return "\n".join(lines)

    def __repr__(self):
        return f"Graph(nodes={self.num_nodes()}, edges={self.num_edges()}, strict={self.strict})"
