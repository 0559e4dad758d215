import networkx as nx
import numpy as np

from mincut.graph import Graph


def _integer_weight(u, v, w) -> int:
    if int(w) != w:
        raise ValueError(f"edge ({u}, {v}) has non-integer weight {w}")
    return int(w)


def from_adjacency_matrix(graph_matrix: np.ndarray,
                          as_multiplicity: bool = False,
                          strict: bool = False) -> Graph:
    """
    Builds a Graph from an (n x n) symmetric adjacency matrix.

    Every positive entry of the upper triangle becomes an edge between the
    row and column indices. With as_multiplicity=True an entry w becomes w
    parallel unit-weight edges instead of a single edge of weight w, so that
    edge counts returned by the contraction algorithm equal cut weights.
    Isolated rows still become vertices.
    """
    if graph_matrix is None:
        raise ValueError("graph_matrix is None")
    graph_matrix = np.asarray(graph_matrix)
    if graph_matrix.ndim != 2 or graph_matrix.shape[0] != graph_matrix.shape[1]:
        raise ValueError("graph_matrix must be square")

    n = graph_matrix.shape[0]
    graph = Graph(strict=strict)
    for i in range(n):
        graph.add_node(i)

    rows, cols = np.where(np.triu(graph_matrix, k=1) > 0)
    for u, v in zip(rows.tolist(), cols.tolist()):
        w = _integer_weight(u, v, graph_matrix[u, v])
        if as_multiplicity:
            for _ in range(w):
                graph.add_edge(u, v, 1)
        else:
            graph.add_edge(u, v, w)

    return graph


def from_networkx(G: nx.Graph, weight: str = 'weight', strict: bool = False) -> Graph:
    """
    Builds a Graph from a networkx graph with integer node labels.
    Multigraph edges are kept as parallel edges; missing weights default to 1.
    """
    graph = Graph(strict=strict)
    for node in G.nodes():
        graph.add_node(node)
    for u, v, w in G.edges(data=weight, default=1):
        graph.add_edge(u, v, _integer_weight(u, v, w))
    return graph


def to_networkx(graph: Graph) -> nx.MultiGraph:
    """
    Returns an nx.MultiGraph with one edge per Graph edge, keyed by edge id.
    """
    G = nx.MultiGraph()
    G.add_nodes_from(graph.get_nodes())
    for e in graph.get_edges():
        G.add_edge(e.from_id, e.to_id, key=e.id, weight=e.weight)
    return G


def to_simple_networkx(graph: Graph) -> nx.Graph:
    """
    Returns an nx.Graph where parallel edges are merged by summing their
    weights and self-loops are dropped, the form stoer_wagner expects.
    """
    G = nx.Graph()
    G.add_nodes_from(graph.get_nodes())
    for e in graph.get_edges():
        if e.is_self_loop():
            continue
        if G.has_edge(e.from_id, e.to_id):
            G[e.from_id][e.to_id]['weight'] += e.weight
        else:
            G.add_edge(e.from_id, e.to_id, weight=e.weight)
    return G
