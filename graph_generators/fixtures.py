from mincut.graph import Graph


def cycle_graph(n: int, weight: int = 1) -> Graph:
    """Simple cycle 0 - 1 - ... - (n-1) - 0. Its minimum cut is 2 for n >= 3."""
    if n < 3:
        raise ValueError("a cycle needs n >= 3")
    graph = Graph()
    for i in range(n):
        graph.add_edge(i, (i + 1) % n, weight)
    return graph


def complete_graph(n: int, weight: int = 1) -> Graph:
    """K_n with one edge per pair. Its minimum cut is n - 1."""
    if n < 1:
        raise ValueError("n must be >= 1")
    graph = Graph()
    graph.add_node(0)
    for i in range(n):
        for j in range(i + 1, n):
            graph.add_edge(i, j, weight)
    return graph


def adjacency_list_graph(adjacency: dict) -> Graph:
    """
    Builds a graph from {vertex: [neighbors]} where every undirected edge is
    listed from one side only; listing it from both sides creates a parallel
    edge.
    """
    graph = Graph()
    for vertex, neighbors in adjacency.items():
        graph.insert_node_adjacency(vertex, neighbors)
    return graph
