import networkx as nx
import numpy as np
import pytest

from graph_generators.fixtures import cycle_graph
from mincut.convert import from_networkx, to_networkx
from mincut.graph import Graph
from mincut.mst import MSTResult, find_mst


def kruskal_weight(graph):
    T = nx.minimum_spanning_tree(to_networkx(graph), weight='weight', algorithm='kruskal')
    return T.size(weight='weight')


class TestFindMST:
    @pytest.mark.parametrize("seed", range(10))
    def test_weighted_five(self, weighted_five, seed):
        result = find_mst(weighted_five, np.random.default_rng(seed))
        assert result.spanning
        assert len(result) == 4
        assert result.total_weight == 10
        assert result.total_weight == kruskal_weight(weighted_five)
        assert sorted(e.weight for e in result) == [1, 2, 3, 4]

    def test_does_not_mutate(self, weighted_five, rng):
        find_mst(weighted_five, rng)
        assert weighted_five.num_nodes() == 5
        assert weighted_five.num_edges() == 9

    def test_every_vertex_explored(self, weighted_five, rng):
        result = find_mst(weighted_five, rng)
        assert sorted(result.explored) == [0, 1, 2, 3, 4]

    def test_parallel_edges_cheapest_wins(self):
        G = Graph()
        G.add_edge(1, 2, 5)
        cheap = G.add_edge(2, 1, 2)
        G.add_edge(1, 2, 3)
        result = find_mst(G, np.random.default_rng(0))
        assert result.edges == [cheap]

    def test_self_loops_ignored(self):
        G = Graph()
        G.add_edge(1, 1, 0)
        G.add_edge(1, 2, 4)
        result = find_mst(G, np.random.default_rng(0))
        assert result.spanning
        assert result.total_weight == 4

    @pytest.mark.parametrize("seed", range(5))
    def test_random_graphs_match_kruskal(self, seed):
        rng = np.random.default_rng(seed)
        G = nx.connected_watts_strogatz_graph(12, 4, 0.5, seed=seed)
        for u, v in G.edges():
            G[u][v]['weight'] = int(rng.integers(1, 20))
        graph = from_networkx(G)

        result = find_mst(graph, rng)
        assert result.spanning
        assert len(result) == graph.num_nodes() - 1
        assert result.total_weight == kruskal_weight(graph)

    def test_non_contiguous_ids(self):
        G = Graph()
        G.add_edge(10**15, 7, 2)
        G.add_edge(7, 123456789, 1)
        result = find_mst(G, np.random.default_rng(3))
        assert result.spanning
        assert result.total_weight == 3

    def test_single_vertex(self):
        G = Graph()
        G.add_node(1)
        result = find_mst(G)
        assert result.spanning
        assert result.edges == []

    def test_empty_graph(self):
        result = find_mst(Graph())
        assert isinstance(result, MSTResult)
        assert result.spanning
        assert len(result) == 0


class TestDisconnected:
    def test_two_components_not_spanning(self):
        G = cycle_graph(4)
        G.add_edge(10, 11, 1)
        G.add_edge(11, 12, 1)

        for seed in range(10):
            result = find_mst(G, np.random.default_rng(seed))
            assert not result.spanning
            assert len(result) < G.num_nodes() - 1
            explored = set(result.explored)
            assert explored in ({0, 1, 2, 3}, {10, 11, 12})
            assert len(result) == len(explored) - 1

    def test_isolated_vertex(self):
        G = Graph()
        G.add_edge(0, 1, 1)
        G.add_node(2)
        result = find_mst(G, np.random.default_rng(0))
        assert not result.spanning
