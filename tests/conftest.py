"""Shared fixtures for graph and algorithm tests."""

import pathlib
import sys

import numpy as np
import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from mincut.graph import Graph  # noqa: E402


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def triangle():
    """0 - 1 - 2 - 0 with distinct weights."""
    G = Graph()
    G.add_edge(0, 1, 1)
    G.add_edge(1, 2, 2)
    G.add_edge(2, 0, 3)
    return G


@pytest.fixture
def weighted_five():
    """
    5-vertex weighted graph with a unique MST of weight 1 + 2 + 3 + 4 = 10:
    edges (0,1,1) (1,2,2) (2,3,3) (3,4,4) plus heavier chords.
    """
    G = Graph()
    for u, v, w in [(0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 4, 4),
                    (0, 2, 5), (1, 3, 6), (2, 4, 7), (0, 4, 8), (1, 4, 9)]:
        G.add_edge(u, v, w)
    return G
