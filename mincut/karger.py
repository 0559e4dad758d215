import math
from typing import Optional

import numpy as np
from tqdm import tqdm

from mincut.graph import Graph


def contraction_algorithm(graph: Graph,
                          rng: Optional[np.random.Generator] = None,
                          verbose: bool = False) -> int:
    """
    One run of Karger's random contraction. Destroys `graph`.

    Contracts a uniformly random edge of the current edge sequence until two
    vertices remain, then returns the number of surviving edges, i.e. the
    size of the cut between the two super-vertices (parallel edges counted).
    The result is an upper bound on the minimum cut; repeat with fresh
    generators and keep the minimum to find the true one with high
    probability (see karger_min_cut).

    Self-loops already in the graph never cross a cut and are dropped
    first. A graph that runs out of edges with more than two vertices left
    is disconnected, and 0 is returned.
    """
    if rng is None:
        rng = np.random.default_rng()

    graph.remove_self_loops()

    if verbose:
        print(f"graph starting as\n{graph}")

    while graph.num_nodes() > 2:
        edges = graph.get_edges()
        if not edges:
            if verbose:
                print(f"no edges left with {graph.num_nodes()} vertices, graph is disconnected")
            return 0

        edge = edges[int(rng.integers(len(edges)))]
        if verbose:
            print(f"contracting {edge}")
        graph.contract_edge(edge)
        if verbose:
            print(f"graph is now:\n{graph}")

    return graph.num_edges()


def default_trials(n: int) -> int:
    """
    Number of runs, ceil(n^2 ln n), after which the failure probability of
    the repeated contraction drops to about 1/n.
    """
    n = max(2, n)
    return max(1, int(math.ceil(n * n * math.log(n))))


def karger_min_cut(graph: Graph,
                   trials: Optional[int] = None,
                   seed=None,
                   progress: bool = False) -> int:
    """
    Repeats contraction_algorithm on copies of `graph` and keeps the minimum.

    Args:
        graph (Graph): Input graph, left untouched.
        trials (Optional[int]): Number of independent runs.
                                Defaults to default_trials(graph.num_nodes()).
        seed: Anything numpy.random.SeedSequence accepts. Every trial gets
              its own generator spawned from it, so a run is reproducible
              while trials stay independent.
        progress (bool): Show a tqdm progress bar.

    Returns:
        int: The smallest cut size observed.
    """
    n = graph.num_nodes()
    if n <= 2:
        # nothing to contract, only the inserted self-loops to discard
        return contraction_algorithm(graph.copy())

    if trials is None:
        trials = default_trials(n)
    if trials < 1:
        raise ValueError("trials must be >= 1")

    children = np.random.SeedSequence(seed).spawn(trials)

    min_cut = None
    for child in tqdm(children, desc="Contraction trials", disable=not progress):
        cut = contraction_algorithm(graph.copy(), np.random.default_rng(child))
        if min_cut is None or cut < min_cut:
            min_cut = cut
        if min_cut == 0:
            break

    return min_cut
