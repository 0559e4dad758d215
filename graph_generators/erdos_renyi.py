from typing import Optional

import numpy as np


def generate_er(n: int, p: float, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Generates an Erdős-Rényi (G(n, p)) random graph.

    Args:
        n (int): Number of nodes.
        p (float): Probability of each of the n(n-1)/2 edges.
        rng (Optional[np.random.Generator]): Source of randomness.

    Returns:
        np.ndarray: An (n, n) adjacency matrix with 0/1 integer weights.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    if not 0.0 <= p <= 1.0:
        raise ValueError("p must be in [0, 1]")
    if rng is None:
        rng = np.random.default_rng()

    matrix = np.zeros((n, n), dtype=int)

    # indices for the upper triangle (k=1 excludes the diagonal)
    rows, cols = np.triu_indices(n, k=1)

    edges = rng.random(rows.size) < p
    matrix[rows[edges], cols[edges]] = 1

    # mirror the matrix to make it symmetric (undirected)
    matrix[cols[edges], rows[edges]] = 1

    return matrix
