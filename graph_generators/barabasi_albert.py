from typing import Optional

import numpy as np


def generate_ba(n: int, m: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Generates a Barabási-Albert (BA) random graph using preferential attachment.

    Args:
        n (int): Total number of nodes.
        m (int): Number of edges to attach from a new node to existing nodes.
                 (m <= m0, where m0 is the initial number of nodes)
        rng (Optional[np.random.Generator]): Source of randomness.

    Returns:
        np.ndarray: An (n, n) adjacency matrix.
    """
    if m < 1:
        raise ValueError("m must be >= 1")
    m0 = m  # initial number of nodes, must be >= m
    if n < m0:
        raise ValueError("n must be >= m")
    if rng is None:
        rng = np.random.default_rng()

    matrix = np.zeros((n, n), dtype=int)

    # seed clique on the first m0 nodes
    rows, cols = np.triu_indices(m0, k=1)
    matrix[rows, cols] = 1
    matrix[cols, rows] = 1

    degrees = np.sum(matrix, axis=1)

    for i in range(m0, n):
        current_degrees = degrees[:i]
        total_degree = np.sum(current_degrees)

        if total_degree == 0:
            # if disconnected, connect randomly
            targets = rng.choice(i, size=m, replace=False)
        else:
            probabilities = current_degrees / total_degree
            targets = rng.choice(i, size=m, replace=False, p=probabilities)

        matrix[i, targets] = 1
        matrix[targets, i] = 1

        degrees[i] = m
        degrees[targets] += 1

    return matrix
