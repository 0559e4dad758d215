import time
from typing import Any, Callable, Dict, List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx
import numpy as np
import pandas as pd
from tqdm import tqdm

from mincut.convert import from_networkx
from mincut.karger import karger_min_cut
from mincut.mst import find_mst


def largest_component(graph_matrix: np.ndarray) -> nx.Graph:
    """
    Converts an adjacency matrix to networkx and keeps its largest connected
    component, relabelled 0..k-1. Random models do not guarantee connectivity.
    """
    G = nx.from_numpy_array(graph_matrix)
    if G.number_of_nodes() == 0:
        return G
    largest_cc_nodes = max(nx.connected_components(G), key=len)
    H = G.subgraph(largest_cc_nodes)
    return nx.convert_node_labels_to_integers(H, ordering="sorted")


class BenchmarkRunner:
    """
    Compares the repeated contraction algorithm against networkx's exact
    Stoer-Wagner cut, and the frontier-growth MST against networkx's Kruskal.
    """

    def __init__(self,
                 generators: Dict[str, Callable],
                 seed: Optional[int] = None):
        """
        Args:
            generators (Dict[str, Callable]):
                Dict of {'model_name': generator_function}
                Each function must accept n, rng and **kwargs and return
                an (n, n) numpy adjacency matrix.

            seed (Optional[int]):
                Base random seed for reproducibility.
                If None, randomness is uncontrolled.
        """
        self.generators = generators
        self.base_seed = seed

    def _trial_rng(self, model_name: str, n: int, i: int) -> np.random.Generator:
        # deterministic per (model, n, trial) when a base seed is set
        if self.base_seed is None:
            return np.random.default_rng()
        key = [self.base_seed, n, i] + [ord(c) for c in model_name]
        return np.random.default_rng(np.random.SeedSequence(key))

    def run_trial(self,
                  graph_matrix: np.ndarray,
                  rng: np.random.Generator,
                  karger_trials: Optional[int] = None) -> Optional[Dict[str, Any]]:
        """
        Runs both algorithms on one generated graph.

        Returns:
            Optional[Dict]: Raw measurements, or None if the largest
                            component has fewer than two vertices.
        """
        G = largest_component(graph_matrix)
        if G.number_of_nodes() < 2:
            return None

        true_cut, _ = nx.stoer_wagner(G, weight='weight')
        graph = from_networkx(G)

        seed = int(rng.integers(2**32))
        start_time = time.perf_counter()
        cut = karger_min_cut(graph, trials=karger_trials, seed=seed)
        end_time = time.perf_counter()

        mst_start = time.perf_counter()
        mst = find_mst(graph, rng)
        mst_end = time.perf_counter()
        true_mst = nx.minimum_spanning_tree(G, weight='weight', algorithm='kruskal')

        return {
            'nodes': G.number_of_nodes(),
            'edges': G.number_of_edges(),
            'true_cut': true_cut,
            'cut': cut,
            'time': end_time - start_time,
            'mst_time': mst_end - mst_start,
            'mst_ok': mst.spanning and mst.total_weight == true_mst.size(weight='weight'),
        }

    def run(self,
            models: List[str],
            n_values: List[int],
            trials: int,
            model_params: Dict[str, Dict[str, Any]],
            karger_trials: Optional[int] = None,
            progress: bool = True) -> pd.DataFrame:
        """
        Runs the full benchmark.

        Args:
            models (List[str]): List of model names (e.g., ['ER', 'BA']).
            n_values (List[int]): List of graph sizes (n).
            trials (int): Number of graphs generated for each (model, n) pair.
            model_params (Dict): Parameters for each model generator.
                                 e.g., {'ER': {'p': 0.1}, 'BA': {'m': 3}}
            karger_trials (Optional[int]): Contraction runs per graph.
                                           Defaults to ceil(n^2 ln n).
            progress (bool): Show tqdm progress bars.

        Returns:
            pd.DataFrame: One row per (model, n) with aggregated results.
        """
        all_results = []

        for model_name in models:
            if model_name not in self.generators:
                print(f"Warning: Generator '{model_name}' not found. Skipping.")
                continue
            gen_func = self.generators[model_name]
            params = model_params.get(model_name, {})

            for n in n_values:
                rows = []
                desc = f"Model={model_name}, n={n}"
                for i in tqdm(range(trials), desc=desc, disable=not progress):
                    rng = self._trial_rng(model_name, n, i)
                    graph_matrix = gen_func(n=n, rng=rng, **params)
                    row = self.run_trial(graph_matrix, rng, karger_trials)
                    if row is not None:
                        rows.append(row)

                if not rows:
                    print(f"Warning: no usable graphs for {model_name}, n={n}.")
                    continue

                df = pd.DataFrame(rows)
                errors = (df['cut'] - df['true_cut']) / df['true_cut'].where(df['true_cut'] > 0)
                all_results.append({
                    'model': model_name,
                    'n': n,
                    'trials': len(df),
                    'mean_nodes': df['nodes'].mean(),
                    'mean_edges': df['edges'].mean(),
                    'mean_time_s': df['time'].mean(),
                    'std_time_s': df['time'].std(ddof=0),
                    'success_rate': float((df['cut'] == df['true_cut']).mean()),
                    'mean_rel_error': float(errors.fillna(0.0).mean()),
                    'min_found_cut': df['cut'].min(),
                    'max_found_cut': df['cut'].max(),
                    'mst_mean_time_s': df['mst_time'].mean(),
                    'mst_agreement': float(df['mst_ok'].mean()),
                })

        return pd.DataFrame(all_results)


def plot_results(results_df: pd.DataFrame, out_path: str, dpi: int = 150) -> None:
    """
    Saves success rate and runtime against n, one line per model.
    """
    fig, (ax_rate, ax_time) = plt.subplots(1, 2, figsize=(11, 4))

    for model_name, group in results_df.groupby('model'):
        group = group.sort_values('n')
        ax_rate.plot(group['n'], group['success_rate'], marker='o', label=model_name)
        ax_time.plot(group['n'], group['mean_time_s'], marker='o', label=model_name)

    ax_rate.set_xlabel("Number of Nodes")
    ax_rate.set_ylabel("Exact min cut found")
    ax_rate.set_title("Contraction success rate vs n")
    ax_rate.grid(True)
    ax_rate.legend()

    ax_time.set_xlabel("Number of Nodes")
    ax_time.set_ylabel("Runtime (seconds)")
    ax_time.set_title("Repeated contraction runtime vs n")
    ax_time.grid(True)
    ax_time.legend()

    fig.savefig(out_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
