import argparse

import pandas as pd

from benchmarking import BenchmarkRunner, plot_results
from graph_generators.barabasi_albert import generate_ba
from graph_generators.erdos_renyi import generate_er


GRAPH_GENERATORS = {
    'ER': generate_er,
    'BA': generate_ba,
}

MODELS = ['ER', 'BA']

# Graph sizes (n). Each graph runs ceil(n^2 ln n) contractions by default,
# so keep n small.
N_VALUES = [8, 12, 16, 20]

# graphs generated for each (model, n) pair
R_TRIALS = 20

RNG_SEED = 42

MODEL_PARAMS = {
    'ER': {'p': 0.4},  # G(n, p)
    'BA': {'m': 3}     # G(n, m) with m=3 new edges per node
}

OUTPUT_CSV = "benchmark_results.csv"
OUTPUT_FIG = "benchmark_results.png"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Random contraction min cut and MST benchmark")

    parser.add_argument("--models", type=str, nargs="+", default=MODELS,
                        choices=sorted(GRAPH_GENERATORS),
                        help="Random graph models to benchmark")

    parser.add_argument("--n_values", type=int, nargs="+", default=N_VALUES,
                        help="Graph sizes to benchmark")

    parser.add_argument("--trials", type=int, default=R_TRIALS,
                        help="Graphs generated per (model, n) pair")

    parser.add_argument("--karger_trials", type=int, default=None,
                        help="Contraction runs per graph (default: ceil(n^2 ln n))")

    parser.add_argument("--seed", type=int, default=RNG_SEED,
                        help="Base random seed")

    parser.add_argument("--p", type=float, default=MODEL_PARAMS['ER']['p'],
                        help="Edge probability for ER graphs")

    parser.add_argument("--m", type=int, default=MODEL_PARAMS['BA']['m'],
                        help="Edges per new node for BA graphs")

    parser.add_argument("--output", type=str, default=OUTPUT_CSV,
                        help="CSV file for the results")

    parser.add_argument("--plot", type=str, default=OUTPUT_FIG,
                        help="Figure file for the results, empty to skip")

    parser.add_argument("--quiet", action="store_true",
                        help="Hide progress bars")

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    model_params = {
        'ER': {'p': args.p},
        'BA': {'m': args.m},
    }

    runner = BenchmarkRunner(GRAPH_GENERATORS, seed=args.seed)
    results_df = runner.run(
        models=args.models,
        n_values=args.n_values,
        trials=args.trials,
        model_params=model_params,
        karger_trials=args.karger_trials,
        progress=not args.quiet,
    )

    pd.set_option('display.width', 1000)
    pd.set_option('display.max_rows', None)

    print("\nBenchmark Results:")
    print(results_df)

    results_df.to_csv(args.output, index=False)
    print(f"\nResults saved to {args.output}")

    if args.plot and not results_df.empty:
        plot_results(results_df, args.plot)
        print(f"Figure saved to {args.plot}")

    return results_df


if __name__ == "__main__":
    main()
