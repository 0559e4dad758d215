import numpy as np

import main
from benchmarking import BenchmarkRunner, largest_component, plot_results
from graph_generators.barabasi_albert import generate_ba
from graph_generators.erdos_renyi import generate_er


class TestBenchmarkRunner:
    def test_largest_component(self):
        matrix = np.zeros((5, 5), dtype=int)
        matrix[0, 1] = matrix[1, 0] = 1
        matrix[2, 3] = matrix[3, 2] = 1
        matrix[3, 4] = matrix[4, 3] = 1
        G = largest_component(matrix)
        assert sorted(G.nodes()) == [0, 1, 2]
        assert G.number_of_edges() == 2

    def test_run(self, tmp_path):
        runner = BenchmarkRunner({'ER': generate_er, 'BA': generate_ba}, seed=5)
        df = runner.run(models=['ER', 'BA', 'XX'], n_values=[6], trials=3,
                        model_params={'ER': {'p': 0.6}, 'BA': {'m': 2}},
                        progress=False)
        assert sorted(df['model']) == ['BA', 'ER']
        assert (df['min_found_cut'] >= 1).all()
        assert (df['mst_agreement'] == 1.0).all()
        assert ((df['success_rate'] >= 0) & (df['success_rate'] <= 1)).all()

        out = tmp_path / "results.png"
        plot_results(df, str(out))
        assert out.exists()

    def test_run_is_reproducible(self):
        def run():
            runner = BenchmarkRunner({'ER': generate_er}, seed=9)
            return runner.run(['ER'], [7], 2, {'ER': {'p': 0.5}}, karger_trials=5, progress=False)
        a, b = run(), run()
        assert a['min_found_cut'].tolist() == b['min_found_cut'].tolist()


class TestMain:
    def test_cli(self, tmp_path, capsys):
        csv = tmp_path / "out.csv"
        fig = tmp_path / "out.png"
        df = main.main(["--models", "BA", "--n_values", "6", "--trials", "2",
                        "--m", "2", "--output", str(csv), "--plot", str(fig), "--quiet"])
        assert len(df) == 1
        assert csv.exists()
        assert fig.exists()
        assert "Benchmark Results" in capsys.readouterr().out
