import os

from BASIC_PSO.Graphics.graphing import plot_gbest_convergence, plot_swarm_diversity


def test_gbest_plot_handles_exact_zero(tmp_path):
    path = plot_gbest_convergence([4.0, 1.0, 0.25, 0.0], str(tmp_path), prefix="sphere")
    assert path is not None and os.path.exists(path)


def test_diversity_plot(tmp_path):
    history = [{'swarm_diversity': d} for d in (3.0, 1.5, 0.4)]
    path = plot_swarm_diversity(history, str(tmp_path))
    assert path.endswith("pso_diversity.png")
    assert os.path.exists(path)


def test_empty_history_is_skipped(tmp_path):
    assert plot_swarm_diversity([], str(tmp_path)) is None
    assert list(tmp_path.iterdir()) == []
