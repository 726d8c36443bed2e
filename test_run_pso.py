from BASIC_PSO.run_pso import main


def test_reference_run_prints_progress_and_summary(capsys):
    assert main(["--iterations", "5", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    for iteration in range(1, 6):
        assert f"Iteration {iteration}: Best Value = " in out
    assert "Global Best Value = " in out
    assert "Global Best Position = [" in out


def test_quiet_run_prints_only_summary(capsys):
    assert main(["--iterations", "5", "--seed", "1", "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "Iteration 1:" not in out
    assert "Global Best Value = " in out


def test_inverted_bounds_exit_code():
    assert main(["--lb", "5", "--ub", "-5", "--iterations", "3"]) == 2


def test_unknown_function_exit_code():
    assert main(["--function", "nope"]) == 2


def test_list_functions(capsys):
    assert main(["--list-functions"]) == 0
    assert "sphere: SphereFunction" in capsys.readouterr().out


def test_plots_written(tmp_path):
    assert main(["--function", "rastrigin", "--iterations", "10", "--seed", "2",
                 "--quiet", "--plot", "--checkpoint-dir", str(tmp_path)]) == 0
    names = sorted(p.name for p in tmp_path.iterdir())
    assert any(name.endswith("rastrigin_2d_gbest.png") for name in names)
    assert any(name.endswith("rastrigin_2d_diversity.png") for name in names)
