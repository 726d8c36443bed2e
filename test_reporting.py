import io

import numpy as np
import pytest

from BASIC_PSO.PSO.Reporting import ConsoleReporter, format_position


def test_format_position_uses_four_significant_digits():
    assert format_position([0.00123456, -2.5]) == "[0.001235 -2.5]"
    assert format_position(np.array([3.0, 12345.678])) == "[3 1.235e+04]"


def test_console_reporter_lines():
    stream = io.StringIO()
    reporter = ConsoleReporter(stream=stream)
    reporter.on_iteration(1, 12.3456789)
    reporter.on_iteration(2, 0.5)
    reporter.on_finish(0.5, np.array([0.1, -0.2]))

    assert stream.getvalue().splitlines() == [
        "Iteration 1: Best Value = 12.345679",
        "Iteration 2: Best Value = 0.500000",
        "Global Best Value = 0.500000",
        "Global Best Position = [0.1 -0.2]",
    ]


def test_report_every_skips_iterations():
    stream = io.StringIO()
    reporter = ConsoleReporter(report_every=2, stream=stream)
    for iteration in range(1, 5):
        reporter.on_iteration(iteration, float(iteration))
    lines = stream.getvalue().splitlines()
    assert lines == ["Iteration 2: Best Value = 2.000000", "Iteration 4: Best Value = 4.000000"]


def test_report_every_must_be_positive():
    with pytest.raises(ValueError):
        ConsoleReporter(report_every=0)
