"""
Tests for input acquisition, console reporting and the runner.
"""

import sys
import os
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rk4_projectile.cli import (
    parse_command_line, prompt_float, prompt_for_conditions,
    acquire_conditions, INVALID_INPUT,
)
from rk4_projectile.integrator import simulate
from rk4_projectile.projectile import State, LaunchConditions
from rk4_projectile.reporting import format_step, format_summary, END_OF_SIMULATION
from rk4_projectile.validation import ConvergenceResult, run_all_validations
import main as runner


def scripted(*answers):
    """input() replacement returning the answers in order."""
    it = iter(answers)
    return lambda prompt="": next(it)


def no_input(prompt=""):
    raise AssertionError("input() should not be called")


class TestCommandLine:

    def test_five_numbers(self):
        cond = parse_command_line(["0", "100", "45", "0.01", "5"])
        assert cond == LaunchConditions(0.0, 100.0, 45.0, 0.01, 5.0)

    @pytest.mark.parametrize("args", [
        [],
        ["0", "100", "45", "0.01"],
        ["0", "100", "45", "0.01", "5", "6"],
        ["0", "fast", "45", "0.01", "5"],
        ["0", "100", "120", "0.01", "5"],
        ["0", "100", "45", "0", "5"],
        ["0", "100", "45", "0.01", "inf"],
    ])
    def test_bad_arguments_raise(self, args):
        with pytest.raises(ValueError):
            parse_command_line(args)


class TestPrompts:

    def test_reprompts_until_valid(self, capsys):
        value = prompt_float("Enter x: ", lambda v: v >= 0,
                             input_fn=scripted("abc", "-1", "3.5"))
        assert value == 3.5
        out = capsys.readouterr().out
        assert out.count(INVALID_INPUT) == 2
        assert out.count("Enter x: ") == 3

    def test_non_finite_rejected(self, capsys):
        value = prompt_float("Enter x: ", input_fn=scripted("inf", "nan", "2"))
        assert value == 2.0
        assert capsys.readouterr().out.count(INVALID_INPUT) == 2

    def test_prompt_order_and_range_checks(self, capsys):
        answers = scripted("10", "100", "45", "30", "-0.1", "0.1", "5")
        cond = prompt_for_conditions(input_fn=answers)
        assert cond == LaunchConditions(altitude=10.0, velocity=30.0,
                                        angle_deg=45.0, dt=0.1, final_time=5.0)
        assert capsys.readouterr().out.count(INVALID_INPUT) == 2

    def test_zero_time_step_rejected(self):
        cond = prompt_for_conditions(
            input_fn=scripted("0", "45", "10", "0", "0.5", "1"))
        assert cond.dt == 0.5

    def test_uses_command_line_when_valid(self):
        cond = acquire_conditions(["1", "2", "3", "0.5", "6"], input_fn=no_input)
        assert cond.altitude == 1.0
        assert cond.final_time == 6.0

    def test_falls_back_to_prompts(self, capsys):
        cond = acquire_conditions([], input_fn=scripted("0", "30", "50", "0.1", "2"))
        assert cond == LaunchConditions(0.0, 50.0, 30.0, 0.1, 2.0)
        assert "Command line arguments error or not provided." in capsys.readouterr().out

    def test_eof_propagates(self):
        with pytest.raises(StopIteration):
            prompt_for_conditions(input_fn=scripted("0"))


class TestReporting:

    def test_step_format(self):
        text = format_step(0.01, State(1.0, 2.0, 3.0, -4.0))
        assert text == (
            "t = 0.01000\n"
            "\ty = 1.000000000\ty' = 3.000000000\n"
            "\tx = 2.000000000\tx' = -4.000000000"
        )

    def test_summary_without_impact(self):
        summary = simulate(State(100.0, 0.0, 0.0, 1.0), 0.5, 1.0)
        text = format_summary(summary)
        assert "RK4" in text
        assert "(none)" in text
        widths = {len(line) for line in text.splitlines()}
        assert len(widths) == 1

    def test_summary_with_impact(self):
        summary = simulate(State(1.0, 0.0, 0.0, 2.0), 0.01, 10.0)
        text = format_summary(summary)
        assert f"{summary.impact_range:.3f}" in text


class TestRunner:

    def test_quiet_run(self, capsys):
        assert runner.main(["0", "100", "45", "0.25", "1", "--quiet"]) == 0
        out = capsys.readouterr().out
        assert END_OF_SIMULATION in out
        assert "t = " not in out

    def test_reports_every_step(self, capsys):
        assert runner.main(["0", "100", "45", "0.25", "1"]) == 0
        out = capsys.readouterr().out
        assert out.count("t = ") == 4
        assert "t = 1.00000" in out

    def test_no_input_aborts(self, monkeypatch, capsys):
        def eof(prompt=""):
            raise EOFError
        monkeypatch.setattr("builtins.input", eof)
        assert runner.main([]) == 1

    def test_validate_writes_plots(self, monkeypatch, tmp_path, capsys):
        monkeypatch.setattr(runner, "OUTPUT_DIR", str(tmp_path))
        assert runner.main(["0", "50", "30", "0.25", "5", "--quiet", "--validate"]) == 0
        out = capsys.readouterr().out

        assert (tmp_path / "01_gravity_profile.png").exists()
        assert (tmp_path / "02_convergence.png").exists()
        assert "VALIDATION vs analytic" in out
        assert "VALIDATION vs solve_ivp" in out
        assert "RK4 err" in out
        assert "EULER err" in out
        # analytic case is launched as the user's run
        assert "v0 = 50.0 m/s | angle = 30.0° | T = 5.0 s" in out
        assert "RK4    exact to round-off" in out


class TestValidation:

    def test_all_cases_and_methods(self):
        results = run_all_validations(verbose=False)
        assert set(results) == {'analytic', 'solve_ivp'}
        for label in results:
            assert [r.method for r in results[label]] == ['rk4', 'euler']

        rk4, euler = results['analytic']
        assert rk4.at_roundoff
        assert abs(euler.order - 1.0) < 0.1

        rk4, euler = results['solve_ivp']
        assert abs(rk4.order - 4.0) < 0.4

    def test_duration_falls_back_when_steps_do_not_divide(self, capsys):
        cond = LaunchConditions(velocity=50.0, angle_deg=30.0, final_time=0.3)
        run_all_validations(cond, verbose=True)
        assert "T = 10.0 s" in capsys.readouterr().out


class TestPlots:

    def test_convergence_plot_saved(self, tmp_path):
        from rk4_projectile.visualization import plot_convergence, plot_gravity_profile

        dts = np.array([0.1, 0.05])
        results = {
            'analytic': [
                ConvergenceResult('euler', 'uniform', dts, np.array([0.5, 0.25])),
                ConvergenceResult('rk4', 'uniform', dts, np.array([0.0, 0.0])),
            ],
        }
        path = tmp_path / "conv.png"
        plot_convergence(results, save_path=str(path))
        assert path.exists()

        path = tmp_path / "gravity.png"
        plot_gravity_profile(save_path=str(path))
        assert path.exists()
