"""Tests for the CLI frontend."""

import argparse
from unittest.mock import Mock, patch

from lifegrid.core.grid import Grid
from lifegrid.frontends.cli import (
    CLIGameOfLife,
    create_parser,
    format_finish_reason,
    format_grid,
    print_results,
    validate_args,
    main,
)


class StepClock:
    """Clock that moves forward a fixed amount every time it is read."""

    def __init__(self, step):
        self.step = step
        self.now = 0.0

    def __call__(self):
        self.now += self.step
        return self.now


class TestCLIGameOfLife:
    """Test cases for the CLI Game of Life."""

    def test_run_simulation(self):
        """Test running a seeded simulation."""
        cli = CLIGameOfLife()

        final_gen, reason, stats = cli.run_simulation(width=10, height=10, max_generations=200, seed=1)

        assert isinstance(final_gen, int)
        assert 0 < final_gen <= 200
        assert reason in ["extinction", "stable", "cycle", "max_generations"]
        assert stats["generation"] == final_gen
        assert stats["grid_size"] == (10, 10)
        assert "duration_seconds" in stats
        assert "initial_population" in stats

    def test_run_simulation_is_reproducible(self):
        """Test that the same seed gives the same run."""
        cli = CLIGameOfLife()

        first = cli.run_simulation(width=12, height=8, max_generations=300, seed=99)
        second = cli.run_simulation(width=12, height=8, max_generations=300, seed=99)

        assert first[0] == second[0]
        assert first[1] == second[1]
        assert first[2]["population"] == second[2]["population"]
        assert first[2]["initial_population"] == second[2]["initial_population"]

    def test_run_simulation_verbose_output(self):
        """Test verbose and grid output."""
        lines = []
        cli = CLIGameOfLife(output=lines.append)

        cli.run_simulation(width=5, height=4, max_generations=10, seed=3, verbose=True, show_grid=True)

        text = "\n".join(lines)
        assert "Initialized 5x4 grid (seed: 3)" in text
        assert "Initial grid:" in text
        assert "Final grid" in text
        assert "+-----+" in text

    def test_watch_prints_each_generation(self):
        """Test terminal animation output."""
        lines = []
        cli = CLIGameOfLife(output=lines.append)

        shown = cli.watch(width=6, height=6, generations=3, interval=0.5, seed=2, clock=StepClock(1.0), sleep=Mock())

        assert 0 <= shown <= 3
        # Grid plus status line for the initial frame and each generation
        assert len(lines) == 2 * (shown + 1)
        assert lines[1].startswith("-- generation 0")

    def test_watch_waits_for_tick(self):
        """Test that watch sleeps until the next tick is due."""
        cli = CLIGameOfLife(output=Mock())
        sleep = Mock()

        cli.watch(width=6, height=6, generations=2, interval=0.5, seed=2, clock=StepClock(0.3), sleep=sleep)

        assert sleep.called

    def test_watch_stops_when_settled(self):
        """Test that watch stops once the grid stops changing."""
        lines = []
        cli = CLIGameOfLife(output=lines.append)

        # A 1x1 grid dies or stays dead after one generation
        shown = cli.watch(width=1, height=1, generations=50, interval=0.5, seed=0, clock=StepClock(1.0), sleep=Mock())

        assert shown <= 2


class TestFormatting:
    """Test cases for output formatting."""

    def test_format_grid(self):
        """Test framed grid output."""
        grid = Grid.from_cells(3, 2, [1, 0, 1, 0, 1, 0])
        assert format_grid(grid) == "+---+\n|* *|\n| * |\n+---+"

    def test_format_finish_reason(self):
        """Test finish reason formatting."""
        stats = {"cycle_length": 2, "cycle_start_generation": 5, "generation": 100}

        assert "Extinction" in format_finish_reason("extinction", stats)
        assert "Stable" in format_finish_reason("stable", stats)

        result = format_finish_reason("cycle", stats)
        assert "length 2" in result
        assert "generation 5" in result

        assert "(100)" in format_finish_reason("max_generations", stats)
        assert "Unknown reason: bogus" == format_finish_reason("bogus", stats)

    @patch("builtins.print")
    def test_print_results(self, mock_print):
        """Test result printing."""
        stats = {
            "initial_population": 10,
            "population": 4,
            "duration_seconds": 0.5,
            "generations_per_second": 20,
            "grid_size": (5, 5),
            "population_density": 0.16,
        }

        print_results(10, "stable", stats, verbose=False)
        printed = " ".join(str(call.args[0]) for call in mock_print.call_args_list if call.args)
        assert "10 generations" in printed
        assert "10 -> 4" in printed

        mock_print.reset_mock()
        print_results(10, "stable", stats, verbose=True)
        printed = " ".join(str(call.args[0]) for call in mock_print.call_args_list if call.args)
        assert "Grid size: 5x5" in printed
        assert "16.00%" in printed


class TestArguments:
    """Test cases for argument parsing and validation."""

    def test_parser_defaults(self):
        """Test default argument values."""
        args = create_parser().parse_args([])

        assert args.width == 40
        assert args.height == 20
        assert args.max_generations == 10000
        assert args.seed is None
        assert args.watch is False
        assert args.interval == 0.1
        assert args.log_level == "WARNING"

    def test_parser_short_options(self):
        """Test short option names."""
        args = create_parser().parse_args(["-W", "7", "-H", "3", "-m", "5", "-s", "11", "-w", "-g", "-v"])

        assert (args.width, args.height, args.max_generations, args.seed) == (7, 3, 5, 11)
        assert args.watch and args.show_grid and args.verbose

    def test_validate_args_ok(self):
        """Test that good arguments pass."""
        args = argparse.Namespace(width=10, height=10, max_generations=10, interval=0.1)
        assert validate_args(args) is True

    @patch("builtins.print")
    def test_validate_args_errors(self, mock_print):
        """Test that each bad argument is reported."""
        args = argparse.Namespace(width=0, height=-1, max_generations=0, interval=-0.5)

        assert validate_args(args) is False

        printed = " ".join(str(call.args[0]) for call in mock_print.call_args_list if call.args)
        assert "Width must be positive" in printed
        assert "Height must be positive" in printed
        assert "Max generations must be positive" in printed
        assert "Interval must be non-negative" in printed


class TestMain:
    """Test cases for the CLI entry point."""

    def test_main_runs_simulation(self, capsys):
        """Test a normal run."""
        assert main(["-W", "8", "-H", "8", "-s", "5", "-m", "100"]) == 0

        out = capsys.readouterr().out
        assert "Simulation completed" in out
        assert "Finish reason" in out

    def test_main_invalid_arguments(self, capsys):
        """Test that invalid arguments give exit code 1."""
        assert main(["--width", "0"]) == 1
        assert "Width must be positive" in capsys.readouterr().out

    def test_main_watch(self, capsys):
        """Test watch mode."""
        with patch.object(CLIGameOfLife, "watch", return_value=3) as watch:
            assert main(["--watch", "-m", "3", "-i", "0"]) == 0

        watch.assert_called_once()
        assert "Showed 3 generations" in capsys.readouterr().out

    def test_main_keyboard_interrupt(self, capsys):
        """Test interruption by the user."""
        with patch.object(CLIGameOfLife, "run_simulation", side_effect=KeyboardInterrupt):
            assert main([]) == 1

        assert "interrupted" in capsys.readouterr().out

    def test_main_unexpected_error(self, capsys):
        """Test that unexpected errors are reported."""
        with patch.object(CLIGameOfLife, "run_simulation", side_effect=RuntimeError("boom")):
            assert main([]) == 1

        assert "Error: boom" in capsys.readouterr().out
