"""Tests for the command-line interface."""

from click.testing import CliRunner

from percolation_stats import __version__
from percolation_stats.cli.main import cli


class TestStatsCommand:
    """Tests for `percolation-stats stats`."""

    def test_prints_three_lines(self):
        result = CliRunner().invoke(cli, ['stats', '10', '5', '--seed', '1'])

        assert result.exit_code == 0, result.output
        assert 'mean                    = ' in result.output
        assert 'stddev                  = ' in result.output
        assert '95% confidence interval = [' in result.output

    def test_verbose_lists_trials(self):
        result = CliRunner().invoke(cli, ['stats', '5', '3', '--seed', '2', '--verbose'])

        assert result.exit_code == 0, result.output
        assert 'trial 3/3' in result.output

    def test_single_trial_reports_nan(self):
        result = CliRunner().invoke(cli, ['stats', '4', '1', '--seed', '0'])

        assert result.exit_code == 0, result.output
        assert 'stddev                  = nan' in result.output

    def test_zero_size_is_usage_error(self):
        result = CliRunner().invoke(cli, ['stats', '0', '5'])

        assert result.exit_code == 2
        assert "Running" not in result.output

    def test_zero_trials_is_usage_error(self):
        result = CliRunner().invoke(cli, ['stats', '5', '0'])

        assert result.exit_code == 2

    def test_version(self):
        result = CliRunner().invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestRunCommand:
    """Tests for `percolation-stats run`."""

    def test_run_from_config(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("run_name: smoke\nsimulation:\n  n: 8\n  trials: 4\n  seed: 3\n")

        result = CliRunner().invoke(cli, ['run', '--config', str(path)])

        assert result.exit_code == 0, result.output
        assert 'mean                    = ' in result.output

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("simulation: [n: 5\n  trials: {\n")

        result = CliRunner().invoke(cli, ['run', '--config', str(path)])

        assert result.exit_code == 2
        assert "--config" in result.output

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("simulation:\n  n: 0\n  trials: 4\n")

        result = CliRunner().invoke(cli, ['run', '--config', str(path)])

        assert result.exit_code == 2
