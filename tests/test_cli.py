"""
Tests for OpenSwarm CLI functionality.
"""

import json

import pytest
from click.testing import CliRunner

from openswarm.cli import cli
from openswarm.core.config import Config, PSOConfig


class TestCLI:
    """Tests for CLI commands."""

    @pytest.fixture
    def runner(self):
        """Create CLI test runner."""
        return CliRunner()

    @pytest.fixture(autouse=True)
    def default_config(self, mocker):
        """Keep local config files and environment out of the tests."""
        return mocker.patch("openswarm.cli.load_config", return_value=Config())

    def test_functions_command(self, runner):
        """Test listing benchmark objectives."""
        result = runner.invoke(cli, ["functions"])

        assert result.exit_code == 0
        assert "sphere" in result.output
        assert "rosenbrock" in result.output

    def test_optimize_json(self, runner):
        """Test optimize with JSON output."""
        result = runner.invoke(cli, [
            "optimize", "--function", "sphere", "--dimensions", "2",
            "--start", "3.0", "--max-iterations", "20", "--seed", "1", "--json"
        ])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["fun"] <= 18.0
        assert data["nit"] <= 20
        assert len(data["x"]) == 2

    def test_optimize_table(self, runner):
        """Test optimize with table output."""
        result = runner.invoke(cli, [
            "optimize", "--function", "rastrigin", "--max-iterations", "10",
            "--tracking", "shared", "--seed", "2"
        ])

        assert result.exit_code == 0
        assert "Objective" in result.output
        assert "Iterations" in result.output

    def test_optimize_constriction(self, runner, default_config):
        """Test selecting the constriction variant from config."""
        default_config.return_value = Config(pso=PSOConfig(
            cognitive_acceleration=2.05, social_acceleration=2.05
        ))

        result = runner.invoke(cli, [
            "optimize", "--variant", "constriction_factor",
            "--max-iterations", "10", "--seed", "3", "--json"
        ])

        assert result.exit_code == 0
        assert json.loads(result.output)["nit"] <= 10

    def test_optimize_constriction_with_default_accelerations(self, runner):
        """Test that the constriction variant runs from the default config."""
        result = runner.invoke(cli, [
            "optimize", "--variant", "constriction_factor",
            "--max-iterations", "10", "--seed", "3", "--json"
        ])

        assert result.exit_code == 0
        assert json.loads(result.output)["nit"] <= 10

    def test_optimize_acceleration_options(self, runner):
        """Test setting the accelerations from the command line."""
        result = runner.invoke(cli, [
            "optimize", "--variant", "constriction_factor",
            "--cognitive-acceleration", "2.5", "--social-acceleration", "2.0",
            "--max-iterations", "5", "--seed", "4", "--json"
        ])

        assert result.exit_code == 0

    def test_optimize_configuration_error(self, runner):
        """Test that invalid hyperparameters exit with an error."""
        result = runner.invoke(cli, [
            "optimize", "--variant", "constriction_factor",
            "--cognitive-acceleration", "0.5", "--social-acceleration", "0.3",
            "--max-iterations", "10"
        ])

        assert result.exit_code == 1
        assert "configuration_error" in result.output

    def test_optimize_invalid_swarm_size(self, runner):
        """Test that an empty swarm is rejected."""
        result = runner.invoke(cli, ["optimize", "--swarm-size", "0"])

        assert result.exit_code == 1

    def test_config_init_and_show(self, runner):
        """Test writing and showing a configuration file."""
        with runner.isolated_filesystem():
            init_result = runner.invoke(cli, ["config-init", "--output", "openswarm.yaml"])
            assert init_result.exit_code == 0

            loaded = Config.from_file("openswarm.yaml")
            assert loaded.pso.swarm_size == 10

            show_result = runner.invoke(cli, ["config-show", "--config", "openswarm.yaml"])
            assert show_result.exit_code == 0
            assert "swarm_size" in show_result.output
