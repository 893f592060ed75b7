"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly, convert colors and report input
errors. Uses Click's CliRunner.
"""

import json
import logging

import pytest
from click.testing import CliRunner

from colorsync.cli.main import cli


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def no_config(temp_dir):
    """Path to a config file that does not exist."""
    return str(temp_dir / "config.json")


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop the handler installed by the CLI so it does not outlive the runner's streams."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler.get_name() == "colorsync":
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        """Test main CLI help displays."""
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'keep RGB, HSV, HSL, CMYK, hex and alpha in sync' in result.output

    def test_version_flag(self, runner):
        """Test --version flag works."""
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    def test_convert_help(self, runner):
        """Test convert command help."""
        result = runner.invoke(cli, ['convert', '--help'])
        assert result.exit_code == 0
        assert '--rgb' in result.output
        assert '--no-sync-hsl' in result.output

    def test_config_help(self, runner):
        """Test config command help."""
        result = runner.invoke(cli, ['config', '--help'])
        assert result.exit_code == 0


@pytest.mark.integration
class TestConvertCommand:
    """Test color conversion from the command line."""

    def test_rgb_text_output(self, runner, no_config):
        result = runner.invoke(cli, ['convert', '--rgb', '255', '0', '0', '--config', no_config])

        assert result.exit_code == 0
        assert 'RGB    255, 0, 0' in result.output
        assert 'Hex    #FFFF0000' in result.output
        assert 'not synced' not in result.output

    def test_rgb_with_alpha_json(self, runner, no_config):
        result = runner.invoke(cli, [
            'convert', '--rgb', '10', '20', '30', '--alpha', '0.75', '--json',
            '--config', no_config,
        ])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data['hex'] == '#BF0A141E'
        assert data['alpha'] == 0.75
        assert data['rgb'] == {'r': 10, 'g': 20, 'b': 30}

    def test_hex_input(self, runner, no_config):
        result = runner.invoke(cli, ['convert', '--hex', '#80FF00FF', '--json', '--config', no_config])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data['rgb'] == {'r': 255, 'g': 0, 'b': 255}
        assert data['hsv']['h'] == pytest.approx(300)
        assert data['alpha'] == pytest.approx(128 / 255)

    def test_hsl_input(self, runner, no_config):
        result = runner.invoke(cli, ['convert', '--hsl', '240', '1', '0.5', '--json', '--config', no_config])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data['rgb'] == {'r': 0, 'g': 0, 'b': 255}
        assert data['hex'] == '#FF0000FF'

    def test_cmyk_input(self, runner, no_config):
        result = runner.invoke(cli, ['convert', '--cmyk', '0', '0', '1', '0', '--json', '--config', no_config])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data['rgb'] == {'r': 255, 'g': 255, 'b': 0}
        assert data['hex'] == '#FFFFFF00'

    def test_hsv_input(self, runner, no_config):
        result = runner.invoke(cli, ['convert', '--hsv', '120', '1', '1', '--json', '--config', no_config])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data['rgb'] == {'r': 0, 'g': 255, 'b': 0}

    def test_disabled_hsl_marked_stale(self, runner, no_config):
        result = runner.invoke(cli, [
            'convert', '--rgb', '255', '0', '0', '--no-sync-hsl', '--config', no_config,
        ])

        assert result.exit_code == 0
        assert 'HSL    0.0°, 0.0%, 100.0%  (not synced)' in result.output

    @pytest.mark.parametrize(
        "args",
        [
            ['--hsl', '0', '0', '1', '--no-sync-hsl'],
            ['--cmyk', '0', '0', '0', '0', '--no-sync-cmyk'],
        ],
        ids=["hsl", "cmyk"],
    )
    def test_unsynced_input_starts_from_initial_color(self, runner, temp_dir, args):
        """Input equal to a stale model's defaults still replaces the initial color."""
        path = temp_dir / "config.json"
        path.write_text('{"initial_color": "#FF0000"}', encoding="utf-8")

        result = runner.invoke(cli, ['convert', *args, '--json', '--config', str(path)])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data['rgb'] == {'r': 255, 'g': 255, 'b': 255}
        assert data['hex'] == '#FFFFFFFF'

    def test_invalid_hex(self, runner, no_config):
        result = runner.invoke(cli, ['convert', '--hex', '#12', '--config', no_config])

        assert result.exit_code == 1
        assert 'ERROR: Invalid hex color' in result.output

    def test_no_input(self, runner, no_config):
        result = runner.invoke(cli, ['convert', '--config', no_config])

        assert result.exit_code == 1
        assert 'ERROR: No color input given' in result.output

    def test_two_inputs(self, runner, no_config):
        result = runner.invoke(cli, [
            'convert', '--rgb', '1', '2', '3', '--hex', '#FF0000', '--config', no_config,
        ])

        assert result.exit_code == 1
        assert 'ERROR: Only one color input may be given, got: rgb, hex' in result.output

    def test_invalid_config_reported(self, runner, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"initial_color": "red"}', encoding="utf-8")

        result = runner.invoke(cli, ['convert', '--rgb', '1', '2', '3', '--config', str(path)])

        assert result.exit_code == 1
        assert "Invalid configuration value for 'initial_color'" in result.output


@pytest.mark.integration
class TestConfigCommand:
    """Test the config command."""

    def test_defaults(self, runner, no_config):
        result = runner.invoke(cli, ['config', '--config', no_config])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            'enable_hsl': False,
            'enable_cmyk': False,
            'initial_color': None,
        }

    def test_from_file(self, runner, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"enable_cmyk": true}', encoding="utf-8")

        result = runner.invoke(cli, ['config', '--config', str(path)])

        assert result.exit_code == 0
        assert json.loads(result.output)['enable_cmyk'] is True

    def test_log_file(self, runner, temp_dir, no_config):
        log_path = temp_dir / "logs" / "colorsync.log"

        result = runner.invoke(cli, [
            '--log-file', str(log_path), '--log-level', 'DEBUG', 'config', '--config', no_config,
        ])

        assert result.exit_code == 0
        assert log_path.exists()
        assert 'Logging configured' in log_path.read_text()
