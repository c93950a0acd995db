"""Tests for cli.py -- Click CLI interface."""

import os
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from complex_renamer.cli import main
from complex_renamer.errors import TraversalError
from complex_renamer.models import Workflow


class TestHelpOutput:
    def test_help_flag_exits_nonzero(self):
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 1
        assert "--source" in result.output
        assert "--dryrun" in result.output
        assert "--incoming" in result.output

    def test_missing_source_prints_usage(self):
        result = CliRunner().invoke(main, [])
        assert result.exit_code == 1
        assert "Usage:" in result.output

    @patch("complex_renamer.cli.BatchRunner")
    def test_usage_runs_no_workflow(self, mock_runner_cls):
        CliRunner().invoke(main, ["-h", "-s", "/tmp"])
        mock_runner_cls.assert_not_called()


class TestWorkflowSelection:
    @patch("complex_renamer.cli.BatchRunner")
    def test_default_is_rename(self, mock_runner_cls, tmp_path):
        result = CliRunner().invoke(main, ["-s", str(tmp_path), "--prefix", "FOO_"])
        assert result.exit_code == 0, result.output
        config = mock_runner_cls.call_args.args[0]
        assert config.workflow == Workflow.RENAME
        assert config.prefix == "FOO_"
        assert config.dest_dir == tmp_path

    @patch("complex_renamer.cli.BatchRunner")
    def test_order_flags(self, mock_runner_cls, tmp_path):
        result = CliRunner().invoke(
            main,
            ["-s", str(tmp_path), "-o", "--season", "3", "--offset", "5", "-d", "/out", "-n", "-c"],
        )
        assert result.exit_code == 0, result.output
        config = mock_runner_cls.call_args.args[0]
        assert config.workflow == Workflow.ORDER
        assert config.season == 3
        assert config.offset == 5
        assert config.dest_dir == Path("/out")
        assert config.dry_run is True
        assert config.copy_mode is True

    @patch("complex_renamer.cli.BatchRunner")
    def test_precedence(self, mock_runner_cls, tmp_path):
        CliRunner().invoke(main, ["-s", str(tmp_path), "--order", "--touch", "--incoming"])
        assert mock_runner_cls.call_args.args[0].workflow == Workflow.INCOMING

    @patch("complex_renamer.cli.BatchRunner")
    def test_tool_paths(self, mock_runner_cls, tmp_path):
        CliRunner().invoke(
            main,
            ["-s", str(tmp_path), "--chd", "--chdman", "/opt/chdman", "--winrar", "/opt/rar"],
        )
        config = mock_runner_cls.call_args.args[0]
        assert config.workflow == Workflow.CHD
        assert config.chdman == "/opt/chdman"
        assert config.winrar == "/opt/rar"

    @patch("complex_renamer.cli.BatchRunner")
    def test_config_file_values_below_flags(self, mock_runner_cls, tmp_path):
        env_file = tmp_path / "renamer.env"
        env_file.write_text('RENAMER_CHDMAN="/srv/chdman"\nRENAMER_WINRAR=/srv/rar\n')
        result = CliRunner().invoke(
            main,
            ["-s", str(tmp_path), "--winrar", "/opt/rar", "--config", str(env_file)],
        )
        assert result.exit_code == 0, result.output
        config = mock_runner_cls.call_args.args[0]
        assert config.chdman == "/srv/chdman"
        assert config.winrar == "/opt/rar"
        assert "RENAMER_CHDMAN" not in os.environ


class TestFailureExit:
    @patch("complex_renamer.cli.BatchRunner")
    def test_fatal_error_exits_one(self, mock_runner_cls, tmp_path):
        mock_runner_cls.return_value.run.side_effect = TraversalError(tmp_path, "gone")
        result = CliRunner().invoke(main, ["-s", str(tmp_path)])
        assert result.exit_code == 1


class TestEndToEnd:
    def test_order_dry_run(self, tmp_path):
        (tmp_path / "b.mkv").write_text("b")
        (tmp_path / "a.mkv").write_text("a")
        result = CliRunner().invoke(main, ["-s", str(tmp_path), "--order", "--dryrun"])
        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.mkv", "b.mkv"]

    def test_order_real(self, tmp_path):
        (tmp_path / "b.mkv").write_text("b")
        (tmp_path / "a.mkv").write_text("a")
        result = CliRunner().invoke(main, ["-s", str(tmp_path), "--order"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "S01E01.mkv").read_text() == "a"
        assert (tmp_path / "S01E02.mkv").read_text() == "b"

    def test_missing_source_dir_fails(self, tmp_path):
        result = CliRunner().invoke(main, ["-s", str(tmp_path / "nope"), "--touch"])
        assert result.exit_code == 1
