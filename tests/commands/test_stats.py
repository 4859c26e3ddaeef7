"""Tests for the stats command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from shopnet.cli import cli

WriteInput = Callable[..., Path]


class TestStatsCommand:
    def test_human(self, cli_runner: CliRunner, write_input: WriteInput) -> None:
        result = cli_runner.invoke(cli, ["stats", str(write_input([(1, 2), (2, 3)]))])
        assert result.exit_code == 0
        assert "nodes: 3" in result.stdout
        assert "components: 1" in result.stdout

    def test_json(self, cli_runner: CliRunner, write_input: WriteInput) -> None:
        result = cli_runner.invoke(cli, ["--json", "stats", str(write_input([(1, 2), (3, 4)]))])
        data = json.loads(result.stdout)
        assert data["data"]["components"] == 2
        assert data["data"]["roads"] == 2

    def test_strict_road_to_flag(self, cli_runner: CliRunner, write_input: WriteInput) -> None:
        path = write_input(text="3 2\n1 2\n1 3000\n")
        lenient = cli_runner.invoke(cli, ["--json", "stats", str(path)])
        strict = cli_runner.invoke(cli, ["--json", "stats", "--strict-road-to", str(path)])
        assert strict.exit_code == 0
        assert json.loads(lenient.stdout)["data"]["nodes"] == 3
        assert json.loads(strict.stdout)["data"]["nodes"] == 2

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["stats", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert result.stdout == ""
