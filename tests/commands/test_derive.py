"""Tests for derived-graph commands: complement, union, demo."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.conftest import PATH_TEXT, TRIANGLE_TEXT
from ugraph.cli import cli


def _neighbours(data: dict, node_id: int) -> list[int]:
    row = next(row for row in data["data"]["adjacency"] if row["id"] == node_id)
    return [nb["id"] for nb in row["neighbors"]]


@pytest.mark.usefixtures("_isolated_cwd")
class TestComplementCommand:
    def test_anchor_default(
        self, cli_runner: CliRunner, write_graph: Callable[..., Path]
    ) -> None:
        path = write_graph(PATH_TEXT)
        result = cli_runner.invoke(cli, ["--json", "complement", str(path)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["mode"] == "anchor"
        assert data["data"]["anchor"] == 1
        assert _neighbours(data, 1) == [3, 4]
        assert _neighbours(data, 2) == []

    def test_full_mode(self, cli_runner: CliRunner, write_graph: Callable[..., Path]) -> None:
        path = write_graph(PATH_TEXT)
        result = cli_runner.invoke(cli, ["--json", "complement", str(path), "--mode", "full"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["edge_count"] == 4
        assert _neighbours(data, 4) == [1, 2, 3]

    def test_mode_from_config_file(
        self, cli_runner: CliRunner, write_graph: Callable[..., Path], tmp_path: Path
    ) -> None:
        (tmp_path / "ugraph.toml").write_text('[graph]\ncomplement_mode = "full"\n')
        path = write_graph(PATH_TEXT)
        result = cli_runner.invoke(cli, ["--json", "complement", str(path)])
        assert json.loads(result.output)["data"]["mode"] == "full"

    def test_explicit_config_option(
        self, cli_runner: CliRunner, write_graph: Callable[..., Path], tmp_path: Path
    ) -> None:
        config = tmp_path / "alt.toml"
        config.write_text('[graph]\ncomplement_mode = "full"\n')
        path = write_graph(PATH_TEXT)
        result = cli_runner.invoke(cli, ["--json", "-c", str(config), "complement", str(path)])
        assert json.loads(result.output)["data"]["mode"] == "full"

    def test_invalid_mode(self, cli_runner: CliRunner, write_graph: Callable[..., Path]) -> None:
        path = write_graph(PATH_TEXT)
        result = cli_runner.invoke(cli, ["complement", str(path), "--mode", "half"])
        assert result.exit_code == 2

    def test_already_complete(
        self, cli_runner: CliRunner, write_graph: Callable[..., Path]
    ) -> None:
        path = write_graph(TRIANGLE_TEXT)
        result = cli_runner.invoke(cli, ["--json", "complement", str(path)])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "ALREADY_COMPLETE"


@pytest.mark.usefixtures("_isolated_cwd")
class TestUnionCommand:
    def test_union(self, cli_runner: CliRunner, write_graph: Callable[..., Path]) -> None:
        first = write_graph(PATH_TEXT, "first.txt")
        second = write_graph("5\ne 4 5 3\ne 1 2 8\n", "second.txt")
        result = cli_runner.invoke(cli, ["--json", "union", str(first), str(second)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["order"] == 5
        assert data["data"]["edge_count"] == 3
        row = next(row for row in data["data"]["adjacency"] if row["id"] == 1)
        assert row["neighbors"] == [{"id": 2, "weight": 8}]

    def test_second_file_missing(
        self, cli_runner: CliRunner, write_graph: Callable[..., Path], tmp_path: Path
    ) -> None:
        first = write_graph(PATH_TEXT, "first.txt")
        result = cli_runner.invoke(cli, ["union", str(first), str(tmp_path / "none.txt")])
        assert result.exit_code == 1
        assert "none.txt" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
class TestDemoCommand:
    def test_demo(self, cli_runner: CliRunner, write_graph: Callable[..., Path]) -> None:
        path = write_graph(TRIANGLE_TEXT)
        result = cli_runner.invoke(cli, ["demo", str(path)])
        assert result.exit_code == 0
        assert "removed edge 1 - 2" in result.output
        assert "weight of edge 1 - 3: 4" in result.output

    def test_demo_json_steps(
        self, cli_runner: CliRunner, write_graph: Callable[..., Path]
    ) -> None:
        path = write_graph(TRIANGLE_TEXT)
        result = cli_runner.invoke(cli, ["--json", "demo", str(path)])
        data = json.loads(result.output)
        assert len(data["data"]["steps"]) == 6

    def test_demo_without_edge_1_2(
        self, cli_runner: CliRunner, write_graph: Callable[..., Path]
    ) -> None:
        path = write_graph("3\ne 1 3 2\n")
        result = cli_runner.invoke(cli, ["demo", str(path)])
        assert result.exit_code == 1
        assert "Edge 1 - 2 not found" in result.output
