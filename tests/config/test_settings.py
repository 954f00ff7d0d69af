"""Tests for UgraphSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from ugraph.config.settings import UgraphSettings
from ugraph.domain.types import ComplementMode


class TestUgraphSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = UgraphSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.graph.default_weight == 1
        assert settings.graph.complement_mode is ComplementMode.ANCHOR
        assert settings.output.width == 120

    def test_frozen(self, tmp_path: Path) -> None:
        settings = UgraphSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "ugraph.toml"
        toml.write_text('[graph]\ndefault_weight = 3\ncomplement_mode = "full"\n')
        settings = UgraphSettings.from_cli(start=tmp_path)
        assert settings.graph.default_weight == 3
        assert settings.graph.complement_mode is ComplementMode.FULL
        assert settings.output.sort_nodes is True  # default preserved
        assert settings.config_path == toml

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "ugraph.toml").write_text("[output]\nwidth = 60\n")
        child = tmp_path / "graphs"
        child.mkdir()
        settings = UgraphSettings.from_cli(start=child)
        assert settings.output.width == 60

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[output]\nsort_nodes = false\n")
        settings = UgraphSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.output.sort_nodes is False
        assert settings.config_path == custom

    def test_missing_explicit_path(self, tmp_path: Path) -> None:
        (tmp_path / "ugraph.toml").write_text("[output]\nwidth = 60\n")
        missing = tmp_path / "nope.toml"
        with pytest.raises(click.ClickException, match="Config file not found"):
            UgraphSettings.from_cli(config_path=str(missing), start=tmp_path)

    def test_pyproject_tool_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            '[tool.ugraph]\njson_output = true\n[tool.ugraph.graph]\ndefault_weight = 5\n'
        )
        settings = UgraphSettings.from_cli(start=tmp_path)
        assert settings.json_output is True
        assert settings.graph.default_weight == 5
        assert settings.config_path == pyproject

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "ugraph.toml").write_text("[graph\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            UgraphSettings.from_cli(start=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = UgraphSettings.from_cli(
            start=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
            log_json=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.log_json is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        """CLI flags take priority over TOML values."""
        (tmp_path / "ugraph.toml").write_text("quiet = true\n")
        settings = UgraphSettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UGRAPH_QUIET", "true")
        settings = UgraphSettings.from_cli(start=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UGRAPH_GRAPH__DEFAULT_WEIGHT", "4")
        settings = UgraphSettings.from_cli(start=tmp_path)
        assert settings.graph.default_weight == 4

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "ugraph.toml").write_text('[graph]\ncomplement_mode = "anchor"\n')
        monkeypatch.setenv("UGRAPH_GRAPH__COMPLEMENT_MODE", "full")
        settings = UgraphSettings.from_cli(start=tmp_path)
        assert settings.graph.complement_mode is ComplementMode.FULL
