"""Locate and read ugraph configuration.

Two file shapes are accepted:

- ``ugraph.toml``: sections at the top level (``[graph]``, ``[output]``)
- ``pyproject.toml``: the same sections nested under ``[tool.ugraph]``

Lookup order: ``UGRAPH_CONFIG``, then a walk up from the start directory.
In each directory ``ugraph.toml`` wins; a ``pyproject.toml`` only counts
when it carries a ``[tool.ugraph]`` table.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from ugraph.config.models import UgraphConfig

CONFIG_FILENAME = "ugraph.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "UGRAPH_CONFIG"


class ConfigFileError(ValueError):
    """A config file exists but is not valid TOML."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid TOML in {path}: {reason}")


def _parse(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileError(path, str(exc)) from exc


def read_config_table(path: Path) -> dict[str, Any]:
    """Return the ugraph settings table stored in *path*.

    For ``pyproject.toml`` this is ``[tool.ugraph]`` (empty if absent);
    any other file is read whole.

    Raises:
        ConfigFileError: the file is not valid TOML.
    """
    data = _parse(path)
    if path.name == PYPROJECT_FILENAME:
        table = data.get("tool", {}).get("ugraph", {})
        return table if isinstance(table, dict) else {}
    return data


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = _parse(pyproject)
    except ConfigFileError:
        return False
    return isinstance(data.get("tool", {}).get("ugraph"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None.

    An ``UGRAPH_CONFIG`` pointing at a missing file disables discovery.
    A malformed ``pyproject.toml`` is skipped rather than reported.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> UgraphConfig:
    """Load and validate the section models only (no CLI flags or env vars).

    If *path* is None, :func:`find_config` discovers one from *cwd*.
    Returns the defaults when nothing is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return UgraphConfig()
    return UgraphConfig.model_validate(read_config_table(path))
