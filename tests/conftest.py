"""Shared pytest fixtures and test helpers for ugraph tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from click.testing import CliRunner

from ugraph.domain.graph import Graph

# Order 3 with edges (1,2,5), (1,3,4), (2,3,7): a complete triangle.
TRIANGLE_TEXT = """\
3
e 1 2 5
e 1 3 4
e 2 3 7
"""

# Order 4 path 1-2-3 plus isolated node 4.
PATH_TEXT = """\
4
e 1 2 5
e 2 3 7
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host UGRAPH_* variables out of every test."""
    for name in (
        "UGRAPH_CONFIG",
        "UGRAPH_JSON_OUTPUT",
        "UGRAPH_QUIET",
        "UGRAPH_VERBOSE",
        "UGRAPH_LOG_JSON",
        "UGRAPH_GRAPH__DEFAULT_WEIGHT",
        "UGRAPH_GRAPH__COMPLEMENT_MODE",
        "UGRAPH_OUTPUT__WIDTH",
        "UGRAPH_OUTPUT__SORT_NODES",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run with CWD in a temp directory so no stray ugraph.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_graph(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes edge-list text to ``tmp_path / name``."""

    def _write(text: str, name: str = "graph.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Shared test helpers (used across test modules)
# ---------------------------------------------------------------------------


def build_graph(order: int, edges: Iterable[tuple[int, int, int]] = ()) -> Graph:
    """Graph with node records ``1..order`` and the given weighted edges."""
    g = Graph(order)
    for node_id in range(1, order + 1):
        g.add_node(node_id)
    for src, dest, weight in edges:
        g.add_edge(src, dest, weight)
    return g


def complete_graph(order: int, weight: int = 1) -> Graph:
    """Complete graph on ids ``1..order``."""
    return build_graph(
        order,
        [(a, b, weight) for a in range(1, order + 1) for b in range(a + 1, order + 1)],
    )
