"""Shared pytest fixtures and test helpers for pipegraph tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from pipegraph.domain.adjacency import Adjacency, build_adjacency
from pipegraph.infrastructure.graph.engine import GraphEngine
from pipegraph.services.timing import enable_timing

# The seven-node example: {0, 2, 3, 4, 5, 6} plus the self-looped 1.
SAMPLE = """\
0 <-> 2
1 <-> 1
2 <-> 0, 3, 4
3 <-> 2, 4
4 <-> 2, 3, 6
5 <-> 6
6 <-> 4, 5
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_text() -> str:
    return SAMPLE


@pytest.fixture
def sample_adjacency() -> Adjacency:
    return build_adjacency(SAMPLE)


@pytest.fixture
def sample_engine(sample_adjacency: Adjacency) -> GraphEngine:
    return GraphEngine(sample_adjacency)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write the sample adjacency list to a temp file."""
    path = tmp_path / "pipes.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no stray pipegraph.toml or env leaks in."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PIPEGRAPH_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _reset_timing() -> Generator[None]:
    """The CLI turns timing on for -v; keep it from leaking across tests."""
    yield
    enable_timing(False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() handler and level changes after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    root_level = root.level
    app_level = logging.getLogger("pipegraph").level
    yield
    root.handlers = handlers
    root.setLevel(root_level)
    logging.getLogger("pipegraph").setLevel(app_level)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def adjacency_text(entries: list[list[int]]) -> str:
    """Render neighbour lists back into adjacency-list text."""
    return "\n".join(
        f"{node} <-> {', '.join(str(n) for n in neighbors)}"
        for node, neighbors in enumerate(entries)
    )


def symmetric_entries(node_count: int, edges: list[tuple[int, int]]) -> list[list[int]]:
    """Build symmetric neighbour lists; nodes without edges get a self-loop."""
    entries: list[list[int]] = [[] for _ in range(node_count)]
    for a, b in edges:
        entries[a].append(b)
        if a != b:
            entries[b].append(a)
    for node, entry in enumerate(entries):
        if not entry:
            entry.append(node)
    return entries
