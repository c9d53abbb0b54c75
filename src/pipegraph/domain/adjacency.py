"""Adjacency-list parsing — text to a dense, immutable node table.

Input format, one line per node::

    0 <-> 2
    1 <-> 1
    2 <-> 0, 3, 4

Storage is a tuple indexed by node id. Ids must therefore be exactly
``0..n-1``; lines may arrive in any order, but duplicates, gaps, and
neighbours without an entry of their own are rejected rather than
silently misplaced.

INVARIANT: every neighbour id in an Adjacency is a valid index into it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from pipegraph.domain.errors import AdjacencyParseError

logger = logging.getLogger(__name__)

ARROW = " <-> "
NEIGHBOR_SEPARATOR = ", "

_ID_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Adjacency:
    """Neighbour lists indexed by node id.

    ``entries[i]`` is the ordered neighbour list of node ``i``. An
    undirected edge appears in both endpoints' lists; the builder does
    not symmetrize.
    """

    entries: tuple[tuple[int, ...], ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self.entries)

    def __getitem__(self, node: int) -> tuple[int, ...]:
        return self.entries[node]


def _parse_id(token: str, *, role: str) -> int:
    if not _ID_PATTERN.fullmatch(token):
        raise AdjacencyParseError(f"{role} {token!r} is not a non-negative integer")
    return int(token)


def parse_line(line: str) -> tuple[int, tuple[int, ...]]:
    """Parse one ``<node> <-> <n1>, <n2>`` line into ``(node, neighbours)``.

    Raises AdjacencyParseError (without a line number) on malformed input.
    """
    head, sep, tail = line.partition(ARROW)
    if not sep:
        raise AdjacencyParseError(f"missing {ARROW.strip()!r} separator")
    if not tail:
        raise AdjacencyParseError("empty neighbour list")
    node = _parse_id(head, role="node")
    neighbors = tuple(
        _parse_id(token, role="neighbour") for token in tail.split(NEIGHBOR_SEPARATOR)
    )
    return node, neighbors


def build_adjacency(text: str) -> Adjacency:
    """Build an Adjacency from adjacency-list *text*.

    Blank lines are skipped and trailing whitespace is ignored. Empty
    text yields an empty Adjacency. Any malformed or inconsistent line
    aborts the build; no partial graph is returned.
    """
    slots: dict[int, tuple[int, ...]] = {}
    first_mention: dict[int, int] = {}

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.rstrip()
        if not line:
            continue
        try:
            node, neighbors = parse_line(line)
        except AdjacencyParseError as exc:
            raise AdjacencyParseError(str(exc), line_no=line_no, line=line) from None
        if node in slots:
            raise AdjacencyParseError(
                f"duplicate entry for node {node}", line_no=line_no, line=line
            )
        slots[node] = neighbors
        for neighbor in neighbors:
            first_mention.setdefault(neighbor, line_no)

    size = len(slots)
    for node in range(size):
        if node not in slots:
            raise AdjacencyParseError(
                f"node ids must be contiguous from 0; missing entry for node {node}"
            )
    # All ids are < size here, so anything larger is a neighbour without an entry.
    dangling = sorted(n for n in first_mention if n >= size)
    if dangling:
        node = dangling[0]
        raise AdjacencyParseError(
            f"neighbour {node} has no entry of its own",
            line_no=first_mention[node],
        )

    adjacency = Adjacency(tuple(slots[node] for node in range(size)))
    logger.debug(
        "Built adjacency: %d nodes, %d links",
        size,
        sum(len(entry) for entry in adjacency),
    )
    return adjacency
