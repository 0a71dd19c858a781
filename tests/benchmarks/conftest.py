"""Deterministic capture generators for performance benchmarks.

All generators produce fixed, reproducible capture text.  No random values.
Three tiers: 100 nodes, 1,000 nodes, 10,000 nodes.
Each tier provides a "clean" capture (a balanced tree) and a "dirty" capture
(the same tree with orphans, self-references, cycles and duplicates mixed in).
"""

from __future__ import annotations

import pytest


def _line(index: int, tei: int, pco: int, level: int) -> str:
    role = "(CCO)" if index == 0 else "(STA)"
    return (
        f"{index} {role} 7cc294ff{index:04x} 0x{tei:03X} 1 {pco:03X} "
        f"{level} {pco:03X} -{40 + index % 30} {20 + index % 10}.5"
    )


def generate_clean_capture(num_nodes: int, fanout: int = 4) -> str:
    """Balanced tree: node k (k >= 1) hangs under node (k - 1) // fanout."""
    lines = [_line(0, 1, 1, 0)]
    levels = [0]
    for k in range(1, num_nodes):
        parent = (k - 1) // fanout
        levels.append(levels[parent] + 1)
        lines.append(_line(k, k + 1, parent + 1, levels[k]))
    return "\n".join(lines) + "\n"


def generate_dirty_capture(num_nodes: int) -> str:
    """Clean capture plus one malformed row per ten nodes."""
    lines = generate_clean_capture(num_nodes).splitlines()
    base = num_nodes + 16
    for j in range(num_nodes // 10):
        kind = j % 4
        index = num_nodes + j
        if kind == 0:  # orphan
            lines.append(_line(index, base + j, 0xFFFFF, 1))
        elif kind == 1:  # self-reference
            lines.append(_line(index, base + j, base + j, 1))
        elif kind == 2:  # two-row cycle
            lines.append(_line(index, base + j, base + j + 1, 1))
            lines.append(_line(index, base + j + 1, base + j, 1))
        else:  # duplicate of an existing identifier
            lines.append(_line(index, 2, 1, 1))
        lines.append("garbage row")
    return "\n".join(lines) + "\n"


@pytest.fixture
def capture_100_clean() -> str:
    return generate_clean_capture(100)


@pytest.fixture
def capture_100_dirty() -> str:
    return generate_dirty_capture(100)


@pytest.fixture
def capture_1000_clean() -> str:
    return generate_clean_capture(1000)


@pytest.fixture
def capture_1000_dirty() -> str:
    return generate_dirty_capture(1000)


@pytest.fixture
def capture_10000_clean() -> str:
    return generate_clean_capture(10000)


@pytest.fixture
def capture_10000_dirty() -> str:
    return generate_dirty_capture(10000)
