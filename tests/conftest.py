"""Shared test fixtures."""

from __future__ import annotations

import pytest


SINGLE_BOX = """\
+--+
|  |
+--+"""

SHARED_WALL = """\
+--++--+
|  ||  |
+--++--+"""

SHARED_SINGLE_WALL = """\
+--+--+
|  |  |
+--+--+"""

STACKED_BOXES = """\
+--+
|  |
+--+
+--+
|  |
+--+"""

NESTED_BOXES = """\
+--------+
|        |
| +--+   |
| |  |   |
| +--+   |
|        |
+--------+"""

INNER_BOX = """\
+--+
|  |
+--+"""

SPLIT_PANEL = """\
+------------+
|            |
|            |
|            |
+------+-----+
|      |     |
|      |     |
+------+-----+"""

SPLIT_PANEL_PIECES = [
    """\
+------------+
|            |
|            |
|            |
+------------+""",
    """\
+------+
|      |
|      |
+------+""",
    """\
+-----+
|     |
|     |
+-----+""",
]

# Non-rectangular region: the lower right corner is cut away
L_SHAPE = """\
+------+
|      |
|  +---+
|  |
+--+"""

# The same outline with a box filling the cut-away corner
L_SHAPE_WITH_BOX = """\
+------+
|      |
|  +---+
|  |   |
+--+---+"""

CORNER_BOX = """\
+---+
|   |
+---+"""

# Two boxes on ragged lines, floating in open space
RAGGED_BOXES = """\

   +---+
   |   |     +-+
   +---+     | |
             +-+
"""


@pytest.fixture
def single_box() -> str:
    return SINGLE_BOX


@pytest.fixture
def shared_wall() -> str:
    return SHARED_WALL


@pytest.fixture
def stacked_boxes() -> str:
    return STACKED_BOXES


@pytest.fixture
def nested_boxes() -> str:
    return NESTED_BOXES


@pytest.fixture
def split_panel() -> str:
    return SPLIT_PANEL
