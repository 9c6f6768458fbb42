"""End-to-end tests for decompose()."""

from __future__ import annotations

import pytest

from boxsplit import BoxSplitError, CapacityError, PipelineConfig, decompose, get_registry, register_transforms
from boxsplit.glyphs import BLANK, BORDER_GLYPHS, DISCARD
from boxsplit.utils.grid import pad_rows
from boxsplit.utils.morphology import label_regions
from tests.conftest import (
    CORNER_BOX,
    INNER_BOX,
    L_SHAPE,
    L_SHAPE_WITH_BOX,
    NESTED_BOXES,
    RAGGED_BOXES,
    SHARED_SINGLE_WALL,
    SHARED_WALL,
    SINGLE_BOX,
    SPLIT_PANEL,
    SPLIT_PANEL_PIECES,
    STACKED_BOXES,
)

ALL_DIAGRAMS = [
    SINGLE_BOX,
    SHARED_WALL,
    SHARED_SINGLE_WALL,
    STACKED_BOXES,
    NESTED_BOXES,
    SPLIT_PANEL,
    RAGGED_BOXES,
    L_SHAPE,
    L_SHAPE_WITH_BOX,
]


def test_registers_all_transforms():
    register_transforms()
    register_transforms()
    ids = {s.id for s in get_registry().all()}
    assert ids == {"T0.01", "T1.01", "T1.02", "T1.03", "T2.01", "T3.01", "T3.02", "T3.03"}


def test_single_box_round_trips(single_box):
    assert decompose(single_box) == [single_box]


def test_shared_wall_splits_in_two(shared_wall):
    assert decompose(shared_wall) == [SINGLE_BOX, SINGLE_BOX]


def test_single_shared_wall_splits_in_two():
    assert decompose(SHARED_SINGLE_WALL) == [SINGLE_BOX, SINGLE_BOX]


def test_stacked_boxes_split_in_two(stacked_boxes):
    assert decompose(stacked_boxes) == [SINGLE_BOX, SINGLE_BOX]


def test_blank_line_has_no_shapes():
    assert decompose("      ") == []


@pytest.mark.parametrize("diagram", ["", "\n", "+--+", "----\n|  |", "|  |"])
def test_degenerate_inputs_have_no_shapes(diagram):
    assert decompose(diagram) == []


def test_nested_boxes_are_independent(nested_boxes):
    assert decompose(nested_boxes) == [NESTED_BOXES, INNER_BOX]


def test_split_panel(split_panel):
    assert decompose(split_panel) == SPLIT_PANEL_PIECES


def test_l_shape_keeps_its_outline():
    assert decompose(L_SHAPE) == [L_SHAPE]


def test_l_shape_and_box_separate():
    # The shared walls go to both pieces; the L comes first in raster order
    assert decompose(L_SHAPE_WITH_BOX) == [L_SHAPE, CORNER_BOX]


def test_ragged_lines_and_open_space():
    assert decompose(RAGGED_BOXES) == [
        "+---+\n|   |\n+---+",
        "+-+\n| |\n+-+",
    ]


@pytest.mark.parametrize("diagram", ALL_DIAGRAMS)
def test_output_is_deterministic(diagram):
    assert decompose(diagram) == decompose(diagram)


@pytest.mark.parametrize("diagram", ALL_DIAGRAMS)
def test_shapes_have_no_trailing_blanks(diagram):
    for shape in decompose(diagram):
        assert not shape.endswith("\n")
        for line in shape.split("\n"):
            assert line == line.rstrip()


@pytest.mark.parametrize("diagram", ALL_DIAGRAMS)
def test_shape_borders_are_closed(diagram):
    for shape in decompose(diagram):
        grid = pad_rows(shape.split("\n"))
        labels, count, _ = label_regions(grid)
        assert count >= 1
        for r, row in enumerate(grid):
            for c, ch in enumerate(row):
                if labels[r, c] <= 0:
                    continue
                for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                    neighbor = grid[nr][nc]
                    assert neighbor in BORDER_GLYPHS or labels[nr, nc] == labels[r, c]


@pytest.mark.parametrize("diagram", ALL_DIAGRAMS)
def test_shapes_keep_their_own_size(diagram):
    # A shape drawn on its own is returned unchanged
    for shape in decompose(diagram):
        assert decompose(shape)[0] == shape


def test_boundary_region_never_returned():
    diagram = "+--+\n|   \n+--+"
    labels, _, _ = label_regions(pad_rows(diagram.split("\n")))
    assert labels[1, 1] == DISCARD
    assert decompose(diagram) == []


def test_glyphs_inside_a_box_are_dropped():
    shapes = decompose("+-----+\n| abc |\n+-----+")
    assert all("a" not in s and "b" not in s and "c" not in s for s in shapes)


def test_grid_capacity_error():
    with pytest.raises(CapacityError):
        decompose(SPLIT_PANEL, PipelineConfig(max_grid_cells=10))


def test_region_capacity_error():
    with pytest.raises(BoxSplitError):
        decompose(SPLIT_PANEL, PipelineConfig(max_regions=1))


def test_many_regions_beyond_a_small_alphabet():
    row = "+-" * 300 + "+"
    wall = "| " * 300 + "|"
    diagram = "\n".join([row, wall, row])
    shapes = decompose(diagram)
    assert len(shapes) == 300
    assert set(shapes) == {"+-+\n| |\n+-+"}
