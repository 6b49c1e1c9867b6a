# File: tests/models/test_layout_types.py
"""Unit tests for panel, mount and joint value types."""

import pytest

from src.solar_mounting.models.layout_types import Joint, Mount, Panel, round_coordinate


def create_panel(x: float, y: float, width: float = 10.0, height: float = 10.0) -> Panel:
    """Create a panel with easy-to-check dimensions."""
    return Panel(x=x, y=y, width=width, height=height)


class TestPanel:
    """Tests for Panel geometry."""

    def test_edges(self):
        panel = Panel(x=0, y=0, width=44.7, height=71.1)
        assert panel.right_edge == pytest.approx(44.7)
        assert panel.bottom_edge == pytest.approx(71.1)
        assert panel.center_y == pytest.approx(35.55)

    def test_coordinates_coerced_to_float(self):
        panel = Panel(x=1, y=2, width=3, height=4)
        assert isinstance(panel.x, float)
        assert isinstance(panel.height, float)

    def test_corners_order(self):
        panel = create_panel(0, 0)
        assert panel.corners == ((0, 0), (10, 0), (0, 10), (10, 10))

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 10)])
    def test_non_positive_dimensions_raise(self, width, height):
        with pytest.raises(ValueError):
            Panel(x=0, y=0, width=width, height=height)

    def test_is_immutable(self):
        panel = create_panel(0, 0)
        with pytest.raises(AttributeError):
            panel.x = 5.0


class TestOverlap:
    """Tests for strict range overlap."""

    def test_same_row_overlaps_vertically(self):
        assert create_panel(0, 0).overlaps_vertically(create_panel(20, 5))

    def test_touching_rows_do_not_overlap(self):
        assert not create_panel(0, 0).overlaps_vertically(create_panel(0, 10))

    def test_touching_columns_do_not_overlap(self):
        assert not create_panel(0, 0).overlaps_horizontally(create_panel(10, 0))

    def test_overlap_is_symmetric(self):
        a, b = create_panel(0, 0), create_panel(5, 20)
        assert a.overlaps_horizontally(b) == b.overlaps_horizontally(a)


class TestGaps:
    """Tests for signed gap calculation."""

    def test_horizontal_gap_either_order(self):
        a, b = create_panel(0, 0), create_panel(12, 0)
        assert a.horizontal_gap(b) == 2.0
        assert b.horizontal_gap(a) == 2.0

    def test_horizontal_gap_negative_when_overlapping(self):
        assert create_panel(0, 0).horizontal_gap(create_panel(5, 0)) == -5.0

    def test_vertical_gap(self):
        a, b = create_panel(0, 0), create_panel(0, 10.5)
        assert a.vertical_gap(b) == 0.5
        assert b.vertical_gap(a) == 0.5


class TestAdjacency:
    """Tests for adjacency predicates."""

    def test_reference_panels_horizontally_adjacent(self):
        a = Panel(x=0, y=0, width=44.7, height=71.1)
        b = Panel(x=45.05, y=0, width=44.7, height=71.1)
        assert a.horizontally_adjacent(b)
        assert b.horizontally_adjacent(a)
        assert not a.vertically_adjacent(b)

    def test_touching_panels_are_adjacent(self):
        assert create_panel(0, 0).horizontally_adjacent(create_panel(10, 0))

    def test_gap_equal_to_max_gap_not_adjacent(self):
        assert not create_panel(0, 0).horizontally_adjacent(create_panel(11, 0))

    def test_custom_max_gap(self):
        assert create_panel(0, 0).horizontally_adjacent(create_panel(11, 0), max_gap=2.0)

    def test_overlapping_panels_not_adjacent(self):
        assert not create_panel(0, 0).horizontally_adjacent(create_panel(5, 0))

    def test_no_vertical_overlap_not_adjacent(self):
        assert not create_panel(0, 0).horizontally_adjacent(create_panel(10.5, 10))

    def test_stacked_panels_vertically_adjacent(self):
        assert create_panel(0, 0).vertically_adjacent(create_panel(0, 10.5))


class TestLayoutPoints:
    """Tests for value equality of mounts and joints."""

    def test_rounded_on_construction(self):
        mount = Mount(x=10.004, y=35.556)
        assert mount.x == 10.0
        assert mount.y == 35.56

    def test_equality_by_rounded_value(self):
        assert Mount(x=10.004, y=35.551) == Mount(x=10.0, y=35.55)
        assert hash(Mount(x=10.004, y=35.551)) == hash(Mount(x=10.0, y=35.55))

    def test_halves_round_away_from_zero(self):
        joint = Joint(x=0.125, y=-0.125)
        assert joint.x == 0.13
        assert joint.y == -0.13

    def test_negative_zero_normalised(self):
        assert str(Mount(x=-0.001, y=0)) == "Mount(x=0.0, y=0.0)"

    def test_set_collapses_near_duplicates(self):
        joints = {Joint(x=44.8701, y=1.0), Joint(x=44.8699, y=1.0)}
        assert len(joints) == 1

    def test_round_coordinate_uses_binary_value(self):
        # 2.675 is stored as 2.67499999...
        assert round_coordinate(2.675) == 2.67
        assert round_coordinate(44.875) == 44.88

    def test_mount_never_equals_joint(self):
        assert Mount(x=1, y=2) != Joint(x=1, y=2)

    def test_to_dict(self):
        assert Joint(x=1.234, y=5).to_dict() == {"x": 1.23, "y": 5.0}

    def test_str(self):
        assert str(Mount(x=1, y=2)) == "Mount(x=1.0, y=2.0)"
