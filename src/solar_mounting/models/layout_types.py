# File: src/solar_mounting/models/layout_types.py

"""Data models for solar array layout.

Defines the value types shared by the mount and joint pipelines.

Key Types:
    Panel: Axis-aligned panel rectangle with adjacency queries
    Mount: Point where a panel is fastened to a rafter
    Joint: Point where two or more panels are connected to each other

Coordinates use a top-left origin: x grows to the right, y grows downward,
so a panel's ``bottom_edge`` is ``y + height``.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple

from ..config.mounting import COORDINATE_PRECISION, MAX_GAP


Point = Tuple[float, float]

_QUANTUM = Decimal(1).scaleb(-COORDINATE_PRECISION)


def round_coordinate(value: float) -> float:
    """Round to COORDINATE_PRECISION decimals, halves away from zero.

    The float is rounded at its exact binary value, so 0.125 becomes 0.13
    while 2.675 (stored just below) becomes 2.67. The builtin round would
    give 0.12 for the first.
    """
    rounded = Decimal(float(value)).quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    return float(rounded) + 0.0


# =============================================================================
# Panel
# =============================================================================


@dataclass(frozen=True)
class Panel:
    """A rectangular solar panel.

    Attributes:
        x: X-coordinate of the top-left corner
        y: Y-coordinate of the top-left corner
        width: Panel width (must be positive)
        height: Panel height (must be positive)
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        """Coerce coordinates to float and validate dimensions."""
        for name in ("x", "y", "width", "height"):
            object.__setattr__(self, name, float(getattr(self, name)))
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Panel dimensions must be positive, got {self.width} x {self.height}"
            )

    @property
    def right_edge(self) -> float:
        return self.x + self.width

    @property
    def bottom_edge(self) -> float:
        return self.y + self.height

    @property
    def center_y(self) -> float:
        """Y-coordinate of the panel's vertical center."""
        return self.y + self.height / 2.0

    @property
    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """Corner points ordered top-left, top-right, bottom-left, bottom-right."""
        return (
            (self.x, self.y),
            (self.right_edge, self.y),
            (self.x, self.bottom_edge),
            (self.right_edge, self.bottom_edge),
        )

    # -------------------------------------------------------------------------
    # Adjacency queries
    # -------------------------------------------------------------------------

    def overlaps_vertically(self, other: "Panel") -> bool:
        """Check if the panels share part of their Y-range.

        Ranges that only touch at an endpoint do not overlap.
        """
        return not (self.y >= other.bottom_edge or other.y >= self.bottom_edge)

    def overlaps_horizontally(self, other: "Panel") -> bool:
        """Check if the panels share part of their X-range."""
        return not (self.x >= other.right_edge or other.x >= self.right_edge)

    def horizontal_gap(self, other: "Panel") -> float:
        """Signed horizontal distance between facing edges.

        Returns:
            Gap distance (negative if the panels overlap horizontally)
        """
        if self.x < other.x:
            return other.x - self.right_edge
        return self.x - other.right_edge

    def vertical_gap(self, other: "Panel") -> float:
        """Signed vertical distance between facing edges.

        Returns:
            Gap distance (negative if the panels overlap vertically)
        """
        if self.y < other.y:
            return other.y - self.bottom_edge
        return self.y - other.bottom_edge

    def horizontally_adjacent(self, other: "Panel", max_gap: float = MAX_GAP) -> bool:
        """Check if the panels sit side by side with a gap below max_gap."""
        if not self.overlaps_vertically(other):
            return False
        gap = self.horizontal_gap(other)
        return 0 <= gap < max_gap

    def vertically_adjacent(self, other: "Panel", max_gap: float = MAX_GAP) -> bool:
        """Check if the panels are stacked with a gap below max_gap."""
        if not self.overlaps_horizontally(other):
            return False
        gap = self.vertical_gap(other)
        return 0 <= gap < max_gap

    def __str__(self) -> str:
        return f"Panel(x={self.x}, y={self.y}, width={self.width}, height={self.height})"


# =============================================================================
# Layout Points
# =============================================================================


@dataclass(frozen=True)
class LayoutPoint:
    """A 2-D point compared by value at COORDINATE_PRECISION decimals.

    Both coordinates are rounded half away from zero on construction, so
    equality and hashing (generated by the dataclass) always operate on
    rounded values.
    """

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", round_coordinate(self.x))
        object.__setattr__(self, "y", round_coordinate(self.y))

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    def __str__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y})"


@dataclass(frozen=True)
class Mount(LayoutPoint):
    """A mount point where a panel attaches to a rafter."""


@dataclass(frozen=True)
class Joint(LayoutPoint):
    """A joint connector between panels."""
