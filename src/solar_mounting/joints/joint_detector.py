# File: src/solar_mounting/joints/joint_detector.py

"""Joint candidate detection between panels.

Builds joint candidates in three independent passes:
1. Horizontal pass: side-by-side panels, joint at the middle of the seam
2. Vertical pass: stacked panels, joint at the middle of the seam
3. Corner pass: points where three or more panels meet, or where two panels
   touch only at their corners

Candidates from different passes may coincide; joint_merger clusters them.
"""

from itertools import combinations
from typing import List, Sequence

from ..config.mounting import JointTolerances
from ..models.layout_types import Joint, Panel, Point
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

# Absorbs floating-point noise in gaps that equal the proximity exactly
_TOLERANCE = 1e-9


# =============================================================================
# Geometry Utilities
# =============================================================================


def within_proximity(p1: Point, p2: Point, proximity: float) -> bool:
    """Check if two points are within proximity on both axes.

    Shared by corner detection and joint merging, so corners found to
    coincide always end up in the same cluster.
    """
    limit = proximity + _TOLERANCE
    return abs(p1[0] - p2[0]) <= limit and abs(p1[1] - p2[1]) <= limit


def _overlap_midpoint(start1: float, end1: float, start2: float, end2: float) -> float:
    """Midpoint of the intersection of two 1-D intervals."""
    return (max(start1, start2) + min(end1, end2)) / 2.0


def _panels_at_point(point: Point, panels: Sequence[Panel], proximity: float) -> List[Panel]:
    """Panels with any corner within proximity of the point."""
    return [
        panel for panel in panels
        if any(within_proximity(point, corner, proximity) for corner in panel.corners)
    ]


def _is_panel_intersection(touching: Sequence[Panel], max_gap: float) -> bool:
    """Decide whether the panels around a corner need their own joint.

    Two panels sharing an edge are already joined by their seam joint, so a
    pair only counts when it meets corner-to-corner.
    """
    if len(touching) >= 3:
        return True
    if len(touching) == 2:
        first, second = touching
        return not (
            first.horizontally_adjacent(second, max_gap)
            or first.vertically_adjacent(second, max_gap)
        )
    return False


# =============================================================================
# Detection Passes
# =============================================================================


def find_horizontal_joints(
    panels: Sequence[Panel],
    tolerances: JointTolerances,
) -> List[Joint]:
    """Joints between horizontally adjacent panels.

    Each pair that overlaps vertically with a horizontal gap in
    ``[0, max_gap)`` yields one joint midway between the facing edges, at
    the middle of the shared Y-range.
    """
    joints = []
    for p1, p2 in combinations(panels, 2):
        if not p1.horizontally_adjacent(p2, tolerances.max_gap):
            continue

        left, right = (p1, p2) if p1.x < p2.x else (p2, p1)
        joint_x = (left.right_edge + right.x) / 2.0
        joint_y = _overlap_midpoint(p1.y, p1.bottom_edge, p2.y, p2.bottom_edge)
        joints.append(Joint(x=joint_x, y=joint_y))

    logger.debug(f"Horizontal pass: {len(joints)} joint candidate(s)")
    return joints


def find_vertical_joints(
    panels: Sequence[Panel],
    tolerances: JointTolerances,
) -> List[Joint]:
    """Joints between vertically adjacent panels.

    Each pair that overlaps horizontally with a vertical gap in
    ``[0, max_gap)`` yields one joint midway between the facing edges, at
    the middle of the shared X-range.
    """
    joints = []
    for p1, p2 in combinations(panels, 2):
        if not p1.vertically_adjacent(p2, tolerances.max_gap):
            continue

        upper, lower = (p1, p2) if p1.y < p2.y else (p2, p1)
        joint_y = (upper.bottom_edge + lower.y) / 2.0
        joint_x = _overlap_midpoint(p1.x, p1.right_edge, p2.x, p2.right_edge)
        joints.append(Joint(x=joint_x, y=joint_y))

    logger.debug(f"Vertical pass: {len(joints)} joint candidate(s)")
    return joints


def find_corner_joints(
    panels: Sequence[Panel],
    tolerances: JointTolerances,
) -> List[Joint]:
    """Joints where panels meet at a corner.

    For the top-right, bottom-left and bottom-right corner of every panel,
    collects the panels (itself included) that have any corner within
    ``corner_proximity`` on both axes. The corner becomes a candidate when
    three or more panels meet there, or when exactly two panels touch there
    without sharing an edge. A corner on the outside of the array that only
    one edge neighbour touches is covered by the seam joint and skipped.

    Top-left corners are never checked: wherever one is part of an
    intersection, a corner of a neighbouring panel is reported instead.
    """
    proximity = tolerances.corner_proximity
    joints = []

    for panel in panels:
        for corner in panel.corners[1:]:
            touching = _panels_at_point(corner, panels, proximity)
            if not _is_panel_intersection(touching, tolerances.max_gap):
                continue

            logger.trace(f"Corner ({corner[0]:.2f}, {corner[1]:.2f}) of {panel} "
                         f"meets {len(touching) - 1} other panel(s)")
            joints.append(Joint(x=corner[0], y=corner[1]))

    logger.debug(f"Corner pass: {len(joints)} joint candidate(s)")
    return joints


def detect_joint_candidates(
    panels: Sequence[Panel],
    tolerances: JointTolerances,
) -> List[Joint]:
    """Run all three detection passes.

    Args:
        panels: Every panel in the array
        tolerances: Adjacency gap and corner proximity

    Returns:
        Unmerged candidates: horizontal, then vertical, then corner
    """
    panels = list(panels)
    candidates = []
    candidates.extend(find_horizontal_joints(panels, tolerances))
    candidates.extend(find_vertical_joints(panels, tolerances))
    candidates.extend(find_corner_joints(panels, tolerances))
    return candidates
