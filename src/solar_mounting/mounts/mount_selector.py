# File: src/solar_mounting/mounts/mount_selector.py
"""
Rafter selection for panel mounts.

Each panel is fastened to a subset of the rafters crossing it:
1. Rafters closer than the edge clearance to either panel edge are unusable
2. Consecutive mounts may not be further apart than the span limit
3. The panel may not overhang its outermost mount by more than the
   cantilever limit

Rafters are evenly spaced and the constraints are monotonic in x, so a single
left-to-right greedy scan picks a minimal valid subset without backtracking.

Example:
    >>> panel = Panel(x=0, y=0, width=44.7, height=71.1)
    >>> config = MountingConfig(rafter_spacing=16, first_rafter_x=10)
    >>> [m.x for m in calculate_panel_mounts(panel, config)]
    [10.0, 42.0]
"""

import math
from typing import Iterable, List

from ..config.mounting import MountingConfig, StructuralLimits
from ..models.layout_types import Mount, Panel
from ..utils.logging_config import get_logger
from .mount_deduplicator import deduplicate_mounts

logger = get_logger(__name__)

# Absorbs floating-point noise when a rafter lands exactly on a clearance bound
_TOLERANCE = 1e-9


def find_available_rafters(
    panel: Panel,
    rafter_spacing: float,
    first_rafter_x: float,
    limits: StructuralLimits,
) -> List[float]:
    """Find all rafters crossing the panel's clearance-reduced span.

    Rafters are ``first_rafter_x + k * rafter_spacing`` for ``k >= 0``. Each
    position is computed by multiplication so it stays on the progression.

    Args:
        panel: The panel
        rafter_spacing: Distance between rafters
        first_rafter_x: X-coordinate of the first rafter
        limits: Structural limits (edge clearance is used here)

    Returns:
        Rafter x-coordinates in increasing order (empty if none fit)
    """
    min_x = panel.x + limits.edge_clearance
    max_x = panel.right_edge - limits.edge_clearance

    if max_x < min_x:
        return []

    index = 0
    if first_rafter_x < min_x:
        index = math.ceil((min_x - first_rafter_x) / rafter_spacing - _TOLERANCE)

    rafters = []
    rafter_x = first_rafter_x + index * rafter_spacing
    while rafter_x <= max_x + _TOLERANCE:
        rafters.append(rafter_x)
        logger.trace(f"Rafter x={rafter_x:.2f} inside usable span [{min_x:.2f}, {max_x:.2f}]")
        index += 1
        rafter_x = first_rafter_x + index * rafter_spacing

    return rafters


def _needs_rafter_for_next_span(
    panel: Panel,
    position: int,
    last_selected: float,
    available: List[float],
    limits: StructuralLimits,
) -> bool:
    """Check whether skipping ``available[position]`` would break a limit.

    If another rafter follows, skipping is only allowed when that rafter is
    still within the span limit of the last selected one. If this is the last
    rafter, skipping is only allowed when the right overhang from it stays
    within the cantilever limit.
    """
    current = available[position]

    if position + 1 >= len(available):
        return (panel.right_edge - current) > limits.cantilever_limit

    return (available[position + 1] - last_selected) > limits.span_limit


def select_rafters(
    panel: Panel,
    available: List[float],
    limits: StructuralLimits,
) -> List[float]:
    """Select which available rafters receive a mount.

    The first available rafter is always taken. Walking right, a rafter is
    added when the span since the last selected rafter exceeds the span
    limit, or when skipping it would leave the next span (or the final
    overhang) out of limits. If the right overhang still exceeds the
    cantilever limit afterwards, the last available rafter is forced in.

    Args:
        panel: The panel being mounted
        available: Available rafter positions, ascending
        limits: Structural limits

    Returns:
        Selected rafter positions, ascending
    """
    if not available:
        return []

    selected = [available[0]]

    for position in range(1, len(available)):
        rafter_x = available[position]
        span = rafter_x - selected[-1]

        if span > limits.span_limit or _needs_rafter_for_next_span(
            panel, position, selected[-1], available, limits
        ):
            selected.append(rafter_x)
            logger.trace(f"Selected rafter x={rafter_x:.2f} (span {span:.2f} from previous)")

    right_overhang = panel.right_edge - selected[-1]
    if right_overhang > limits.cantilever_limit and selected[-1] != available[-1]:
        logger.debug(
            f"Right overhang {right_overhang:.2f} exceeds cantilever limit; "
            f"adding rafter at x={available[-1]:.2f}"
        )
        selected.append(available[-1])

    return sorted(selected)


def calculate_panel_mounts(panel: Panel, config: MountingConfig) -> List[Mount]:
    """Calculate mount positions for a single panel.

    Mounts sit on the selected rafters at the panel's vertical center. A panel
    with no rafter inside its usable span gets no mounts.

    Args:
        panel: The panel to mount
        config: Rafter grid and structural limits

    Returns:
        Mounts for this panel, ordered by x
    """
    available = find_available_rafters(
        panel, config.rafter_spacing, config.first_rafter_x, config.limits
    )
    if not available:
        logger.debug(f"No rafter inside usable span of {panel}; no mounts placed")
        return []

    selected = select_rafters(panel, available, config.limits)
    logger.debug(
        f"{panel}: {len(available)} available rafters, {len(selected)} selected"
    )

    return [Mount(x=rafter_x, y=panel.center_y) for rafter_x in selected]


def calculate_mounts(panels: Iterable[Panel], config: MountingConfig) -> List[Mount]:
    """Calculate deduplicated mount positions for all panels.

    Args:
        panels: Panels in the array
        config: Rafter grid, structural limits and merge distance

    Returns:
        Unique mounts, grouped by rafter
    """
    mounts = []
    unmounted = 0

    for panel in panels:
        panel_mounts = calculate_panel_mounts(panel, config)
        if not panel_mounts:
            unmounted += 1
        mounts.extend(panel_mounts)

    if unmounted:
        logger.warning(f"{unmounted} panel(s) have no rafter within their usable span")

    return deduplicate_mounts(mounts, config.mount_merge_distance)
