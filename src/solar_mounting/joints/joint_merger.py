# File: src/solar_mounting/joints/joint_merger.py

"""Clustering of near-coincident joint candidates.

Clusters are grown from a seed in a single pass: a candidate joins the first
earlier seed it lies within ``corner_proximity`` of on both axes, using the
same comparison as corner detection. Membership is measured against the
seed only, so a chain of points whose neighbours are each close but whose
ends are far apart can split into several joints.
"""

from typing import Iterable, List

from ..config.mounting import CORNER_PROXIMITY, MountingConfig
from ..models.layout_types import Joint, Panel
from ..utils.logging_config import get_logger
from .joint_detector import detect_joint_candidates, within_proximity

logger = get_logger(__name__)


def _cluster_candidates(candidates: List[Joint], proximity: float) -> List[List[Joint]]:
    """Group candidates around seeds taken in input order."""
    assigned = [False] * len(candidates)
    clusters = []

    for i, seed in enumerate(candidates):
        if assigned[i]:
            continue
        assigned[i] = True
        members = [seed]

        for j in range(i + 1, len(candidates)):
            if assigned[j]:
                continue
            other = candidates[j]
            if within_proximity((other.x, other.y), (seed.x, seed.y), proximity):
                assigned[j] = True
                members.append(other)

        clusters.append(members)

    return clusters


def merge_joint_candidates(
    candidates: Iterable[Joint],
    proximity: float = CORNER_PROXIMITY,
) -> List[Joint]:
    """Collapse each cluster of candidates to the mean of its members.

    Args:
        candidates: Joint candidates from all detection passes
        proximity: Per-axis distance below which a candidate joins a seed

    Returns:
        Unique joints in order of their seeds
    """
    candidates = list(candidates)
    clusters = _cluster_candidates(candidates, proximity)

    merged = []
    for members in clusters:
        mean_x = sum(j.x for j in members) / len(members)
        mean_y = sum(j.y for j in members) / len(members)
        merged.append(Joint(x=mean_x, y=mean_y))

    # Rounded means of distinct clusters can still coincide
    unique = list(dict.fromkeys(merged))

    logger.debug(f"Merged {len(candidates)} candidate(s) into {len(unique)} joint(s)")
    return unique


def calculate_joints(panels: Iterable[Panel], config: MountingConfig) -> List[Joint]:
    """Detect and merge joints for a panel array.

    Args:
        panels: Every panel in the array
        config: Run configuration (tolerances are used)

    Returns:
        Final, unique joint positions
    """
    candidates = detect_joint_candidates(list(panels), config.tolerances)
    return merge_joint_candidates(candidates, config.tolerances.corner_proximity)
