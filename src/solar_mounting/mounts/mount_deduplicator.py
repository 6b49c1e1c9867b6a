# File: src/solar_mounting/mounts/mount_deduplicator.py
"""Merging of mounts that share a rafter.

Adjacent panels can land mounts at (nearly) the same spot on a shared rafter.
Those collapse into a single physical fastener.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from ..config.mounting import MOUNT_MERGE_DISTANCE
from ..models.layout_types import Mount
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


def deduplicate_mounts(
    mounts: Iterable[Mount],
    merge_distance: float = MOUNT_MERGE_DISTANCE,
) -> List[Mount]:
    """Collapse mounts on the same rafter that sit within merge_distance.

    Mounts are grouped by their (rounded) x. Within a group, mounts are
    sorted by y and one is kept only if it lies more than merge_distance
    below the previously kept mount.

    Args:
        mounts: Mounts from all panels
        merge_distance: Minimum vertical separation on one rafter

    Returns:
        Deduplicated mounts ordered by x, then y
    """
    by_rafter: Dict[float, List[Mount]] = defaultdict(list)
    total = 0
    for mount in mounts:
        by_rafter[mount.x].append(mount)
        total += 1

    result = []
    for rafter_x in sorted(by_rafter):
        kept: List[Mount] = []
        for mount in sorted(by_rafter[rafter_x], key=lambda m: m.y):
            if not kept or (mount.y - kept[-1].y) > merge_distance:
                kept.append(mount)
        result.extend(kept)

    if total != len(result):
        logger.debug(f"Merged {total - len(result)} duplicate mount(s)")

    return result
