# File: src/solar_mounting/mounts/__init__.py
"""
Mount calculation.

Selects rafter crossings for each panel under edge clearance, span and
cantilever limits, then merges mounts that share a rafter.

Example:
    >>> from src.solar_mounting.mounts import calculate_mounts
    >>> mounts = calculate_mounts(panels, MountingConfig())
"""

from .mount_selector import (
    find_available_rafters,
    select_rafters,
    calculate_panel_mounts,
    calculate_mounts,
)

from .mount_deduplicator import deduplicate_mounts

__all__ = [
    "find_available_rafters",
    "select_rafters",
    "calculate_panel_mounts",
    "calculate_mounts",
    "deduplicate_mounts",
]
