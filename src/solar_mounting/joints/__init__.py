# File: src/solar_mounting/joints/__init__.py

"""Joint analysis module.

Detects where panels meet edge-to-edge or corner-to-corner and merges the
resulting candidates into connector positions.

Usage:
    from src.solar_mounting.joints import calculate_joints

    joints = calculate_joints(panels, MountingConfig())
"""

from .joint_detector import (
    find_horizontal_joints,
    find_vertical_joints,
    find_corner_joints,
    detect_joint_candidates,
)

from .joint_merger import merge_joint_candidates, calculate_joints

__all__ = [
    # Main entry point
    "calculate_joints",
    # Detector
    "find_horizontal_joints",
    "find_vertical_joints",
    "find_corner_joints",
    "detect_joint_candidates",
    # Merger
    "merge_joint_candidates",
]
