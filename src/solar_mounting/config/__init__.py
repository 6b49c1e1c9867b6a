# File: src/solar_mounting/config/__init__.py

"""
Configuration package for the solar mounting calculator.

Provides the structural design constants and the run configuration shared by
the mount and joint pipelines.
"""

from .mounting import (
    PANEL_WIDTH,
    PANEL_HEIGHT,
    DEFAULT_RAFTER_SPACING,
    DEFAULT_FIRST_RAFTER_X,
    EDGE_CLEARANCE,
    CANTILEVER_LIMIT,
    SPAN_LIMIT,
    MAX_GAP,
    CORNER_PROXIMITY,
    MOUNT_MERGE_DISTANCE,
    COORDINATE_PRECISION,
    ConfigurationError,
    StructuralLimits,
    JointTolerances,
    MountingConfig,
)

__all__ = [
    "PANEL_WIDTH",
    "PANEL_HEIGHT",
    "DEFAULT_RAFTER_SPACING",
    "DEFAULT_FIRST_RAFTER_X",
    "EDGE_CLEARANCE",
    "CANTILEVER_LIMIT",
    "SPAN_LIMIT",
    "MAX_GAP",
    "CORNER_PROXIMITY",
    "MOUNT_MERGE_DISTANCE",
    "COORDINATE_PRECISION",
    "ConfigurationError",
    "StructuralLimits",
    "JointTolerances",
    "MountingConfig",
]
