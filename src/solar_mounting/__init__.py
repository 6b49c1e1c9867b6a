# File: src/solar_mounting/__init__.py
"""
Solar array mounting calculator.

Computes two derived datasets for a panel array laid on a rafter grid:
- Mount points where each panel is fastened to a rafter, subject to edge
  clearance, span and cantilever limits
- Joint points where panels meet edge-to-edge or corner-to-corner

Example:
    >>> from src.solar_mounting import calculate_layout, MountingConfig
    >>> result = calculate_layout(
    ...     [{"x": 0, "y": 0}, {"x": 45.05, "y": 0}],
    ...     MountingConfig(rafter_spacing=16, first_rafter_x=0),
    ... )
    >>> print(result.summary())
"""

from .config.mounting import (
    ConfigurationError,
    StructuralLimits,
    JointTolerances,
    MountingConfig,
)

from .models.layout_types import Panel, Mount, Joint

from .mounts import calculate_mounts, calculate_panel_mounts, deduplicate_mounts

from .joints import calculate_joints, detect_joint_candidates, merge_joint_candidates

from .calculator import (
    InvalidInputError,
    LayoutResult,
    validate_panels_data,
    build_panels,
    calculate_layout,
)

__all__ = [
    # Configuration
    "ConfigurationError",
    "StructuralLimits",
    "JointTolerances",
    "MountingConfig",
    # Types
    "Panel",
    "Mount",
    "Joint",
    # Mounts
    "calculate_mounts",
    "calculate_panel_mounts",
    "deduplicate_mounts",
    # Joints
    "calculate_joints",
    "detect_joint_candidates",
    "merge_joint_candidates",
    # Service
    "InvalidInputError",
    "LayoutResult",
    "validate_panels_data",
    "build_panels",
    "calculate_layout",
]
