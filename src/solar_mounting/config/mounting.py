# File: src/solar_mounting/config/mounting.py
"""
Mounting configuration for solar panel arrays.

This module holds the structural design constants (edge clearance, cantilever
and span limits), the joint detection tolerances, and the run-wide rafter and
panel configuration consumed by the mount and joint calculators.

All distances share one unit (inches in the reference installation).

Example:
    >>> config = MountingConfig(rafter_spacing=16, first_rafter_x=10)
    >>> config.validate()
    >>> config.limits.span_limit
    48.0
"""

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import List


# Panel dimensions for the reference module (all panels in a run share one size)
PANEL_WIDTH = 44.7
PANEL_HEIGHT = 71.1

# Rafter grid
DEFAULT_RAFTER_SPACING = 16
DEFAULT_FIRST_RAFTER_X = 0

# Structural limits
EDGE_CLEARANCE = 2       # Minimum distance from a mount to the panel edge
CANTILEVER_LIMIT = 16    # Maximum overhang beyond the outermost mount
SPAN_LIMIT = 48          # Maximum distance between consecutive mounts

# Joint detection
MAX_GAP = 1.0            # Panels closer than this are adjacent
CORNER_PROXIMITY = 0.5   # Corners closer than this (per axis) coincide

# Deduplication
MOUNT_MERGE_DISTANCE = 1.0
COORDINATE_PRECISION = 2


class ConfigurationError(ValueError):
    """Raised when the rafter or structural configuration is invalid."""


def _is_number(value) -> bool:
    """True for real numbers, excluding booleans."""
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_finite_number(value) -> bool:
    """True for real numbers other than booleans, NaN and infinities."""
    return _is_number(value) and math.isfinite(value)


@dataclass
class StructuralLimits:
    """Structural constraints applied when selecting rafters for a panel.

    Attributes:
        edge_clearance: Minimum distance between a mount and either panel edge
        cantilever_limit: Maximum unsupported overhang past the outermost mount
        span_limit: Maximum distance between two consecutive mounts
    """
    edge_clearance: float = EDGE_CLEARANCE
    cantilever_limit: float = CANTILEVER_LIMIT
    span_limit: float = SPAN_LIMIT

    def validate(self) -> List[str]:
        """Return validation error messages (empty if valid)."""
        errors = []
        if not _is_finite_number(self.edge_clearance) or self.edge_clearance < 0:
            errors.append("edge_clearance must be a non-negative number")
        if not _is_finite_number(self.cantilever_limit) or self.cantilever_limit < 0:
            errors.append("cantilever_limit must be a non-negative number")
        if not _is_finite_number(self.span_limit) or self.span_limit <= 0:
            errors.append("span_limit must be a positive number")
        return errors

    def to_dict(self) -> dict:
        return {
            "edge_clearance": self.edge_clearance,
            "cantilever_limit": self.cantilever_limit,
            "span_limit": self.span_limit,
        }


@dataclass
class JointTolerances:
    """Tolerances used by joint detection and merging.

    Attributes:
        max_gap: Panels whose facing edges are closer than this are adjacent
        corner_proximity: Per-axis distance under which corners coincide
    """
    max_gap: float = MAX_GAP
    corner_proximity: float = CORNER_PROXIMITY

    def validate(self) -> List[str]:
        """Return validation error messages (empty if valid)."""
        errors = []
        if not _is_finite_number(self.max_gap) or self.max_gap <= 0:
            errors.append("max_gap must be a positive number")
        if not _is_finite_number(self.corner_proximity) or self.corner_proximity <= 0:
            errors.append("corner_proximity must be a positive number")
        return errors

    def to_dict(self) -> dict:
        return {
            "max_gap": self.max_gap,
            "corner_proximity": self.corner_proximity,
        }


@dataclass
class MountingConfig:
    """Configuration for one mount/joint calculation run.

    Rafters form the progression ``first_rafter_x + k * rafter_spacing`` for
    integer ``k >= 0``. Every panel in the run has the same width and height.

    Attributes:
        rafter_spacing: Distance between rafters (must be positive)
        first_rafter_x: X-coordinate of the first rafter
        panel_width: Width shared by all panels
        panel_height: Height shared by all panels
        limits: Structural limits for rafter selection
        tolerances: Adjacency and corner tolerances for joints
        mount_merge_distance: Mounts on one rafter closer than this collapse

    Example:
        >>> config = MountingConfig(rafter_spacing=0)
        >>> config.validate()  # Raises ConfigurationError
    """
    rafter_spacing: float = DEFAULT_RAFTER_SPACING
    first_rafter_x: float = DEFAULT_FIRST_RAFTER_X
    panel_width: float = PANEL_WIDTH
    panel_height: float = PANEL_HEIGHT
    limits: StructuralLimits = field(default_factory=StructuralLimits)
    tolerances: JointTolerances = field(default_factory=JointTolerances)
    mount_merge_distance: float = MOUNT_MERGE_DISTANCE

    def validate(self) -> List[str]:
        """Validate configuration parameters.

        Returns:
            Empty list when the configuration is valid

        Raises:
            ConfigurationError: Listing every invalid parameter
        """
        errors = []

        if not _is_number(self.rafter_spacing):
            errors.append(
                f"rafter_spacing must be a number, got {type(self.rafter_spacing).__name__}"
            )
        elif not math.isfinite(self.rafter_spacing):
            errors.append(f"rafter_spacing must be finite, got {self.rafter_spacing}")
        elif self.rafter_spacing <= 0:
            errors.append(f"rafter_spacing must be positive, got {self.rafter_spacing}")

        if not _is_number(self.first_rafter_x):
            errors.append(
                f"first_rafter_x must be a number, got {type(self.first_rafter_x).__name__}"
            )
        elif not math.isfinite(self.first_rafter_x):
            errors.append(f"first_rafter_x must be finite, got {self.first_rafter_x}")

        if not _is_finite_number(self.panel_width) or self.panel_width <= 0:
            errors.append("panel_width must be a positive number")
        if not _is_finite_number(self.panel_height) or self.panel_height <= 0:
            errors.append("panel_height must be a positive number")

        if not _is_finite_number(self.mount_merge_distance) or self.mount_merge_distance < 0:
            errors.append("mount_merge_distance must be a non-negative number")

        errors.extend(self.limits.validate())
        errors.extend(self.tolerances.validate())

        if errors:
            raise ConfigurationError(
                "MountingConfig validation failed:\n" + "\n".join(errors)
            )

        return errors

    def to_dict(self) -> dict:
        """Convert config to dictionary for JSON serialization."""
        return {
            "rafter_spacing": self.rafter_spacing,
            "first_rafter_x": self.first_rafter_x,
            "panel_width": self.panel_width,
            "panel_height": self.panel_height,
            "limits": self.limits.to_dict(),
            "tolerances": self.tolerances.to_dict(),
            "mount_merge_distance": self.mount_merge_distance,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MountingConfig":
        """Create config from dictionary, falling back to defaults."""
        limits = data.get("limits", {})
        tolerances = data.get("tolerances", {})
        return cls(
            rafter_spacing=data.get("rafter_spacing", DEFAULT_RAFTER_SPACING),
            first_rafter_x=data.get("first_rafter_x", DEFAULT_FIRST_RAFTER_X),
            panel_width=data.get("panel_width", PANEL_WIDTH),
            panel_height=data.get("panel_height", PANEL_HEIGHT),
            limits=StructuralLimits(
                edge_clearance=limits.get("edge_clearance", EDGE_CLEARANCE),
                cantilever_limit=limits.get("cantilever_limit", CANTILEVER_LIMIT),
                span_limit=limits.get("span_limit", SPAN_LIMIT),
            ),
            tolerances=JointTolerances(
                max_gap=tolerances.get("max_gap", MAX_GAP),
                corner_proximity=tolerances.get("corner_proximity", CORNER_PROXIMITY),
            ),
            mount_merge_distance=data.get("mount_merge_distance", MOUNT_MERGE_DISTANCE),
        )

    @classmethod
    def for_24_oc(cls) -> "MountingConfig":
        """Create config for rafters at 24 on-center."""
        return cls(rafter_spacing=24)
