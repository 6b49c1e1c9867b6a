# File: src/solar_mounting/calculator.py
"""
Mount and joint calculation for a solar panel array.

Validates raw panel records, builds the panels, and runs the two independent
pipelines: rafter mounts and inter-panel joints.

Example:
    >>> panels_data = [{"x": 0, "y": 0}, {"x": 45.05, "y": 0}]
    >>> result = calculate_layout(panels_data, rafter_spacing=16, first_rafter_x=0)
    >>> result.to_dict()["joints"]
    [{'x': 44.88, 'y': 35.55}, ...]
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any, Dict, List, Optional, Sequence

from .config.mounting import MountingConfig
from .joints.joint_merger import calculate_joints
from .models.layout_types import Joint, Mount, Panel
from .mounts.mount_selector import calculate_mounts
from .utils.logging_config import get_logger

logger = get_logger(__name__)


class InvalidInputError(ValueError):
    """Raised when the panel records are malformed."""


@dataclass
class LayoutResult:
    """Mounts and joints computed for one panel array.

    Attributes:
        mounts: Unique mount positions
        joints: Unique joint positions
        config: Configuration the result was computed with
    """
    mounts: List[Mount] = field(default_factory=list)
    joints: List[Joint] = field(default_factory=list)
    config: Optional[MountingConfig] = None

    def to_dict(self) -> Dict[str, List[Dict[str, float]]]:
        """Convert to the ``{"mounts": [...], "joints": [...]}`` shape."""
        return {
            "mounts": [m.to_dict() for m in self.mounts],
            "joints": [j.to_dict() for j in self.joints],
        }

    def summary(self) -> Dict[str, Any]:
        return {
            "mount_count": len(self.mounts),
            "joint_count": len(self.joints),
        }


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_panels_data(panels_data: Any) -> None:
    """Check the shape of raw panel records.

    Args:
        panels_data: Sequence of mappings with numeric "x" and "y"

    Raises:
        InvalidInputError: On the first malformed record
    """
    if not isinstance(panels_data, (list, tuple)):
        raise InvalidInputError("panels_data must be a list")
    if not panels_data:
        raise InvalidInputError("panels_data cannot be empty")

    for index, panel in enumerate(panels_data):
        if not isinstance(panel, Mapping) or "x" not in panel or "y" not in panel:
            raise InvalidInputError(f"Panel at index {index} must have 'x' and 'y' keys")
        if not (_is_number(panel["x"]) and _is_number(panel["y"])):
            raise InvalidInputError(f"Panel at index {index} coordinates must be numeric")
        if not (math.isfinite(panel["x"]) and math.isfinite(panel["y"])):
            raise InvalidInputError(f"Panel at index {index} coordinates must be finite")


def build_panels(panels_data: Sequence[Mapping], config: MountingConfig) -> List[Panel]:
    """Create panels of the configured size from validated records."""
    return [
        Panel(
            x=data["x"],
            y=data["y"],
            width=config.panel_width,
            height=config.panel_height,
        )
        for data in panels_data
    ]


def calculate_layout(
    panels_data: Sequence[Mapping],
    config: Optional[MountingConfig] = None,
    **overrides: Any,
) -> LayoutResult:
    """Calculate mount and joint positions for a panel layout.

    Args:
        panels_data: Panel positions, each a mapping with "x" and "y"
        config: Run configuration (defaults to MountingConfig())
        **overrides: MountingConfig fields to override, e.g. rafter_spacing

    Returns:
        LayoutResult with unique mounts and joints

    Raises:
        ConfigurationError: If the configuration is invalid
        InvalidInputError: If the panel records are malformed
    """
    config = replace(config or MountingConfig(), **overrides)
    config.validate()
    validate_panels_data(panels_data)

    panels = build_panels(panels_data, config)
    logger.info(
        f"Calculating layout for {len(panels)} panel(s), rafter spacing "
        f"{config.rafter_spacing} from x={config.first_rafter_x}"
    )

    mounts = calculate_mounts(panels, config)
    joints = calculate_joints(panels, config)

    logger.info(f"Placed {len(mounts)} mount(s) and {len(joints)} joint(s)")
    return LayoutResult(mounts=mounts, joints=joints, config=config)
