# File: src/solar_mounting/models/__init__.py
"""Value types for panels, mounts and joints."""

from .layout_types import Point, Panel, LayoutPoint, Mount, Joint, round_coordinate

__all__ = ["Point", "Panel", "LayoutPoint", "Mount", "Joint", "round_coordinate"]
