# File: src/solar_mounting/utils/__init__.py
"""Shared utilities (logging setup)."""

from .logging_config import SolarMountingLogger, get_logger

__all__ = ["SolarMountingLogger", "get_logger"]
