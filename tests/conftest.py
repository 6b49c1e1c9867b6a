# tests/conftest.py
import sys
import os

# Add project root to path so `src.solar_mounting` and `api` resolve
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from typing import Dict, List

from src.solar_mounting.models.layout_types import Panel

PANEL_WIDTH = 44.7
PANEL_HEIGHT = 71.1


def _make_panel(x: float, y: float, width: float = PANEL_WIDTH, height: float = PANEL_HEIGHT) -> Panel:
    """Create a panel of the reference size."""
    return Panel(x=x, y=y, width=width, height=height)


@pytest.fixture
def example_panels_data() -> List[Dict[str, float]]:
    """Reference ten-panel layout (0.35 horizontal gaps, 0.5 vertical gaps)."""
    return [
        {"x": 0, "y": 0},
        {"x": 45.05, "y": 0},
        {"x": 90.1, "y": 0},
        {"x": 0, "y": 71.6},
        {"x": 135.15, "y": 0},
        {"x": 135.15, "y": 71.6},
        {"x": 0, "y": 143.2},
        {"x": 45.05, "y": 143.2},
        {"x": 135.15, "y": 143.2},
        {"x": 90.1, "y": 143.2},
    ]


@pytest.fixture
def side_by_side_panels() -> List[Panel]:
    """Two panels in one row with a 0.35 gap."""
    return [_make_panel(0, 0), _make_panel(45.05, 0)]


@pytest.fixture
def grid_panels() -> List[Panel]:
    """2x2 grid with 0.35 gaps on both axes."""
    return [
        _make_panel(0, 0),
        _make_panel(45.05, 0),
        _make_panel(0, 71.45),
        _make_panel(45.05, 71.45),
    ]


@pytest.fixture
def example_panels(example_panels_data) -> List[Panel]:
    """Reference ten-panel layout as Panel objects."""
    return [_make_panel(p["x"], p["y"]) for p in example_panels_data]
