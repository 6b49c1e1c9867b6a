from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from api.utils.config import Config
from src.solar_mounting.config.mounting import (
    DEFAULT_FIRST_RAFTER_X,
    DEFAULT_RAFTER_SPACING,
)

class PanelPosition(BaseModel):
    """Top-left corner of one panel."""
    x: float = Field(description="X coordinate of the top-left corner")
    y: float = Field(description="Y coordinate of the top-left corner")

class LayoutRequest(BaseModel):
    """Input data model for a layout calculation."""
    panels: List[PanelPosition] = Field(
        description="Panel positions in the array",
        min_length=1
    )
    rafter_spacing: float = Field(
        default=DEFAULT_RAFTER_SPACING,
        description="Distance between rafters",
        gt=0
    )
    first_rafter_x: float = Field(
        default=DEFAULT_FIRST_RAFTER_X,
        description="X coordinate of the first rafter"
    )
    panel_width: Optional[float] = Field(
        default=None,
        description="Panel width shared by all panels (defaults to the reference module)",
        gt=0
    )
    panel_height: Optional[float] = Field(
        default=None,
        description="Panel height shared by all panels (defaults to the reference module)",
        gt=0
    )

    @field_validator('panels')
    @classmethod
    def validate_panel_count(cls, v: List[PanelPosition]) -> List[PanelPosition]:
        """Keep pairwise joint detection within a reasonable bound."""
        if len(v) > Config.MAX_PANELS_PER_REQUEST:
            raise ValueError(
                f"Too many panels in one request (maximum {Config.MAX_PANELS_PER_REQUEST})"
            )
        return v

class LayoutPoint(BaseModel):
    """A mount or joint position, rounded to 2 decimals."""
    x: float
    y: float

class LayoutResponse(BaseModel):
    """Mounts and joints computed for a layout."""
    mounts: List[LayoutPoint] = Field(description="Mount positions on rafters")
    joints: List[LayoutPoint] = Field(description="Joint positions between panels")
    mount_count: int = Field(description="Number of mounts")
    joint_count: int = Field(description="Number of joints")
