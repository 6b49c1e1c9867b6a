from fastapi import APIRouter, HTTPException
from typing import Any, Dict
import logging

from api.models.layout_models import LayoutRequest, LayoutResponse
from api.utils.errors import ValidationError, handle_exception
from src.solar_mounting.calculator import InvalidInputError, calculate_layout
from src.solar_mounting.config.mounting import ConfigurationError, MountingConfig

logger = logging.getLogger("solar_mounting.api")

router = APIRouter()

def _config_from_request(request: LayoutRequest) -> MountingConfig:
    """Build the run configuration, keeping defaults for omitted fields."""
    config = MountingConfig(
        rafter_spacing=request.rafter_spacing,
        first_rafter_x=request.first_rafter_x,
    )
    if request.panel_width is not None:
        config.panel_width = request.panel_width
    if request.panel_height is not None:
        config.panel_height = request.panel_height
    return config

@router.post("/calculate", response_model=LayoutResponse)
async def calculate(request: LayoutRequest):
    """
    Calculate mount and joint positions for a panel layout.
    
    Mounts are placed on rafters under edge clearance, span and cantilever
    limits; joints are placed where panels meet.
    """
    logger.info(f"Layout calculation requested for {len(request.panels)} panels")
    try:
        panels_data = [panel.model_dump() for panel in request.panels]
        result = calculate_layout(panels_data, _config_from_request(request))
        
        payload = result.to_dict()
        return LayoutResponse(
            mounts=payload["mounts"],
            joints=payload["joints"],
            **result.summary()
        )
        
    except (InvalidInputError, ConfigurationError) as e:
        logger.warning(f"Rejected layout request: {e}")
        raise ValidationError(str(e)).to_http_exception()
    except Exception as e:
        raise handle_exception(e)

@router.get("/defaults", response_model=Dict[str, Any])
async def defaults():
    """Return the default mounting configuration."""
    return MountingConfig().to_dict()
